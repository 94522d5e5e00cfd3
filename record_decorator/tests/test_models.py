import logging

from django.test import TestCase

from record_decorator.interfaces import DecoratedRecord
from showcase.models import Balloon
from showcase.tests.factories import BalloonFactory, DarkBalloonFactory, TestConstant

logger = logging.getLogger()
logger.setLevel(logging.INFO)


class DecoratableModelTestCase(TestCase):

    def test_is_decorated_record(self):
        self.assertIsInstance(BalloonFactory.build(), DecoratedRecord)

    def test_is_valid(self):
        """
        python manage.py test record_decorator.tests.test_models.DecoratableModelTestCase.test_is_valid
        """
        balloon = BalloonFactory.build()
        self.assertTrue(balloon.is_valid())
        self.assertFalse(balloon.errors)

    def test_is_valid_clean_hook(self):
        """
        python manage.py test record_decorator.tests.test_models.DecoratableModelTestCase.test_is_valid_clean_hook
        """
        balloon = DarkBalloonFactory.build()
        self.assertFalse(balloon.is_valid())
        self.assertEqual([TestConstant.dark_color_error.value], balloon.errors['color'])

    def test_is_valid_field_validation(self):
        balloon = BalloonFactory.build(size='')
        self.assertFalse(balloon.is_valid())
        self.assertIn('size', balloon.errors)
        logger.info(balloon.errors.full_messages())

    def test_is_valid_resets_errors(self):
        balloon = DarkBalloonFactory.build()
        balloon.is_valid()
        balloon.is_valid()
        self.assertEqual(1, len(balloon.errors['color']))

        balloon.color = TestConstant.color.value
        self.assertTrue(balloon.is_valid())
        self.assertFalse(balloon.errors)

    def test_save(self):
        balloon = BalloonFactory.build()
        self.assertTrue(balloon.is_new_record())
        self.assertIs(True, balloon.save())
        self.assertTrue(balloon.is_persisted())
        self.assertEqual(1, Balloon.objects.count())

    def test_destroy(self):
        """
        python manage.py test record_decorator.tests.test_models.DecoratableModelTestCase.test_destroy
        """
        balloon = BalloonFactory()
        self.assertTrue(balloon.is_persisted())
        self.assertIs(True, balloon.destroy())
        self.assertFalse(balloon.is_persisted())
        self.assertEqual(0, Balloon.objects.count())

    def test_errors_per_instance(self):
        self.assertIsNot(BalloonFactory.build().errors, BalloonFactory.build().errors)
