import logging

from django.core.exceptions import NON_FIELD_ERRORS, ValidationError
from django.test import SimpleTestCase

from record_decorator import Errors, InvalidModel

logger = logging.getLogger()
logger.setLevel(logging.INFO)


class ErrorsTestCase(SimpleTestCase):

    def setUp(self) -> None:
        self.errors = Errors()

    def test_missing_field_is_empty(self):
        """
        python manage.py test record_decorator.tests.test_errors.ErrorsTestCase.test_missing_field_is_empty
        """
        self.assertEqual([], self.errors['color'])
        self.assertNotIn('color', self.errors)
        self.assertFalse(self.errors)
        self.assertIsNone(self.errors.get('color'))

    def test_add(self):
        self.errors.add('color', 'is too dark')
        self.errors.add('color', 'is too shiny')
        self.errors.add('size', 'is wrong')

        self.assertEqual(['is too dark', 'is too shiny'], self.errors['color'])
        self.assertEqual(['color', 'size'], list(self.errors))
        self.assertEqual(2, len(self.errors))
        self.assertEqual(3, self.errors.count())

    def test_read_does_not_mutate(self):
        self.errors['color'].append('sneaky')
        self.assertEqual([], self.errors['color'])

    def test_full_messages(self):
        """
        python manage.py test record_decorator.tests.test_errors.ErrorsTestCase.test_full_messages
        """
        self.errors.add('color', 'is too dark')
        self.errors.add('string_length', 'is too long')
        self.errors.add(None, 'Balloon popped.')

        self.assertEqual(
            ['Color is too dark', 'String length is too long', 'Balloon popped.'],
            self.errors.full_messages()
        )
        self.assertEqual(['Balloon popped.'], self.errors[NON_FIELD_ERRORS])

    def test_update_from_validation_error(self):
        self.errors.update_from(ValidationError({'color': ['is too dark'], 'size': 'is wrong'}))
        self.errors.update_from(ValidationError(['first', 'second']))

        self.assertEqual(['is too dark'], self.errors['color'])
        self.assertEqual(['is wrong'], self.errors['size'])
        self.assertEqual(['first', 'second'], self.errors[NON_FIELD_ERRORS])

    def test_merge_is_additive(self):
        self.errors.add('color', 'is too boring')
        self.errors.merge({'color': ['is too dark']})
        self.assertEqual(['is too boring', 'is too dark'], self.errors['color'])

    def test_copy_and_clear(self):
        self.errors.add('color', 'is too dark')
        copied = self.errors.copy()
        self.errors.clear()

        self.assertFalse(self.errors)
        self.assertEqual(['is too dark'], copied['color'])

    def test_as_validation_error(self):
        self.errors.add('color', 'is too dark')
        error = self.errors.as_validation_error()
        self.assertEqual({'color': ['is too dark']}, error.message_dict)

    def test_invalid_model_message(self):
        """
        python manage.py test record_decorator.tests.test_errors.ErrorsTestCase.test_invalid_model_message
        """
        self.errors.add('color', 'is too dark')
        self.errors.add('size', 'is wrong')
        error = InvalidModel(self.errors)
        logger.info(error)
        self.assertEqual("Validation failed: Color is too dark,Size is wrong", str(error))
        self.assertIs(self.errors, error.errors)
