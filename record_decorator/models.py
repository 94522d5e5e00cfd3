import logging

from django.core.exceptions import ValidationError
from django.db import models

from record_decorator.errors import Errors

logger = logging.getLogger(__name__)


class DecoratableModel(models.Model):
    """
    Abstract model mixin giving Django models the DecoratedRecord capabilities.

    Record level validation rules go into clean() / field validators as usual; is_valid() runs full_clean()
    and collects the raised ValidationError into errors instead of raising.
    """
    class Meta:
        abstract = True

    @property
    def errors(self) -> Errors:
        if '_record_errors' not in self.__dict__:
            self.__dict__['_record_errors'] = Errors()
        return self.__dict__['_record_errors']

    def is_valid(self, exclude=None) -> bool:
        self.errors.clear()
        try:
            self.full_clean(exclude=exclude)
        except ValidationError as e:
            self.errors.update_from(e)
            logger.debug(f"{type(self).__name__} invalid: {self.errors!r}")
        return not self.errors

    def save(self, *args, **kwargs) -> bool:
        super().save(*args, **kwargs)
        return True

    def destroy(self) -> bool:
        self.delete()
        return True

    def is_persisted(self) -> bool:
        return not self._state.adding and self.pk is not None

    def is_new_record(self) -> bool:
        return not self.is_persisted()
