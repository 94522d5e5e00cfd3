# -*- coding: utf-8 -*-
"""base module

RecordDecorator decorates a persisted record (typically a DecoratableModel instance) to add behaviour without
touching the model: override attributes, add validation rules and lifecycle callbacks. Persistence calls go through
to the decorated record inside a single atomic block.

Usage:

    class BookDecorator(RecordDecorator, decorates=Book):

        @after_save
        def send_email(self):
            mail.saved_book(self)

    decorator = BookDecorator(book)
    decorator.update({'title': "Dune"})

Validation (is_valid):
- before_validation callbacks, a False return halts and is_valid() is False
- decorator validation rules, then the decorated record's is_valid()
- an invalid record's errors are copied (added) into the decorator's own errors
- after_validation callbacks, whenever not halted

Save:
- is_valid() False returns False without opening a transaction
- inside transaction.atomic: before_save callbacks, decorated record save(), after_save callbacks
- anything but exactly True from the decorated save, or a halting before_save, rolls the block back
- an exception from any callback or from the record rolls the block back and propagates

Destroy follows the save shape without validation.

Errors are never cleared automatically. Call errors.clear() before re-validating when needed.
"""
import logging

from django.db import DEFAULT_DB_ALIAS, models, router, transaction

from record_decorator import config as decorator_config
from record_decorator.callbacks import VALIDATE_HOOK, CallbackPhase, CallbackRegistry
from record_decorator.errors import Errors
from record_decorator.exceptions import InvalidModel, NotDecoratable
from record_decorator.interfaces import DecoratedRecord
from record_decorator.naming import ModelName, class_or_instance_method, model_name_of
from record_decorator.proxy import ForwardingProxy

logger = logging.getLogger(__name__)


class RecordDecorator(ForwardingProxy):
    _callbacks = CallbackRegistry()

    def __init_subclass__(cls, decorates: type = None, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._callbacks = CallbackRegistry()
        cls._callbacks.collect(cls)
        if decorates is not None:
            cls.configure(decorates)

    def __init__(self, record: DecoratedRecord):
        if not isinstance(record, DecoratedRecord):
            raise NotDecoratable(record)
        super().__init__(record)
        self._errors = Errors()

    # --- class level configuration

    @classmethod
    def configure(cls, decorated_class: type) -> None:
        decorator_config.configure(cls, decorated_class)

    @classmethod
    def get_config(cls):
        return decorator_config.get_config(cls)

    @classmethod
    def add_callback(cls, hook: str, callback) -> None:
        cls._callbacks.register(hook, callback)

    @classmethod
    def add_validator(cls, rule) -> None:
        cls._callbacks.register(VALIDATE_HOOK, rule)

    @classmethod
    def resolve_callbacks(cls) -> CallbackRegistry:
        return CallbackRegistry.merged(
            vars(klass)['_callbacks'] for klass in reversed(cls.__mro__) if '_callbacks' in vars(klass)
        )

    def _class_model_name(cls) -> ModelName:
        config = cls.get_config()
        if config is not None and config.decorated_class is not None:
            return model_name_of(config.decorated_class)
        return ModelName(cls.__name__)

    def _instance_model_name(self) -> ModelName:
        return model_name_of(self.decorated_record)

    model_name = class_or_instance_method(_class_model_name, _instance_model_name)

    # --- validation

    @property
    def errors(self) -> Errors:
        return self._errors

    def is_valid(self) -> bool:
        return self.resolve_callbacks().run(CallbackPhase.VALIDATION, self, self._run_validations) is True

    def _run_validations(self) -> bool:
        error_count = self.errors.count()
        self.resolve_callbacks().validate(self)
        rules_passed = self.errors.count() == error_count

        record = self.decorated_record
        if record.is_valid():
            return rules_passed

        self.errors.merge(record.errors)
        return False

    # --- persistence

    def get_db_alias(self) -> str:
        record = self.decorated_record_deep
        if isinstance(record, models.Model):
            return router.db_for_write(type(record), instance=record)
        return DEFAULT_DB_ALIAS

    def _run_atomic(self, phase: CallbackPhase, action, succeeded) -> bool:
        using = self.get_db_alias()
        with transaction.atomic(using=using):
            status = self.resolve_callbacks().run(phase, self, action)
            if not succeeded(status):
                logger.info(f"Rolling back {phase.value} of {self!r}, status: {status!r}")
                transaction.set_rollback(True, using=using)
                return False
        return True

    def save(self, raise_exception: bool = False) -> bool:
        if self.is_valid():
            saved = self._run_atomic(CallbackPhase.SAVE, self.decorated_record.save, lambda status: status is True)
        else:
            logger.info(f"Not saving invalid {self!r}: {self.errors.full_messages()}")
            saved = False

        if not saved and raise_exception:
            raise InvalidModel(self.errors.copy())
        return saved

    def save_or_raise(self) -> bool:
        return self.save(raise_exception=True)

    def destroy(self) -> bool:
        return self._run_atomic(
            CallbackPhase.DESTROY, self.decorated_record.destroy, lambda status: status is not False
        )

    def update(self, attrs=None, raise_exception: bool = False, **kwargs) -> bool:
        self.assign_attributes(attrs, **kwargs)
        return self.save(raise_exception=raise_exception)

    def update_or_raise(self, attrs=None, **kwargs) -> bool:
        return self.update(attrs, raise_exception=True, **kwargs)

    update_attributes = update
    update_attributes_or_raise = update_or_raise

    def is_persisted(self) -> bool:
        return self.decorated_record.is_persisted()

    def is_new_record(self) -> bool:
        return not self.is_persisted()
