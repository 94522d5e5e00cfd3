# -*- coding: utf-8 -*-
"""record_decorator package

Decorators for persisted Django records: forward everything to the decorated record, override what you need, add
validation rules and lifecycle callbacks around an atomic save/destroy.

DecoratableModel lives in record_decorator.models and is not re-exported here, so that importing this package does
not require the Django app registry to be ready.
"""
from record_decorator.base import RecordDecorator
from record_decorator.callbacks import (
    after_destroy,
    after_save,
    after_validation,
    before_destroy,
    before_save,
    before_validation,
    validator,
)
from record_decorator.errors import Errors
from record_decorator.exceptions import InvalidModel, NotDecoratable, RecordDecoratorError, UnknownCallbackHook
from record_decorator.naming import ModelName

__version__ = "0.1.0"
