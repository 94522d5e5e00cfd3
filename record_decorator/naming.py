# -*- coding: utf-8 -*-
"""naming module

Naming identity of decorated things, used by form / UI conventions (param keys, human labels).
Django models take it from their _meta options; any other class derives it from its own name.
"""
import inspect

from django.db import models
from django.utils.text import camel_case_to_spaces, capfirst


class ModelName:

    def __init__(self, name: str, human: str = None, plural: str = None):
        self.name = name
        self.singular = camel_case_to_spaces(name).replace(' ', '_')
        self.param_key = self.singular
        self.human = human or capfirst(camel_case_to_spaces(name))
        self.plural = plural or f"{self.singular}s"

    @classmethod
    def from_model(cls, model) -> 'ModelName':
        opts = model._meta
        return cls(
            opts.object_name,
            human=capfirst(str(opts.verbose_name)),
            plural=str(opts.verbose_name_plural).replace(' ', '_'),
        )

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"ModelName({self.name!r})"

    def __eq__(self, other):
        if isinstance(other, ModelName):
            return self.name == other.name
        if isinstance(other, str):
            return self.name == other
        return NotImplemented

    def __hash__(self):
        return hash(self.name)


def model_name_of(target) -> ModelName:
    """
    Resolve naming identity of a class or an instance

    :param target: naming aware object (exposes model_name()), Django model class/instance or any object
    """
    naming = getattr(target, 'model_name', None)
    # bound only: a plain function read off a class needs an instance
    if inspect.ismethod(naming):
        return naming()

    klass = target if isinstance(target, type) else type(target)
    if issubclass(klass, models.Model):
        return ModelName.from_model(klass)
    return ModelName(klass.__name__)


class class_or_instance_method:
    """
    Descriptor dispatching to one function when accessed on the class and another when accessed on an instance
    """

    def __init__(self, class_level, instance_level):
        self.class_level = class_level
        self.instance_level = instance_level

    def __get__(self, instance, owner):
        if instance is None:
            return self.class_level.__get__(owner, owner)
        return self.instance_level.__get__(instance, owner)
