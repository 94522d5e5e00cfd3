# -*- coding: utf-8 -*-
"""config module

Per decorator class configuration. Configs live in a registry keyed by decorator class.
A class without its own entry sees the nearest configured ancestor's config; configuring a class always stores a
fresh (deep copied) config for that class only, so parents and siblings are never mutated.
"""
import copy
import logging
import weakref
from typing import Optional

logger = logging.getLogger(__name__)


class DecoratorConfig:

    def __init__(self, decorated_class: type = None):
        self.decorated_class = decorated_class

    def __repr__(self):
        return f"DecoratorConfig(decorated_class={self.decorated_class!r})"


_registry: 'weakref.WeakKeyDictionary[type, DecoratorConfig]' = weakref.WeakKeyDictionary()


def get_config(decorator_class: type) -> Optional[DecoratorConfig]:
    for klass in decorator_class.__mro__:
        config = _registry.get(klass)
        if config is not None:
            return config
    return None


def configure(decorator_class: type, decorated_class: type) -> DecoratorConfig:
    inherited = get_config(decorator_class)
    config = copy.deepcopy(inherited) if inherited is not None else DecoratorConfig()
    config.decorated_class = decorated_class
    _registry[decorator_class] = config
    logger.debug(f"Configured {decorator_class.__name__} to decorate {getattr(decorated_class, '__name__', decorated_class)}")
    return config
