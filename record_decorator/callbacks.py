# -*- coding: utf-8 -*-
"""callbacks module

Lifecycle callback chains for record decorators.

Each phase (validation, save, destroy) owns an ordered chain of "before" and "after" callbacks wrapped around a core
action. A before callback returning False halts the chain: the action and the after callbacks are skipped and the
chain reports False. Any other return value (None included) lets the chain carry on. After callback return values
are ignored; exceptions raised anywhere propagate to the caller.

Callbacks are either method names (resolved on the decorator instance when run, so subclass overrides apply) or
plain callables taking the decorator instance. Marker decorators register methods at class definition time:

    class BalloonDecorator(RecordDecorator, decorates=Balloon):

        @before_save
        def stamp(self):
            ...

        @validator
        def must_float(self):
            if self.size == 'anvil':
                self.errors.add('size', 'is too heavy')

Each decorator class keeps only the callbacks it registers itself. Chains are resolved along the class hierarchy when
they run, so parent callbacks run before the ones a subclass adds, and a callback added to a parent later still
reaches existing subclasses.
"""
import logging
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Union

from record_decorator.exceptions import UnknownCallbackHook

logger = logging.getLogger(__name__)

Callback = Union[str, Callable[[Any], Any]]

HOOK_ATTR = '_record_decorator_hooks'
VALIDATE_HOOK = 'validate'


class CallbackPhase(Enum):
    VALIDATION = "validation"
    SAVE = "save"
    DESTROY = "destroy"


class CallbackKind(Enum):
    BEFORE = "before"
    AFTER = "after"


HOOKS = {
    f"{kind.value}_{phase.value}": (kind, phase) for phase in CallbackPhase for kind in CallbackKind
}


def _invoke(target, callback: Callback):
    if isinstance(callback, str):
        return getattr(target, callback)()
    return callback(target)


def _label(callback: Callback) -> str:
    if isinstance(callback, str):
        return callback
    return getattr(callback, '__qualname__', repr(callback))


class CallbackChain:

    def __init__(self, phase: CallbackPhase):
        self.phase = phase
        self.callbacks: Dict[CallbackKind, List[Callback]] = {kind: [] for kind in CallbackKind}

    def copy(self) -> 'CallbackChain':
        chain = CallbackChain(self.phase)
        for kind, callbacks in self.callbacks.items():
            chain.callbacks[kind] = list(callbacks)
        return chain

    def append(self, kind: CallbackKind, callback: Callback) -> None:
        if callback not in self.callbacks[kind]:
            self.callbacks[kind].append(callback)

    def run(self, target, action: Callable[[], Any]) -> Any:
        """
        Run before callbacks, the action, then after callbacks

        :param target: decorator instance callbacks are run against
        :param action: core action of the phase
        :return: False when a before callback halted the chain, otherwise the action's result
        """
        for callback in self.callbacks[CallbackKind.BEFORE]:
            if _invoke(target, callback) is False:
                logger.info(f"{type(target).__name__} {self.phase.value} halted by before callback {_label(callback)}")
                return False

        result = action()

        for callback in self.callbacks[CallbackKind.AFTER]:
            _invoke(target, callback)

        return result


class CallbackRegistry:
    """
    Callback chains and validation rules of one decorator class
    """

    def __init__(self):
        self.chains: Dict[CallbackPhase, CallbackChain] = {phase: CallbackChain(phase) for phase in CallbackPhase}
        self.validators: List[Callback] = []

    @classmethod
    def merged(cls, registries: Iterable['CallbackRegistry']) -> 'CallbackRegistry':
        """
        Combine registries in the given order, earlier entries first, each callback kept once
        """
        merged = cls()
        for registry in registries:
            for phase, chain in registry.chains.items():
                for kind, callbacks in chain.callbacks.items():
                    for callback in callbacks:
                        merged.chains[phase].append(kind, callback)
            for rule in registry.validators:
                merged.register(VALIDATE_HOOK, rule)
        return merged

    def register(self, hook: str, callback: Callback) -> None:
        if hook == VALIDATE_HOOK:
            if callback not in self.validators:
                self.validators.append(callback)
            return

        try:
            kind, phase = HOOKS[hook]
        except KeyError:
            raise UnknownCallbackHook(hook)
        self.chains[phase].append(kind, callback)

    def collect(self, klass: type) -> None:
        """
        Register methods marked by the hook decorators, in class body order
        """
        for name, member in vars(klass).items():
            for hook in getattr(member, HOOK_ATTR, ()):
                self.register(hook, name)

    def run(self, phase: CallbackPhase, target, action: Callable[[], Any]) -> Any:
        return self.chains[phase].run(target, action)

    def validate(self, target) -> None:
        for rule in self.validators:
            _invoke(target, rule)


def _marker(hook: str):
    def mark(func):
        setattr(func, HOOK_ATTR, getattr(func, HOOK_ATTR, ()) + (hook,))
        return func
    mark.__name__ = hook
    mark.__doc__ = f"Register the decorated method as a {hook.replace('_', ' ')} callback"
    return mark


before_validation = _marker('before_validation')
after_validation = _marker('after_validation')
before_save = _marker('before_save')
after_save = _marker('after_save')
before_destroy = _marker('before_destroy')
after_destroy = _marker('after_destroy')
validator = _marker(VALIDATE_HOOK)
