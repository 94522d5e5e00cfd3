import inspect

_MISSING = object()


def _defines(obj, name: str) -> bool:
    # static lookup, descriptors (lazy relations included) are never evaluated
    if isinstance(obj, ForwardingProxy):
        return obj._knows(name)
    return inspect.getattr_static(obj, name, _MISSING) is not _MISSING


class ForwardingProxy:
    """
    Wraps exactly one object and forwards any attribute it does not define itself.

    Reads fall through to the wrapped object whenever normal lookup on the proxy fails. Writes go to the wrapped
    object when it defines the attribute, unless the proxy claims the name (own instance state, a private name,
    a class attribute or a property with a setter). A property without a setter only overrides the reader.
    Whether the wrapped object defines a name is decided from its instance dict and its class, without running
    any getter.

    The wrapped object is fixed at construction. Overrides reach the original behaviour with read_through(),
    write_through() and call_through().
    """

    def __init__(self, record):
        object.__setattr__(self, '_decorated', record)

    @property
    def decorated_record(self):
        return self._decorated

    @property
    def decorated_record_deep(self):
        record = self._decorated
        while isinstance(record, ForwardingProxy):
            record = record.decorated_record
        return record

    def __getattr__(self, name):
        if name == '_decorated':
            raise AttributeError(name)
        return getattr(self._decorated, name)

    def __setattr__(self, name, value):
        if name == '_decorated' and name in self.__dict__:
            raise AttributeError(f"{type(self).__name__} decorated record cannot be replaced")
        if self._owns(name):
            object.__setattr__(self, name, value)
        else:
            setattr(self._decorated, name, value)

    def __delattr__(self, name):
        if name == '_decorated':
            raise AttributeError(f"{type(self).__name__} decorated record cannot be removed")
        if name in self.__dict__:
            object.__delattr__(self, name)
        else:
            delattr(self._decorated, name)

    def _owns(self, name: str) -> bool:
        if name.startswith('_') or name in self.__dict__ or '_decorated' not in self.__dict__:
            return True

        attr = inspect.getattr_static(type(self), name, _MISSING)
        if attr is _MISSING or (isinstance(attr, property) and attr.fset is None):
            return not _defines(self._decorated, name)
        return True

    def _knows(self, name: str) -> bool:
        if name in self.__dict__ or inspect.getattr_static(type(self), name, _MISSING) is not _MISSING:
            return True
        return '_decorated' in self.__dict__ and _defines(self._decorated, name)

    def __getitem__(self, name: str):
        return self.read(name)

    def __setitem__(self, name: str, value) -> None:
        self.write(name, value)

    def __str__(self):
        return str(self._decorated)

    def __repr__(self):
        return f"<{type(self).__name__}: {self._decorated!r}>"

    def read(self, name: str):
        return getattr(self, name)

    def write(self, name: str, value):
        setattr(self, name, value)
        return value

    def assign_attributes(self, attrs=None, **kwargs) -> None:
        # through setattr on self, so overridden setters see bulk assignment too
        for name, value in dict(attrs or {}, **kwargs).items():
            setattr(self, name, value)

    def read_through(self, name: str):
        return getattr(self._decorated, name)

    def write_through(self, name: str, value) -> None:
        setattr(self._decorated, name, value)

    def call_through(self, name: str, *args, **kwargs):
        return getattr(self._decorated, name)(*args, **kwargs)
