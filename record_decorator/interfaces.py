from typing import List, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class DecoratedRecord(Protocol):
    """
    Capabilities an object must provide to be wrapped by a RecordDecorator.

    Django models get them from DecoratableModel; decorators provide them too, so decorators nest.
    """

    errors: Mapping[str, List[str]]

    def save(self) -> bool: ...

    def destroy(self) -> Optional[bool]: ...

    def is_valid(self) -> bool: ...

    def is_persisted(self) -> bool: ...
