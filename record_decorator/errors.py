# -*- coding: utf-8 -*-
"""errors module

Ordered field -> messages collection shared by decorators and decoratable models.
Field-less (model wide) messages are kept under Django's NON_FIELD_ERRORS key.
"""
from collections.abc import Mapping
from typing import Dict, List, Optional

from django.core.exceptions import NON_FIELD_ERRORS, ValidationError
from django.utils.text import capfirst


class Errors(Mapping):

    def __init__(self, messages: Optional[Mapping] = None):
        self._messages: Dict[str, List[str]] = {}
        if messages:
            self.merge(messages)

    def __getitem__(self, field: str) -> List[str]:
        # unknown fields read as "no errors" rather than raising
        return list(self._messages.get(field, []))

    def __iter__(self):
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, field) -> bool:
        return field in self._messages

    def __repr__(self):
        return f"Errors({self._messages!r})"

    def get(self, field, default=None):
        if field in self._messages:
            return self[field]
        return default

    def add(self, field: Optional[str], message) -> None:
        field = NON_FIELD_ERRORS if field is None else field
        self._messages.setdefault(field, []).append(str(message))

    def merge(self, other: Mapping) -> None:
        for field, messages in other.items():
            for message in messages:
                self.add(field, message)

    def update_from(self, error: ValidationError) -> None:
        if hasattr(error, 'error_dict'):
            self.merge(error.message_dict)
        else:
            for message in error.messages:
                self.add(NON_FIELD_ERRORS, message)

    def clear(self) -> None:
        self._messages.clear()

    def copy(self) -> 'Errors':
        return Errors(self._messages)

    def count(self) -> int:
        return sum(len(messages) for messages in self._messages.values())

    def full_messages(self) -> List[str]:
        """
        Messages prefixed with their humanised field name, i.e. "Color is too dark"

        :return: flat list in field insertion order
        """
        full = []
        for field, messages in self._messages.items():
            for message in messages:
                if field == NON_FIELD_ERRORS:
                    full.append(message)
                else:
                    full.append(f"{capfirst(field.replace('_', ' '))} {message}")
        return full

    def as_validation_error(self) -> ValidationError:
        return ValidationError({field: list(messages) for field, messages in self._messages.items()})
