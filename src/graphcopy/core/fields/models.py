"""Field descriptor models for record introspection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class FieldStorage(Enum):
    """Where a record field lives on an instance."""

    SLOT = auto()  # __slots__ member descriptor declared on the owner class
    DICT = auto()  # Key of the instance __dict__
    NATIVE = auto()  # Data descriptor of a builtin base class, e.g. BaseException.args


class _Unset:
    """Marker for a slot that has never been assigned."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """A named field of a record, readable and writable regardless of visibility.

    Reads and writes go through the slot member descriptor or the raw instance
    ``__dict__``, so ``__setattr__`` overrides, properties, frozen dataclass
    guards and model validation are never triggered.

    Attributes:
        name: Attribute name as stored (private slot names are mangled).
        owner: Class that declares the field.
        storage: Slot member, native descriptor or instance dict entry.
        accessor: Data descriptor for slot and native fields, None for dict fields.
    """

    name: str
    owner: type
    storage: FieldStorage
    accessor: Any = field(default=None, compare=False, repr=False)

    def read(self, instance: Any) -> Any:
        """Read the field from an instance.

        Args:
            instance: Object to read from.

        Returns:
            The stored value, or UNSET for a slot that was never assigned.
        """
        if self.storage is not FieldStorage.DICT:
            try:
                return self.accessor.__get__(instance, self.owner)
            except AttributeError:
                return UNSET
        return object.__getattribute__(instance, "__dict__")[self.name]

    def write(self, instance: Any, value: Any) -> None:
        """Store a value into the field of an instance.

        Args:
            instance: Object to write to.
            value: Value to store.
        """
        if self.storage is not FieldStorage.DICT:
            self.accessor.__set__(instance, value)
        else:
            object.__getattribute__(instance, "__dict__")[self.name] = value
