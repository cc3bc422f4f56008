"""Enumerate and access the fields of arbitrary records.

Slot fields are declared per class and collected over the whole MRO, so they
are cached per concrete type. Builtin exception classes keep their state
(args, __cause__, errno and so on) in native descriptors, which are collected
the same way. Dict fields are per instance and are enumerated
on every visit.
"""

from __future__ import annotations

import types
from functools import cache
from typing import Any

from graphcopy.core.errors import FieldAccessError
from graphcopy.core.fields.models import FieldDescriptor, FieldStorage

_IMPLICIT_SLOTS = frozenset({"__dict__", "__weakref__"})

_NATIVE_DESCRIPTORS = (types.GetSetDescriptorType, types.MemberDescriptorType)


def _mangle(owner: type, name: str) -> str:
    """Apply private name mangling the way the compiler does for ``__slots__``."""
    if not name.startswith("__") or name.endswith("__"):
        return name
    stripped = owner.__name__.lstrip("_")
    if not stripped:
        return name
    return f"_{stripped}{name}"


@cache
def declared_fields(cls: type) -> tuple[FieldDescriptor, ...]:
    """Collect slot and native fields declared on a class and every ancestor.

    Args:
        cls: Concrete record type.

    Returns:
        Field descriptors, most derived class first, without duplicates.
    """
    fields: list[FieldDescriptor] = []
    seen: set[str] = set()
    for owner in cls.__mro__:
        slots = owner.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in _IMPLICIT_SLOTS:
                continue
            name = _mangle(owner, slot)
            if name in seen:
                continue
            accessor = owner.__dict__.get(name)
            if accessor is None or not hasattr(accessor, "__set__"):
                continue
            seen.add(name)
            fields.append(FieldDescriptor(name, owner, FieldStorage.SLOT, accessor))
        if issubclass(owner, BaseException) and owner.__module__ == "builtins":
            for name, accessor in owner.__dict__.items():
                if name in _IMPLICIT_SLOTS or name in seen:
                    continue
                if isinstance(accessor, _NATIVE_DESCRIPTORS):
                    seen.add(name)
                    fields.append(FieldDescriptor(name, owner, FieldStorage.NATIVE, accessor))
    return tuple(fields)


def record_fields(instance: Any) -> tuple[FieldDescriptor, ...]:
    """Enumerate every field of a record instance.

    Args:
        instance: Record to inspect.

    Returns:
        Declared slot fields followed by the instance ``__dict__`` entries, in
        insertion order.
    """
    cls = type(instance)
    fields = declared_fields(cls)
    try:
        instance_dict = object.__getattribute__(instance, "__dict__")
    except AttributeError:
        return fields
    return fields + tuple(
        FieldDescriptor(name, cls, FieldStorage.DICT) for name in instance_dict
    )


def read_field(descriptor: FieldDescriptor, instance: Any) -> Any:
    """Read a field, translating failures into FieldAccessError.

    Args:
        descriptor: Field to read.
        instance: Object to read from.

    Returns:
        Field value, or UNSET for an unassigned slot.

    Raises:
        FieldAccessError: If the field cannot be read.
    """
    try:
        return descriptor.read(instance)
    except Exception as e:
        raise FieldAccessError(type(instance), descriptor.name, "read") from e


def write_field(descriptor: FieldDescriptor, instance: Any, value: Any) -> None:
    """Write a field, translating failures into FieldAccessError.

    Args:
        descriptor: Field to write.
        instance: Object to write to.
        value: Value to store.

    Raises:
        FieldAccessError: If the field cannot be written.
    """
    try:
        descriptor.write(instance, value)
    except Exception as e:
        raise FieldAccessError(type(instance), descriptor.name, "write") from e
