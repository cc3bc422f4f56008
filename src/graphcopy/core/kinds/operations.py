"""Pure classification of runtime values."""

from __future__ import annotations

from typing import Any

from graphcopy.core.kinds.models import (
    ARRAY_TYPES,
    BOUND_METHOD_TYPES,
    LEAF_TYPES,
    MAPPING_TYPES,
    SEQUENCE_TYPES,
    ValueKind,
)


def is_leaf(value: Any) -> bool:
    """Check if a value is immutable and safe to alias.

    A bound method is a leaf only when its receiver is: rebinding ``len`` or
    ``"abc".upper`` gains nothing, but ``self.items.append`` must follow the
    copied list.

    Args:
        value: Any runtime value.

    Returns:
        True if the value's type is a known immutable leaf type.
    """
    if isinstance(value, BOUND_METHOD_TYPES):
        receiver = getattr(value, "__self__", None)
        return receiver is None or is_leaf(receiver)
    return isinstance(value, LEAF_TYPES)


def classify(value: Any) -> ValueKind:
    """Categorize a value by the copy strategy that applies to it.

    The checks run in a fixed order: null, leaf, bound method, array,
    sequence, mapping and finally record. ``str`` and ``bytes`` are sequences
    too, so leaves must be decided before containers.

    Args:
        value: Any runtime value.

    Returns:
        The ValueKind for the value's runtime type.
    """
    if value is None:
        return ValueKind.NULL
    if is_leaf(value):
        return ValueKind.LEAF
    if isinstance(value, BOUND_METHOD_TYPES):
        return ValueKind.METHOD
    if isinstance(value, ARRAY_TYPES):
        return ValueKind.ARRAY
    if isinstance(value, SEQUENCE_TYPES):
        return ValueKind.SEQUENCE
    if isinstance(value, MAPPING_TYPES):
        return ValueKind.MAPPING
    return ValueKind.RECORD
