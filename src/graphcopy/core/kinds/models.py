"""Value kinds and the type tables the classifier dispatches on."""

from __future__ import annotations

import array
import datetime
import decimal
import fractions
import pathlib
import re
import types
import uuid
import weakref
from collections.abc import Mapping, MutableSequence, MutableSet
from enum import Enum, auto


class ValueKind(Enum):
    """Copy strategy category of a runtime value."""

    NULL = auto()  # None, never registered
    LEAF = auto()  # Immutable, aliased instead of cloned
    ARRAY = auto()  # Fixed-layout homogeneous buffer
    SEQUENCE = auto()  # Variable-size ordered or unordered elements
    MAPPING = auto()  # Key to value container
    METHOD = auto()  # Bound method, rebound to the copy of its receiver
    RECORD = auto()  # Object with named fields


# Instances of these types are never mutated after construction.
LEAF_TYPES: tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    range,
    slice,
    types.EllipsisType,
    types.NotImplementedType,
    decimal.Decimal,
    fractions.Fraction,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    uuid.UUID,
    pathlib.PurePath,
    re.Pattern,
    Enum,
    type,
    types.FunctionType,
    types.ModuleType,
    types.CodeType,
    types.FrameType,
    types.TracebackType,
    weakref.ref,
    property,
)

ARRAY_TYPES: tuple[type, ...] = (array.array, bytearray)

SEQUENCE_TYPES: tuple[type, ...] = (MutableSequence, MutableSet, tuple, frozenset)

MAPPING_TYPES: tuple[type, ...] = (Mapping,)

# Callables holding a receiver in __self__. A builtin function such as len is
# bound to its module, so it is a leaf like any other bound method whose
# receiver is a leaf.
BOUND_METHOD_TYPES: tuple[type, ...] = (
    types.MethodType,
    types.BuiltinMethodType,
    types.MethodWrapperType,
)
