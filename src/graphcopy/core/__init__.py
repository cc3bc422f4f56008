"""Core functionalities: stateless classification, introspection, and adapters.

Architecture Note:
    core/ contains pure, stateless building blocks with no per-copy state.
    For the stateful pieces of a copy, see registry/, construction/, and engine/.
"""

from graphcopy.core.containers import (
    ContainerAdapter,
    FrozenContainerAdapter,
    adapter_for,
    is_frozen,
)
from graphcopy.core.errors import (
    ConstructionError,
    FieldAccessError,
    GraphCopyError,
    RegistrationError,
    UnsupportedContainerError,
)
from graphcopy.core.fields import (
    UNSET,
    FieldDescriptor,
    FieldStorage,
    declared_fields,
    read_field,
    record_fields,
    write_field,
)
from graphcopy.core.kinds import LEAF_TYPES, ValueKind, classify, is_leaf
from graphcopy.core.types import Copy

__all__ = [
    # Types
    "Copy",
    # Kinds
    "ValueKind",
    "LEAF_TYPES",
    "classify",
    "is_leaf",
    # Fields
    "UNSET",
    "FieldDescriptor",
    "FieldStorage",
    "declared_fields",
    "record_fields",
    "read_field",
    "write_field",
    # Containers
    "ContainerAdapter",
    "FrozenContainerAdapter",
    "adapter_for",
    "is_frozen",
    # Errors
    "GraphCopyError",
    "ConstructionError",
    "FieldAccessError",
    "UnsupportedContainerError",
    "RegistrationError",
]
