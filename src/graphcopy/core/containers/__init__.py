"""Container adapters: uniform access to sequence and mapping shapes."""

from graphcopy.core.containers.adapters import (
    BoundMethodAdapter,
    FrozenSetAdapter,
    MappingAdapter,
    ReadOnlyMappingAdapter,
    SequenceAdapter,
    SetAdapter,
    TupleAdapter,
    adapter_for,
    is_frozen,
)
from graphcopy.core.containers.protocol import ContainerAdapter, FrozenContainerAdapter

__all__ = [
    # Protocols
    "ContainerAdapter",
    "FrozenContainerAdapter",
    # Adapters
    "SequenceAdapter",
    "SetAdapter",
    "MappingAdapter",
    "TupleAdapter",
    "FrozenSetAdapter",
    "ReadOnlyMappingAdapter",
    "BoundMethodAdapter",
    "adapter_for",
    "is_frozen",
]
