"""Concrete container adapters and adapter selection.

Bound methods are handled as a one-element frozen container: the receiver is
copied first, then the method is rebound to that copy.
"""

from __future__ import annotations

import types
from collections import defaultdict, deque
from collections.abc import Iterator, Mapping, MutableMapping, MutableSequence, MutableSet
from typing import TYPE_CHECKING, Any

from graphcopy.core.containers.protocol import ContainerAdapter, FrozenContainerAdapter
from graphcopy.core.errors import ConstructionError, UnsupportedContainerError
from graphcopy.core.kinds.models import BOUND_METHOD_TYPES

if TYPE_CHECKING:
    from graphcopy.construction import Instantiator


class SequenceAdapter:
    """Ordered mutable sequences: list, deque, UserList, MutableSequence."""

    def empty(self, original: Any, instantiator: Instantiator) -> Any:
        cls = type(original)
        if isinstance(original, deque) and original.maxlen is not None:
            # maxlen is read-only after construction
            try:
                shell = cls((), original.maxlen)
            except Exception as e:
                raise UnsupportedContainerError(cls) from e
            if type(shell) is not cls:
                raise UnsupportedContainerError(cls)
            return shell
        return instantiator.instantiate_container(cls, [])

    def iterate(self, original: Any) -> Iterator[Any]:
        return iter(original)

    def insert(self, container: Any, entry: Any) -> None:
        container.append(entry)


class SetAdapter:
    """Unordered mutable sets: set, MutableSet."""

    def empty(self, original: Any, instantiator: Instantiator) -> Any:
        return instantiator.instantiate_container(type(original), set())

    def iterate(self, original: Any) -> Iterator[Any]:
        return iter(original)

    def insert(self, container: Any, entry: Any) -> None:
        container.add(entry)


class MappingAdapter:
    """Mutable mappings: dict, OrderedDict, Counter, defaultdict, UserDict, MutableMapping.

    Entries are (key, value) pairs. Insertion order of the original is kept.
    """

    def empty(self, original: Any, instantiator: Instantiator) -> Any:
        shell = instantiator.instantiate_container(type(original), {})
        if isinstance(original, defaultdict):
            shell.default_factory = original.default_factory
        return shell

    def iterate(self, original: Any) -> Iterator[tuple[Any, Any]]:
        return iter(original.items())

    def insert(self, container: Any, entry: tuple[Any, Any]) -> None:
        key, value = entry
        container[key] = value


class TupleAdapter:
    """Tuples, namedtuples, and other tuple subclasses."""

    def iterate(self, original: Any) -> Iterator[Any]:
        return iter(original)

    def build(self, original: Any, entries: list[Any]) -> Any:
        cls = type(original)
        if cls is tuple:
            return tuple(entries)
        try:
            if hasattr(cls, "_make"):
                return cls._make(entries)
            return tuple.__new__(cls, entries)
        except Exception as e:
            raise UnsupportedContainerError(cls) from e


class FrozenSetAdapter:
    """frozenset and its subclasses."""

    def iterate(self, original: Any) -> Iterator[Any]:
        return iter(original)

    def build(self, original: Any, entries: list[Any]) -> Any:
        cls = type(original)
        if cls is frozenset:
            return frozenset(entries)
        try:
            return frozenset.__new__(cls, entries)
        except Exception as e:
            raise UnsupportedContainerError(cls) from e


class ReadOnlyMappingAdapter:
    """Read-only mappings such as MappingProxyType, rebuilt over a fresh dict."""

    def iterate(self, original: Any) -> Iterator[tuple[Any, Any]]:
        return iter(original.items())

    def build(self, original: Any, entries: list[Any]) -> Any:
        cls = type(original)
        try:
            result = cls(dict(entries))
        except Exception as e:
            raise UnsupportedContainerError(cls) from e
        if type(result) is not cls:
            raise UnsupportedContainerError(cls)
        return result


class BoundMethodAdapter:
    """Bound methods whose receiver is copied rather than shared."""

    def iterate(self, original: Any) -> Iterator[Any]:
        return iter((original.__self__,))

    def build(self, original: Any, entries: list[Any]) -> Any:
        (receiver,) = entries
        if isinstance(original, types.MethodType):
            return types.MethodType(original.__func__, receiver)

        # builtin methods and slot wrappers are rebound through the class attribute
        name = original.__name__
        try:
            bound = getattr(type(receiver), name).__get__(receiver, type(receiver))
        except Exception as e:
            raise ConstructionError(type(original), f"cannot rebind {name!r}: {e}") from e
        if type(bound) is not type(original) or bound.__self__ is not receiver:
            raise ConstructionError(type(original), f"cannot rebind {name!r}")
        return bound


_SEQUENCE = SequenceAdapter()
_SET = SetAdapter()
_MAPPING = MappingAdapter()
_TUPLE = TupleAdapter()
_FROZENSET = FrozenSetAdapter()
_READ_ONLY_MAPPING = ReadOnlyMappingAdapter()
_BOUND_METHOD = BoundMethodAdapter()


def adapter_for(value: Any) -> ContainerAdapter | FrozenContainerAdapter:
    """Select the adapter for a sequence or mapping value.

    Args:
        value: Container classified as SEQUENCE or MAPPING, or a bound method.

    Returns:
        A ContainerAdapter for mutable containers, a FrozenContainerAdapter for
        immutable ones.

    Raises:
        UnsupportedContainerError: If no adapter understands the container.
    """
    if isinstance(value, BOUND_METHOD_TYPES):
        return _BOUND_METHOD
    if isinstance(value, tuple):
        return _TUPLE
    if isinstance(value, frozenset):
        return _FROZENSET
    if isinstance(value, MutableSequence):
        return _SEQUENCE
    if isinstance(value, MutableSet):
        return _SET
    if isinstance(value, MutableMapping):
        return _MAPPING
    if isinstance(value, Mapping):
        return _READ_ONLY_MAPPING
    raise UnsupportedContainerError(type(value))


def is_frozen(adapter: ContainerAdapter | FrozenContainerAdapter) -> bool:
    """Check if an adapter builds its container in one step."""
    return not isinstance(adapter, ContainerAdapter)
