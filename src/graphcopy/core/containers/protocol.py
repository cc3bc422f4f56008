"""Container adapter protocols.

Adapters give the traversal engine one uniform view over every sequence and
mapping shape it supports. Mutable containers are allocated empty, registered,
then filled entry by entry. Immutable containers cannot be filled after
construction, so they are built in one step from already-copied entries.

Usage:
    adapter = adapter_for(original)
    if isinstance(adapter, ContainerAdapter):
        shell = adapter.empty(original, instantiator)
        for entry in adapter.iterate(original):
            adapter.insert(shell, entry)
    else:
        copy = adapter.build(original, list(adapter.iterate(original)))
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from graphcopy.construction import Instantiator


@runtime_checkable
class ContainerAdapter(Protocol):
    """Mutable container: empty shell, ordered iteration, insertion."""

    def empty(self, original: Any, instantiator: Instantiator) -> Any:
        """Create an empty container with the same concrete shape as original."""
        ...

    def iterate(self, original: Any) -> Iterator[Any]:
        """Iterate the original's elements (or (key, value) pairs) in encounter order."""
        ...

    def insert(self, container: Any, entry: Any) -> None:
        """Add one copied element (or (key, value) pair) to the container."""
        ...


@runtime_checkable
class FrozenContainerAdapter(Protocol):
    """Immutable container: ordered iteration and one-shot construction."""

    def iterate(self, original: Any) -> Iterator[Any]:
        """Iterate the original's elements (or (key, value) pairs) in encounter order."""
        ...

    def build(self, original: Any, entries: list[Any]) -> Any:
        """Construct a container of the original's concrete type from copied entries."""
        ...
