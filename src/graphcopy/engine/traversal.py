"""Traversal engine for deep copies of arbitrary value graphs.

Usage:
    from graphcopy import copy

    node = Node()
    node.next = node
    clone = copy(node)
    assert clone.next is clone

Every non-leaf value is handled as "allocate empty shell -> register -> fill
children". Because the shell is registered before any child is visited, a
value that reaches itself again resolves to its own (still filling) copy.

The walk runs on an explicit frame stack instead of native recursion. Each
fill step is a generator that yields a child and is sent back the child's
copy, so values complete in the same order as a recursive copy would, but
depth is limited by memory rather than the interpreter recursion limit.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any

from graphcopy.config import CopySettings, get_settings
from graphcopy.construction import Instantiator
from graphcopy.core.containers import (
    ContainerAdapter,
    FrozenContainerAdapter,
    adapter_for,
    is_frozen,
)
from graphcopy.core.errors import ConstructionError
from graphcopy.core.fields import UNSET, FieldDescriptor, read_field, record_fields, write_field
from graphcopy.core.kinds import ValueKind, classify
from graphcopy.core.types import Copy
from graphcopy.engine.stats import CopyStats
from graphcopy.registry import IdentityRegistry

logger = logging.getLogger(__name__)

type Frame = Generator[Any, Any, Any]

_MISSING = object()


class _Traversal:
    """State of one top-level copy call. Never reused across calls."""

    def __init__(self, instantiator: Instantiator, stats: CopyStats) -> None:
        self._registry = IdentityRegistry()
        self._instantiator = instantiator
        self._stats = stats

    def run(self, root: Any) -> Any:
        ready, outcome = self._begin(root)
        if ready:
            return outcome

        stack: list[Frame] = [outcome]
        sent: Any = None
        while stack:
            try:
                child = stack[-1].send(sent)
            except StopIteration as stop:
                stack.pop()
                sent = stop.value
                continue
            ready, outcome = self._begin(child)
            if ready:
                sent = outcome
            else:
                stack.append(outcome)
                sent = None
        return sent

    def _begin(self, value: Any) -> tuple[bool, Any]:
        """Start copying a value.

        Returns:
            (True, copy) when the copy is already complete, or (False, frame)
            when children still have to be copied by the frame.
        """
        if value is None:
            return True, None

        existing = self._registry.lookup(value, _MISSING)
        if existing is not _MISSING:
            self._stats.reused += 1
            return True, existing

        kind = classify(value)

        if kind is ValueKind.LEAF:
            self._stats.record(kind)
            self._registry.register(value, value)
            return True, value

        if kind is ValueKind.ARRAY:
            self._stats.record(kind)
            shell = self._instantiator.allocate_array(value)
            self._register_shell(value, shell)
            return False, self._fill_array(value, shell)

        if kind is ValueKind.RECORD:
            self._stats.record(kind)
            shell = self._instantiator.instantiate(type(value))
            fields = record_fields(value)
            self._register_shell(value, shell)
            return False, self._fill_record(value, shell, fields)

        adapter = adapter_for(value)
        pairs = kind is ValueKind.MAPPING
        # subclass attributes travel with the container; a bound method has none of its own
        fields = () if kind is ValueKind.METHOD else record_fields(value)
        if is_frozen(adapter):
            # counted when built, since a cycle can open a second frame for this value
            return False, self._build_frozen(value, adapter, kind, fields)  # type: ignore[arg-type]

        self._stats.record(kind)
        shell = adapter.empty(value, self._instantiator)  # type: ignore[union-attr]
        self._register_shell(value, shell)
        if pairs:
            return False, self._fill_mapping(value, shell, adapter, fields)  # type: ignore[arg-type]
        return False, self._fill_sequence(value, shell, adapter, fields)  # type: ignore[arg-type]

    def _register_shell(self, original: Any, shell: Any) -> None:
        if shell is original:
            # e.g. a singleton handed back by a custom __new__
            raise ConstructionError(type(original), "instantiation returned the original instance")
        self._registry.register(original, shell)

    def _fill_array(self, original: Any, shell: Any) -> Frame:
        for index, element in enumerate(original):
            shell[index] = yield element
        return shell

    def _fill_sequence(
        self,
        original: Any,
        shell: Any,
        adapter: ContainerAdapter,
        fields: tuple[FieldDescriptor, ...],
    ) -> Frame:
        for element in adapter.iterate(original):
            adapter.insert(shell, (yield element))
        return (yield from self._fill_record(original, shell, fields))

    def _fill_mapping(
        self,
        original: Any,
        shell: Any,
        adapter: ContainerAdapter,
        fields: tuple[FieldDescriptor, ...],
    ) -> Frame:
        for key, value in adapter.iterate(original):
            key_copy = yield key
            value_copy = yield value
            adapter.insert(shell, (key_copy, value_copy))
        return (yield from self._fill_record(original, shell, fields))

    def _fill_record(
        self, original: Any, shell: Any, fields: tuple[FieldDescriptor, ...]
    ) -> Frame:
        for descriptor in fields:
            value = read_field(descriptor, original)
            if value is UNSET:
                continue
            write_field(descriptor, shell, (yield value))
        return shell

    def _build_frozen(
        self,
        original: Any,
        adapter: FrozenContainerAdapter,
        kind: ValueKind,
        fields: tuple[FieldDescriptor, ...],
    ) -> Frame:
        entries: list[Any] = []
        if kind is ValueKind.MAPPING:
            for key, value in adapter.iterate(original):
                key_copy = yield key
                value_copy = yield value
                entries.append((key_copy, value_copy))
        else:
            for element in adapter.iterate(original):
                entries.append((yield element))

        field_copies: list[tuple[FieldDescriptor, Any]] = []
        for descriptor in fields:
            value = read_field(descriptor, original)
            if value is not UNSET:
                field_copies.append((descriptor, (yield value)))

        # A cycle through a mutable descendant may already have built this one
        existing = self._registry.lookup(original, _MISSING)
        if existing is not _MISSING:
            self._stats.reused += 1
            return existing

        result = adapter.build(original, entries)
        self._stats.record(kind)
        self._registry.register(original, result)
        for descriptor, value in field_copies:
            write_field(descriptor, result, value)
        return result


class GraphCopier:
    """Deep copier for arbitrary, possibly cyclic, value graphs.

    Each call to copy() uses a fresh identity registry, so one copier can be
    reused freely. Statistics of the most recent successful call are kept in
    last_stats.

    Args:
        settings: Copy settings (defaults to the process-wide settings).
        instantiator: Empty-instance factory (defaults to one built from settings).
    """

    def __init__(
        self,
        settings: CopySettings | None = None,
        instantiator: Instantiator | None = None,
    ):
        """Initialize the copier.

        Args:
            settings: Copy settings (defaults to the process-wide settings).
            instantiator: Empty-instance factory (defaults to one built from settings).
        """
        self._settings = settings if settings is not None else get_settings()
        self._instantiator = (
            instantiator if instantiator is not None else Instantiator(self._settings)
        )
        self.last_stats: CopyStats | None = None

    def copy[T](self, value: T) -> Copy[T]:
        """Produce a fully independent structural copy of a value.

        Args:
            value: Root of the graph to copy. May be None.

        Returns:
            Copy of the same concrete shape. Leaves are returned as-is; sharing
            and cycles inside the original are reproduced inside the copy.

        Raises:
            ConstructionError: If an empty record or array cannot be created.
            FieldAccessError: If a record field cannot be read or written.
            UnsupportedContainerError: If a container shape cannot be recreated.
        """
        stats = CopyStats()
        result = _Traversal(self._instantiator, stats).run(value)
        self.last_stats = stats

        if self._settings.log_stats:
            logger.info("Copied %s: %s", type(value).__qualname__, stats.to_dict())
        else:
            logger.debug("Copied %s: %s", type(value).__qualname__, stats.to_dict())
        return result


def copy[T](value: T) -> Copy[T]:
    """Deep copy a value graph with the process-wide settings.

    Args:
        value: Root of the graph to copy. May be None.

    Returns:
        Independent copy of value. See GraphCopier.copy().
    """
    return GraphCopier().copy(value)
