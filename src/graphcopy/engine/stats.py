"""Per-copy traversal statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from graphcopy.core.kinds import ValueKind


@dataclass(slots=True)
class CopyStats:
    """Tally of one copy call.

    Attributes:
        visited: Number of distinct values visited per ValueKind name.
        reused: Number of visits answered by the identity registry.

    Example:
        stats = CopyStats()
        stats.record(ValueKind.RECORD)
        stats.to_dict()  # {"visited": {"RECORD": 1}, "reused": 0, "nodes": 1}
    """

    visited: dict[str, int] = field(default_factory=dict)
    reused: int = 0

    def record(self, kind: ValueKind) -> None:
        """Count one newly visited value of the given kind."""
        self.visited[kind.name] = self.visited.get(kind.name, 0) + 1

    @property
    def nodes(self) -> int:
        """Total number of distinct values visited."""
        return sum(self.visited.values())

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {"visited": dict(self.visited), "reused": self.reused, "nodes": self.nodes}
