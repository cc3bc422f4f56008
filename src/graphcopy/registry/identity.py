"""Identity registry service.

IdentityRegistry maps the identity of an original value to the copy produced
for it. It is the memoization cache of a single copy call and the mechanism
that breaks cycles and preserves shared references.
"""

from __future__ import annotations

from typing import Any

from graphcopy.core.errors import RegistrationError


class IdentityRegistry:
    """Per-call mapping from original object identity to its copy.

    Keys are ``id(original)``; the original's own ``__eq__`` and ``__hash__``
    are never called, so two equal but distinct mutable objects map to two
    distinct copies. Registered originals are kept alive until the registry is
    discarded so their ids cannot be reused mid-copy.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._copies: dict[int, Any] = {}
        self._keep_alive: list[Any] = []

    def lookup(self, original: Any, default: Any = None) -> Any:
        """Get the copy registered for an original value.

        Args:
            original: Value from the original graph.
            default: Returned when the identity is not registered.

        Returns:
            The in-progress or completed copy, or default.
        """
        return self._copies.get(id(original), default)

    def register(self, original: Any, copy: Any) -> None:
        """Record the copy of an original value.

        Must be called exactly once per identity, before the original's
        children are visited.

        Args:
            original: Value from the original graph.
            copy: Its (possibly still empty) copy.

        Raises:
            ValueError: If original is None.
            RegistrationError: If the identity is already registered.
        """
        if original is None:
            raise ValueError("None is never registered")
        key = id(original)
        if key in self._copies:
            raise RegistrationError(
                f"Identity of {type(original).__name__} at {key:#x} registered twice"
            )
        self._copies[key] = copy
        self._keep_alive.append(original)

    def __contains__(self, original: Any) -> bool:
        return id(original) in self._copies

    def __len__(self) -> int:
        return len(self._copies)
