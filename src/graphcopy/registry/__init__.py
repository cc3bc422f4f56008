"""Identity registry: per-call memoization and cycle breaking."""

from graphcopy.registry.identity import IdentityRegistry

__all__ = [
    "IdentityRegistry",
]
