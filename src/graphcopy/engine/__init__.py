"""Traversal engine: the public copy operation.

Architecture Note:
    engine/ ties the stateless core/ pieces to the per-call IdentityRegistry
    and the Instantiator. State lives only for the duration of one copy.
"""

from graphcopy.engine.stats import CopyStats
from graphcopy.engine.traversal import GraphCopier, copy

__all__ = [
    "GraphCopier",
    "CopyStats",
    "copy",
]
