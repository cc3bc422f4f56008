"""Value classification: kinds, leaf tables, and the classifier."""

from graphcopy.core.kinds.models import BOUND_METHOD_TYPES, LEAF_TYPES, ValueKind
from graphcopy.core.kinds.operations import classify, is_leaf

__all__ = [
    "ValueKind",
    "LEAF_TYPES",
    "BOUND_METHOD_TYPES",
    "classify",
    "is_leaf",
]
