"""graphcopy: deep copies of arbitrary, possibly cyclic, object graphs.

Usage:
    from graphcopy import copy

    @dataclass
    class Person:
        name: str
        age: int
        favorite_books: list[str]

    alice = Person("Alice", 30, ["Book1", "Book2"])
    clone = copy(alice)
    alice.favorite_books.append("Book3")
    assert len(clone.favorite_books) == 2

    class Node:
        next: "Node | None" = None

    node = Node()
    node.next = node
    clone = copy(node)
    assert clone.next is clone and clone is not node
"""

import logging

__version__ = "0.1.0"

# Configuration
from graphcopy.config import CopySettings, get_settings

# Construction
from graphcopy.construction import Instantiator

# Core primitives
from graphcopy.core import (
    ConstructionError,
    Copy,
    FieldAccessError,
    GraphCopyError,
    RegistrationError,
    UnsupportedContainerError,
    ValueKind,
    classify,
    is_leaf,
)

# Engine
from graphcopy.engine import CopyStats, GraphCopier, copy

# Registry
from graphcopy.registry import IdentityRegistry

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Copy
    "copy",
    "GraphCopier",
    "CopyStats",
    "Copy",
    # Core
    "ValueKind",
    "classify",
    "is_leaf",
    # Services
    "IdentityRegistry",
    "Instantiator",
    # Config
    "CopySettings",
    "get_settings",
    # Errors
    "GraphCopyError",
    "ConstructionError",
    "FieldAccessError",
    "UnsupportedContainerError",
    "RegistrationError",
]
