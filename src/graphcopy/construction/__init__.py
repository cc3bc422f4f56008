"""Construction of empty instances for records, containers and arrays."""

from graphcopy.construction.instantiator import Instantiator, placeholder_for

__all__ = [
    "Instantiator",
    "placeholder_for",
]
