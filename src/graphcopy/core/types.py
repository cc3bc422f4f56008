"""Core type definitions for graphcopy."""

type Copy[T] = T
"""Type alias indicating a value is an independent deep copy.

When you see `Copy[T]` in a return type, no mutable sub-object of the returned
value is shared with the value it was copied from. Sharing that existed inside
the original graph is reproduced inside the copy.
"""
