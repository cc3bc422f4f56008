"""Error taxonomy for graph copies.

Every error raised while copying is fatal to the enclosing ``copy()`` call and
propagates unchanged to the caller. No partial copy is ever returned.
"""

from __future__ import annotations


def _qualname(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class GraphCopyError(Exception):
    """Base class for errors raised while copying a value graph."""

    pass


class ConstructionError(GraphCopyError):
    """Raised when no strategy yields an empty instance of a concrete type."""

    def __init__(self, target_type: type, reason: str | None = None) -> None:
        self.target_type = target_type
        message = f"Cannot construct an empty instance of {_qualname(target_type)}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class FieldAccessError(GraphCopyError):
    """Raised when a record field cannot be read from the original or written to the copy."""

    def __init__(self, target_type: type, field_name: str, operation: str) -> None:
        self.target_type = target_type
        self.field_name = field_name
        self.operation = operation
        super().__init__(
            f"Cannot {operation} field {field_name!r} of {_qualname(target_type)}"
        )


class UnsupportedContainerError(GraphCopyError):
    """Raised when a sequence or mapping type has no way to produce an empty instance."""

    def __init__(self, target_type: type) -> None:
        self.target_type = target_type
        super().__init__(
            f"No construction strategy for container {_qualname(target_type)}"
        )


class RegistrationError(RuntimeError):
    """Raised when an identity is registered twice.

    This always indicates a traversal bug, never a problem with user data.
    """

    pass
