"""Record field introspection: descriptors, enumeration, and raw access."""

from graphcopy.core.fields.models import UNSET, FieldDescriptor, FieldStorage
from graphcopy.core.fields.operations import (
    declared_fields,
    read_field,
    record_fields,
    write_field,
)

__all__ = [
    "UNSET",
    "FieldDescriptor",
    "FieldStorage",
    "declared_fields",
    "record_fields",
    "read_field",
    "write_field",
]
