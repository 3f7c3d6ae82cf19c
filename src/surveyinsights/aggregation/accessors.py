"""
Record field access.

Survey records are plain mappings from field name to an optional string.
Aggregations never index records directly; they go through an accessor so
that record shape is a concern of this module only.
"""

from collections.abc import Callable, Mapping
from typing import TypeAlias

RawRecord: TypeAlias = Mapping[str, str | None]
FieldAccessor: TypeAlias = Callable[[RawRecord], str | None]


def field_accessor(name: str) -> FieldAccessor:
    """
    Build an accessor returning the raw value of one field.

    Absent keys read as None. The value is returned untouched, so an empty
    string stays distinguishable from a missing field.

    Args:
        name: Field name.

    Returns:
        Callable mapping a record to its value for the field.
    """

    def read(record: RawRecord) -> str | None:
        return record.get(name)

    read.__name__ = f"field_accessor[{name}]"
    return read


def has_value(value: str | None) -> bool:
    """Whether a field value counts as present (not None, not empty)."""
    return value is not None and value != ""
