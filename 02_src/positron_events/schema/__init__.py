"""Event schema module."""

from .loader import (
    EventSchema,
    FieldSchema,
    Schema,
    enum_member_name,
    load_schema,
    parse_schema,
    snake_case_to_sentence_case,
)

__all__ = [
    "EventSchema",
    "FieldSchema",
    "Schema",
    "enum_member_name",
    "load_schema",
    "parse_schema",
    "snake_case_to_sentence_case",
]
