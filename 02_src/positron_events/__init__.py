"""Events exchanged between a language runtime and the Positron frontend."""

from .errors import EventError, MalformedEventError, SchemaError, UnknownEventError
from .models import (
    EVENTS_BY_TYPE,
    BusyEvent,
    PositronEvent,
    PositronEventRecord,
    PositronEventType,
    PositronEventVariant,
    ShowHelpEvent,
    ShowHelpKind,
    ShowHelpUrlEvent,
    ShowMessageEvent,
)
from .schema import EventSchema, FieldSchema, Schema, load_schema
from .wire import EventCodec

__all__ = [
    # Models
    "PositronEventType",
    "BusyEvent",
    "ShowMessageEvent",
    "ShowHelpEvent",
    "ShowHelpKind",
    "ShowHelpUrlEvent",
    "PositronEvent",
    "PositronEventRecord",
    "PositronEventVariant",
    "EVENTS_BY_TYPE",
    # Schema
    "EventSchema",
    "FieldSchema",
    "Schema",
    "load_schema",
    # Wire
    "EventCodec",
    # Errors
    "EventError",
    "SchemaError",
    "UnknownEventError",
    "MalformedEventError",
]
