"""Event records and the PositronEvent union."""

from .events import (
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

__all__ = [
    # Tag capability
    "PositronEventType",
    # Records
    "BusyEvent",
    "ShowMessageEvent",
    "ShowHelpEvent",
    "ShowHelpKind",
    "ShowHelpUrlEvent",
    # Union
    "PositronEvent",
    "PositronEventRecord",
    "PositronEventVariant",
    "EVENTS_BY_TYPE",
]
