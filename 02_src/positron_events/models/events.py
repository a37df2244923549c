#
# events.py
#
# Auto-generated from events.json by positron-events-codegen.
# Please do not modify this file directly.
#

"""Events sent from the language runtime to the frontend."""

import enum
from dataclasses import dataclass, field
from typing import ClassVar, Protocol, Union


class PositronEventType(Protocol):
    """Exposes the wire tag of an event record."""

    def event_type(self) -> str:
        """Return the wire tag identifying this event."""
        ...


@dataclass
class BusyEvent:
    """
    Represents a change in the runtime's busy state.
    Note that this represents the busy state of the underlying computation engine, not the busy state of the kernel.
    The kernel is busy when it is processing a request, but the runtime is busy only when a computation is running.
    """

    EVENT_TYPE: ClassVar[str] = "busy"

    busy: bool = field(
        metadata={
            "description": "Whether the runtime is busy.",
        }
    )

    def event_type(self) -> str:
        return self.EVENT_TYPE


@dataclass
class ShowMessageEvent:
    """Use this event to show a message to the user."""

    EVENT_TYPE: ClassVar[str] = "show_message"

    message: str = field(
        metadata={
            "description": "The message to show to the user.",
        }
    )

    def event_type(self) -> str:
        return self.EVENT_TYPE


@enum.unique
class ShowHelpKind(str, enum.Enum):
    """Possible values for kind in ShowHelpEvent."""

    HTML = "html"
    MARKDOWN = "markdown"


@dataclass
class ShowHelpEvent:
    """Show help content in the Help pane."""

    EVENT_TYPE: ClassVar[str] = "show_help"

    content: str = field(
        metadata={
            "description": "The help content to be shown.",
        }
    )

    kind: str = field(
        metadata={
            "description": "The content help type. Must be one of 'html' or 'markdown'.",
        }
    )

    def event_type(self) -> str:
        return self.EVENT_TYPE


@dataclass
class ShowHelpUrlEvent:
    """Show help content from an external URL in the Help pane."""

    EVENT_TYPE: ClassVar[str] = "show_help_url"

    url: str = field(
        metadata={
            "description": "The URL to be shown in the Help pane.",
        }
    )

    def event_type(self) -> str:
        return self.EVENT_TYPE


@enum.unique
class PositronEventVariant(enum.Enum):
    """In-process discriminator selecting which record a PositronEvent carries."""

    BUSY = "Busy"
    SHOW_MESSAGE = "ShowMessage"
    SHOW_HELP = "ShowHelp"
    SHOW_HELP_URL = "ShowHelpUrl"


PositronEventRecord = Union[
    BusyEvent,
    ShowMessageEvent,
    ShowHelpEvent,
    ShowHelpUrlEvent,
]


EVENTS_BY_TYPE: dict[str, type] = {
    BusyEvent.EVENT_TYPE: BusyEvent,
    ShowMessageEvent.EVENT_TYPE: ShowMessageEvent,
    ShowHelpEvent.EVENT_TYPE: ShowHelpEvent,
    ShowHelpUrlEvent.EVENT_TYPE: ShowHelpUrlEvent,
}


_VARIANTS: dict[type, PositronEventVariant] = {
    BusyEvent: PositronEventVariant.BUSY,
    ShowMessageEvent: PositronEventVariant.SHOW_MESSAGE,
    ShowHelpEvent: PositronEventVariant.SHOW_HELP,
    ShowHelpUrlEvent: PositronEventVariant.SHOW_HELP_URL,
}


@dataclass(frozen=True)
class PositronEvent:
    """Exactly one of the event records above, carried by value."""

    event: PositronEventRecord

    def __post_init__(self) -> None:
        if type(self.event) not in _VARIANTS:
            raise TypeError(f"Not a Positron event record: {self.event!r}")

    @property
    def variant(self) -> PositronEventVariant:
        return _VARIANTS[type(self.event)]

    def event_type(self) -> str:
        return self.event.event_type()

    def __repr__(self) -> str:
        return f"PositronEvent.{self.variant.value}({self.event!r})"
