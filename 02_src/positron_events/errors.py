"""Exceptions raised around the event schema."""


class EventError(Exception):
    """Base class for all positron_events errors."""


class SchemaError(EventError):
    """The event schema is ill-formed or out of sync with the generated module."""


class UnknownEventError(EventError):
    """A message names an event type outside the closed set."""

    def __init__(self, event_type: object):
        super().__init__(f"Unknown event type: {event_type!r}")
        self.event_type = event_type


class MalformedEventError(EventError):
    """An event's fields do not satisfy the schema."""

    def __init__(self, event_type: str, detail: str):
        super().__init__(f"Malformed '{event_type}' event: {detail}")
        self.event_type = event_type
        self.detail = detail
