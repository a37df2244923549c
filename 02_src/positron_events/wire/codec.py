"""Conversion between PositronEvents and JSON-RPC notification messages.

An event travels as its wire tag plus its fields::

    {"jsonrpc": "2.0", "method": "show_help", "params": {"content": "...", "kind": "html"}}

Fields are validated against the schema in both directions, so an
out-of-set `kind` or a non-URL `url` never leaves or enters the process.
"""

import dataclasses
import enum
from typing import Any

from pydantic import BaseModel, ValidationError

from ..errors import MalformedEventError, SchemaError, UnknownEventError
from ..logging_config import get_logger
from ..models import EVENTS_BY_TYPE, PositronEvent, PositronEventRecord
from ..schema import Schema, load_schema
from .params import build_params_models

logger = get_logger(__name__)

JSONRPC_VERSION = "2.0"


def _fields(record: PositronEventRecord) -> dict[str, Any]:
    """Record fields as plain wire values (enum members become their value)."""
    return {
        name: value.value if isinstance(value, enum.Enum) else value
        for name, value in dataclasses.asdict(record).items()
    }


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in error['loc']) or 'params'}: {error['msg']}"
        for error in exc.errors()
    )


class EventCodec:
    """Encodes events to messages and decodes messages back to events."""

    def __init__(self, schema: Schema | None = None):
        self._schema = schema if schema is not None else load_schema()
        self._models = build_params_models(self._schema)
        self._check_against_records()

    def _check_against_records(self) -> None:
        """Refuse a schema that drifted from the generated records."""
        for event in self._schema.events:
            record_cls = EVENTS_BY_TYPE.get(event.name)
            if record_cls is None:
                raise SchemaError(
                    f"Event '{event.name}' has no generated record; regenerate the events module"
                )
            expected = [param.name for param in event.params]
            actual = [f.name for f in dataclasses.fields(record_cls)]
            if expected != actual:
                raise SchemaError(
                    f"Fields of {record_cls.__name__} {actual} do not match schema {expected}"
                )

    @property
    def event_types(self) -> list[str]:
        return self._schema.tags

    def _validate(self, event_type: str, params: Any) -> BaseModel:
        model = self._models.get(event_type)
        if model is None:
            raise UnknownEventError(event_type)
        if not isinstance(params, dict):
            raise MalformedEventError(event_type, "params must be an object")
        try:
            return model.model_validate(params)
        except ValidationError as exc:
            logger.warning(
                "Rejected '%s' event",
                event_type,
                extra={
                    "context": {
                        "errors": exc.errors(
                            include_url=False, include_context=False, include_input=False
                        )
                    }
                },
            )
            raise MalformedEventError(event_type, _describe(exc)) from exc

    def validate(self, event: PositronEvent | PositronEventRecord) -> PositronEventRecord:
        """Check a record's fields against the schema; returns the record."""
        record = event.event if isinstance(event, PositronEvent) else event
        self._validate(record.event_type(), _fields(record))
        return record

    def encode(self, event: PositronEvent | PositronEventRecord) -> dict[str, Any]:
        """Build the notification message for an event."""
        record = self.validate(event)
        message = {
            "jsonrpc": JSONRPC_VERSION,
            "method": record.event_type(),
            "params": _fields(record),
        }
        logger.debug("Encoded '%s' event", message["method"])
        return message

    def decode(self, message: dict[str, Any]) -> PositronEvent:
        """Rebuild a PositronEvent from a notification message."""
        if not isinstance(message, dict):
            raise MalformedEventError("<unknown>", "message must be an object")

        event_type = message.get("method")
        if not isinstance(event_type, str) or event_type not in self._models:
            raise UnknownEventError(event_type)

        version = message.get("jsonrpc", JSONRPC_VERSION)
        if version != JSONRPC_VERSION:
            raise MalformedEventError(event_type, f"unsupported jsonrpc version {version!r}")

        params = self._validate(event_type, message.get("params", {}))
        record = EVENTS_BY_TYPE[event_type](**params.model_dump())
        logger.debug("Decoded '%s' event", event_type)
        return PositronEvent(record)
