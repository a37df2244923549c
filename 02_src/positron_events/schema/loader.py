"""Event schema data model and loading."""

import json
import keyword
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..config import DEFAULT_SCHEMA_PATH, PathLike
from ..errors import SchemaError
from ..logging_config import get_logger

logger = get_logger(__name__)

# JSON schema type -> Python annotation
PYTHON_TYPES = {
    "boolean": "bool",
    "string": "str",
    "integer": "int",
    "number": "float",
}

SUPPORTED_FORMATS = {"uri"}

_TAG_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")

# Names the generated record class body already binds
RESERVED_PARAM_NAMES = {
    "EVENT_TYPE",
    "event_type",
    "field",
    "ClassVar",
    "bool",
    "str",
    "int",
    "float",
}

# Top-level names of the generated module
RESERVED_CLASS_NAMES = {
    "PositronEvent",
    "PositronEventType",
    "PositronEventVariant",
    "PositronEventRecord",
    "EVENTS_BY_TYPE",
    "ClassVar",
    "Protocol",
    "Union",
}


def snake_case_to_sentence_case(name: str) -> str:
    """Convert `show_help_url` to `ShowHelpUrl`."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))


def enum_member_name(value: str) -> str:
    """Member name generated for an enumerated value, e.g. `slow-motion` -> `SLOW_MOTION`."""
    member = re.sub(r"\W", "_", value).upper()
    return member if member.isidentifier() else f"V_{member}"


@dataclass
class FieldSchema:
    """A single named field of an event."""

    name: str
    type: str  # JSON schema type, see PYTHON_TYPES
    description: str
    enum: list[str] | None = None
    format: str | None = None

    @property
    def python_type(self) -> str:
        return PYTHON_TYPES[self.type]


@dataclass
class EventSchema:
    """One event: its wire tag, documentation and fields."""

    name: str  # wire tag
    description: str
    params: list[FieldSchema] = field(default_factory=list)

    @property
    def class_name(self) -> str:
        return f"{snake_case_to_sentence_case(self.name)}Event"

    @property
    def variant_label(self) -> str:
        return snake_case_to_sentence_case(self.name)

    @property
    def variant_member(self) -> str:
        return self.name.upper()

    def enum_class_name(self, param: FieldSchema) -> str:
        """Name of the enum generated for an enumerated field."""
        return snake_case_to_sentence_case(self.name) + snake_case_to_sentence_case(
            param.name
        )


@dataclass
class Schema:
    """The full, ordered set of events."""

    events: list[EventSchema]
    source: str = "events.json"

    @property
    def tags(self) -> list[str]:
        return [event.name for event in self.events]

    def get(self, tag: str) -> EventSchema | None:
        for event in self.events:
            if event.name == tag:
                return event
        return None


def _check_description(text: Any, where: str) -> str:
    if not isinstance(text, str) or not text.strip():
        raise SchemaError(f"No description for {where}; please add a description to the schema")
    # Descriptions are emitted verbatim into docstrings.
    if '"""' in text or "\\" in text or text.endswith('"'):
        raise SchemaError(f"Description for {where} may not contain triple quotes or backslashes")
    return text


def _parse_field(event_name: str, data: Any) -> FieldSchema:
    if not isinstance(data, dict):
        raise SchemaError(f"Param of '{event_name}' must be an object")

    name = data.get("name")
    if not isinstance(name, str) or not name.isidentifier():
        raise SchemaError(f"Invalid param name {name!r} in '{event_name}'")
    if keyword.iskeyword(name) or name in RESERVED_PARAM_NAMES:
        raise SchemaError(f"Param name {name!r} in '{event_name}' is reserved")

    where = f"the '{event_name}.{name}' value"
    type_ = data.get("type")
    if type_ not in PYTHON_TYPES:
        raise SchemaError(f"Unsupported type {type_!r} for {where}")

    enum = data.get("enum")
    if enum is not None:
        if type_ != "string":
            raise SchemaError(f"Only string values may be enumerated ({where})")
        if not enum or not all(isinstance(v, str) and v for v in enum):
            raise SchemaError(f"Enumeration for {where} must be a non-empty list of strings")
        if len(set(enum)) != len(enum):
            raise SchemaError(f"Enumeration for {where} contains duplicates")
        members = [enum_member_name(value) for value in enum]
        if len(set(members)) != len(members):
            raise SchemaError(f"Enumeration values for {where} collide as member names {members}")

    format_ = data.get("format")
    if format_ is not None and format_ not in SUPPORTED_FORMATS:
        raise SchemaError(f"Unsupported format {format_!r} for {where}")

    return FieldSchema(
        name=name,
        type=type_,
        description=_check_description(data.get("description"), where),
        enum=list(enum) if enum is not None else None,
        format=format_,
    )


def _parse_event(data: Any) -> EventSchema:
    if not isinstance(data, dict):
        raise SchemaError("Each event must be an object")

    name = data.get("name")
    if not isinstance(name, str) or not _TAG_PATTERN.match(name):
        raise SchemaError(f"Invalid event name {name!r}; expected a snake_case ASCII tag")

    raw_params = data.get("params", [])
    if not isinstance(raw_params, list):
        raise SchemaError(f"Params of '{name}' must be a list")

    params = [_parse_field(name, param) for param in raw_params]
    seen: set[str] = set()
    for param in params:
        if param.name in seen:
            raise SchemaError(f"Duplicate param '{param.name}' in '{name}'")
        seen.add(param.name)

    return EventSchema(
        name=name,
        description=_check_description(data.get("description"), f"'{name}'"),
        params=params,
    )


def parse_schema(data: Any, source: str = "events.json") -> Schema:
    """Validate raw schema data and build a Schema."""
    if not isinstance(data, dict) or not isinstance(data.get("events"), list):
        raise SchemaError(f"{source}: expected an object with an 'events' list")

    events = [_parse_event(event) for event in data["events"]]
    if not events:
        raise SchemaError(f"{source}: no events defined")

    tags = [event.name for event in events]
    duplicates = sorted({tag for tag in tags if tags.count(tag) > 1})
    if duplicates:
        raise SchemaError(f"{source}: duplicate event names {duplicates}")

    # Record and enum classes share the module namespace with the union
    names = [event.class_name for event in events] + [
        event.enum_class_name(param) for event in events for param in event.params if param.enum
    ]
    clashes = sorted(
        {name for name in names if names.count(name) > 1 or name in RESERVED_CLASS_NAMES}
    )
    if clashes:
        raise SchemaError(f"{source}: generated class names clash {clashes}")

    return Schema(events=events, source=source)


def load_schema(path: PathLike | None = None) -> Schema:
    """Load and validate the event schema from disk."""
    schema_path = Path(path) if path is not None else DEFAULT_SCHEMA_PATH
    try:
        data = json.loads(schema_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SchemaError(f"{schema_path.name}: invalid JSON ({exc})") from exc

    schema = parse_schema(data, source=schema_path.name)
    logger.debug("Loaded %d events from %s", len(schema.events), schema_path)
    return schema
