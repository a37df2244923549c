"""Renders the Python events module from the event schema.

The output carries the records, their wire tags, the enumerations of
constrained fields and the `PositronEvent` union. It is committed as
`positron_events/models/events.py`; edits go through the schema.
"""

import json
from pathlib import Path

from ..config import PathLike
from ..logging_config import get_logger
from ..schema import EventSchema, FieldSchema, Schema, enum_member_name

logger = get_logger(__name__)

INDENT = "    "


def _docstring(description: str, indent: str = INDENT) -> list[str]:
    lines = description.split("\n")
    if len(lines) == 1:
        return [f'{indent}"""{lines[0]}"""']
    return [f'{indent}"""'] + [f"{indent}{line}" for line in lines] + [f'{indent}"""']


def _header(schema: Schema) -> str:
    return "\n".join(
        [
            "#",
            "# events.py",
            "#",
            f"# Auto-generated from {schema.source} by positron-events-codegen.",
            "# Please do not modify this file directly.",
            "#",
            "",
            '"""Events sent from the language runtime to the frontend."""',
            "",
            "import enum",
            "from dataclasses import dataclass, field",
            "from typing import ClassVar, Protocol, Union",
        ]
    )


def _protocol() -> str:
    return "\n".join(
        [
            "class PositronEventType(Protocol):",
            '    """Exposes the wire tag of an event record."""',
            "",
            "    def event_type(self) -> str:",
            '        """Return the wire tag identifying this event."""',
            "        ...",
        ]
    )


def _enum(event: EventSchema, param: FieldSchema) -> str:
    lines = [
        "@enum.unique",
        f"class {event.enum_class_name(param)}(str, enum.Enum):",
        f'    """Possible values for {param.name} in {event.class_name}."""',
        "",
    ]
    for value in param.enum or []:
        lines.append(f"    {enum_member_name(value)} = {json.dumps(value)}")
    return "\n".join(lines)


def _record(event: EventSchema) -> str:
    lines = ["@dataclass", f"class {event.class_name}:"]
    lines += _docstring(event.description)
    lines += ["", f"    EVENT_TYPE: ClassVar[str] = {json.dumps(event.name)}", ""]
    for param in event.params:
        lines += [
            f"    {param.name}: {param.python_type} = field(",
            "        metadata={",
            f'            "description": {json.dumps(param.description)},',
            "        }",
            "    )",
            "",
        ]
    lines += [
        "    def event_type(self) -> str:",
        "        return self.EVENT_TYPE",
    ]
    return "\n".join(lines)


def _union(schema: Schema) -> list[str]:
    variants = [
        "@enum.unique",
        "class PositronEventVariant(enum.Enum):",
        '    """In-process discriminator selecting which record a PositronEvent carries."""',
        "",
    ]
    variants += [
        f'    {event.variant_member} = "{event.variant_label}"' for event in schema.events
    ]

    records = ["PositronEventRecord = Union["]
    records += [f"    {event.class_name}," for event in schema.events]
    records += ["]"]

    by_type = ["EVENTS_BY_TYPE: dict[str, type] = {"]
    by_type += [
        f"    {event.class_name}.EVENT_TYPE: {event.class_name}," for event in schema.events
    ]
    by_type += ["}"]

    by_class = ["_VARIANTS: dict[type, PositronEventVariant] = {"]
    by_class += [
        f"    {event.class_name}: PositronEventVariant.{event.variant_member},"
        for event in schema.events
    ]
    by_class += ["}"]

    union = [
        "@dataclass(frozen=True)",
        "class PositronEvent:",
        '    """Exactly one of the event records above, carried by value."""',
        "",
        "    event: PositronEventRecord",
        "",
        "    def __post_init__(self) -> None:",
        "        if type(self.event) not in _VARIANTS:",
        '            raise TypeError(f"Not a Positron event record: {self.event!r}")',
        "",
        "    @property",
        "    def variant(self) -> PositronEventVariant:",
        "        return _VARIANTS[type(self.event)]",
        "",
        "    def event_type(self) -> str:",
        "        return self.event.event_type()",
        "",
        "    def __repr__(self) -> str:",
        '        return f"PositronEvent.{self.variant.value}({self.event!r})"',
    ]

    return ["\n".join(block) for block in (variants, records, by_type, by_class, union)]


def render_events_module(schema: Schema) -> str:
    """Render the complete events module for `schema`."""
    blocks = [_header(schema), _protocol()]
    for event in schema.events:
        blocks += [_enum(event, param) for param in event.params if param.enum]
        blocks.append(_record(event))
    blocks += _union(schema)
    return "\n\n\n".join(blocks) + "\n"


def write_events_module(schema: Schema, path: PathLike) -> Path:
    """Render `schema` and write it to `path`."""
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render_events_module(schema), encoding="utf-8")
    logger.info("Generated %d events into %s", len(schema.events), output)
    return output


def check_events_module(schema: Schema, path: PathLike) -> bool:
    """Return True if the module at `path` matches what `schema` renders to."""
    target = Path(path)
    if not target.exists():
        logger.warning("Events module %s does not exist", target)
        return False

    current = target.read_text(encoding="utf-8")
    if current != render_events_module(schema):
        logger.warning("Events module %s is out of date with %s", target, schema.source)
        return False
    return True
