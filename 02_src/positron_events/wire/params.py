"""Pydantic models validating event fields, built from the schema."""

from typing import Annotated, Any, Literal

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    create_model,
)

from ..schema import EventSchema, FieldSchema, Schema

_URL = TypeAdapter(AnyUrl)

_STRICT_TYPES: dict[str, Any] = {
    "boolean": StrictBool,
    "string": StrictStr,
    "integer": StrictInt,
    "number": StrictFloat,
}


def _check_url(value: str) -> str:
    """Accept syntactically valid absolute URLs; keep the original text."""
    try:
        _URL.validate_python(value)
    except ValidationError:
        raise ValueError(f"not a valid URL: {value!r}") from None
    return value


def _annotation(param: FieldSchema) -> Any:
    if param.enum:
        return Literal[tuple(param.enum)]
    if param.format == "uri":
        return Annotated[StrictStr, AfterValidator(_check_url)]
    return _STRICT_TYPES[param.type]


def build_params_model(event: EventSchema) -> type[BaseModel]:
    """Create the params model for one event, e.g. `ShowHelpEventParams`."""
    fields = {
        param.name: (_annotation(param), Field(description=param.description))
        for param in event.params
    }
    return create_model(
        f"{event.class_name}Params",
        __config__=ConfigDict(extra="forbid"),
        __doc__=event.description,
        **fields,
    )


def build_params_models(schema: Schema) -> dict[str, type[BaseModel]]:
    """Params models for every event, keyed by wire tag."""
    return {event.name: build_params_model(event) for event in schema.events}
