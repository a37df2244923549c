"""Tests for loading and validating the event schema."""

import json

import pytest

from positron_events.errors import SchemaError
from positron_events.schema import load_schema, parse_schema, snake_case_to_sentence_case


class TestBundledSchema:
    """Tests for the schema shipped with the package."""

    def test_tags(self, schema):
        """Test that the bundled schema defines the four events in order."""
        assert schema.tags == ["busy", "show_message", "show_help", "show_help_url"]

    def test_derived_names(self, schema):
        """Test class and variant names derived from tags."""
        event = schema.get("show_help_url")
        assert event.class_name == "ShowHelpUrlEvent"
        assert event.variant_label == "ShowHelpUrl"
        assert event.variant_member == "SHOW_HELP_URL"

    def test_field_types(self, schema):
        """Test the semantic types of every field."""
        types = {
            (event.name, param.name): param.python_type
            for event in schema.events
            for param in event.params
        }
        assert types == {
            ("busy", "busy"): "bool",
            ("show_message", "message"): "str",
            ("show_help", "content"): "str",
            ("show_help", "kind"): "str",
            ("show_help_url", "url"): "str",
        }

    def test_kind_enumeration(self, schema):
        """Test that kind is constrained to html and markdown."""
        kind = schema.get("show_help").params[1]
        assert kind.enum == ["html", "markdown"]
        assert schema.get("show_help").enum_class_name(kind) == "ShowHelpKind"

    def test_url_format(self, schema):
        """Test that url is declared as a URI."""
        assert schema.get("show_help_url").params[0].format == "uri"

    def test_get_unknown(self, schema):
        """Test looking up an event that does not exist."""
        assert schema.get("nope") is None


class TestLoadSchema:
    """Tests for reading schema files."""

    def test_load_from_path(self, tmp_path, raw_schema):
        """Test loading a schema file from disk."""
        path = tmp_path / "custom.json"
        path.write_text(json.dumps(raw_schema), encoding="utf-8")
        schema = load_schema(path)
        assert schema.tags == ["ping"]
        assert schema.source == "custom.json"

    def test_invalid_json(self, tmp_path):
        """Test that unreadable JSON becomes a SchemaError."""
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(SchemaError, match="invalid JSON"):
            load_schema(path)

    def test_invalid_utf8(self, tmp_path):
        """Test that a file that is not UTF-8 becomes a SchemaError."""
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"events": [\xff]}')
        with pytest.raises(SchemaError):
            load_schema(path)


class TestParseSchemaErrors:
    """Tests for schema validation."""

    def test_missing_events(self):
        """Test a document without an events list."""
        with pytest.raises(SchemaError):
            parse_schema({})

    def test_empty_events(self):
        """Test a document with no events."""
        with pytest.raises(SchemaError, match="no events"):
            parse_schema({"events": []})

    def test_duplicate_event(self, raw_schema):
        """Test that wire tags must be unique."""
        raw_schema["events"].append(dict(raw_schema["events"][0]))
        with pytest.raises(SchemaError, match="duplicate"):
            parse_schema(raw_schema)

    @pytest.mark.parametrize("name", ["Ping", "ping-pong", "1ping", "", None])
    def test_invalid_event_name(self, raw_schema, name):
        """Test that tags must be snake_case ASCII."""
        raw_schema["events"][0]["name"] = name
        with pytest.raises(SchemaError, match="Invalid event name"):
            parse_schema(raw_schema)

    def test_missing_event_description(self, raw_schema):
        """Test that every event must be documented."""
        del raw_schema["events"][0]["description"]
        with pytest.raises(SchemaError, match="No description for 'ping'"):
            parse_schema(raw_schema)

    def test_missing_param_description(self, raw_schema):
        """Test that every field must be documented."""
        del raw_schema["events"][0]["params"][0]["description"]
        with pytest.raises(SchemaError, match="ping.count"):
            parse_schema(raw_schema)

    def test_description_with_triple_quotes(self, raw_schema):
        """Test that descriptions cannot break out of a docstring."""
        raw_schema["events"][0]["description"] = 'Say """hi"""'
        with pytest.raises(SchemaError):
            parse_schema(raw_schema)

    def test_unknown_type(self, raw_schema):
        """Test that only scalar JSON types are accepted."""
        raw_schema["events"][0]["params"][0]["type"] = "array"
        with pytest.raises(SchemaError, match="Unsupported type"):
            parse_schema(raw_schema)

    def test_enum_on_non_string(self, raw_schema):
        """Test that only strings may be enumerated."""
        raw_schema["events"][0]["params"][0]["enum"] = ["1", "2"]
        with pytest.raises(SchemaError, match="Only string values"):
            parse_schema(raw_schema)

    def test_empty_enum(self, raw_schema):
        """Test that an enumeration needs at least one value."""
        param = raw_schema["events"][0]["params"][0]
        param["type"] = "string"
        param["enum"] = []
        with pytest.raises(SchemaError, match="non-empty"):
            parse_schema(raw_schema)

    def test_unknown_format(self, raw_schema):
        """Test that unknown string formats are refused."""
        raw_schema["events"][0]["params"][0]["format"] = "email"
        with pytest.raises(SchemaError, match="Unsupported format"):
            parse_schema(raw_schema)

    def test_duplicate_param(self, raw_schema):
        """Test that field names are unique within an event."""
        params = raw_schema["events"][0]["params"]
        params.append(dict(params[0]))
        with pytest.raises(SchemaError, match="Duplicate param"):
            parse_schema(raw_schema)

    def test_event_without_params(self, raw_schema):
        """Test that an event may have no fields."""
        del raw_schema["events"][0]["params"]
        schema = parse_schema(raw_schema)
        assert schema.events[0].params == []

    @pytest.mark.parametrize("params", [None, {"name": "count"}, "count"])
    def test_params_not_a_list(self, raw_schema, params):
        """Test that params must be a list."""
        raw_schema["events"][0]["params"] = params
        with pytest.raises(SchemaError, match="must be a list"):
            parse_schema(raw_schema)

    @pytest.mark.parametrize(
        "name",
        ["class", "from", "None", "event_type", "EVENT_TYPE", "field", "str", "bool"],
    )
    def test_reserved_param_name(self, raw_schema, name):
        """Test that param names the generated record cannot bind are refused."""
        raw_schema["events"][0]["params"][0]["name"] = name
        with pytest.raises(SchemaError, match="reserved"):
            parse_schema(raw_schema)

    @pytest.mark.parametrize("values", [["a-b", "a_b"], ["slow motion", "slow-motion"]])
    def test_enum_member_collision(self, raw_schema, values):
        """Test that enumerated values must map to distinct member names."""
        param = raw_schema["events"][0]["params"][0]
        param["type"] = "string"
        param["enum"] = values
        with pytest.raises(SchemaError, match="collide"):
            parse_schema(raw_schema)

    def test_event_class_clashes_with_union(self, raw_schema):
        """Test that a tag deriving the union's own class name is refused."""
        raw_schema["events"][0]["name"] = "positron"
        with pytest.raises(SchemaError, match="clash"):
            parse_schema(raw_schema)

    def test_enum_class_clashes_with_protocol(self, raw_schema):
        """Test that an enum deriving a generated top-level name is refused."""
        raw_schema["events"][0]["name"] = "positron_event"
        param = raw_schema["events"][0]["params"][0]
        param.update(name="type", type="string", enum=["a", "b"])
        with pytest.raises(SchemaError, match="PositronEventType"):
            parse_schema(raw_schema)

    def test_event_classes_clash_with_each_other(self, raw_schema):
        """Test that two tags deriving the same class name are refused."""
        second = dict(raw_schema["events"][0])
        raw_schema["events"][0]["name"] = "a_b"
        second["name"] = "a__b"
        raw_schema["events"].append(second)
        with pytest.raises(SchemaError, match="ABEvent"):
            parse_schema(raw_schema)


class TestSentenceCase:
    """Tests for name conversion."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("busy", "Busy"),
            ("show_message", "ShowMessage"),
            ("show_help_url", "ShowHelpUrl"),
        ],
    )
    def test_convert(self, name, expected):
        """Test snake_case to SentenceCase."""
        assert snake_case_to_sentence_case(name) == expected
