"""Tests for example documents derived from schemas."""

from dataclasses import dataclass, field
from typing import Annotated

import yaml

from typeschema.core.schema import FieldMeta, build_schema, example_value, example_yaml
from typeschema.core.schema.models import SchemaKind, SchemaNode


@dataclass
class Server:
    host: Annotated[str, FieldMeta(example="localhost")]
    port: Annotated[int, FieldMeta(minimum=1, maximum=65535)]
    mode: Annotated[str, FieldMeta(enum="dev,prod")]
    tags: list[str]
    debug: bool = field(default=False, metadata={"json": "debug,omitempty"})
    weight: Annotated[float, FieldMeta(optional=True, default=1.5)] = 1.5


class TestExampleValue:
    """Tests for example_value."""

    def test_placeholders(self):
        """Test placeholders for each node kind."""
        assert example_value(SchemaNode(kind=SchemaKind.STRING)) == "value"
        assert example_value(SchemaNode(kind=SchemaKind.INTEGER)) == 0
        assert example_value(SchemaNode(kind=SchemaKind.NUMBER)) == 0.0
        assert example_value(SchemaNode(kind=SchemaKind.BOOLEAN)) is False
        assert example_value(SchemaNode()) == {}

    def test_example_beats_default_and_enum(self):
        """Test example takes precedence over default and enum."""
        node = SchemaNode(kind=SchemaKind.STRING, example="e", default="d", enum=["x"])
        assert example_value(node) == "e"

    def test_array_uses_item(self):
        """Test arrays hold one example item."""
        node = SchemaNode(kind=SchemaKind.ARRAY, items=SchemaNode(kind=SchemaKind.INTEGER))
        assert example_value(node) == [0]

    def test_record_example(self):
        """Test an example document for a built record."""
        assert example_value(build_schema(Server)) == {
            "host": "localhost",
            "port": 1,
            "mode": "dev",
            "tags": ["value"],
            "weight": 1.5,
        }


class TestExampleYaml:
    """Tests for example_yaml."""

    def test_yaml_round_trips(self):
        """Test the YAML example loads back to the example value."""
        schema = build_schema(Server)
        assert yaml.safe_load(example_yaml(schema)) == example_value(schema)

    def test_yaml_keeps_field_order(self):
        """Test keys follow declaration order."""
        text = example_yaml(build_schema(Server))
        assert text.splitlines()[0] == "host: localhost"
