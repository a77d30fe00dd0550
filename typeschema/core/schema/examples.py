"""Example documents derived from generated schemas."""

from __future__ import annotations

from typing import Any

import yaml

from typeschema.core.schema.models import SchemaKind, SchemaNode

PLACEHOLDERS: dict[SchemaKind, Any] = {
    SchemaKind.STRING: "value",
    SchemaKind.INTEGER: 0,
    SchemaKind.NUMBER: 0.0,
    SchemaKind.BOOLEAN: False,
    SchemaKind.ARRAY: [],
    SchemaKind.OBJECT: {},
}


def example_value(node: SchemaNode) -> Any:
    """Build a sample value conforming to ``node``.

    Resolution order for a node: its ``example``, its ``default``, the first
    ``enum`` token, then a structural placeholder. Optional properties are
    only included when they carry an example or a default.

    Examples
    --------
    >>> node = SchemaNode(
    ...     kind=SchemaKind.OBJECT,
    ...     properties={
    ...         "name": SchemaNode(kind=SchemaKind.STRING),
    ...         "age": SchemaNode(kind=SchemaKind.INTEGER, minimum=18),
    ...         "nick": SchemaNode(kind=SchemaKind.STRING),
    ...     },
    ...     required=["name", "age"],
    ... )
    >>> example_value(node)
    {'name': 'value', 'age': 18}
    """
    if node.example is not None:
        return node.example
    if node.default is not None:
        return node.default
    if node.enum:
        return node.enum[0]

    if node.kind is SchemaKind.OBJECT:
        required = set(node.required or ())
        return {
            name: example_value(child)
            for name, child in (node.properties or {}).items()
            if name in required or child.example is not None or child.default is not None
        }

    if node.kind is SchemaKind.ARRAY:
        return [example_value(node.items)] if node.items is not None else []

    if node.kind in (SchemaKind.INTEGER, SchemaKind.NUMBER) and node.minimum is not None:
        return node.minimum

    if node.kind is None:
        return {}

    return PLACEHOLDERS[node.kind]


def example_yaml(node: SchemaNode) -> str:
    """Render :func:`example_value` as YAML."""
    yaml_output: str = yaml.dump(example_value(node), sort_keys=False, default_flow_style=False)
    return yaml_output
