"""Schema builder - converts type descriptors to JSON-Schema-like nodes."""

from __future__ import annotations

import re
from typing import Any

import orjson

from typeschema.core.config.loader import load_config
from typeschema.core.config.models import OUTPUT_FORMATS, SchemaConfig
from typeschema.core.exceptions import (
    MalformedConstraintError,
    MalformedExampleError,
    UnsupportedTypeError,
)
from typeschema.core.logging import get_logger
from typeschema.core.schema.descriptors import (
    FieldDescriptor,
    MappingType,
    OpaqueType,
    OptionalType,
    PrimitiveKind,
    PrimitiveType,
    RecordType,
    SequenceType,
    TypeDescriptor,
)
from typeschema.core.schema.introspection import describe
from typeschema.core.schema.models import SchemaKind, SchemaNode

logger = get_logger(__name__)

# Optional sign and ASCII digits only, nothing around them
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class SchemaBuilder:
    """Build schema nodes from type descriptors.

    The builder walks a descriptor depth-first and returns a freshly built
    node tree on every call. It keeps no state between calls, so one instance
    can serve concurrent callers. The first structural problem raises and
    aborts the whole build:

    - UnsupportedTypeError for a type without a mapping rule
    - MalformedConstraintError for a bound that is not an integer
    - MalformedExampleError for an example that is not a JSON literal

    Examples
    --------
    >>> from typeschema.core.schema.descriptors import PrimitiveType, SequenceType
    >>> node = SchemaBuilder().build(SequenceType(PrimitiveType(PrimitiveKind.INT)))
    >>> node.to_dict()
    {'type': 'array', 'items': {'type': 'integer'}}
    """

    def __init__(self, config: SchemaConfig | None = None) -> None:
        self.config = config or SchemaConfig()

    def build(self, descriptor: TypeDescriptor) -> SchemaNode:
        """Build the schema node for ``descriptor``.

        Args
        ----
            descriptor: Type descriptor to walk

        Returns
        -------
            SchemaNode: Root of the generated schema tree

        Raises
        ------
        UnsupportedTypeError
            If the descriptor, or any type nested in it, has no mapping rule
        MalformedConstraintError
            If a field's minimum or maximum is not an integer
        MalformedExampleError
            If a non-string field's example is not a JSON literal
        """
        if isinstance(descriptor, RecordType):
            return self._build_record(descriptor)

        if isinstance(descriptor, SequenceType):
            return SchemaNode(kind=SchemaKind.ARRAY, items=self.build(descriptor.element))

        if isinstance(descriptor, MappingType):
            # Arbitrary key/value shapes are not modelled
            return SchemaNode()

        if isinstance(descriptor, OptionalType):
            return self.build(descriptor.target)

        if isinstance(descriptor, PrimitiveType):
            return self._build_primitive(descriptor.primitive)

        kind = descriptor.kind_name if isinstance(descriptor, OpaqueType) else descriptor.kind
        raise UnsupportedTypeError(str(kind), descriptor.name)

    @staticmethod
    def _build_primitive(primitive: PrimitiveKind) -> SchemaNode:
        if primitive.is_signed_integer:
            return SchemaNode(kind=SchemaKind.INTEGER)
        if primitive.is_unsigned_integer:
            # Unsigned integers can't be negative
            return SchemaNode(kind=SchemaKind.INTEGER, minimum=0)
        if primitive.is_float:
            return SchemaNode(kind=SchemaKind.NUMBER)
        if primitive is PrimitiveKind.BOOL:
            return SchemaNode(kind=SchemaKind.BOOLEAN)
        return SchemaNode(kind=SchemaKind.STRING)

    def _build_record(self, record: RecordType) -> SchemaNode:
        logger.debug(
            "Building object schema for {record} ({count} fields)",
            record=record.name,
            count=len(record.fields),
        )
        properties: dict[str, SchemaNode] = {}
        required: list[str] = []

        for field in record.fields:
            name = field.meta.name or field.name
            node = self.build(field.type)
            self._apply_field_meta(record, field, node)
            properties[name] = node

            if not field.meta.optional and name not in required:
                required.append(name)

        return SchemaNode(
            kind=SchemaKind.OBJECT,
            properties=properties or None,
            required=required or None,
        )

    def _apply_field_meta(
        self, record: RecordType, field: FieldDescriptor, node: SchemaNode
    ) -> None:
        """Refine a freshly built field node with the field's metadata."""
        meta = field.meta

        if meta.description is not None:
            node.description = meta.description

        if meta.enum is not None:
            node.enum = self._enum_tokens(meta.enum)

        if meta.minimum is not None:
            node.minimum = self._parse_bound(record, field, "minimum", meta.minimum)

        if meta.maximum is not None:
            node.maximum = self._parse_bound(record, field, "maximum", meta.maximum)

        if meta.example is not None:
            node.example = self._parse_example(record, field, node, meta.example)

        if meta.default is not None:
            node.default = meta.default

    def _enum_tokens(self, values: Any) -> list[str]:
        # Tokens stay text whatever the field type is
        if isinstance(values, str):
            return values.split(self.config.enum_separator)
        return [str(value) for value in values]

    @staticmethod
    def _parse_bound(
        record: RecordType, field: FieldDescriptor, bound: str, value: int | str
    ) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        text = str(value)
        if not INTEGER_PATTERN.fullmatch(text):
            raise MalformedConstraintError(record.name, field.name, bound, text)
        return int(text, 10)

    @staticmethod
    def _parse_example(
        record: RecordType, field: FieldDescriptor, node: SchemaNode, value: Any
    ) -> Any:
        if not isinstance(value, str) or node.kind is SchemaKind.STRING:
            return value
        try:
            return orjson.loads(value)
        except orjson.JSONDecodeError as e:
            raise MalformedExampleError(record.name, field.name, value, str(e)) from e


def build_schema(target: Any, config: SchemaConfig | None = None) -> SchemaNode:
    """Build the schema of a descriptor or Python type.

    Without ``config`` the options come from :func:`load_config`, so
    ``[tool.typeschema.schema]`` and ``TYPESCHEMA_*`` overrides apply.

    Examples
    --------
    >>> build_schema(list[int]).to_dict()
    {'type': 'array', 'items': {'type': 'integer'}}
    """
    descriptor = target if isinstance(target, TypeDescriptor) else describe(target)
    return SchemaBuilder(config or load_config().schema).build(descriptor)


def generate_schema(
    target: Any, format: str | None = None, config: SchemaConfig | None = None
) -> dict[str, Any] | str:
    """Generate a schema and render it as dict, YAML, or JSON.

    Args
    ----
        target: Type descriptor or Python type
        format: Output format - "dict", "yaml", or "json"; defaults to the
            configured output format
        config: Builder options; loaded with :func:`load_config` when omitted

    Returns
    -------
        dict | str: Schema in requested format

    Raises
    ------
    ValueError
        If format is not one of: dict, yaml, json

    Examples
    --------
    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class Point:
    ...     x: float
    ...     y: float
    >>> generate_schema(Point)["required"]
    ['x', 'y']
    """
    config = config or load_config().schema
    format = format or config.output_format
    if format not in OUTPUT_FORMATS:
        raise ValueError(f"Invalid format: {format}. Must be one of: dict, yaml, json")

    node = build_schema(target, config)

    if format == "yaml":
        return node.to_yaml()
    if format == "json":
        return node.to_json(indent=config.json_indent)
    return node.to_dict()
