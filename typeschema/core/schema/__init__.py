"""Schema generation from type descriptors.

This module walks record, collection and primitive types, together with the
metadata attached to record fields, and produces JSON-Schema-like documents.
"""

from typeschema.core.schema.builder import SchemaBuilder, build_schema, generate_schema
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
    TypeKind,
)
from typeschema.core.schema.examples import example_value, example_yaml
from typeschema.core.schema.introspection import describe
from typeschema.core.schema.metadata import FieldMeta
from typeschema.core.schema.models import SchemaKind, SchemaNode

__all__ = [
    "FieldDescriptor",
    "FieldMeta",
    "MappingType",
    "OpaqueType",
    "OptionalType",
    "PrimitiveKind",
    "PrimitiveType",
    "RecordType",
    "SchemaBuilder",
    "SchemaKind",
    "SchemaNode",
    "SequenceType",
    "TypeDescriptor",
    "TypeKind",
    "build_schema",
    "describe",
    "example_value",
    "example_yaml",
    "generate_schema",
]
