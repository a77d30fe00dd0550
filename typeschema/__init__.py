"""typeschema - JSON-Schema-like documents from the record types you already have.

Describe a dataclass, pydantic model or TypedDict (or assemble a type
descriptor by hand) and get back a schema with required fields, enums,
numeric bounds and examples taken from per-field metadata.

Examples
--------
>>> from dataclasses import dataclass
>>> from typing import Annotated
>>> from typeschema import FieldMeta, generate_schema
>>> @dataclass
... class Person:
...     name: str
...     age: Annotated[int, FieldMeta(optional=True)]
>>> schema = generate_schema(Person)
>>> schema["properties"]
{'name': {'type': 'string'}, 'age': {'type': 'integer'}}
>>> schema["required"]
['name']
"""

try:
    from importlib.metadata import version

    __version__ = version("typeschema")
except Exception:
    __version__ = "0.0.0.dev0"  # Fallback for development installs

from typeschema.core.exceptions import (
    ConfigurationError,
    MalformedConstraintError,
    MalformedExampleError,
    TypeSchemaError,
    UnsupportedTypeError,
)
from typeschema.core.schema import (
    FieldDescriptor,
    FieldMeta,
    MappingType,
    OpaqueType,
    OptionalType,
    PrimitiveKind,
    PrimitiveType,
    RecordType,
    SchemaBuilder,
    SchemaKind,
    SchemaNode,
    SequenceType,
    TypeDescriptor,
    TypeKind,
    build_schema,
    describe,
    example_value,
    example_yaml,
    generate_schema,
)

__all__ = [
    "ConfigurationError",
    "FieldDescriptor",
    "FieldMeta",
    "MalformedConstraintError",
    "MalformedExampleError",
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
    "TypeSchemaError",
    "UnsupportedTypeError",
    "__version__",
    "build_schema",
    "describe",
    "example_value",
    "example_yaml",
    "generate_schema",
]
