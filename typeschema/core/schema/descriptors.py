"""Type descriptors walked by the schema builder.

A descriptor is an immutable description of a data type's shape, independent
of any value. The builder only relies on the structural accessors defined
here, so descriptors can come from Python introspection
(:func:`typeschema.core.schema.introspection.describe`) or be assembled by
hand for types that exist elsewhere (database rows, foreign IDL files, ...).

Examples
--------
>>> record = RecordType(
...     name="User",
...     fields=(
...         FieldDescriptor("name", PrimitiveType(PrimitiveKind.STRING)),
...         FieldDescriptor("tags", SequenceType(PrimitiveType(PrimitiveKind.STRING))),
...     ),
... )
>>> [f.name for f in record.fields]
['name', 'tags']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from typeschema.core.schema.metadata import EMPTY_META, FieldMeta


class TypeKind(StrEnum):
    """Kind category of a type descriptor."""

    RECORD = "record"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OPTIONAL = "optional"
    PRIMITIVE = "primitive"
    OPAQUE = "opaque"


class PrimitiveKind(StrEnum):
    """Primitive kinds, keeping width and signedness of numeric types."""

    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BOOL = "bool"
    STRING = "string"

    @property
    def is_signed_integer(self) -> bool:
        return self in _SIGNED_INTEGERS

    @property
    def is_unsigned_integer(self) -> bool:
        return self in _UNSIGNED_INTEGERS

    @property
    def is_float(self) -> bool:
        return self in (PrimitiveKind.FLOAT32, PrimitiveKind.FLOAT64)


_SIGNED_INTEGERS = frozenset({
    PrimitiveKind.INT,
    PrimitiveKind.INT8,
    PrimitiveKind.INT16,
    PrimitiveKind.INT32,
    PrimitiveKind.INT64,
})

_UNSIGNED_INTEGERS = frozenset({
    PrimitiveKind.UINT,
    PrimitiveKind.UINT8,
    PrimitiveKind.UINT16,
    PrimitiveKind.UINT32,
    PrimitiveKind.UINT64,
})


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Base class of all descriptors.

    Attributes
    ----------
    name : str
        Human-readable name of the described type, used in error messages
    """

    kind = TypeKind.OPAQUE

    name: str


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """A record field: declared identifier, own type and metadata."""

    name: str
    type: TypeDescriptor
    meta: FieldMeta = EMPTY_META


@dataclass(frozen=True, slots=True)
class RecordType(TypeDescriptor):
    """Record/struct type with fields in declaration order."""

    kind = TypeKind.RECORD

    fields: tuple[FieldDescriptor, ...] = ()


@dataclass(frozen=True, slots=True, init=False)
class SequenceType(TypeDescriptor):
    """Homogeneous sequence (list, set, array) of ``element``."""

    kind = TypeKind.SEQUENCE

    element: TypeDescriptor

    def __init__(self, element: TypeDescriptor, name: str | None = None) -> None:
        object.__setattr__(self, "name", name or f"list[{element.name}]")
        object.__setattr__(self, "element", element)


@dataclass(frozen=True, slots=True)
class MappingType(TypeDescriptor):
    """Key/value mapping. Key and value types are kept for callers; the builder ignores them."""

    kind = TypeKind.MAPPING

    key: TypeDescriptor | None = None
    value: TypeDescriptor | None = None


@dataclass(frozen=True, slots=True, init=False)
class OptionalType(TypeDescriptor):
    """Reference wrapper around ``target`` that may be absent (``T | None``)."""

    kind = TypeKind.OPTIONAL

    target: TypeDescriptor

    def __init__(self, target: TypeDescriptor, name: str | None = None) -> None:
        object.__setattr__(self, "name", name or f"{target.name} | None")
        object.__setattr__(self, "target", target)


@dataclass(frozen=True, slots=True, init=False)
class PrimitiveType(TypeDescriptor):
    """Leaf type of a primitive kind."""

    kind = TypeKind.PRIMITIVE

    primitive: PrimitiveKind

    def __init__(self, primitive: PrimitiveKind, name: str | None = None) -> None:
        object.__setattr__(self, "name", name or primitive.value)
        object.__setattr__(self, "primitive", primitive)


@dataclass(frozen=True, slots=True)
class OpaqueType(TypeDescriptor):
    """Type with no schema mapping rule (callables, ``Any``, unions, ...).

    Attributes
    ----------
    kind_name : str
        Kind category reported when the builder rejects the type
    """

    kind_name: str = "unknown"


__all__ = [
    "FieldDescriptor",
    "MappingType",
    "OpaqueType",
    "OptionalType",
    "PrimitiveKind",
    "PrimitiveType",
    "RecordType",
    "SequenceType",
    "TypeDescriptor",
    "TypeKind",
]
