"""Tests for describing Python types."""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Annotated, Any, Literal, NewType, NotRequired, Optional, TypedDict

import pytest
from pydantic import BaseModel, Field

from typeschema.core.exceptions import UnsupportedTypeError
from typeschema.core.schema.builder import build_schema
from typeschema.core.schema.descriptors import (
    MappingType,
    OpaqueType,
    OptionalType,
    PrimitiveKind,
    PrimitiveType,
    RecordType,
    SequenceType,
)
from typeschema.core.schema.introspection import describe, field_meta
from typeschema.core.schema.metadata import FieldMeta
from typeschema.core.types import float32, int8, int64, uint, uint16, uint64

UserId = NewType("UserId", int)


@dataclass
class Address:
    city: str
    zip_code: Annotated[str, FieldMeta(name="zip", description="Postal code")]


@dataclass
class Person:
    name: str
    age: Annotated[int, FieldMeta(optional=True)]


@dataclass
class Account:
    id: UserId
    balance: Annotated[float, FieldMeta(minimum=0)]
    tags: list[str]
    address: Address | None
    extras: dict[str, Any] = field(default_factory=dict)
    status: str = field(
        default="active", metadata={"json": "state,omitempty", "enum": "active,closed"}
    )


class Settings(BaseModel):
    retries: Annotated[uint16, Field(le=10, description="Retry attempts")]
    endpoint: str = Field(alias="url", examples=["https://example.com"])
    timeout: Annotated[float, FieldMeta(optional=True, maximum="30")] = 5.0


class Movie(TypedDict):
    title: str
    year: int
    rating: NotRequired[Annotated[float, FieldMeta(description="Stars")]]


@dataclass
class Draft:
    title: "str"
    words: "list[int]"
    owner: "MissingOwner"  # noqa: F821


class TestPrimitives:
    """Test primitive type hints."""

    @pytest.mark.parametrize(
        ("hint", "kind"),
        [
            (bool, PrimitiveKind.BOOL),
            (str, PrimitiveKind.STRING),
            (int, PrimitiveKind.INT),
            (float, PrimitiveKind.FLOAT64),
            (int8, PrimitiveKind.INT8),
            (int64, PrimitiveKind.INT64),
            (uint, PrimitiveKind.UINT),
            (uint64, PrimitiveKind.UINT64),
            (float32, PrimitiveKind.FLOAT32),
        ],
    )
    def test_primitive_kinds(self, hint, kind):
        """Test builtins and sized aliases map to primitive kinds."""
        descriptor = describe(hint)
        assert isinstance(descriptor, PrimitiveType)
        assert descriptor.primitive is kind

    def test_user_newtype_resolves_supertype(self):
        """Test NewType wrappers use their supertype."""
        assert describe(UserId) == PrimitiveType(PrimitiveKind.INT)

    def test_annotated_is_stripped(self):
        """Test Annotated wrappers describe their base type."""
        assert describe(Annotated[str, "doc"]).primitive is PrimitiveKind.STRING

    def test_uint64_schema(self):
        """Test uint64 yields an integer node with minimum 0."""
        assert build_schema(uint64).to_dict() == {"type": "integer", "minimum": 0}


class TestWrappersAndCollections:
    """Test optional, sequence and mapping hints."""

    @pytest.mark.parametrize("hint", [int | None, Optional[int]])  # noqa: UP007
    def test_optional(self, hint):
        """Test T | None becomes an optional wrapper."""
        descriptor = describe(hint)
        assert isinstance(descriptor, OptionalType)
        assert descriptor.target == PrimitiveType(PrimitiveKind.INT)

    @pytest.mark.parametrize(
        "hint", [list[str], set[str], frozenset[str], tuple[str, ...], Sequence[str]]
    )
    def test_sequences(self, hint):
        """Test homogeneous collections become sequences."""
        descriptor = describe(hint)
        assert isinstance(descriptor, SequenceType)
        assert descriptor.element.primitive is PrimitiveKind.STRING

    def test_bare_list_has_opaque_element(self):
        """Test a bare list cannot be built."""
        descriptor = describe(list)
        assert isinstance(descriptor, SequenceType)
        assert isinstance(descriptor.element, OpaqueType)
        with pytest.raises(UnsupportedTypeError, match="any"):
            build_schema(list)

    @pytest.mark.parametrize("hint", [dict, dict[str, int], Mapping[str, float]])
    def test_mappings(self, hint):
        """Test mappings become pass-through mapping descriptors."""
        assert isinstance(describe(hint), MappingType)
        assert build_schema(hint).to_dict() == {}

    def test_mapping_keeps_key_and_value(self):
        """Test typed mappings keep their key and value descriptors."""
        descriptor = describe(dict[str, int])
        assert descriptor.key.primitive is PrimitiveKind.STRING
        assert descriptor.value.primitive is PrimitiveKind.INT


class TestUnsupported:
    """Test hints without a mapping rule."""

    @pytest.mark.parametrize(
        ("hint", "kind_name"),
        [
            (Any, "any"),
            (int | str, "union"),
            (tuple[int, str], "tuple"),
            (Literal["a", "b"], "literal"),
            (Callable[[int], str], "callable"),
            (bytes, "class"),
            (complex, "class"),
        ],
    )
    def test_opaque_kinds(self, hint, kind_name):
        """Test unsupported hints become opaque descriptors."""
        descriptor = describe(hint)
        assert isinstance(descriptor, OpaqueType)
        assert descriptor.kind_name == kind_name

    def test_unsupported_field_fails_record(self):
        """Test a record with an unsupported field cannot be built."""

        @dataclass
        class Job:
            name: str
            run: Callable[[], None]

        with pytest.raises(UnsupportedTypeError) as exc_info:
            build_schema(Job)
        assert exc_info.value.kind == "callable"


class TestDataclasses:
    """Test dataclass records."""

    def test_fields_in_declaration_order(self):
        """Test fields keep declaration order and identifiers."""
        descriptor = describe(Account)
        assert isinstance(descriptor, RecordType)
        assert descriptor.name == "Account"
        assert [f.name for f in descriptor.fields] == [
            "id",
            "balance",
            "tags",
            "address",
            "extras",
            "status",
        ]

    def test_name_and_optional_age(self):
        """Test the canonical required/optional example."""
        assert build_schema(Person).to_dict() == {
            "type": "object",
            "properties": {"name": {"type": "string"}, "age": {"type": "integer"}},
            "required": ["name"],
        }

    def test_annotated_metadata(self):
        """Test FieldMeta in Annotated refines fields."""
        schema = build_schema(Address).to_dict()
        assert schema["properties"]["zip"] == {"type": "string", "description": "Postal code"}
        assert schema["required"] == ["city", "zip"]

    def test_field_metadata_tags(self):
        """Test string tags in dataclass field metadata are honored."""
        schema = build_schema(Account).to_dict()
        assert schema["properties"]["state"] == {"type": "string", "enum": ["active", "closed"]}
        assert "state" not in schema["required"]

    def test_nested_optional_record(self):
        """Test optional record references unwrap to the record schema."""
        schema = build_schema(Account).to_dict()
        assert schema["properties"]["address"]["type"] == "object"
        assert "address" in schema["required"]

    def test_full_account_schema(self):
        """Test the complete account schema."""
        schema = build_schema(Account).to_dict()
        assert schema["properties"]["id"] == {"type": "integer"}
        assert schema["properties"]["balance"] == {"type": "number", "minimum": 0}
        assert schema["properties"]["tags"] == {"type": "array", "items": {"type": "string"}}
        assert schema["properties"]["extras"] == {}
        assert schema["required"] == ["id", "balance", "tags", "address", "extras"]

    def test_explicit_fieldmeta_in_field_metadata(self):
        """Test a FieldMeta stored under the typeschema key is used."""

        @dataclass
        class Item:
            sku: str = field(metadata={"typeschema": FieldMeta(name="SKU", optional=True)})

        schema = build_schema(Item).to_dict()
        assert schema == {"type": "object", "properties": {"SKU": {"type": "string"}}}


class TestPydanticModels:
    """Test pydantic model records."""

    def test_field_info_metadata(self):
        """Test alias, description, bounds and examples come from FieldInfo."""
        schema = build_schema(Settings).to_dict()

        assert schema["properties"]["retries"] == {
            "type": "integer",
            "description": "Retry attempts",
            "minimum": 0,
            "maximum": 10,
        }
        assert schema["properties"]["url"] == {
            "type": "string",
            "example": "https://example.com",
        }

    def test_fieldmeta_overrides_field_info(self):
        """Test FieldMeta wins over FieldInfo and marks optionality."""
        schema = build_schema(Settings).to_dict()
        assert schema["properties"]["timeout"] == {"type": "number", "maximum": 30}
        assert schema["required"] == ["retries", "url"]


class TestTypedDicts:
    """Test TypedDict records."""

    def test_not_required_keys_are_optional(self):
        """Test NotRequired keys stay out of required."""
        schema = build_schema(Movie).to_dict()
        assert schema["required"] == ["title", "year"]
        assert schema["properties"]["rating"] == {"type": "number", "description": "Stars"}

    def test_total_false(self):
        """Test total=False makes every key optional."""

        class Patch(TypedDict, total=False):
            title: str

        assert build_schema(Patch).to_dict() == {
            "type": "object",
            "properties": {"title": {"type": "string"}},
        }


class TestFieldMetaCollection:
    """Test merging of metadata sources."""

    def test_annotated_wins_over_tags(self):
        """Test Annotated FieldMeta overrides string tags attribute by attribute."""
        meta = field_meta(
            Annotated[int, FieldMeta(minimum=5)],
            {"json": "count,omitempty", "minimum": "1", "maximum": "9"},
        )
        assert meta == FieldMeta(name="count", optional=True, minimum=5, maximum="9")

    def test_no_metadata(self):
        """Test a plain hint yields empty metadata."""
        assert field_meta(int).is_empty()


class TestUnresolvableHints:
    """Test records whose annotations cannot all be evaluated."""

    def test_other_fields_still_resolve(self):
        """Test one unknown name leaves the remaining fields resolved."""
        descriptor = describe(Draft)
        title, words, owner = descriptor.fields
        assert title.type.primitive is PrimitiveKind.STRING
        assert words.type.element.primitive is PrimitiveKind.INT
        assert isinstance(owner.type, OpaqueType)
        assert owner.type.kind_name == "forward reference"

    def test_build_names_the_unresolved_field(self):
        """Test the build fails on the unresolved field only."""
        with pytest.raises(UnsupportedTypeError) as exc_info:
            build_schema(Draft)
        assert exc_info.value.kind == "forward reference"
        assert exc_info.value.type_name == "MissingOwner"
