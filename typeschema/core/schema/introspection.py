"""Build type descriptors from Python type hints.

Supported shapes:
- ``bool``, ``str``, ``int``, ``float`` and the sized aliases in
  :mod:`typeschema.core.types`
- ``T | None`` / ``Optional[T]``
- ``list[T]``, ``set[T]``, ``frozenset[T]``, ``tuple[T, ...]`` and the
  ``collections.abc`` collection protocols
- ``dict[K, V]`` and ``Mapping[K, V]``
- ``Annotated[T, ...]`` (field metadata is read from record fields)
- dataclasses, pydantic models and TypedDict classes as records
- ``NewType`` wrappers, resolved to their supertype

Everything else becomes an :class:`OpaqueType`, which the builder rejects.
Record hints are resolved together; when that fails, each field is resolved
on its own and a hint that still cannot be evaluated stays a forward
reference, which makes only that field unsupported.
Self-referential types are not detected and recurse without bound.
"""

from __future__ import annotations

import dataclasses
import inspect
import sys
from collections import abc
from collections.abc import Mapping
from typing import (
    Any,
    ForwardRef,
    Literal,
    NewType,
    NotRequired,
    Required,
    get_args,
    get_origin,
    get_type_hints,
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
from typeschema.core.schema.metadata import EMPTY_META, FieldMeta
from typeschema.core.types import (
    float32,
    float64,
    get_annotated_metadata,
    int8,
    int16,
    int32,
    int64,
    is_mapping_type,
    is_pydantic_model,
    is_sequence_type,
    is_typeddict_type,
    is_union_type,
    type_name,
    uint,
    uint8,
    uint16,
    uint32,
    uint64,
)

logger = get_logger(__name__)

# Key under which dataclass field metadata may carry an explicit FieldMeta
METADATA_KEY = "typeschema"

PRIMITIVE_TYPES: dict[Any, PrimitiveKind] = {
    bool: PrimitiveKind.BOOL,
    str: PrimitiveKind.STRING,
    int: PrimitiveKind.INT,
    float: PrimitiveKind.FLOAT64,
    int8: PrimitiveKind.INT8,
    int16: PrimitiveKind.INT16,
    int32: PrimitiveKind.INT32,
    int64: PrimitiveKind.INT64,
    uint: PrimitiveKind.UINT,
    uint8: PrimitiveKind.UINT8,
    uint16: PrimitiveKind.UINT16,
    uint32: PrimitiveKind.UINT32,
    uint64: PrimitiveKind.UINT64,
    float32: PrimitiveKind.FLOAT32,
    float64: PrimitiveKind.FLOAT64,
}


def describe(tp: Any) -> TypeDescriptor:
    """Describe a Python type hint.

    Examples
    --------
    >>> describe(list[int]).element
    PrimitiveType(name='int', primitive=<PrimitiveKind.INT: 'int'>)
    >>> describe(dict[str, int]).kind
    <TypeKind.MAPPING: 'mapping'>
    """
    tp, _ = get_annotated_metadata(tp)
    name = type_name(tp)

    if tp is Any or tp is object:
        return OpaqueType(name="Any", kind_name="any")

    if isinstance(tp, (str, ForwardRef)):
        return OpaqueType(name=str(tp), kind_name="forward reference")

    if isinstance(tp, (type, NewType)) and tp in PRIMITIVE_TYPES:
        return PrimitiveType(PRIMITIVE_TYPES[tp], name=name)

    if isinstance(tp, NewType):
        return describe(tp.__supertype__)

    if is_union_type(tp):
        members = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(members) == 1:
            return OptionalType(describe(members[0]), name=name)
        return OpaqueType(name=name, kind_name="union")

    if get_origin(tp) is Literal:
        return OpaqueType(name=name, kind_name="literal")

    if is_sequence_type(tp):
        return _describe_sequence(tp, name)

    if is_mapping_type(tp):
        args = get_args(tp)
        if len(args) == 2:
            return MappingType(name=name, key=describe(args[0]), value=describe(args[1]))
        return MappingType(name=name)

    if isinstance(tp, type):
        if dataclasses.is_dataclass(tp):
            return _describe_dataclass(tp)
        if is_pydantic_model(tp):
            return _describe_model(tp)
        if is_typeddict_type(tp):
            return _describe_typeddict(tp)

    if tp is abc.Callable or get_origin(tp) is abc.Callable:
        return OpaqueType(name=name, kind_name="callable")

    logger.debug("No descriptor rule for {type}", type=name)
    return OpaqueType(name=name, kind_name="class" if isinstance(tp, type) else "unknown")


def _describe_sequence(tp: Any, name: str) -> TypeDescriptor:
    args = get_args(tp)
    if get_origin(tp) is tuple:
        # Only homogeneous variadic tuples are sequences
        if len(args) == 2 and args[1] is Ellipsis:
            return SequenceType(describe(args[0]), name=name)
        return OpaqueType(name=name, kind_name="tuple")
    return SequenceType(describe(args[0] if args else Any), name=name)


def _resolve_hints(cls: type) -> dict[str, Any]:
    try:
        return get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as e:
        logger.debug(f"Could not resolve type hints for {cls.__name__}: {e}")

    # Resolve field by field so one bad hint only affects its own field
    hints: dict[str, Any] = {}
    for base in reversed(cls.__mro__):
        module = sys.modules.get(base.__module__)
        globalns = dict(vars(module)) if module else {}
        localns = dict(vars(base))
        for name, annotation in inspect.get_annotations(base).items():
            hints[name] = _resolve_hint(name, annotation, globalns, localns)
    return hints


def _resolve_hint(
    name: str, annotation: Any, globalns: dict[str, Any], localns: dict[str, Any]
) -> Any:
    """Evaluate one annotation, keeping it unresolved when that fails."""
    holder = type("_FieldHint", (), {"__annotations__": {name: annotation}})
    try:
        return get_type_hints(holder, globalns, localns, include_extras=True)[name]
    except (NameError, TypeError, SyntaxError) as e:
        logger.debug(f"Could not resolve type hint of field {name!r}: {e}")
        return annotation


def field_meta(hint: Any, tags: Mapping[str, Any] | None = None) -> FieldMeta:
    """Collect the metadata of a record field.

    String tags are read first, then an explicit FieldMeta stored under the
    ``typeschema`` tag key, then every FieldMeta in ``Annotated`` metadata.
    Later sources win attribute by attribute.
    """
    meta = FieldMeta.from_tags(tags) if tags else EMPTY_META
    if tags and isinstance(explicit := tags.get(METADATA_KEY), FieldMeta):
        meta = meta.merge(explicit)

    _, annotations = get_annotated_metadata(hint)
    for item in annotations:
        if isinstance(item, FieldMeta):
            meta = meta.merge(item)
    return meta


def _describe_dataclass(cls: type) -> RecordType:
    hints = _resolve_hints(cls)
    fields = []
    for f in dataclasses.fields(cls):
        hint = hints.get(f.name, f.type)
        fields.append(FieldDescriptor(f.name, describe(hint), field_meta(hint, f.metadata)))
    return RecordType(name=cls.__name__, fields=tuple(fields))


def _pydantic_field_meta(info: Any) -> FieldMeta:
    """Translate pydantic FieldInfo attributes into FieldMeta."""
    values: dict[str, Any] = {}
    if alias := info.serialization_alias or info.alias:
        values["name"] = alias
    if info.description:
        values["description"] = info.description
    # Ge/Le objects from annotated_types
    for constraint in info.metadata:
        ge = getattr(constraint, "ge", None)
        if isinstance(ge, int) and not isinstance(ge, bool):
            values["minimum"] = ge
        le = getattr(constraint, "le", None)
        if isinstance(le, int) and not isinstance(le, bool):
            values["maximum"] = le
    if info.examples:
        values["example"] = info.examples[0]
    return FieldMeta(**values)


def _describe_model(model: Any) -> RecordType:
    # pydantic strips Annotated from the resolved annotation and keeps
    # foreign metadata, FieldMeta included, on FieldInfo.metadata
    fields = []
    for name, info in model.model_fields.items():
        meta = _pydantic_field_meta(info)
        for item in info.metadata:
            if isinstance(item, FieldMeta):
                meta = meta.merge(item)
        fields.append(FieldDescriptor(name, describe(info.annotation), meta))
    return RecordType(name=model.__name__, fields=tuple(fields))


def _describe_typeddict(td: Any) -> RecordType:
    hints = _resolve_hints(td)
    required_keys = getattr(td, "__required_keys__", frozenset(hints))
    fields = []
    for name, hint in hints.items():
        while get_origin(hint) in (Required, NotRequired):
            hint = get_args(hint)[0]
        meta = field_meta(hint)
        if name not in required_keys and not meta.optional:
            meta = dataclasses.replace(meta, optional=True)
        fields.append(FieldDescriptor(name, describe(hint), meta))
    return RecordType(name=td.__name__, fields=tuple(fields))
