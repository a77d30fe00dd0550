"""Sized numeric aliases and type-hint inspection utilities.

Python has a single ``int`` and a single ``float``. The aliases below let a
record declare the width and signedness of a numeric field so the schema
builder can derive kind-level constraints (unsigned integers are never
negative).

Examples
--------
```python
from dataclasses import dataclass

from typeschema.core.types import uint32


@dataclass
class Counter:
    hits: uint32
```
"""

from collections import abc
from types import UnionType
from typing import Annotated, Any, NewType, Union, get_args, get_origin, is_typeddict

# ============================================================================
# Sized Numeric Aliases
# ============================================================================

int8 = NewType("int8", int)
int16 = NewType("int16", int)
int32 = NewType("int32", int)
int64 = NewType("int64", int)

uint = NewType("uint", int)
"""Platform-width unsigned integer."""

uint8 = NewType("uint8", int)
uint16 = NewType("uint16", int)
uint32 = NewType("uint32", int)
uint64 = NewType("uint64", int)

float32 = NewType("float32", float)
float64 = NewType("float64", float)

# ============================================================================
# Type Inspection Utilities
# ============================================================================

SEQUENCE_ORIGINS: frozenset[Any] = frozenset({
    list,
    set,
    frozenset,
    tuple,
    abc.Sequence,
    abc.MutableSequence,
    abc.Set,
    abc.MutableSet,
    abc.Collection,
    abc.Iterable,
})

MAPPING_ORIGINS: frozenset[Any] = frozenset({
    dict,
    abc.Mapping,
    abc.MutableMapping,
})


def is_union_type(type_hint: Any) -> bool:
    """Check if type hint is a Union type (including | syntax).

    Examples
    --------
    >>> from typing import Optional
    >>> is_union_type(Optional[str])
    True
    >>> is_union_type(str | int)
    True
    >>> is_union_type(str)
    False
    """
    return get_origin(type_hint) is Union or isinstance(type_hint, UnionType)


def is_annotated_type(type_hint: Any) -> bool:
    """Check if type hint is an Annotated type.

    Examples
    --------
    >>> is_annotated_type(Annotated[int, "meta"])
    True
    >>> is_annotated_type(int)
    False
    """
    return get_origin(type_hint) is Annotated


def get_annotated_metadata(type_hint: Any) -> tuple[Any, tuple[Any, ...]]:
    """Extract base type and metadata from Annotated type.

    Examples
    --------
    >>> base, metadata = get_annotated_metadata(Annotated[int, "meta"])
    >>> base
    <class 'int'>
    >>> metadata
    ('meta',)
    """
    if not is_annotated_type(type_hint):
        return type_hint, ()
    return type_hint.__origin__, tuple(type_hint.__metadata__)


def is_sequence_type(type_hint: Any) -> bool:
    """Check if type hint is a homogeneous collection (list, set, tuple, ...).

    Examples
    --------
    >>> is_sequence_type(list[str])
    True
    >>> is_sequence_type(tuple)
    True
    >>> is_sequence_type(str)
    False
    """
    if get_origin(type_hint) in SEQUENCE_ORIGINS:
        return True
    return isinstance(type_hint, type) and type_hint in SEQUENCE_ORIGINS


def is_mapping_type(type_hint: Any) -> bool:
    """Check if type hint is a mapping type.

    Examples
    --------
    >>> is_mapping_type(dict[str, int])
    True
    >>> is_mapping_type(dict)
    True
    >>> is_mapping_type(list)
    False
    """
    if get_origin(type_hint) in MAPPING_ORIGINS:
        return True
    return isinstance(type_hint, type) and type_hint in MAPPING_ORIGINS


def is_typeddict_type(type_hint: Any) -> bool:
    """Check if type hint is a TypedDict class."""
    return isinstance(type_hint, type) and is_typeddict(type_hint)


def is_pydantic_model(type_hint: Any) -> bool:
    """Check if type hint is a pydantic model class."""
    from pydantic import BaseModel

    return isinstance(type_hint, type) and issubclass(type_hint, BaseModel)


def type_name(type_hint: Any) -> str:
    """Return a readable name for a type hint.

    Examples
    --------
    >>> type_name(int)
    'int'
    >>> type_name(list[int])
    'list[int]'
    """
    if isinstance(type_hint, type) and not get_args(type_hint):
        return type_hint.__qualname__
    name = getattr(type_hint, "__name__", None)
    if name and not get_args(type_hint):
        return str(name)
    return repr(type_hint).replace("typing.", "")
