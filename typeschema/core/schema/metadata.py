"""Per-field metadata consulted by the schema builder.

FieldMeta is the structured form of the serialization and validation hints a
record field carries. Attach it to a field with ``Annotated``::

    from typing import Annotated

    age: Annotated[int, FieldMeta(optional=True, minimum=0, maximum=150)]

or read it from string-keyed tags (e.g. ``dataclasses.field(metadata=...)``)
with :meth:`FieldMeta.from_tags`.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

# Modifier on the serialization tag marking a field as omittable
OMIT_EMPTY = "omitempty"

# Tag keys taken as raw text
_TEXT_TAGS = ("description", "enum", "minimum", "maximum", "example")


@dataclass(frozen=True, slots=True)
class FieldMeta:
    """Schema metadata for a single record field.

    Attributes
    ----------
    name : str | None
        Serialization name; the declared identifier is used when unset
    optional : bool, default=False
        Field may be omitted, so it is left out of the record's required list
    description : str | None
        Copied verbatim to the node's description
    enum : str | Sequence[Any] | None
        Allowed values, either delimiter-separated text or a sequence
    minimum, maximum : int | str | None
        Integer bounds; text is parsed as a base-10 integer at build time
    example : Any
        Example value; text is parsed as a JSON literal for non-string nodes
    default : Any
        Default value copied to the node

    Examples
    --------
    >>> meta = FieldMeta.from_tags({"json": "age,omitempty", "minimum": "18"})
    >>> meta.name, meta.optional, meta.minimum
    ('age', True, '18')
    """

    name: str | None = None
    optional: bool = False
    description: str | None = None
    enum: str | Sequence[Any] | None = None
    minimum: int | str | None = None
    maximum: int | str | None = None
    example: Any = None
    default: Any = None

    @classmethod
    def from_tags(cls, tags: Mapping[str, Any]) -> FieldMeta:
        """Build metadata from string-keyed tags.

        The ``json`` tag holds ``"<name>[,modifier...]"``; an empty name keeps
        the declared identifier and the ``omitempty`` modifier marks the field
        optional. ``description``, ``enum``, ``minimum``, ``maximum`` and
        ``example`` are taken as raw text. Other keys are ignored.
        """
        values: dict[str, Any] = {}

        if (serialization := tags.get("json")) is not None:
            name, *modifiers = str(serialization).split(",")
            if name:
                values["name"] = name
            if OMIT_EMPTY in modifiers:
                values["optional"] = True

        for key in _TEXT_TAGS:
            if key in tags:
                values[key] = tags[key]

        return cls(**values)

    def merge(self, other: FieldMeta) -> FieldMeta:
        """Return a copy with every attribute ``other`` sets laid over this one.

        An attribute counts as set when it differs from its default.
        """
        changes = {
            f.name: getattr(other, f.name)
            for f in dataclasses.fields(other)
            if getattr(other, f.name) != f.default
        }
        return dataclasses.replace(self, **changes) if changes else self

    def is_empty(self) -> bool:
        """Check whether no attribute is set."""
        return self == EMPTY_META


EMPTY_META = FieldMeta()
