"""Schema node data model."""

from __future__ import annotations

import json
from enum import StrEnum
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator


class SchemaKind(StrEnum):
    """JSON Schema ``type`` values the builder produces."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"


class SchemaNode(BaseModel):
    """A node of a generated schema tree.

    Every attribute is optional and left as ``None`` when it does not apply;
    absent attributes are omitted from the rendered document.

    Attributes
    ----------
    kind : SchemaKind | None
        Node type, rendered as ``type``. ``None`` for pass-through mapping nodes
    description : str | None
        Free text from field metadata
    items : SchemaNode | None
        Element schema of an ``array`` node
    properties : dict[str, SchemaNode] | None
        Child schemas of an ``object`` node, keyed by serialization name
    required : list[str] | None
        Mandatory property names in declaration order
    format : str | None
        Refinement hint (reserved, never populated by the builder)
    enum : list[Any] | None
        Allowed literal values
    default, example : Any
        Literal values from field metadata
    minimum, maximum : int | None
        Integer bounds, independent of each other

    Examples
    --------
    >>> SchemaNode(kind=SchemaKind.ARRAY, items=SchemaNode(kind=SchemaKind.INTEGER)).to_dict()
    {'type': 'array', 'items': {'type': 'integer'}}
    """

    model_config = ConfigDict(populate_by_name=True)

    kind: SchemaKind | None = Field(default=None, alias="type")
    description: str | None = None
    items: SchemaNode | None = None
    properties: dict[str, SchemaNode] | None = None
    required: list[str] | None = None
    format: str | None = None
    enum: list[Any] | None = None
    default: Any = None
    example: Any = None
    minimum: int | None = None
    maximum: int | None = None

    @model_validator(mode="after")
    def _check_shape(self) -> SchemaNode:
        if self.items is not None and self.kind is not SchemaKind.ARRAY:
            raise ValueError(f"'items' is only valid on array nodes, not {self.kind}")
        if self.kind is not SchemaKind.OBJECT and (
            self.properties is not None or self.required is not None
        ):
            raise ValueError(
                f"'properties'/'required' are only valid on object nodes, not {self.kind}"
            )
        if self.required:
            unknown = [name for name in self.required if name not in (self.properties or {})]
            if unknown:
                raise ValueError(f"required names missing from properties: {unknown}")
        return self

    def to_dict(self) -> dict[str, Any]:
        """Render as a JSON-compatible dict, omitting absent attributes."""
        result: dict[str, Any] = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return result

    def to_json(self, indent: int | None = 2) -> str:
        """Render as JSON text."""
        return json.dumps(self.to_dict(), indent=indent)

    def to_yaml(self) -> str:
        """Render as YAML text, keeping key order."""
        yaml_str: str = yaml.dump(self.to_dict(), sort_keys=False, default_flow_style=False)
        return yaml_str


SchemaNode.model_rebuild()
