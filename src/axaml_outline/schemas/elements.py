"""Element tree models."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from axaml_outline.schemas.positions import Span


class SymbolKind(str, Enum):
    """Coarse element category used for outline icons."""

    CLASS = "class"
    PACKAGE = "package"
    FUNCTION = "function"
    STRING = "string"
    ARRAY = "array"
    FILE = "file"
    OBJECT = "object"


class ElementNode(BaseModel):
    """One surviving markup element and its subtree.

    Nodes are immutable once built: ``attributes`` is a read-only mapping
    and ``children`` is a tuple.
    """

    model_config = ConfigDict(frozen=True)

    tag_name: str
    attributes: Mapping[str, str] = Field(default_factory=dict)
    label: str
    kind: SymbolKind = SymbolKind.OBJECT
    span: Span
    children: tuple["ElementNode", ...] = ()

    @field_validator("attributes", mode="after")
    @classmethod
    def freeze_attributes(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("attributes")
    def dump_attributes(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)
