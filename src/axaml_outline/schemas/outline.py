"""Renderable outline models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from axaml_outline.schemas.elements import SymbolKind
from axaml_outline.schemas.positions import Span


class OutlineSymbol(BaseModel):
    """A node of the navigation outline.

    Attributes:
        name: Display label of the element.
        detail: Tag name, optionally followed by the 1-based start line.
        kind: Element category.
        range: Full source span of the element.
        selection_range: Span of the tag name inside the opening tag.
        children: Nested symbols in document order.
    """

    name: str
    detail: str
    kind: SymbolKind
    range: Span
    selection_range: Span
    children: list["OutlineSymbol"] = Field(default_factory=list)


class FlatSymbol(BaseModel):
    """One entry of the flattened pick-by-name list."""

    label: str
    tag_name: str
    kind: SymbolKind
    line: int = Field(..., ge=1, description="1-based start line")
    depth: int = Field(default=0, ge=0)
