"""Shared schemas for axaml-outline."""

from axaml_outline.schemas.document import TextDocument
from axaml_outline.schemas.elements import ElementNode, SymbolKind
from axaml_outline.schemas.outline import FlatSymbol, OutlineSymbol
from axaml_outline.schemas.positions import Position, Span

__all__ = [
    "ElementNode",
    "FlatSymbol",
    "OutlineSymbol",
    "Position",
    "Span",
    "SymbolKind",
    "TextDocument",
]
