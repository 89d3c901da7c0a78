"""axaml-outline: extract a navigable element outline from Avalonia XAML."""

from axaml_outline.attributes import parse_attributes
from axaml_outline.classifier import element_label, symbol_kind
from axaml_outline.detection import is_axaml_document
from axaml_outline.exceptions import (
    AxamlOutlineError,
    DocumentTooLargeError,
    MismatchedTagError,
    ParseError,
)
from axaml_outline.outline import describe_element, find_element_at, flatten_elements, to_outline
from axaml_outline.provider import OutlineProvider
from axaml_outline.scanner import DEFINITION_TAGS, parse_axaml
from axaml_outline.schemas import (
    ElementNode,
    FlatSymbol,
    OutlineSymbol,
    Position,
    Span,
    SymbolKind,
    TextDocument,
)

__all__ = [
    "DEFINITION_TAGS",
    "AxamlOutlineError",
    "DocumentTooLargeError",
    "ElementNode",
    "FlatSymbol",
    "MismatchedTagError",
    "OutlineProvider",
    "OutlineSymbol",
    "ParseError",
    "Position",
    "Span",
    "SymbolKind",
    "TextDocument",
    "describe_element",
    "element_label",
    "find_element_at",
    "flatten_elements",
    "is_axaml_document",
    "parse_attributes",
    "parse_axaml",
    "symbol_kind",
    "to_outline",
]
