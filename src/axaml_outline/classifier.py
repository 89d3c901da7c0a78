"""Display labels and categories for AXAML elements."""

from __future__ import annotations

from typing import Mapping

from axaml_outline.schemas import SymbolKind

QUALIFIED_NAME_ATTRIBUTE = "x:Name"
NAME_ATTRIBUTE = "Name"

# Tags whose content attribute is shown when the element has no name.
_CONTENT_ATTRIBUTES = {
    "Button": ("Content", "Text"),
    "TextBlock": ("Text", "Content"),
}

# Ordered: the first row with a matching substring wins.
_KIND_TABLE: tuple[tuple[SymbolKind, tuple[str, ...]], ...] = (
    (SymbolKind.CLASS, ("window", "usercontrol")),
    (SymbolKind.PACKAGE, ("grid", "stackpanel", "canvas", "dockpanel", "wrappanel", "border")),
    (SymbolKind.FUNCTION, ("button", "checkbox", "radiobutton", "slider")),
    (SymbolKind.STRING, ("textblock", "textbox", "label")),
    (SymbolKind.ARRAY, ("listbox", "combobox", "datagrid", "treeview")),
    (SymbolKind.FILE, ("image", "mediaelement")),
)


def element_label(tag_name: str, attributes: Mapping[str, str]) -> str:
    """Return the outline label for an element.

    Precedence: ``x:Name``, then ``Name``, then the content of a button or
    text block shown as ``[Tag "value"]``, then the bracketed tag name.
    """
    qualified = attributes.get(QUALIFIED_NAME_ATTRIBUTE)
    if qualified:
        return qualified

    name = attributes.get(NAME_ATTRIBUTE)
    if name:
        return name

    for content_key in _CONTENT_ATTRIBUTES.get(tag_name, ()):
        content = attributes.get(content_key)
        if content:
            return f'[{tag_name} "{content}"]'

    return f"[{tag_name}]"


def symbol_kind(tag_name: str) -> SymbolKind:
    """Map a tag name to its category by case-insensitive substring match."""
    lowered = tag_name.lower()
    for kind, needles in _KIND_TABLE:
        if any(needle in lowered for needle in needles):
            return kind
    return SymbolKind.OBJECT
