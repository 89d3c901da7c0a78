"""Turn element forests into outline symbols, flat lists, and point lookups."""

from __future__ import annotations

from typing import Iterable, Iterator

from axaml_outline.schemas import ElementNode, FlatSymbol, OutlineSymbol, Position, Span


def to_outline(forest: Iterable[ElementNode], *, show_line_numbers: bool = False) -> list[OutlineSymbol]:
    """Convert an element forest into outline symbols, preserving order."""
    # Pre-order numbering puts every child after its parent, so sweeping the
    # list backwards finishes each node's children before the node itself.
    order: list[tuple[ElementNode, int | None]] = []
    stack: list[tuple[ElementNode, int | None]] = [(node, None) for node in reversed(list(forest))]
    while stack:
        node, parent = stack.pop()
        index = len(order)
        order.append((node, parent))
        stack.extend((child, index) for child in reversed(node.children))

    children: list[list[OutlineSymbol]] = [[] for _ in order]
    roots: list[OutlineSymbol] = []
    for index in range(len(order) - 1, -1, -1):
        node, parent = order[index]
        # Collected back to front.
        children[index].reverse()
        symbol = _to_symbol(node, children[index], show_line_numbers)
        if parent is None:
            roots.append(symbol)
        else:
            children[parent].append(symbol)
    roots.reverse()
    return roots


def _to_symbol(node: ElementNode, children: list[OutlineSymbol], show_line_numbers: bool) -> OutlineSymbol:
    start = node.span.start
    detail = node.tag_name
    if show_line_numbers:
        detail = f"{node.tag_name} (line {start.line + 1})"

    # The selection anchor covers the tag name right after "<".
    name_start = Position(start.line, start.column + 1)
    selection_range = Span(start=name_start, end=Position(start.line, name_start.column + len(node.tag_name)))

    return OutlineSymbol(
        name=node.label,
        detail=detail,
        kind=node.kind,
        range=node.span,
        selection_range=selection_range,
        children=children,
    )


def iter_elements(forest: Iterable[ElementNode]) -> Iterator[tuple[ElementNode, int]]:
    """Yield ``(node, depth)`` pairs in depth-first pre-order without recursion."""
    stack = [(node, 0) for node in reversed(list(forest))]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((child, depth + 1) for child in reversed(node.children))


def count_elements(forest: Iterable[ElementNode]) -> int:
    """Count every node in the forest."""
    return sum(1 for _ in iter_elements(forest))


def flatten_elements(forest: Iterable[ElementNode]) -> list[FlatSymbol]:
    """Flatten the forest for pick-by-name navigation."""
    return [
        FlatSymbol(
            label=node.label,
            tag_name=node.tag_name,
            kind=node.kind,
            line=node.span.start.line + 1,
            depth=depth,
        )
        for node, depth in iter_elements(forest)
    ]


def find_element_at(forest: Iterable[ElementNode], position: Position) -> ElementNode | None:
    """Return the deepest node whose span contains ``position``.

    Siblings are tried in order and the first containing one is descended into.
    """
    position = Position(*position)
    found: ElementNode | None = None
    candidates: Iterable[ElementNode] = forest
    while True:
        match = next((node for node in candidates if node.span.contains(position)), None)
        if match is None:
            return found
        found = match
        candidates = match.children


def describe_element(node: ElementNode) -> str:
    """Build the one-line message shown for "element under cursor"."""
    parts = [
        f"{node.label} <{node.tag_name}>",
        f"kind: {node.kind.value}",
        f"line: {node.span.start.line + 1}",
        f"attributes: {len(node.attributes)}",
        f"children: {len(node.children)}",
    ]
    return " | ".join(parts)


def render_tree(symbols: Iterable[OutlineSymbol], indent: int = 0) -> str:
    """Render outline symbols as an indented text tree."""
    lines: list[str] = []
    stack = [(symbol, indent) for symbol in reversed(list(symbols))]
    while stack:
        symbol, level = stack.pop()
        lines.append(" " * (level * 4) + f"{symbol.name}  ({symbol.detail})")
        stack.extend((child, level + 1) for child in reversed(symbol.children))
    return "\n".join(lines)
