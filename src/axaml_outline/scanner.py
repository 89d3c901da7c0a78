"""Lenient line-oriented scanner that turns AXAML text into an element forest.

This is not an XML parser. It walks the document line by line, recognises
start, self-closing and end tags plus comments, and rebuilds nesting with an
explicit open-element stack. Malformed input never raises in the default
mode: unterminated tags run to the end of the document, unmatched closing
tags are ignored, and closing tag names are not checked against the element
they close.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from axaml_outline.attributes import parse_attributes
from axaml_outline.classifier import element_label, symbol_kind
from axaml_outline.exceptions import MismatchedTagError
from axaml_outline.schemas import ElementNode, Position, Span, SymbolKind

logger = logging.getLogger(__name__)

_TAG_NAME_RE = re.compile(r"[A-Za-z][A-Za-z0-9.:_-]*")
_CLOSE_TAG_RE = re.compile(r"</([A-Za-z][A-Za-z0-9.:_-]*)\s*>")
_QUOTES = {'"', "'"}

# Non-visual definition elements. They are never emitted and their subtree is
# dropped. A property element (``Owner.Member``) whose member is listed here,
# or ends in ``Template``, is treated the same way.
DEFINITION_TAGS = frozenset(
    {
        "RowDefinitions",
        "RowDefinition",
        "ColumnDefinitions",
        "ColumnDefinition",
        "Resources",
        "ResourceDictionary",
        "ResourceInclude",
        "MergedDictionaries",
        "ThemeDictionaries",
        "Styles",
        "Style",
        "StyleInclude",
        "ControlTheme",
        "Template",
        "ControlTemplate",
        "DataTemplate",
        "DataTemplates",
        "ItemsPanelTemplate",
        "TreeDataTemplate",
        "FocusAdornerTemplate",
        "Setter",
        "Trigger",
        "DataTrigger",
        "EventTrigger",
        "MultiTrigger",
    }
)


@dataclass
class _Draft:
    tag_name: str
    attributes: dict[str, str]
    label: str
    kind: SymbolKind
    start: Position
    end: Position
    children: list[int] = field(default_factory=list)


@dataclass
class _Frame:
    """An open tag on the stack; ``index`` is None when nothing was emitted."""

    tag_name: str
    index: int | None
    suppresses: bool


def is_definition_tag(tag_name: str) -> bool:
    """Return True if ``tag_name`` opens a non-visual definition block."""
    if "." in tag_name:
        member = tag_name.rsplit(".", 1)[1]
        return member in DEFINITION_TAGS or member.endswith("Template")
    return tag_name in DEFINITION_TAGS


def parse_axaml(text: str, *, strict: bool = False) -> list[ElementNode]:
    """Parse AXAML ``text`` into an ordered forest of element nodes.

    Args:
        text: Full document text.
        strict: If True, raise ``MismatchedTagError`` when a closing tag name
            differs from the element it closes instead of popping regardless.

    Returns:
        Root elements in document order.
    """
    return _Scanner(text, strict=strict).run()


class _Scanner:
    def __init__(self, text: str, *, strict: bool) -> None:
        self.lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
        self.strict = strict
        self.arena: list[_Draft] = []
        self.roots: list[int] = []
        self.stack: list[_Frame] = []
        self.suppressed = 0

    def run(self) -> list[ElementNode]:
        line_no, column = 0, 0
        while line_no < len(self.lines):
            lt = self.lines[line_no].find("<", column)
            if lt == -1:
                line_no, column = line_no + 1, 0
                continue
            line_no, column = self._consume(line_no, lt)

        self._close_remaining()
        forest = self._build()
        logger.debug(
            "Scanned AXAML document",
            extra={"lines": len(self.lines), "elements": len(self.arena), "roots": len(forest)},
        )
        return forest

    def _consume(self, line_no: int, lt: int) -> tuple[int, int]:
        """Handle the markup starting at ``lt`` and return the next cursor."""
        line = self.lines[line_no]
        if line.startswith("<!--", lt):
            return self._skip_past(line_no, lt + 4, "-->")
        if line.startswith("<![CDATA[", lt):
            return self._skip_past(line_no, lt + 9, "]]>")
        if line.startswith("<?", lt) or line.startswith("<!", lt):
            return self._skip_past(line_no, lt + 2, ">")

        closing = _CLOSE_TAG_RE.match(line, lt)
        if closing:
            self._close(closing.group(1), Position(line_no, closing.end()))
            return line_no, closing.end()
        if line.startswith("</", lt):
            return line_no, lt + 2

        name = _TAG_NAME_RE.match(line, lt + 1)
        if not name:
            return line_no, lt + 1
        return self._open(line_no, lt, name.group(0), name.end())

    def _skip_past(self, line_no: int, column: int, terminator: str) -> tuple[int, int]:
        while line_no < len(self.lines):
            found = self.lines[line_no].find(terminator, column)
            if found != -1:
                return line_no, found + len(terminator)
            line_no, column = line_no + 1, 0
        return len(self.lines), 0

    def _find_tag_end(self, line_no: int, column: int) -> tuple[int, int] | None:
        """Locate the ``>`` closing a start tag; quoted values may contain ``>``."""
        quote: str | None = None
        while line_no < len(self.lines):
            line = self.lines[line_no]
            for index in range(column, len(line)):
                char = line[index]
                if quote:
                    if char == quote:
                        quote = None
                elif char in _QUOTES:
                    quote = char
                elif char == ">":
                    return line_no, index + 1
            line_no, column = line_no + 1, 0
        return None

    def _open(self, line_no: int, lt: int, tag_name: str, name_end: int) -> tuple[int, int]:
        tag_end = self._find_tag_end(line_no, name_end)
        if tag_end is None:
            # Unterminated: the tag swallows the rest of the document.
            end_line = len(self.lines) - 1
            end_column = len(self.lines[end_line])
        else:
            end_line, end_column = tag_end

        if end_line == line_no:
            content = self.lines[line_no][lt:end_column]
        else:
            parts = [self.lines[line_no][lt:]]
            parts.extend(self.lines[index].strip() for index in range(line_no + 1, end_line))
            parts.append(self.lines[end_line][:end_column].strip())
            content = " ".join(parts)

        self_closing = tag_end is not None and content.endswith("/>")
        suppresses = is_definition_tag(tag_name)
        index: int | None = None
        if "." not in tag_name and not suppresses and not self.suppressed:
            raw = content[len(tag_name) + 1 :]
            if self_closing:
                raw = raw[:-2]
            elif tag_end is not None:
                raw = raw[:-1]
            index = self._emit(
                tag_name,
                raw.strip(),
                Position(line_no, lt),
                Position(end_line, end_column),
            )

        if not self_closing:
            self.stack.append(_Frame(tag_name=tag_name, index=index, suppresses=suppresses))
            if suppresses:
                self.suppressed += 1

        if tag_end is None:
            return len(self.lines), 0
        return end_line, end_column

    def _emit(self, tag_name: str, raw_attributes: str, start: Position, end: Position) -> int:
        attributes = parse_attributes(raw_attributes)
        draft = _Draft(
            tag_name=tag_name,
            attributes=attributes,
            label=element_label(tag_name, attributes),
            kind=symbol_kind(tag_name),
            start=start,
            end=end,
        )
        index = len(self.arena)
        self.arena.append(draft)

        parent = self._current_parent()
        if parent is None:
            self.roots.append(index)
        else:
            self.arena[parent].children.append(index)
        return index

    def _current_parent(self) -> int | None:
        # Property elements sit on the stack without a node; skip past them.
        for frame in reversed(self.stack):
            if frame.index is not None:
                return frame.index
        return None

    def _close(self, tag_name: str, end: Position) -> None:
        if not self.stack:
            logger.debug("Ignoring unmatched closing tag", extra={"tag": tag_name, "line": end.line})
            return

        frame = self.stack.pop()
        if frame.tag_name != tag_name:
            if self.strict:
                raise MismatchedTagError(frame.tag_name, tag_name, end.line)
            logger.debug(
                "Closing tag does not match open element",
                extra={"expected": frame.tag_name, "found": tag_name, "line": end.line},
            )
        if frame.suppresses:
            self.suppressed -= 1
        if frame.index is not None:
            self.arena[frame.index].end = end

    def _close_remaining(self) -> None:
        last_line = len(self.lines) - 1
        document_end = Position(last_line, len(self.lines[last_line]))
        for frame in self.stack:
            if frame.index is not None:
                self.arena[frame.index].end = document_end
        self.stack.clear()
        self.suppressed = 0

    def _build(self) -> list[ElementNode]:
        # Children are always created after their parent, so a reverse sweep
        # sees every child before the node that owns it.
        built: list[ElementNode | None] = [None] * len(self.arena)
        for index in range(len(self.arena) - 1, -1, -1):
            draft = self.arena[index]
            built[index] = ElementNode(
                tag_name=draft.tag_name,
                attributes=draft.attributes,
                label=draft.label,
                kind=draft.kind,
                span=Span(start=draft.start, end=draft.end),
                children=tuple(built[child] for child in draft.children),
            )
        return [built[index] for index in self.roots]
