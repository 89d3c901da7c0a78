"""Entry point used by hosts (editor glue, CLI, HTTP API) to query outlines."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from axaml_outline.cache_utils import ParseCache, cache_key_for
from axaml_outline.config import (
    AXAML_OUTLINE_CACHE_ENABLED,
    AXAML_OUTLINE_SHOW_LINE_NUMBERS,
    AXAML_OUTLINE_STRICT_TAGS,
)
from axaml_outline.detection import DocumentFilter, is_axaml_document
from axaml_outline.outline import describe_element, find_element_at, flatten_elements, to_outline
from axaml_outline.scanner import parse_axaml
from axaml_outline.schemas import ElementNode, FlatSymbol, OutlineSymbol, Position, TextDocument

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]
T = TypeVar("T")


def _log_notification(message: str) -> None:
    logger.error(message)


class OutlineProvider:
    """Parses documents on demand and exposes the outline views.

    Every public method is an error boundary: an unexpected exception while
    parsing is logged, reported through ``notify`` and turned into an empty
    result. Documents rejected by ``document_filter`` are never parsed.

    Args:
        document_filter: Predicate deciding whether a document is AXAML.
        show_line_numbers: Append the 1-based start line to outline details.
        use_cache: Keep the last parse result in a single-slot cache.
        strict: Raise on mismatched closing tags instead of popping regardless.
        notify: Callback receiving user-visible error messages.
    """

    def __init__(
        self,
        *,
        document_filter: DocumentFilter = is_axaml_document,
        show_line_numbers: bool | None = None,
        use_cache: bool | None = None,
        strict: bool | None = None,
        notify: Notifier | None = None,
    ) -> None:
        self.document_filter = document_filter
        self._show_line_numbers = (
            AXAML_OUTLINE_SHOW_LINE_NUMBERS if show_line_numbers is None else show_line_numbers
        )
        self.use_cache = AXAML_OUTLINE_CACHE_ENABLED if use_cache is None else use_cache
        self.strict = AXAML_OUTLINE_STRICT_TAGS if strict is None else strict
        self.notify = notify or _log_notification
        self.cache = ParseCache()

    @property
    def show_line_numbers(self) -> bool:
        return self._show_line_numbers

    @show_line_numbers.setter
    def show_line_numbers(self, value: bool) -> None:
        if value != self._show_line_numbers:
            self.cache.invalidate()
        self._show_line_numbers = value

    def parse(self, document: TextDocument) -> list[ElementNode]:
        """Return the element forest for ``document``."""
        return self._guarded(document, "parse", [], lambda: self._forest(document))

    def provide_outline(
        self,
        document: TextDocument,
        is_cancelled: Callable[[], bool] | None = None,
    ) -> list[OutlineSymbol]:
        """Return the outline symbols for the navigation panel.

        Cancellation is only checked before parsing starts.
        """
        if is_cancelled is not None and is_cancelled():
            logger.debug("Outline request cancelled", extra={"uri": document.uri})
            return []
        return self._guarded(document, "outline", [], lambda: self._outline(document))

    def list_symbols(self, document: TextDocument) -> list[FlatSymbol]:
        """Return the depth-first flat list for pick-by-name navigation."""
        return self._guarded(
            document, "symbols", [], lambda: flatten_elements(self._forest(document))
        )

    def element_at(self, document: TextDocument, position: Position) -> ElementNode | None:
        """Return the deepest element containing ``position``, if any."""
        return self._guarded(
            document, "element_at", None, lambda: find_element_at(self._forest(document), position)
        )

    def describe_element_at(self, document: TextDocument, position: Position) -> str | None:
        """Return a one-line description of the element under ``position``."""
        node = self.element_at(document, position)
        if node is None:
            return None
        return describe_element(node)

    def _guarded(self, document: TextDocument, operation: str, default: T, build: Callable[[], T]) -> T:
        if not self.document_filter(document):
            logger.debug("Skipping non-AXAML document", extra={"uri": document.uri, "operation": operation})
            return default
        try:
            return build()
        except Exception as exc:
            logger.exception(
                "AXAML parsing failed",
                extra={"uri": document.uri, "version": document.version, "operation": operation},
            )
            self.notify(f"Error parsing AXAML: {exc}")
            return default

    def _forest(self, document: TextDocument) -> list[ElementNode]:
        key = cache_key_for(document, self._show_line_numbers)
        if self.use_cache and self.cache.lookup(key):
            return self.cache.forest

        forest = parse_axaml(document.text, strict=self.strict)
        if self.use_cache:
            self.cache.store(key, forest)
        return forest

    def _outline(self, document: TextDocument) -> list[OutlineSymbol]:
        forest = self._forest(document)
        if self.use_cache and self.cache.outline is not None:
            return self.cache.outline

        symbols = to_outline(forest, show_line_numbers=self._show_line_numbers)
        if self.use_cache:
            self.cache.outline = symbols
        logger.debug(
            "Generated outline",
            extra={"uri": document.uri, "roots": len(symbols), "show_line_numbers": self._show_line_numbers},
        )
        return symbols
