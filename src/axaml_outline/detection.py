"""Predicates deciding whether a document should be treated as AXAML.

The parser never decides this itself; hosts pass one of these (or their own
callable) to ``OutlineProvider``.
"""

from __future__ import annotations

from typing import Callable

from axaml_outline.config import AVALONIA_NAMESPACE, AXAML_EXTENSION, AXAML_LANGUAGE_ID
from axaml_outline.schemas import TextDocument

DocumentFilter = Callable[[TextDocument], bool]


def by_extension(*extensions: str) -> DocumentFilter:
    """Match documents whose URI ends with one of ``extensions`` (case-insensitive)."""
    suffixes = tuple(ext.lower() for ext in extensions)

    def _matches(document: TextDocument) -> bool:
        return document.uri.lower().endswith(suffixes)

    return _matches


def by_language(*language_ids: str) -> DocumentFilter:
    """Match documents whose declared language id is one of ``language_ids``."""
    wanted = set(language_ids)

    def _matches(document: TextDocument) -> bool:
        return document.language_id in wanted

    return _matches


def by_content(marker: str) -> DocumentFilter:
    """Match documents whose text contains ``marker``."""

    def _matches(document: TextDocument) -> bool:
        return marker in document.text

    return _matches


def any_of(*filters: DocumentFilter) -> DocumentFilter:
    """Combine filters; a document matches if any of them does."""

    def _matches(document: TextDocument) -> bool:
        return any(check(document) for check in filters)

    return _matches


is_axaml_document: DocumentFilter = any_of(
    by_extension(AXAML_EXTENSION),
    by_language(AXAML_LANGUAGE_ID),
    by_content(AVALONIA_NAMESPACE),
)


def accept_all(document: TextDocument) -> bool:  # noqa: ARG001
    """Filter that treats every document as AXAML."""
    return True
