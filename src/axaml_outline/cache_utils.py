"""Single-slot cache for the most recently parsed document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from axaml_outline.schemas import ElementNode, OutlineSymbol, TextDocument


class CacheKey(NamedTuple):
    """Identity of a parse result.

    The text hash guards hosts that never bump ``version``.
    """

    uri: str
    version: int
    text_hash: int
    show_line_numbers: bool


def cache_key_for(document: TextDocument, show_line_numbers: bool) -> CacheKey:
    """Build the cache key for ``document`` rendered with the given flag."""
    return CacheKey(
        uri=document.uri,
        version=document.version,
        text_hash=hash(document.text),
        show_line_numbers=show_line_numbers,
    )


@dataclass
class ParseCache:
    """Holds the last parsed forest and its rendered outline.

    Any lookup with a different key empties the slot.
    """

    key: CacheKey | None = None
    forest: list[ElementNode] | None = None
    outline: list[OutlineSymbol] | None = None
    hits: int = 0
    misses: int = 0

    def lookup(self, key: CacheKey) -> bool:
        """Return True if the slot holds results for ``key``; reset it otherwise."""
        if self.key == key and self.forest is not None:
            self.hits += 1
            return True
        self.misses += 1
        self.invalidate()
        self.key = key
        return False

    def store(self, key: CacheKey, forest: list[ElementNode]) -> None:
        if self.key != key:
            self.invalidate()
            self.key = key
        self.forest = forest

    def invalidate(self) -> None:
        self.key = None
        self.forest = None
        self.outline = None
