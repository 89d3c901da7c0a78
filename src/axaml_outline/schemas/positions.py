"""Source position and range models."""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, model_validator


class Position(NamedTuple):
    """A zero-based (line, column) location; tuples compare lexically."""

    line: int
    column: int


class Span(BaseModel):
    """A half-open source range from ``start`` up to, but excluding, ``end``."""

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    @model_validator(mode="after")
    def check_order(self) -> Span:
        if self.end < self.start:
            raise ValueError(f"Span end {tuple(self.end)} precedes start {tuple(self.start)}")
        return self

    def contains(self, position: Position) -> bool:
        """Return True if ``position`` falls inside the span."""
        return self.start <= position < self.end

    def encloses(self, other: Span) -> bool:
        """Return True if ``other`` lies entirely within this span."""
        return self.start <= other.start and other.end <= self.end
