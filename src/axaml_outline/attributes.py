"""Extract attribute key/value pairs from a raw tag substring."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
# name="value" or name='value'; the value runs to the matching quote character.
_ATTRIBUTE_RE = re.compile(
    r"""([A-Za-z][A-Za-z0-9.:_-]*)\s*=\s*(?:"([^"]*)"|'([^']*)')"""
)


def parse_attributes(raw: str | None) -> dict[str, str]:
    """Parse ``raw`` into an attribute mapping.

    Whitespace runs (including newlines from multi-line tags) are collapsed to
    single spaces first. Values are taken verbatim, without escape handling.
    A repeated key keeps its last value. Never raises; unparseable input yields
    an empty mapping.
    """
    if not raw:
        return {}
    cleaned = _WHITESPACE_RE.sub(" ", raw).strip()

    attributes: dict[str, str] = {}
    for match in _ATTRIBUTE_RE.finditer(cleaned):
        key = match.group(1)
        value = match.group(2) if match.group(2) is not None else match.group(3)
        attributes[key] = value
    return attributes
