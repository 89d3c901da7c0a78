"""Document snapshot model."""

from __future__ import annotations

from pydantic import BaseModel


class TextDocument(BaseModel):
    """Immutable text snapshot handed in by the host.

    Attributes:
        uri: Document identity (file path or editor URI).
        language_id: Language identifier declared by the host, if any.
        version: Content version; bumps on every edit.
        text: Full document text.
    """

    uri: str = "untitled"
    language_id: str | None = None
    version: int = 0
    text: str
