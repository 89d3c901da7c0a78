"""Pydantic models for the outline API."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field, field_validator

from axaml_outline.schemas import ElementNode, FlatSymbol, OutlineSymbol, TextDocument


class DocumentRequest(BaseModel):
    """Document payload shared by every endpoint.

    Attributes
    ----------
    text : str
        Full document text.
    uri : str
        Document identity, used for file-type detection and caching.
    language_id : str | None
        Language identifier declared by the caller.
    version : int
        Content version of the document.
    detect : bool
        Only parse documents that look like AXAML.

    """

    text: str = Field(..., description="Full document text")
    uri: str = Field(default="untitled.axaml", description="Document URI or path")
    language_id: str | None = Field(default=None, description="Declared language id")
    version: int = Field(default=0, ge=0, description="Document content version")
    detect: bool = Field(default=False, description="Skip documents that do not look like AXAML")

    @field_validator("uri")
    @classmethod
    def validate_uri(cls, v: str) -> str:
        """Validate that ``uri`` is not empty."""
        if not v.strip():
            err = "uri cannot be empty"
            raise ValueError(err)
        return v.strip()

    def to_document(self) -> TextDocument:
        """Build the text snapshot handed to the provider."""
        return TextDocument(uri=self.uri, language_id=self.language_id, version=self.version, text=self.text)


class OutlineRequest(DocumentRequest):
    """Request model for the /api/outline endpoint."""

    show_line_numbers: bool = Field(default=False, description="Append start lines to symbol details")


class ElementAtRequest(DocumentRequest):
    """Request model for the /api/element-at endpoint.

    Attributes
    ----------
    line : int
        Zero-based line of the cursor.
    column : int
        Zero-based column of the cursor.

    """

    line: int = Field(..., ge=0, description="Zero-based line")
    column: int = Field(..., ge=0, description="Zero-based column")


class OutlineResponse(BaseModel):
    """Success response for /api/outline."""

    uri: str
    symbols: list[OutlineSymbol] = Field(default_factory=list)
    element_count: int = Field(default=0, description="Total number of elements in the outline")


class SymbolListResponse(BaseModel):
    """Success response for /api/symbols."""

    uri: str
    symbols: list[FlatSymbol] = Field(default_factory=list)


class ElementAtResponse(BaseModel):
    """Success response for /api/element-at; ``element`` is None when nothing contains the position."""

    uri: str
    element: ElementNode | None = None
    description: str | None = None


class ErrorResponse(BaseModel):
    """Error response model.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.
    status_code : int
        HTTP status to answer with; not part of the body.

    """

    error: str = Field(..., description="Error message")
    status_code: int = Field(default=500, exclude=True)


OutlineResult = Union[OutlineResponse, ErrorResponse]
SymbolListResult = Union[SymbolListResponse, ErrorResponse]
ElementAtResult = Union[ElementAtResponse, ErrorResponse]
