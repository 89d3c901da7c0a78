"""Run outline requests through the provider and shape API responses."""

from __future__ import annotations

from pydantic import BaseModel

from axaml_outline.detection import accept_all, is_axaml_document
from axaml_outline.exceptions import DocumentTooLargeError
from axaml_outline.outline import count_elements, describe_element
from axaml_outline.provider import OutlineProvider
from axaml_outline.schemas import Position
from axaml_outline.utils.logging_config import get_logger
from outline_server.models import (
    DocumentRequest,
    ElementAtRequest,
    ElementAtResponse,
    ElementAtResult,
    ErrorResponse,
    OutlineRequest,
    OutlineResponse,
    OutlineResult,
    SymbolListResponse,
    SymbolListResult,
)
from outline_server.server_config import MAX_DOCUMENT_SIZE_KB

# Initialize logger for this module
logger = get_logger(__name__)


def _check_size(request: DocumentRequest) -> None:
    """Reject documents above ``MAX_DOCUMENT_SIZE_KB``.

    Parameters
    ----------
    request : DocumentRequest
        The incoming request.

    Raises
    ------
    DocumentTooLargeError
        If the encoded document exceeds the limit.

    """
    size_kb = len(request.text.encode("utf-8")) / 1024
    if size_kb > MAX_DOCUMENT_SIZE_KB:
        msg = f"Document is {size_kb:.0f} KB, limit is {MAX_DOCUMENT_SIZE_KB} KB"
        raise DocumentTooLargeError(msg)


def _provider_for(request: DocumentRequest, errors: list[str], *, show_line_numbers: bool = False) -> OutlineProvider:
    return OutlineProvider(
        document_filter=is_axaml_document if request.detect else accept_all,
        show_line_numbers=show_line_numbers,
        use_cache=True,
        notify=errors.append,
    )


def process_outline(request: OutlineRequest) -> OutlineResult:
    """Build the outline for a document."""
    try:
        _check_size(request)
    except DocumentTooLargeError as exc:
        logger.warning("Rejected outline request", extra={"uri": request.uri, "error": str(exc)})
        return ErrorResponse(error=str(exc), status_code=400)

    errors: list[str] = []
    provider = _provider_for(request, errors, show_line_numbers=request.show_line_numbers)
    document = request.to_document()
    symbols = provider.provide_outline(document)
    if errors:
        _print_error(request.uri, "outline", errors[0])
        return ErrorResponse(error=errors[0])

    element_count = count_elements(provider.parse(document)) if symbols else 0
    logger.info(
        "Outline generated",
        extra={"uri": request.uri, "roots": len(symbols), "elements": element_count},
    )
    return OutlineResponse(uri=request.uri, symbols=symbols, element_count=element_count)


def process_symbols(request: DocumentRequest) -> SymbolListResult:
    """Build the flat symbol list for a document."""
    try:
        _check_size(request)
    except DocumentTooLargeError as exc:
        logger.warning("Rejected symbols request", extra={"uri": request.uri, "error": str(exc)})
        return ErrorResponse(error=str(exc), status_code=400)

    errors: list[str] = []
    symbols = _provider_for(request, errors).list_symbols(request.to_document())
    if errors:
        _print_error(request.uri, "symbols", errors[0])
        return ErrorResponse(error=errors[0])
    return SymbolListResponse(uri=request.uri, symbols=symbols)


def process_element_at(request: ElementAtRequest) -> ElementAtResult:
    """Find the innermost element under a position."""
    try:
        _check_size(request)
    except DocumentTooLargeError as exc:
        logger.warning("Rejected element-at request", extra={"uri": request.uri, "error": str(exc)})
        return ErrorResponse(error=str(exc), status_code=400)

    errors: list[str] = []
    provider = _provider_for(request, errors)
    node = provider.element_at(request.to_document(), Position(request.line, request.column))
    if errors:
        _print_error(request.uri, "element-at", errors[0])
        return ErrorResponse(error=errors[0])
    return ElementAtResponse(
        uri=request.uri,
        element=node,
        description=describe_element(node) if node else None,
    )


def dump_result(result: BaseModel) -> tuple[int, dict]:
    """Serialize a processor result into a status code and a JSON-ready body.

    Parameters
    ----------
    result : BaseModel
        A response model or an ``ErrorResponse``.

    Returns
    -------
    tuple[int, dict]
        The HTTP status code and the body. A result that cannot be
        serialized becomes a 500 error body.

    """
    if isinstance(result, ErrorResponse):
        return result.status_code, result.model_dump()
    # Pydantic reports trees past its nesting limit as a ValueError subclass.
    try:
        return 200, result.model_dump(mode="json")
    except (ValueError, RecursionError) as exc:
        message = f"Error serializing result: {exc}"
        _print_error(getattr(result, "uri", "untitled"), "serialize", message)
        error = ErrorResponse(error=message)
        return error.status_code, error.model_dump()


def _print_error(uri: str, operation: str, message: str) -> None:
    """Log a failed request.

    Parameters
    ----------
    uri : str
        The document the request was about.
    operation : str
        Which view was requested.
    message : str
        The user-visible error message.

    """
    logger.error(
        "Outline request failed",
        extra={"uri": uri, "operation": operation, "error": message},
    )
