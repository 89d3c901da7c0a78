"""Outline endpoints for the API."""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from outline_server.models import (
    DocumentRequest,
    ElementAtRequest,
    ElementAtResponse,
    ErrorResponse,
    OutlineRequest,
    OutlineResponse,
    SymbolListResponse,
)
from outline_server.outline_processor import dump_result, process_element_at, process_outline, process_symbols

router = APIRouter()

COMMON_RESPONSES: dict = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Document rejected"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Parsing failed"},
}


def _to_response(result: BaseModel) -> JSONResponse:
    status_code, body = dump_result(result)
    return JSONResponse(status_code=status_code, content=body)


@router.post("/api/outline", responses={**COMMON_RESPONSES, 200: {"model": OutlineResponse}})
async def api_outline(
    request: Request,  # noqa: ARG001 (unused-function-argument) # pylint: disable=unused-argument
    outline_request: OutlineRequest,
) -> JSONResponse:
    """Return the hierarchical outline of an AXAML document.

    **Parameters**

    - **outline_request** (`OutlineRequest`): document text, identity and display options

    **Returns**

    - **JSONResponse**: outline symbols with ranges and selection anchors, or an error body
    """
    return _to_response(process_outline(outline_request))


@router.post("/api/symbols", responses={**COMMON_RESPONSES, 200: {"model": SymbolListResponse}})
async def api_symbols(
    request: Request,  # noqa: ARG001 (unused-function-argument) # pylint: disable=unused-argument
    document_request: DocumentRequest,
) -> JSONResponse:
    """Return the flattened depth-first symbol list used for pick-by-name navigation."""
    return _to_response(process_symbols(document_request))


@router.post("/api/element-at", responses={**COMMON_RESPONSES, 200: {"model": ElementAtResponse}})
async def api_element_at(
    request: Request,  # noqa: ARG001 (unused-function-argument) # pylint: disable=unused-argument
    element_request: ElementAtRequest,
) -> JSONResponse:
    """Describe the innermost element containing a zero-based ``line``/``column``."""
    return _to_response(process_element_at(element_request))
