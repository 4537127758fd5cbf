"""Parse and scan endpoints for the API."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from server.models import ParseRequest, ScanRequest
from server.routers_utils import COMMON_PARSE_RESPONSES, COMMON_SCAN_RESPONSES, _perform_parse, _perform_scan

router = APIRouter()


@router.post("/api/parse", responses=COMMON_PARSE_RESPONSES)
async def api_parse(
    request: Request,  # noqa: ARG001 (unused-function-argument) # pylint: disable=unused-argument
    parse_request: ParseRequest,
) -> JSONResponse:
    """Parse an outline document and return its heading tree.

    **This endpoint scans and parses the submitted text,** then returns the
    document tree together with a short summary and an indented outline.

    **Parameters**

    - **parse_request** (`ParseRequest`): Pydantic model containing the document and options

    **Returns**

    - **JSONResponse**: Success response with the tree, or a **400** error naming the
      line and character that could not be scanned

    """
    return await _perform_parse(
        text=parse_request.text,
        include_tokens=parse_request.include_tokens,
        duplicate_titles=parse_request.duplicate_titles,
    )


@router.post("/api/scan", responses=COMMON_SCAN_RESPONSES)
async def api_scan(
    request: Request,  # noqa: ARG001 (unused-function-argument) # pylint: disable=unused-argument
    scan_request: ScanRequest,
) -> JSONResponse:
    """Scan an outline document and return its flat token stream.

    **Returns**

    - **JSONResponse**: Success response with the tokens, or a **400** error

    """
    return await _perform_scan(text=scan_request.text)
