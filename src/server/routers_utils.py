"""Shared helpers for the API routers."""

from __future__ import annotations

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from orgtree.config import DuplicateTitles
from server.document_processor import process_document, process_scan
from server.models import ParseErrorResponse, ParseSuccessResponse, ScanSuccessResponse

COMMON_PARSE_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_200_OK: {"model": ParseSuccessResponse, "description": "Successful parse"},
    status.HTTP_400_BAD_REQUEST: {
        "model": ParseErrorResponse,
        "description": "Unrecognized character in input or headings nested too deeply",
    },
}

COMMON_SCAN_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_200_OK: {"model": ScanSuccessResponse, "description": "Successful scan"},
    status.HTTP_400_BAD_REQUEST: {"model": ParseErrorResponse, "description": "Unrecognized character in input"},
}


async def _perform_parse(
    *,
    text: str,
    include_tokens: bool,
    duplicate_titles: DuplicateTitles | None,
) -> JSONResponse:
    """Run a parse and map the outcome onto an HTTP response."""
    result = await process_document(text, include_tokens=include_tokens, duplicate_titles=duplicate_titles)
    return _to_json_response(result)


async def _perform_scan(*, text: str) -> JSONResponse:
    """Run a scan and map the outcome onto an HTTP response."""
    result = await process_scan(text)
    return _to_json_response(result)


def _to_json_response(result: ParseSuccessResponse | ScanSuccessResponse | ParseErrorResponse) -> JSONResponse:
    if isinstance(result, ParseErrorResponse):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=result.model_dump())
    return JSONResponse(status_code=status.HTTP_200_OK, content=result.model_dump(mode="json", exclude_none=True))
