"""Process a document by scanning and parsing it into API responses."""

from __future__ import annotations

import asyncio

from orgtree.config import DuplicateTitles
from orgtree.document import check_tree_depth
from orgtree.exceptions import OrgtreeError, UnrecognizedCharacterError
from orgtree.output_formatter import format_document
from orgtree.parser import parse
from orgtree.scanner import scan
from orgtree.schemas import ParseResult, Token
from orgtree.utils.logging_config import get_logger
from server.models import (
    ParseErrorResponse,
    ParseResponse,
    ParseSuccessResponse,
    ScanResponse,
    ScanSuccessResponse,
)

# Initialize logger for this module
logger = get_logger(__name__)


async def process_document(
    text: str,
    *,
    include_tokens: bool = False,
    duplicate_titles: DuplicateTitles | None = None,
) -> ParseResponse:
    """Parse a document off the event loop and wrap the outcome."""
    try:
        result, tokens = await asyncio.to_thread(_parse_with_tokens, text, duplicate_titles)
    except OrgtreeError as exc:
        _log_error(text, exc)
        return _error_response(exc)

    logger.info(
        "Document parsed",
        input_chars=len(text),
        top_level_headings=len(result.tree.children),
    )
    return ParseSuccessResponse(
        summary=result.summary,
        outline=result.outline,
        tree=result.tree,
        tokens=tokens if include_tokens else None,
    )


async def process_scan(text: str) -> ScanResponse:
    """Scan a document off the event loop and wrap the outcome."""
    try:
        tokens = await asyncio.to_thread(scan, text)
    except OrgtreeError as exc:
        _log_error(text, exc)
        return _error_response(exc)

    logger.info("Document scanned", input_chars=len(text), tokens=len(tokens))
    return ScanSuccessResponse(tokens=tokens)


def _parse_with_tokens(text: str, duplicate_titles: DuplicateTitles | None) -> tuple[ParseResult, list[Token]]:
    tokens = scan(text)
    root = check_tree_depth(parse(tokens, duplicate_titles=duplicate_titles))
    return format_document(root), tokens


def _error_response(exc: OrgtreeError) -> ParseErrorResponse:
    if isinstance(exc, UnrecognizedCharacterError):
        return ParseErrorResponse(error=str(exc), line=exc.line, character=exc.character)
    return ParseErrorResponse(error=str(exc))


def _log_error(text: str, exc: Exception) -> None:
    logger.warning("Document processing failed", input_chars=len(text), error=str(exc))
