"""Pydantic models for the parse API."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field, field_validator

from orgtree.config import DuplicateTitles
from orgtree.schemas import Node, Token
from server.server_config import MAX_INPUT_SIZE, MAX_INPUT_SIZE_KB


def _check_size(text: str) -> str:
    if len(text) > MAX_INPUT_SIZE:
        err = f"text exceeds the {MAX_INPUT_SIZE_KB} KB limit"
        raise ValueError(err)
    return text


class ParseRequest(BaseModel):
    """Request model for the /api/parse endpoint.

    Attributes
    ----------
    text : str
        The full outline document.
    include_tokens : bool
        Also return the flat token stream.
    duplicate_titles : DuplicateTitles | None
        Policy for sibling headings sharing a title; server default when omitted.

    """

    text: str = Field(..., description="Outline document to parse")
    include_tokens: bool = Field(default=False, description="Return the token stream as well")
    duplicate_titles: DuplicateTitles | None = Field(
        default=None,
        description="Policy for sibling headings with identical titles",
    )

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Validate that ``text`` fits the configured size limit."""
        return _check_size(v)


class ScanRequest(BaseModel):
    """Request model for the /api/scan endpoint."""

    text: str = Field(..., description="Outline document to scan")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Validate that ``text`` fits the configured size limit."""
        return _check_size(v)


class ParseSuccessResponse(BaseModel):
    """Success response model for the /api/parse endpoint.

    Attributes
    ----------
    summary : str
        Document metadata and heading counts.
    outline : str
        Indented heading outline.
    tree : Node
        The parsed document tree.
    tokens : list[Token] | None
        Token stream, when requested.

    """

    summary: str = Field(..., description="Document summary")
    outline: str = Field(..., description="Indented heading outline")
    tree: Node = Field(..., description="Parsed document tree")
    tokens: list[Token] | None = Field(default=None, description="Token stream")


class ScanSuccessResponse(BaseModel):
    """Success response model for the /api/scan endpoint."""

    tokens: list[Token] = Field(..., description="Token stream")


class ParseErrorResponse(BaseModel):
    """Error response model for the parse and scan endpoints.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.
    line : int | None
        Line of the offending character, when known.
    character : str | None
        The offending character, when known.

    """

    error: str = Field(..., description="Error message")
    line: int | None = Field(default=None, description="Line of the offending character")
    character: str | None = Field(default=None, description="Offending character")


# Union type for API responses
ParseResponse = Union[ParseSuccessResponse, ParseErrorResponse]
ScanResponse = Union[ScanSuccessResponse, ParseErrorResponse]
