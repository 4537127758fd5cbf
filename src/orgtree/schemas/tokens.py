"""Token models produced by the scanner."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TokenKind(str, Enum):
    """Closed set of lexical classes."""

    HEADING = "heading"
    STRING = "string"

    TITLE = "title"
    AUTHOR = "author"
    CREATION_DATE = "creation_date"
    LOGBOOK = "logbook"
    LOGBOOK_END = "logbook_end"
    CLOCK = "clock"
    SCHEDULED = "scheduled"
    DEADLINE = "deadline"
    TODO = "todo"
    DONE = "done"

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    LINK = "link"

    DATE = "date"
    TIMESTAMP = "timestamp"
    DURATION = "duration"

    EOF = "eof"


class Token(BaseModel):
    """A single lexeme with its kind and the line it starts on."""

    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    lexeme: str
    line: int = Field(..., ge=1)
