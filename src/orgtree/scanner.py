"""Turn outline text into a flat, line-annotated token stream."""

from __future__ import annotations

import logging
import re
from typing import Callable, Final

from orgtree.exceptions import UnrecognizedCharacterError
from orgtree.schemas import Token, TokenKind

logger = logging.getLogger(__name__)

KEYWORDS: Final[dict[str, TokenKind]] = {
    "#+TITLE:": TokenKind.TITLE,
    "#+AUTHOR:": TokenKind.AUTHOR,
    "#+DATE:": TokenKind.CREATION_DATE,
    ":LOGBOOK:": TokenKind.LOGBOOK,
    ":END:": TokenKind.LOGBOOK_END,
    "CLOCK:": TokenKind.CLOCK,
    "SCHEDULED:": TokenKind.SCHEDULED,
    "DEADLINE:": TokenKind.DEADLINE,
    "TODO": TokenKind.TODO,
    "DONE": TokenKind.DONE,
}

# Punctuation that may appear inside a word alongside letters.
WORD_SYMBOLS: Final[frozenset[str]] = frozenset(":#+*_-.,/=>~^?!'()")

_SKIPPED_WHITESPACE: Final[frozenset[str]] = frozenset(" \r\t")

_EMPHASIS_KINDS: Final[dict[str, TokenKind]] = {
    "*": TokenKind.BOLD,
    "/": TokenKind.ITALIC,
    "_": TokenKind.UNDERLINE,
    "+": TokenKind.STRIKETHROUGH,
}
_EMPHASIS_PATTERNS: Final[dict[str, re.Pattern[str]]] = {
    marker: re.compile(rf"{re.escape(marker)}.*{re.escape(marker)}") for marker in _EMPHASIS_KINDS
}

_HEADING_RE = re.compile(r"\*+")
_DATE_PREFIX_RE = re.compile(r"<\d{4}-\d{2}-\d{2}")
_TIMESTAMP_RE = re.compile(r"\[\d{4}-\d{2}-\d{2} \w{3} \d{2}:\d{2}\]")
_LINK_RE = re.compile(r"\[\[.*[\[\]|]{2}.*\]\]")
_DURATION_RE = re.compile(r"\d+:\d+")


def scan(text: str) -> list[Token]:
    """Scan outline text into tokens.

    The returned list always ends with a single ``EOF`` token carrying an
    empty lexeme and the number of the last line.

    Raises:
        UnrecognizedCharacterError: If a character starts no valid token.
    """
    tokens = Scanner(text).scan_tokens()
    logger.debug("Scanned %d tokens over %d lines", len(tokens), tokens[-1].line)
    return tokens


def is_word_char(char: str) -> bool:
    """Return True for letters and the punctuation allowed inside words."""
    return char.isalpha() or char in WORD_SYMBOLS


class Scanner:
    """Single-use, left-to-right scanner over one source string."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1

    def scan_tokens(self) -> list[Token]:
        while not self._is_at_end():
            self._start = self._current
            self._scan_token()

        self._tokens.append(Token(kind=TokenKind.EOF, lexeme="", line=self._line))
        return self._tokens

    def _scan_token(self) -> None:
        char = self._advance()

        if char in _EMPHASIS_KINDS:
            self._emphasis(char)
        elif char == "<":
            self._angle_bracket()
        elif char == "[":
            self._square_bracket()
        elif "0" <= char <= "9":
            self._number()
        elif char in _SKIPPED_WHITESPACE:
            pass
        elif char == "\n":
            self._line += 1
        elif is_word_char(char):
            self._identifier()
        else:
            raise UnrecognizedCharacterError(self._line, char)

    def _emphasis(self, marker: str) -> None:
        """Scan a run opened by ``*``, ``/``, ``_`` or ``+``.

        A run made only of asterisks is a heading marker; a run that opens and
        closes with its marker is an emphasis span; anything else is a word.
        """
        self._consume_while(lambda c: is_word_char(c) or c.isalnum())
        text = self._lexeme()

        if marker == "*" and _HEADING_RE.fullmatch(text):
            kind = TokenKind.HEADING
        elif len(text) > 1 and _EMPHASIS_PATTERNS[marker].fullmatch(text):
            kind = _EMPHASIS_KINDS[marker]
        else:
            kind = TokenKind.STRING

        self._add_token(kind)

    def _angle_bracket(self) -> None:
        self._consume_while(lambda c: is_word_char(c) or c.isalnum())

        if not _DATE_PREFIX_RE.fullmatch(self._lexeme()):
            self._add_token(TokenKind.STRING)
            return

        # Dates run to the closing bracket but never across a line break.
        self._consume_while(lambda c: c not in (">", "\n"))
        if self._peek() != ">":
            self._add_token(TokenKind.STRING)
            return

        self._advance()
        self._add_token(TokenKind.DATE)

    def _square_bracket(self) -> None:
        depth = 1
        while depth and self._peek() not in ("", "\n"):
            char = self._advance()
            if char == "[":
                depth += 1
            elif char == "]":
                depth -= 1

        text = self._lexeme()
        if depth:
            kind = TokenKind.STRING
        elif _TIMESTAMP_RE.fullmatch(text):
            kind = TokenKind.TIMESTAMP
        elif _LINK_RE.fullmatch(text):
            kind = TokenKind.LINK
        else:
            kind = TokenKind.STRING

        self._add_token(kind)

    def _number(self) -> None:
        self._consume_while(lambda c: c.isdigit() or c == ":")

        if _DURATION_RE.fullmatch(self._lexeme()):
            self._add_token(TokenKind.DURATION)
        else:
            self._add_token(TokenKind.STRING)

    def _identifier(self) -> None:
        self._consume_while(is_word_char)
        self._add_token(KEYWORDS.get(self._lexeme(), TokenKind.STRING))

    def _consume_while(self, predicate: Callable[[str], bool]) -> None:
        while not self._is_at_end() and predicate(self._peek()):
            self._current += 1

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        self._current += 1
        return self._source[self._current - 1]

    def _peek(self) -> str:
        if self._is_at_end():
            return ""
        return self._source[self._current]

    def _lexeme(self) -> str:
        return self._source[self._start : self._current]

    def _add_token(self, kind: TokenKind) -> None:
        self._tokens.append(Token(kind=kind, lexeme=self._lexeme(), line=self._line))
