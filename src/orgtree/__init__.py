"""orgtree: parse outline documents into heading trees."""

from orgtree.config import DuplicateTitles
from orgtree.document import build_result, parse_document, parse_document_json
from orgtree.exceptions import ConfigError, OrgtreeError, ScanError, TreeTooDeepError, UnrecognizedCharacterError
from orgtree.parser import parse
from orgtree.scanner import scan
from orgtree.schemas import Node, ParseResult, Token, TokenKind

__all__ = [
    "ConfigError",
    "DuplicateTitles",
    "Node",
    "OrgtreeError",
    "ParseResult",
    "ScanError",
    "Token",
    "TokenKind",
    "TreeTooDeepError",
    "UnrecognizedCharacterError",
    "build_result",
    "parse",
    "parse_document",
    "parse_document_json",
    "scan",
]
