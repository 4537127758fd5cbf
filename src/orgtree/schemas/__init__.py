"""Shared schemas for orgtree."""

from orgtree.schemas.document import ParseResult
from orgtree.schemas.nodes import Node
from orgtree.schemas.tokens import Token, TokenKind

__all__ = ["Node", "ParseResult", "Token", "TokenKind"]
