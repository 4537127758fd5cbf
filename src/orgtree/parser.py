"""Rebuild the heading hierarchy from a flat token stream."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from orgtree.config import ORGTREE_DUPLICATE_TITLES, DuplicateTitles
from orgtree.schemas import Node, Token, TokenKind

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """A node still collecting tokens up to ``end``."""

    end: int
    title: str = ""
    content: list[Token] = field(default_factory=list)
    children: dict[str, Node] = field(default_factory=dict)


def parse(tokens: Sequence[Token], *, duplicate_titles: DuplicateTitles | None = None) -> Node:
    """Build the document tree for a scanned token stream.

    Never fails: irregular nesting produces a differently shaped tree. A
    heading's scope ends only at the next heading marker of the same length,
    so shallower markers inside it become its descendants.

    Open headings are kept on an explicit stack, so nesting depth is not
    limited by the interpreter's recursion limit.

    Args:
        tokens: Scanner output. Anything from the first ``EOF`` token on is ignored.
        duplicate_titles: Policy for sibling headings sharing a title.
            Defaults to ``ORGTREE_DUPLICATE_TITLES``.

    Returns:
        The root node. It has no heading line of its own.
    """
    policy = duplicate_titles or ORGTREE_DUPLICATE_TITLES
    tokens = _strip_eof(tokens)

    stack = [_Frame(end=len(tokens))]
    index = 0
    while True:
        frame = stack[-1]

        if index >= frame.end:
            stack.pop()
            node = Node(content=frame.content, children=frame.children)
            if not stack:
                logger.debug("Parsed %d tokens into %d top-level headings", len(tokens), len(node.children))
                return node
            _insert_child(stack[-1].children, frame.title, node, policy)
            continue

        if tokens[index].kind is TokenKind.HEADING:
            end = _scope_end(tokens, index, frame.end)
            split = _line_end(tokens, index, end)
            heading = list(tokens[index:split])
            stack.append(_Frame(end=end, title=derive_title(heading), content=heading))
            index = split
        else:
            end = _line_end(tokens, index, frame.end)
            frame.content.extend(tokens[index:end])
            index = end


def derive_title(tokens: Sequence[Token]) -> str:
    """Concatenate the plain-string lexemes of a heading line."""
    return "".join(token.lexeme for token in tokens if token.kind is TokenKind.STRING)


def _strip_eof(tokens: Sequence[Token]) -> Sequence[Token]:
    for index, token in enumerate(tokens):
        if token.kind is TokenKind.EOF:
            return tokens[:index]
    return tokens


def _scope_end(tokens: Sequence[Token], start: int, limit: int) -> int:
    """Index of the next heading marker as long as ``tokens[start]``, or ``limit``."""
    depth = len(tokens[start].lexeme)
    for index in range(start + 1, limit):
        token = tokens[index]
        if token.kind is TokenKind.HEADING and len(token.lexeme) == depth:
            return index
    return limit


def _line_end(tokens: Sequence[Token], start: int, limit: int) -> int:
    line = tokens[start].line
    index = start
    while index < limit and tokens[index].line == line:
        index += 1
    return index


def _insert_child(children: dict[str, Node], title: str, child: Node, policy: DuplicateTitles) -> None:
    if title not in children or policy is DuplicateTitles.OVERWRITE:
        children[title] = child
        return

    ordinal = 2
    key = f"{title} ({ordinal})"
    while key in children:
        ordinal += 1
        key = f"{title} ({ordinal})"
    logger.debug("Duplicate heading title %r stored as %r", title, key)
    children[key] = child
