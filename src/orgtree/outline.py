"""Read-only helpers for walking and querying a parsed document tree."""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import groupby
from typing import Iterator, Sequence

from orgtree.parser import derive_title
from orgtree.schemas import Node, Token, TokenKind

_METADATA_KEYS = {
    TokenKind.TITLE: "title",
    TokenKind.AUTHOR: "author",
    TokenKind.CREATION_DATE: "date",
}
_STATE_KINDS = (TokenKind.TODO, TokenKind.DONE)


@dataclass(frozen=True)
class ClockEntry:
    """One ``CLOCK:`` line from a logbook block."""

    start: str
    end: str | None
    duration: str | None
    line: int

    @property
    def duration_minutes(self) -> int:
        """Clocked time in minutes, 0 when the entry is still running."""
        if not self.duration:
            return 0
        hours, _, minutes = self.duration.partition(":")
        return int(hours) * 60 + int(minutes)


def normalize_title(title: str) -> str:
    """Normalize heading titles for comparison."""
    return re.sub(r"\s+", " ", title.strip().casefold())


def iter_lines(tokens: Sequence[Token]) -> Iterator[list[Token]]:
    """Group tokens into source lines."""
    for _, line in groupby(tokens, key=lambda token: token.line):
        yield list(line)


def heading_line(node: Node) -> list[Token]:
    """Tokens of the line that introduced ``node``; empty for the root."""
    if not node.content or node.content[0].kind is not TokenKind.HEADING:
        return []
    return next(iter_lines(node.content))


def heading_title(node: Node) -> str:
    return derive_title(heading_line(node))


def heading_state(node: Node) -> str | None:
    """``TODO`` or ``DONE`` when the heading line carries a state keyword."""
    for token in heading_line(node):
        if token.kind in _STATE_KINDS:
            return token.lexeme
    return None


def iter_headings(node: Node, depth: int = 1) -> Iterator[tuple[int, str, Node]]:
    """Depth-first walk yielding ``(depth, key, child)`` in source order."""
    for key, child in node.children.items():
        yield depth, key, child
        yield from iter_headings(child, depth + 1)


def count_headings(node: Node) -> int:
    """Count all heading nodes below ``node``."""
    return sum(1 for _ in iter_headings(node))


def tree_depth(node: Node) -> int:
    """Levels of headings below ``node``; 0 for a node without children."""
    deepest = 0
    pending = [(0, node)]
    while pending:
        depth, current = pending.pop()
        deepest = max(deepest, depth)
        pending.extend((depth + 1, child) for child in current.children.values())
    return deepest


def find_heading(node: Node, *titles: str) -> Node | None:
    """Follow a path of heading titles down from ``node``.

    Titles are compared after normalization, so ``find_heading(root, "projects")``
    matches a child stored as ``"Projects"``.
    """
    current = node
    for title in titles:
        wanted = normalize_title(title)
        current = next(
            (child for key, child in current.children.items() if normalize_title(key) == wanted),
            None,
        )
        if current is None:
            return None
    return current


def extract_metadata(root: Node) -> dict[str, str | None]:
    """Extract ``#+TITLE:``, ``#+AUTHOR:`` and ``#+DATE:`` values from the root.

    Returns:
        Dictionary with keys ``title``, ``author`` and ``date``; the first
        occurrence of each keyword wins, missing ones are None.
    """
    metadata: dict[str, str | None] = dict.fromkeys(_METADATA_KEYS.values())
    for line in iter_lines(root.content):
        key = _METADATA_KEYS.get(line[0].kind)
        if key and metadata[key] is None:
            metadata[key] = " ".join(token.lexeme for token in line[1:]) or None
    return metadata


def clock_entries(node: Node) -> list[ClockEntry]:
    """Collect the clock lines found inside ``node``'s own logbook blocks."""
    entries: list[ClockEntry] = []
    in_logbook = False

    for line in iter_lines(node.content):
        first = line[0].kind
        if first is TokenKind.LOGBOOK:
            in_logbook = True
        elif first is TokenKind.LOGBOOK_END:
            in_logbook = False
        elif first is TokenKind.CLOCK and in_logbook:
            timestamps = [token.lexeme for token in line if token.kind is TokenKind.TIMESTAMP]
            durations = [token.lexeme for token in line if token.kind is TokenKind.DURATION]
            if not timestamps:
                continue
            entries.append(
                ClockEntry(
                    start=timestamps[0],
                    end=timestamps[1] if len(timestamps) > 1 else None,
                    duration=durations[-1] if durations else None,
                    line=line[0].line,
                )
            )

    return entries


def clocked_minutes(node: Node) -> int:
    """Total clocked minutes for ``node`` and all of its descendants."""
    own = sum(entry.duration_minutes for entry in clock_entries(node))
    return own + sum(clocked_minutes(child) for child in node.children.values())
