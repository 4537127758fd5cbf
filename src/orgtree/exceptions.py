"""Custom exceptions for orgtree."""

from __future__ import annotations


class OrgtreeError(Exception):
    """Base exception for orgtree operations."""


class ScanError(OrgtreeError):
    """Error while turning raw text into tokens."""


class UnrecognizedCharacterError(ScanError):
    """A character that starts no valid token was found.

    Attributes:
        line: 1-based line number of the offending character.
        character: The offending character itself.
    """

    def __init__(self, line: int, character: str) -> None:
        self.line = line
        self.character = character
        super().__init__(f"line {line}, unexpected character: {character!r}")


class ConfigError(OrgtreeError):
    """Invalid configuration value."""


class TreeTooDeepError(OrgtreeError):
    """A parsed tree nests deeper than it can be serialized.

    Attributes:
        depth: Heading depth of the tree.
        limit: Deepest nesting accepted for serialization.
    """

    def __init__(self, depth: int, limit: int) -> None:
        self.depth = depth
        self.limit = limit
        super().__init__(f"heading nesting depth {depth} exceeds the limit of {limit}")
