"""Single entry point from document text to tree."""

from __future__ import annotations

from orgtree.config import MAX_TREE_DEPTH, DuplicateTitles
from orgtree.exceptions import TreeTooDeepError
from orgtree.outline import tree_depth
from orgtree.output_formatter import format_document
from orgtree.parser import parse
from orgtree.scanner import scan
from orgtree.schemas import Node, ParseResult


def parse_document(text: str, *, duplicate_titles: DuplicateTitles | None = None) -> Node:
    """Scan and parse a whole document.

    Raises:
        UnrecognizedCharacterError: If the text contains a character that
            starts no valid token. Nothing is returned in that case.
    """
    return parse(scan(text), duplicate_titles=duplicate_titles)


def parse_document_json(
    text: str,
    *,
    indent: int | None = None,
    duplicate_titles: DuplicateTitles | None = None,
) -> str:
    """Parse a document and serialize the tree to JSON.

    Raises:
        UnrecognizedCharacterError: As for ``parse_document``.
        TreeTooDeepError: If headings nest deeper than ``MAX_TREE_DEPTH``.
    """
    root = check_tree_depth(parse_document(text, duplicate_titles=duplicate_titles))
    return root.model_dump_json(indent=indent)


def build_result(text: str, *, duplicate_titles: DuplicateTitles | None = None) -> ParseResult:
    """Parse a document and attach its summary and heading outline."""
    return format_document(check_tree_depth(parse_document(text, duplicate_titles=duplicate_titles)))


def check_tree_depth(root: Node, limit: int = MAX_TREE_DEPTH) -> Node:
    """Return ``root`` unchanged if it can be rendered, else raise ``TreeTooDeepError``."""
    depth = tree_depth(root)
    if depth > limit:
        raise TreeTooDeepError(depth, limit)
    return root
