"""Format a parsed document into summary and outline text."""

from __future__ import annotations

from orgtree.outline import clocked_minutes, count_headings, extract_metadata, heading_state
from orgtree.schemas import Node, ParseResult


def format_document(root: Node) -> ParseResult:
    """Create summary and heading outline for a parsed document."""
    outline = "Headings:\n" + _create_headings_tree(root)

    metadata = extract_metadata(root)
    summary_lines = []
    if metadata["title"]:
        summary_lines.append(f"Title: {metadata['title']}")
    if metadata["author"]:
        summary_lines.append(f"Author: {metadata['author']}")
    if metadata["date"]:
        summary_lines.append(f"Date: {metadata['date']}")
    summary_lines.append(f"Headings: {count_headings(root)}")

    minutes = clocked_minutes(root)
    if minutes:
        summary_lines.append(f"Clocked: {format_minutes(minutes)}")

    return ParseResult(summary="\n".join(summary_lines), outline=outline, tree=root)


def format_minutes(minutes: int) -> str:
    """Render a minute count as ``H:MM``."""
    return f"{minutes // 60}:{minutes % 60:02d}"


def _create_headings_tree(node: Node, indent: int = 0) -> str:
    lines: list[str] = []
    for title, child in node.children.items():
        state = heading_state(child)
        label = f"{state} {title}" if state else title
        lines.append(" " * (indent * 4) + label)
        if child.children:
            lines.append(_create_headings_tree(child, indent + 1))
    return "\n".join(lines)
