"""Command line entry point: ``python -m orgtree``."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from orgtree.config import DuplicateTitles
from orgtree.document import build_result, parse_document_json
from orgtree.exceptions import OrgtreeError
from orgtree.scanner import scan
from orgtree.utils.logging_config import get_logger

logger = get_logger("orgtree.cli")


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        text = load_text(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Reading document failed", file=args.file, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1

    duplicate_titles = DuplicateTitles(args.duplicate_titles) if args.duplicate_titles else None

    try:
        if args.tokens:
            tokens = scan(text)
            output = json.dumps([token.model_dump(mode="json") for token in tokens], indent=args.indent)
        elif args.outline:
            result = build_result(text, duplicate_titles=duplicate_titles)
            output = result.summary + "\n\n" + result.outline
        else:
            output = parse_document_json(text, indent=args.indent, duplicate_titles=duplicate_titles)
    except OrgtreeError as exc:
        logger.error("Parsing failed", file=args.file, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="orgtree", description="Parse an outline document into a heading tree.")
    parser.add_argument("file", nargs="?", default="-", help="Document to parse ('-' reads stdin)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--tokens", action="store_true", help="Print the token stream instead of the tree")
    mode.add_argument("--outline", action="store_true", help="Print a summary and the heading outline")
    parser.add_argument("--indent", type=int, default=None, help="JSON indentation")
    parser.add_argument(
        "--duplicate-titles",
        choices=[policy.value for policy in DuplicateTitles],
        default=None,
        help="How sibling headings with the same title are stored",
    )
    return parser


def load_text(file: str) -> str:
    if file == "-":
        return sys.stdin.read()

    path = Path(file)
    if not path.is_file():
        raise FileNotFoundError(f"Document not found: {path}")
    return path.read_text(encoding="utf-8")


if __name__ == "__main__":
    sys.exit(main())
