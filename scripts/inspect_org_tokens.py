"""Inspect the token stream of an outline document to aid debugging."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

import httpx

from orgtree.scanner import scan
from orgtree.schemas import Token, TokenKind


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Inspect token kinds and heading depths of a document.")
    parser.add_argument("--url", help="URL to fetch (e.g. a raw .org file)")
    parser.add_argument("--file", help="Local document path")
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in TokenKind],
        help="Only list lexemes of this token kind",
    )
    args = parser.parse_args(argv)

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    text = load_text(url=args.url, file_path=args.file)
    tokens = scan(text)
    kinds, depths, lexemes = collect_stats(tokens)

    print("Kinds:")
    for name, count in kinds.most_common():
        print(f"{name}: {count}")

    print("\nHeading depths:")
    for depth, count in sorted(depths.items()):
        print(f"{depth}: {count}")

    if args.kind:
        print(f"\nLexemes ({args.kind}):")
        for lexeme, count in lexemes.get(args.kind, Counter()).most_common():
            print(f"{lexeme}: {count}")


def load_text(*, url: str | None, file_path: str | None) -> str:
    if url:
        response = httpx.get(url, follow_redirects=True, timeout=15.0)
        response.raise_for_status()
        return response.text

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"Document not found: {path}")
    return path.read_text(encoding="utf-8")


def collect_stats(tokens: list[Token]) -> tuple[Counter, Counter, dict[str, Counter]]:
    kinds = Counter()
    depths = Counter()
    lexemes: dict[str, Counter] = {}

    for token in tokens:
        kinds[token.kind.value] += 1
        if token.kind is TokenKind.HEADING:
            depths[len(token.lexeme)] += 1
        lexemes.setdefault(token.kind.value, Counter())[token.lexeme] += 1
    return kinds, depths, lexemes


if __name__ == "__main__":
    main()
