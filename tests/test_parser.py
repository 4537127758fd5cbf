"""Tests for the parser module."""

from __future__ import annotations

import sys

import pytest
from pydantic import ValidationError

from orgtree.config import DuplicateTitles
from orgtree.parser import derive_title, parse
from orgtree.scanner import scan
from orgtree.schemas import Node, Token, TokenKind


def _tree(text: str, **kwargs) -> Node:
    return parse(scan(text), **kwargs)


def _shape(node: Node) -> dict:
    """Reduce a node to nested dicts of child titles."""
    return {title: _shape(child) for title, child in node.children.items()}


def _lexemes(node: Node) -> list[str]:
    return [token.lexeme for token in node.content]


def _max_depth(node: Node) -> int:
    return 1 + max((_max_depth(child) for child in node.children.values()), default=0)


class TestHeadingHierarchy:
    """Nesting rebuilt from heading markers."""

    def test_nested_heading(self) -> None:
        root = _tree("** TODO Futurice \n *** brainstorming")

        assert _shape(root) == {"Futurice": {"brainstorming": {}}}
        futurice = root.children["Futurice"]
        assert futurice.content[0] == Token(kind=TokenKind.HEADING, lexeme="**", line=1)
        brainstorming = futurice.children["brainstorming"]
        assert brainstorming.content[0].lexeme == "***"

    def test_siblings_close_at_same_depth_marker(self) -> None:
        root = _tree("* a\n** b\n** c\n* d")

        assert _shape(root) == {"a": {"b": {}, "c": {}}, "d": {}}

    def test_children_keep_source_order(self) -> None:
        root = _tree("* zeta\n* alpha\n* mid")

        assert list(root.children) == ["zeta", "alpha", "mid"]

    def test_deeper_heading_skipping_levels(self) -> None:
        root = _tree("* a\n*** b\n** c\n*** d")

        assert _shape(root) == {"a": {"b": {"c": {}}, "d": {}}}

    def test_shallower_marker_inside_body_is_absorbed(self) -> None:
        root = _tree("** a\n* b\n** c")

        assert _shape(root) == {"a": {"b": {}}, "c": {}}

    def test_same_length_marker_on_heading_line_closes_scope(self) -> None:
        root = _tree("** a ** b")

        assert _shape(root) == {"a": {}, "b": {}}

    def test_scope_closes_exactly_at_equal_marker(self) -> None:
        root = _tree("** a\nbody\n*** deep\n** b\ntail")

        assert _lexemes(root.children["a"]) == ["**", "a", "body"]
        assert _lexemes(root.children["a"].children["deep"]) == ["***", "deep"]
        assert _lexemes(root.children["b"]) == ["**", "b", "tail"]

    def test_depth_bounded_by_distinct_marker_lengths(self) -> None:
        text = "* a\n** b\n*** c\n** d\n* e\n*** f\n** g\n* h"
        root = _tree(text)
        lengths = {token.lexeme for token in scan(text) if token.kind is TokenKind.HEADING}

        assert _max_depth(root) - 1 <= len(lengths)

    def test_nesting_deeper_than_the_recursion_limit(self) -> None:
        levels = sys.getrecursionlimit() + 200
        root = _tree("\n".join("*" * depth + " h" for depth in range(1, levels + 1)))

        node, depth = root, 0
        while node.children:
            assert list(node.children) == ["h"]
            node, depth = node.children["h"], depth + 1
        assert depth == levels
        assert _lexemes(node) == ["*" * levels, "h"]


class TestContent:
    """Tokens owned directly by a node."""

    def test_root_holds_lines_before_first_heading(self) -> None:
        root = _tree("#+TITLE: LifeRepo\n* a")

        assert _lexemes(root) == ["#+TITLE:", "LifeRepo"]

    def test_eof_is_not_content(self) -> None:
        root = _tree("text\n* a")

        assert all(token.kind is not TokenKind.EOF for token in root.content)
        assert all(token.kind is not TokenKind.EOF for token in root.children["a"].content)

    def test_heading_content_is_line_then_body(self) -> None:
        root = _tree("* a *b*\nfirst\nsecond line\n** child")

        assert _lexemes(root.children["a"]) == ["*", "a", "*b*", "first", "second", "line"]

    def test_marker_after_text_on_same_line_is_content(self) -> None:
        root = _tree("note *** here")

        assert root.children == {}
        assert _lexemes(root) == ["note", "***", "here"]

    def test_empty_stream(self) -> None:
        root = parse(scan(""))

        assert root == Node()

    def test_stream_without_eof(self) -> None:
        tokens = [
            Token(kind=TokenKind.HEADING, lexeme="*", line=1),
            Token(kind=TokenKind.STRING, lexeme="a", line=1),
        ]

        assert _shape(parse(tokens)) == {"a": {}}

    def test_every_token_lands_in_exactly_one_node(self, life_repo: str) -> None:
        tokens = scan(life_repo)
        root = parse(tokens)

        collected: list[Token] = []

        def collect(node: Node) -> None:
            collected.extend(node.content)
            for child in node.children.values():
                collect(child)

        collect(root)
        assert sorted(collected, key=lambda t: (t.line, t.lexeme)) == sorted(
            tokens[:-1], key=lambda t: (t.line, t.lexeme)
        )


class TestTitles:
    """Derived titles used as children keys."""

    def test_title_concatenates_strings_without_separator(self) -> None:
        root = _tree("* big red dog")

        assert list(root.children) == ["bigreddog"]

    def test_title_skips_non_string_tokens(self) -> None:
        root = _tree("** DONE /thesis/ draft <2019-09-25 Wed>")

        assert list(root.children) == ["draft"]

    def test_title_ignores_body_text(self) -> None:
        root = _tree("* a\nbody text")

        assert list(root.children) == ["a"]

    def test_derive_title(self) -> None:
        tokens = scan("** TODO Futurice _x_ now")[:-1]

        assert derive_title(tokens) == "Futuricenow"

    def test_duplicate_titles_renamed_by_default(self) -> None:
        root = _tree("* a\nfirst\n* a\nsecond\n* a\nthird")

        assert list(root.children) == ["a", "a (2)", "a (3)"]
        assert _lexemes(root.children["a (2)"]) == ["*", "a", "second"]

    def test_duplicate_titles_overwrite(self) -> None:
        root = _tree("* a\nfirst\n* a\nsecond", duplicate_titles=DuplicateTitles.OVERWRITE)

        assert list(root.children) == ["a"]
        assert _lexemes(root.children["a"]) == ["*", "a", "second"]

    @pytest.mark.parametrize("policy", list(DuplicateTitles))
    def test_distinct_titles_unaffected_by_policy(self, policy: DuplicateTitles) -> None:
        root = _tree("* a\n* b", duplicate_titles=policy)

        assert list(root.children) == ["a", "b"]


class TestSerialization:
    """Tree values are plain ordered records."""

    def test_model_dump_shape(self) -> None:
        root = _tree("* a\ntext")

        assert root.model_dump(mode="json") == {
            "content": [],
            "children": {
                "a": {
                    "content": [
                        {"kind": "heading", "lexeme": "*", "line": 1},
                        {"kind": "string", "lexeme": "a", "line": 1},
                        {"kind": "string", "lexeme": "text", "line": 2},
                    ],
                    "children": {},
                }
            },
        }

    def test_nodes_are_frozen(self) -> None:
        root = _tree("* a")

        with pytest.raises(ValidationError):
            root.content = []
