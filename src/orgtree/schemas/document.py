"""Parse output model."""

from __future__ import annotations

from pydantic import BaseModel

from orgtree.schemas.nodes import Node


class ParseResult(BaseModel):
    """Final parse output."""

    summary: str
    outline: str
    tree: Node
