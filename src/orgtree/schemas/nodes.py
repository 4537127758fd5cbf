"""Document tree models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from orgtree.schemas.tokens import Token


class Node(BaseModel):
    """One scope of the document: the root, or the body of a heading.

    ``content`` holds the tokens owned directly by the scope (the heading line
    first, then plain body lines). ``children`` maps each nested heading's
    derived title to its node, in source order.
    """

    model_config = ConfigDict(frozen=True)

    content: list[Token] = Field(default_factory=list)
    children: dict[str, "Node"] = Field(default_factory=dict)
