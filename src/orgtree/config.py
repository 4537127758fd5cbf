"""Local configuration for orgtree."""

from __future__ import annotations

import os
from enum import Enum

from orgtree.exceptions import ConfigError


class DuplicateTitles(str, Enum):
    """How sibling headings with the same derived title are stored."""

    RENAME = "rename"
    OVERWRITE = "overwrite"


def parse_duplicate_titles(value: str) -> DuplicateTitles:
    """Convert a configuration string into a ``DuplicateTitles`` policy.

    Raises:
        ConfigError: If ``value`` names no known policy.
    """
    try:
        return DuplicateTitles(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(policy.value for policy in DuplicateTitles)
        raise ConfigError(f"Unknown duplicate title policy {value!r} (expected one of: {choices})") from exc


DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_DUPLICATE_TITLES = DuplicateTitles.RENAME.value
DEFAULT_MAX_INPUT_KB = 1024

ORGTREE_LOG_LEVEL = os.getenv("ORGTREE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
ORGTREE_DUPLICATE_TITLES = parse_duplicate_titles(os.getenv("ORGTREE_DUPLICATE_TITLES", DEFAULT_DUPLICATE_TITLES))
# Upper bound on documents accepted by the HTTP server.
ORGTREE_MAX_INPUT_KB = int(os.getenv("ORGTREE_MAX_INPUT_KB", str(DEFAULT_MAX_INPUT_KB)))
# Deepest heading nesting accepted by the JSON and text renderings.
MAX_TREE_DEPTH = 100
