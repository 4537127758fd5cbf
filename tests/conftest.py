"""Test setup for orgtree."""

from __future__ import annotations

import sys
from pathlib import Path
from textwrap import dedent

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running the HTTP server tests selectively:
        pytest -m server       # run only server tests
        pytest -m "not server" # skip server tests
    """
    config.addinivalue_line(
        "markers",
        "server: marks tests that exercise the FastAPI application",
    )


@pytest.fixture
def life_repo() -> str:
    """A small but complete outline document."""
    return dedent(
        """\
        #+TITLE: LifeRepo
        #+AUTHOR: Jane
        #+DATE: <2019-09-25 Wed>
        * projects
        ** TODO Futurice
        SCHEDULED: <2019-09-26 Thu>
        :LOGBOOK:
        CLOCK: [2019-09-21 Sat 17:11]--[2019-09-21 Sat 18:24] =>  1:13
        CLOCK: [2019-09-21 Sat 16:26]--[2019-09-21 Sat 16:58] =>  0:32
        :END:
        *** brainstorming
        read [[https://orgmode.org/worg/dev/org-syntax.html][org-mode syntax]]
        ** DONE /thesis/ draft
        * _Agenda_ notes
        """
    )
