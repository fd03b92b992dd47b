"""Test setup for daemonmd."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


SAMPLE_DOCUMENT = """\
[ABOUT]
I build small tools.

[MISSION] @public
Make security boring.

[FAVORITE_BOOKS] @public
- Dune
- Neuromancer
@restricted
- A Book I Am Embarrassed About

[TELOS] @restricted
- P1: Too much noise
- M1: Reduce it
notes about goals
- G1: Ship weekly

[PROJECTS]
Technical:
- daemonmd
Creative:
- Short films
@private
Personal:
- Renovate the kitchen

[CURRENT_LOCATION] @private
Somewhere quiet
"""


@pytest.fixture
def sample_document() -> str:
    """A valid document exercising every level and section shape."""
    return SAMPLE_DOCUMENT
