"""Test setup for treetextconf."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def nested_config() -> str:
    """Four nested groups, depth 4 at the innermost."""
    return "a:\nb:\nc:\nd:\n:\n:\n:\n:"
