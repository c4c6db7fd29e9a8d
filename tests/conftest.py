"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src directory to Python path for tests
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))
tests_path = Path(__file__).parent
sys.path.insert(0, str(tests_path))


@pytest.fixture
def console() -> Console:
    """Create a Rich console with string output."""
    return Console(file=io.StringIO(), force_terminal=False, width=160)
