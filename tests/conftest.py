"""Pytest configuration and fixtures for Tempotime tests."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so tempotime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from tempotime.config import reset_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch: pytest.MonkeyPatch):
    """Start every test from default settings, ignoring TEMPOTIME_* variables."""
    for name in list(os.environ):
        if name.startswith("TEMPOTIME_"):
            monkeypatch.delenv(name)
    reset_settings()
    yield
    reset_settings()
