"""Pytest configuration for the f32round test suite."""

import importlib
import sys
from pathlib import Path

import pytest

# Add src directory to path for package imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def reload_package(monkeypatch):
    """Re-run import-time backend selection; restores the real binding afterwards."""
    import f32round
    import f32round.config

    def reload():
        importlib.reload(f32round.config)
        return importlib.reload(f32round)

    yield reload
    monkeypatch.undo()
    reload()
