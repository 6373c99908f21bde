"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def isolate_runner_env(monkeypatch):
    """Keep a real Actions runner's INPUT_* and GITHUB_OUTPUT out of the tests."""
    for key in list(os.environ):
        if key.startswith("INPUT_") or key == "GITHUB_OUTPUT":
            monkeypatch.delenv(key, raising=False)
