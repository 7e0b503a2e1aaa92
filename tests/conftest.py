"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from taskline.config import Config, ConfigModel  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Give every test a fresh default configuration under tmp_path."""
    Config._instance = ConfigModel(data_dir=str(tmp_path / "taskline"))
    yield Config._instance
    Config._instance = None
