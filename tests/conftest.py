"""Shared pytest fixtures for all tests."""

import tempfile
from pathlib import Path

import pytest
import yaml


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_yaml(temp_dir):
    """Write a mapping as YAML file inside temp_dir and return its path."""

    def _write(name: str, content) -> Path:
        path = temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.dump(content))
        return path

    return _write
