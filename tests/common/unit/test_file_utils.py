"""Unit tests for file and YAML helpers."""

from datetime import date
from pathlib import Path

import pytest

from common.shared.file_utils import file_exists, must_read_file, try_read_file
from common.shared.yaml_utils import load_yaml, parse_yaml_scalar


class TestFileExists:
    """Test file existence checks."""

    def test_existing_file(self, tmp_path: Path):
        """Test that a regular file exists."""
        path = tmp_path / "a.txt"
        path.write_text("a")
        assert file_exists(path)
        assert file_exists(str(path))

    def test_missing_file(self, tmp_path: Path):
        """Test that a missing file doesn't exist."""
        assert not file_exists(tmp_path / "missing.txt")

    def test_directory(self, tmp_path: Path):
        """Test that directories don't count as files."""
        assert not file_exists(tmp_path)

    def test_empty_path(self):
        """Test that an empty path doesn't exist."""
        assert not file_exists("")


class TestReadFile:
    """Test file reading helpers."""

    def test_try_read_file(self, tmp_path: Path):
        """Test reading an existing file."""
        path = tmp_path / "a.txt"
        path.write_bytes(b"content")
        assert try_read_file(path) == b"content"

    def test_try_read_relative(self, tmp_path: Path, monkeypatch):
        """Test that relative paths resolve against the working directory."""
        (tmp_path / "a.txt").write_bytes(b"content")
        monkeypatch.chdir(tmp_path)
        assert try_read_file("a.txt") == b"content"

    def test_try_read_missing(self, tmp_path: Path):
        """Test that errors give empty bytes."""
        assert try_read_file(tmp_path / "missing.txt") == b""
        assert try_read_file(tmp_path) == b""
        assert try_read_file("") == b""

    def test_must_read_file(self, tmp_path: Path):
        """Test reading a required file."""
        path = tmp_path / "a.txt"
        path.write_bytes(b"content")
        assert must_read_file(path) == b"content"

    def test_must_read_empty_path(self):
        """Test that an empty path raises ValueError."""
        with pytest.raises(ValueError, match="empty file path"):
            must_read_file("")

    def test_must_read_missing(self, tmp_path: Path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            must_read_file(tmp_path / "missing.txt")


class TestLoadYaml:
    """Test YAML loading."""

    def test_load(self, tmp_path: Path):
        """Test loading a mapping."""
        path = tmp_path / "a.yaml"
        path.write_text("a:\n  b: [1, 2]\n")
        assert load_yaml(path) == {"a": {"b": [1, 2]}}

    def test_empty(self, tmp_path: Path):
        """Test that an empty document loads as None."""
        path = tmp_path / "a.yaml"
        path.write_text("")
        assert load_yaml(path) is None

    def test_missing(self, tmp_path: Path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_yaml(tmp_path / "missing.yaml")


class TestParseYamlScalar:
    """Test YAML scalar typing of raw strings."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("true", True),
            ("2008", 2008),
            ("0.5", 0.5),
            ("null", None),
            ("text", "text"),
            ("", ""),
            ("a: b", "a: b"),
            ("[1, 2]", "[1, 2]"),
            ("[unclosed", "[unclosed"),
            ("x #1", "x #1"),
            ("#fff", "#fff"),
            ("...", "..."),
            ("---", "---"),
            ("2020-01-01", date(2020, 1, 1)),
        ],
    )
    def test_scalar(self, raw, expected):
        """Test typed scalars and raw fallbacks."""
        assert parse_yaml_scalar(raw) == expected
