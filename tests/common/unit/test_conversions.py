"""Unit tests for JSON conversion helpers."""

import json
from dataclasses import dataclass

from pydantic import BaseModel

from common.shared.conversions import (
    convert_json_to_map,
    convert_struct_to_bytes,
    convert_struct_to_fields,
    convert_struct_to_json,
    convert_struct_to_json_pretty,
    convert_struct_to_map,
)


@dataclass
class Info:
    name: str
    port: int


class Model(BaseModel):
    name: str
    ratio: float = 0.5


class TestConvertJsonToMap:
    """Test parsing JSON objects."""

    def test_object(self):
        """Test a valid JSON object."""
        assert convert_json_to_map('{"a": 1}') == {"a": 1}

    def test_short_or_empty(self):
        """Test that inputs shorter than two characters give an empty dict."""
        assert convert_json_to_map("") == {}
        assert convert_json_to_map("{") == {}

    def test_invalid(self):
        """Test that invalid JSON gives an empty dict."""
        assert convert_json_to_map("{not json}") == {}

    def test_not_object(self):
        """Test that a JSON array gives an empty dict."""
        assert convert_json_to_map("[1, 2]") == {}


class TestConvertStruct:
    """Test serialising structs."""

    def test_dataclass_to_json(self):
        """Test compact JSON for a dataclass."""
        assert convert_struct_to_json(Info(name="svc", port=80)) == '{"name":"svc","port":80}'

    def test_model_to_bytes(self):
        """Test compact JSON bytes for a pydantic model."""
        assert convert_struct_to_bytes(Model(name="m")) == b'{"name":"m","ratio":0.5}'

    def test_list_of_dataclasses(self):
        """Test that lists are converted item by item."""
        assert convert_struct_to_json([Info(name="a", port=1)]) == '[{"name":"a","port":1}]'

    def test_none(self):
        """Test that None gives empty results."""
        assert convert_struct_to_bytes(None) == b""
        assert convert_struct_to_json(None) == ""
        assert convert_struct_to_json_pretty(None) == ""
        assert convert_struct_to_map(None) == {}
        assert convert_struct_to_fields(None) == []

    def test_unserialisable(self):
        """Test that unserialisable values never raise."""
        value = {"obj": object()}
        assert convert_struct_to_bytes(value) == b""
        assert convert_struct_to_json(value) == ""
        assert convert_struct_to_json_pretty(value) == "{}"
        assert convert_struct_to_map(value) == {}

    def test_pretty(self):
        """Test indented JSON."""
        pretty = convert_struct_to_json_pretty(Info(name="svc", port=80))
        assert "\n" in pretty
        assert json.loads(pretty) == {"name": "svc", "port": 80}

    def test_to_map(self):
        """Test conversion to a JSON-compatible dict."""
        assert convert_struct_to_map(Model(name="m")) == {"name": "m", "ratio": 0.5}

    def test_to_map_not_object(self):
        """Test that non-object values give an empty dict."""
        assert convert_struct_to_map([1, 2]) == {}

    def test_to_fields(self):
        """Test conversion to key-value pairs."""
        assert convert_struct_to_fields(Info(name="svc", port=80)) == [("name", "svc"), ("port", 80)]
