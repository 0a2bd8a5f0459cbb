"""
Unit tests for best-effort coercion.
"""

from datetime import date, datetime, time, timezone
from decimal import Decimal

import pytest

from taurus_config.core import cast


@pytest.mark.unit
class TestToString:

    @pytest.mark.parametrize("value,expected", [
        ("text", "text"),
        (8080, "8080"),
        (1.5, "1.5"),
        (3.0, "3"),
        (True, "true"),
        (False, "false"),
        (b"bytes", "bytes"),
        (date(2024, 1, 15), "2024-01-15"),
        (datetime(2024, 1, 15, 8, 30), "2024-01-15T08:30:00"),
        (datetime(1979, 5, 27, 7, 32, tzinfo=timezone.utc), "1979-05-27T07:32:00+00:00"),
        (time(7, 32), "07:32:00"),
        (None, ""),
        ({"a": 1}, ""),
        ([1, 2], ""),
    ])
    def test_to_string(self, value, expected):
        assert cast.to_string(value) == expected


@pytest.mark.unit
class TestToInt:

    @pytest.mark.parametrize("value,expected", [
        (42, 42),
        (True, 1),
        (False, 0),
        (3.9, 3),
        (-3.9, -3),
        ("8080", 8080),
        ("8080.0", 8080),
        ("0x1F", 31),
        ("-12", -12),
        ("8080.5", 0),
        ("not a number", 0),
        ("", 0),
        (None, 0),
        ([1], 0),
        (float("nan"), 0),
    ])
    def test_to_int(self, value, expected):
        assert cast.to_int(value) == expected


@pytest.mark.unit
class TestToBool:

    @pytest.mark.parametrize("value,expected", [
        (True, True),
        (False, False),
        (1, True),
        (0, False),
        (0.5, True),
        ("true", True),
        ("TRUE", True),
        ("t", True),
        ("1", True),
        ("false", False),
        ("0", False),
        ("yes", False),
        ("", False),
        (None, False),
        ({"a": 1}, False),
    ])
    def test_to_bool(self, value, expected):
        assert cast.to_bool(value) is expected


@pytest.mark.unit
class TestToFloat:

    @pytest.mark.parametrize("value,expected", [
        (1.25, 1.25),
        (2, 2.0),
        (True, 1.0),
        ("3.5", 3.5),
        ("abc", 0.0),
        (None, 0.0),
        ([1.0], 0.0),
    ])
    def test_to_float(self, value, expected):
        assert cast.to_float(value) == expected


@pytest.mark.unit
class TestCollections:

    def test_string_list_from_list(self):
        assert cast.to_string_list(["a", 1, True, 2.5]) == ["a", "1", "true", "2.5"]

    def test_string_list_from_string(self):
        assert cast.to_string_list("a b  c") == ["a", "b", "c"]

    def test_string_list_from_other(self):
        assert cast.to_string_list(None) == []
        assert cast.to_string_list(5) == []
        assert cast.to_string_list({"a": 1}) == []

    def test_string_map_from_mapping(self):
        assert cast.to_string_map({"a": 1, 2: "b"}) == {"a": 1, "2": "b"}

    def test_string_map_from_json_string(self):
        assert cast.to_string_map('{"a": {"b": 1}}') == {"a": {"b": 1}}

    def test_string_map_from_other(self):
        assert cast.to_string_map("[1, 2]") == {}
        assert cast.to_string_map("not json") == {}
        assert cast.to_string_map(None) == {}
        assert cast.to_string_map([("a", 1)]) == {}


@pytest.mark.unit
class TestJsonDefault:

    def test_dates_use_iso_format(self):
        assert cast.json_default(datetime(2024, 1, 15, 8, 30)) == "2024-01-15T08:30:00"
        assert cast.json_default(date(2024, 1, 15)) == "2024-01-15"

    def test_other_values_use_str(self):
        assert cast.json_default(Decimal("1.50")) == "1.50"
