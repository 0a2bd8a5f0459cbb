"""
Tests for the helpers shared by CLI commands.
"""

from pathlib import Path
from unittest.mock import Mock

import pytest

from taurus_config.cli.commands.export import render
from taurus_config.cli.utils import flatten, format_value, resolve_paths
from taurus_config.exceptions import InvalidCommandError
from taurus_config.settings import LoaderSettings


def make_context(**settings):
    ctx = Mock()
    ctx.obj = {"settings": LoaderSettings(**settings)}
    return ctx


@pytest.mark.unit
class TestFlatten:

    def test_nested_keys(self):
        data = {"http": {"port": 8080, "tls": {"enabled": True}}, "name": "app"}

        assert list(flatten(data)) == [
            ("http.port", 8080),
            ("http.tls.enabled", True),
            ("name", "app"),
        ]

    def test_empty_mapping_is_a_leaf(self):
        assert list(flatten({"empty": {}})) == [("empty", {})]


@pytest.mark.unit
class TestFormatValue:

    @pytest.mark.parametrize("value,expected", [
        ("text", "text"),
        (8080, "8080"),
        (True, "true"),
        (None, "null"),
        (["a", "b"], '["a", "b"]'),
    ])
    def test_format(self, value, expected):
        assert format_value(value) == expected


@pytest.mark.unit
class TestResolvePaths:

    def test_explicit_arguments_win(self, clean_environment):
        ctx = make_context(config_path="from-env", env_file=".env")

        assert resolve_paths(ctx, "show", Path("cli"), Path(".env.cli")) == (
            Path("cli"),
            Path(".env.cli"),
        )

    def test_fallback_to_settings(self, clean_environment):
        ctx = make_context(config_path="config", env_file=".env.local")

        assert resolve_paths(ctx, "show", None, None) == (Path("config"), Path(".env.local"))

    def test_no_path_anywhere(self, clean_environment):
        with pytest.raises(InvalidCommandError, match="TAURUS_CONFIG_PATH"):
            resolve_paths(make_context(), "get", None, None)


@pytest.mark.unit
class TestRender:

    def test_toml_drops_none(self):
        assert render({"a": 1, "b": None}, ".toml") == "a = 1\n"

    def test_yaml_keeps_order(self):
        assert render({"b": 1, "a": 2}, ".yml") == "b: 1\na: 2\n"

    def test_unknown_suffix(self):
        with pytest.raises(ValueError):
            render({}, ".ini")
