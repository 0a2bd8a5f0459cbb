"""
Pytest configuration and shared fixtures for taurus-config tests.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

from taurus_config import ConfigStore


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def write_file(temp_dir) -> Callable[[str, str], Path]:
    """Write ``content`` to ``name`` below the temp dir and return the path."""

    def _write(name: str, content: str) -> Path:
        path = temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def isolated_environ() -> Dict[str, str]:
    """An environment mapping that is not the process environment."""
    return {}


@pytest.fixture
def store(isolated_environ) -> ConfigStore:
    """An empty store reading and writing an isolated environment."""
    return ConfigStore(environ=isolated_environ)


@pytest.fixture
def clean_environment():
    """Remove TAURUS_* variables (and the sample HOST) for the test."""
    original_env = {}
    for var in list(os.environ):
        if var.startswith("TAURUS_") or var == "HOST":
            original_env[var] = os.environ.pop(var)

    yield

    for var in list(os.environ):
        if var.startswith("TAURUS_"):
            del os.environ[var]
    os.environ.update(original_env)


@pytest.fixture
def sample_config_data() -> Dict[str, Any]:
    """Sample configuration document."""
    return {
        "app_name": "taurus",
        "version": "1.0.0",
        "http": {
            "address": "0.0.0.0",
            "port": 8080,
            "read_timeout": 30,
            "authorization": "secret",
        },
        "features": ["auth", "metrics"],
        "debug": False,
    }


@pytest.fixture
def config_dir(temp_dir, sample_config_data) -> Path:
    """A config directory with one file per format and a nested override."""
    root = temp_dir / "config"
    root.mkdir()

    (root / "app.json").write_text(json.dumps(sample_config_data), encoding="utf-8")
    (root / "database.yaml").write_text(
        "database:\n"
        "  host: ${DB_HOST:localhost}\n"
        "  port: 5432\n"
        "  pool:\n"
        "    min: 1\n"
        "    max: 10\n",
        encoding="utf-8",
    )
    (root / "logging.toml").write_text(
        "[logging]\nlevel = \"info\"\nfile = \"app.log\"\n",
        encoding="utf-8",
    )
    nested = root / "overrides"
    nested.mkdir()
    (nested / "http.yml").write_text("http:\n  port: 9090\n", encoding="utf-8")
    return root
