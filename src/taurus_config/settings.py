"""
Settings for the loader itself.

These are read from ``TAURUS_*`` environment variables so that applications and
the CLI can locate their configuration without hard-coding paths.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import ENV_PREFIX
from .logging.config import FORMAT_TYPES


class LoaderSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    config_path: Optional[Path] = Field(None, description="Config file or directory")
    env_file: Optional[Path] = Field(None, description="KEY=VALUE file loaded before the config")
    print_enable: bool = Field(False, description="Log the merged configuration after loading")
    sort_files: bool = Field(True, description="Merge directory entries in sorted path order")
    log_level: str = Field("WARNING", description="Root log level")
    log_format: str = Field("console", description="console, json or rich")

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX, case_sensitive=False, extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        fmt = v.strip().lower()
        if fmt not in FORMAT_TYPES:
            raise ValueError(f"Invalid log format: {v}")
        return fmt

    @field_validator("config_path", "env_file", mode="before")
    @classmethod
    def blank_path_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v
