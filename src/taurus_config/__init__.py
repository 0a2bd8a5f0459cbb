"""
taurus-config: layered application configuration.

Loads JSON, YAML, TOML and XML files (a single file or a whole directory),
resolves ``${NAME:default}`` environment placeholders, deep-merges the
documents and exposes dotted-path typed accessors.

Architecture Overview:
- core: merge, placeholder substitution, env files, coercion and ConfigStore
- decoders: per-extension file decoders and their registry
- settings: TAURUS_* environment settings for the loader itself
- logging: console, JSON and Rich log output
- cli: the ``taurus-config`` command
"""

__version__ = "0.1.0"

from .core import ConfigStore, load_env_file, merge_values, new, replace_placeholders
from .decoders import ConfigDecoder, DecoderRegistry
from .exceptions import (
    ConfigDecodeError,
    ConfigPathError,
    ConfigurationError,
    EnvFileError,
    TaurusConfigError,
    UnsupportedFormatError,
)
from .settings import LoaderSettings

__all__ = [
    "__version__",
    "ConfigStore",
    "new",
    "merge_values",
    "replace_placeholders",
    "load_env_file",
    "ConfigDecoder",
    "DecoderRegistry",
    "LoaderSettings",
    "TaurusConfigError",
    "ConfigurationError",
    "ConfigPathError",
    "ConfigDecodeError",
    "UnsupportedFormatError",
    "EnvFileError",
]
