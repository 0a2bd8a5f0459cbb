"""
Configuration file decoders.

- base: ConfigDecoder interface
- builtin: JSON, YAML, TOML and XML decoders
- registry: extension dispatch and error wrapping
"""

from .base import ConfigDecoder
from .builtin import (
    JsonDecoder,
    TomlDecoder,
    XmlDecoder,
    YamlDecoder,
    builtin_decoders,
    element_to_value,
)
from .registry import DecoderRegistry, default_registry

__all__ = [
    "ConfigDecoder",
    "DecoderRegistry",
    "JsonDecoder",
    "TomlDecoder",
    "XmlDecoder",
    "YamlDecoder",
    "builtin_decoders",
    "default_registry",
    "element_to_value",
]
