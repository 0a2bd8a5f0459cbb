"""
Core configuration logic: merging, placeholders, env files, coercion and the store.
"""

from . import cast
from .envfile import load_env_file, parse_env_content
from .merge import merge_into, merge_values
from .placeholders import replace_placeholders
from .store import ConfigStore, new

__all__ = [
    "ConfigStore",
    "cast",
    "load_env_file",
    "merge_into",
    "merge_values",
    "new",
    "parse_env_content",
    "replace_placeholders",
]
