"""
Flat ``KEY=VALUE`` environment files.

Lines are matched with ``(\\w+)=(.+)``: the first ``=`` ends the key and the
rest of the line is the value. Quotes, escapes and comments get no special
treatment.
"""

import logging
import os
import re
from pathlib import Path
from typing import Dict, MutableMapping, Optional, Union

from ..constants import ENV_LINE_PATTERN
from ..exceptions.config import EnvFileError
from ..utils.error_handling import FileOperationHandler

logger = logging.getLogger(__name__)

_ENV_LINE_RE = re.compile(ENV_LINE_PATTERN, re.ASCII)


def parse_env_content(content: str) -> Dict[str, str]:
    """Extract ``KEY=VALUE`` pairs from env file text.

    Later assignments of the same key win.
    """
    # '.' stops at the newline, so each match ends with its own line
    return {match.group(1): match.group(2).rstrip("\r") for match in _ENV_LINE_RE.finditer(content)}


def load_env_file(
    path: Union[str, Path],
    environ: Optional[MutableMapping[str, str]] = None,
) -> Dict[str, str]:
    """Read ``path`` and set every pair into ``environ`` (``os.environ`` by default).

    Returns the pairs that were set.

    Raises:
        EnvFileError: if the file cannot be read
    """
    env = os.environ if environ is None else environ
    content = FileOperationHandler.read_text(path, file_type="env file", error_factory=EnvFileError)

    pairs = parse_env_content(content)
    for key, value in pairs.items():
        env[key] = value

    logger.debug(f"Loaded {len(pairs)} variables from env file {path}")
    return pairs
