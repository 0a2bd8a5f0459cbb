"""
Environment placeholder substitution.

Placeholders have the form ``${NAME:default}`` and are resolved against the
environment on the raw file text, before the text is handed to a decoder.
Substituted values are not escaped for the target format.
"""

import os
import re
from typing import Mapping, Optional

from ..constants import PLACEHOLDER_PATTERN

_PLACEHOLDER_RE = re.compile(PLACEHOLDER_PATTERN, re.ASCII)


def replace_placeholders(content: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Replace every ``${NAME:default}`` in ``content``.

    A variable that is present in ``environ`` wins even when its value is
    empty; otherwise the literal default is used.
    """
    env = os.environ if environ is None else environ

    def _substitute(match: re.Match) -> str:
        name, default = match.group(1), match.group(2)
        if name in env:
            return env[name]
        return default

    return _PLACEHOLDER_RE.sub(_substitute, content)
