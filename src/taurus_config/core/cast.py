"""
Best-effort type coercion for configuration values.

Every function here accepts any value and never raises: values that cannot be
converted come back as the target type's zero value.
"""

import json
from datetime import date, time
from typing import Any, Dict, List, Mapping

TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_STRINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _trim_zero_decimal(text: str) -> str:
    # "8080.0" and "8080.000" parse as integers; "8080.5" does not
    head, sep, tail = text.partition(".")
    if sep and head and tail and set(tail) == {"0"}:
        return head
    return text


def _format_float(value: float) -> str:
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def to_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (date, time)):
        # TOML and YAML dates decode to datetime objects
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return ""


def to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return 0
        return int(value)
    if isinstance(value, str):
        try:
            return int(_trim_zero_decimal(value), 0)
        except ValueError:
            return 0
    return 0


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value in TRUE_STRINGS
    return False


def to_float(value: Any) -> float:
    if isinstance(value, (bool, int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0


def to_string_list(value: Any) -> List[str]:
    """Lists become lists of strings; a string is split on whitespace."""
    if isinstance(value, (list, tuple)):
        return [to_string(item) for item in value]
    if isinstance(value, str):
        return value.split()
    return []


def to_string_map(value: Any) -> Dict[str, Any]:
    """Mappings get string keys; a string holding a JSON object is decoded."""
    if isinstance(value, Mapping):
        return {to_string(key): item for key, item in value.items()}
    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except ValueError:
            return {}
        if isinstance(decoded, dict):
            return decoded
    return {}


def json_default(value: Any) -> str:
    """``json.dumps`` fallback: ISO text for dates and times, ``str`` otherwise."""
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)
