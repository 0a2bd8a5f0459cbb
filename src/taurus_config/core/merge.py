"""
Deep merge of configuration documents.

Mappings are merged key by key; every other value (scalars, lists, or a type
mismatch between the two sides) is replaced by the incoming value.
"""

from typing import Any, Dict, Mapping


def merge_values(existing: Any, incoming: Any) -> Any:
    """Merge ``incoming`` over ``existing`` and return the result.

    Neither argument is modified. When both sides are mappings the result is a
    new dict; otherwise ``incoming`` is returned as-is.
    """
    if isinstance(existing, Mapping) and isinstance(incoming, Mapping):
        result = dict(existing)
        for key, value in incoming.items():
            if key in result:
                result[key] = merge_values(result[key], value)
            else:
                result[key] = value
        return result

    return incoming


def merge_into(target: Dict[str, Any], incoming: Mapping[str, Any]) -> Dict[str, Any]:
    """Fold ``incoming`` into ``target`` in place, top-level key by key."""
    for key, value in incoming.items():
        if key in target:
            target[key] = merge_values(target[key], value)
        else:
            target[key] = value
    return target
