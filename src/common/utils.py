"""Common utility functions."""

from typing import Any


def get_value(obj: Any, *keys: str) -> Any:
    """Get the first non-None value for any of keys from a dict or object attribute."""
    for key in keys:
        if isinstance(obj, dict):
            value = obj.get(key)
        else:
            value = getattr(obj, key, None)
        if value is not None:
            return value
    return None

