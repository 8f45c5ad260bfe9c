"""Canonical string rendering of scope keys."""

from enum import Enum
from typing import Any


def scope_key_name(key: Any) -> str:
    """
    Render a scope key as it appears in scoped feature names.

    Enum members render as their member name (``SuggestType.Recap`` ->
    ``"Recap"``); any other value uses ``str()``.
    """
    if isinstance(key, Enum):
        return key.name
    return str(key)
