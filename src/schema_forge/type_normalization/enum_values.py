"""Enumeration source normalization."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


def normalize_enum(source: Any) -> list[Any]:
    """Return the ordered list of allowed literal values for an enum source.

    Lists and tuples are returned as lists. ``Enum`` subclasses yield their member
    values in definition order. Mappings yield the values of every key that does not
    parse as an integer, which drops the reverse entries of numeric-keyed tables.
    Any other source yields an empty list.
    """
    if isinstance(source, list):
        return source
    if isinstance(source, tuple):
        return list(source)
    if isinstance(source, type) and issubclass(source, Enum):
        return [member.value for member in source]
    if isinstance(source, Mapping):
        return [value for key, value in source.items() if not _is_integer_key(key)]
    return []


def enum_kind(values: list[Any]) -> str:
    """Return the JSON kind of an enum, taken from its first value."""
    if values and isinstance(values[0], str):
        return "string"
    return "number"


def _is_integer_key(key: Any) -> bool:
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return True
    if not isinstance(key, str):
        return False
    try:
        int(key.strip())
    except ValueError:
        return False
    return bool(key.strip())
