"""Primitive JSON Schema kinds and type-token classification."""

from __future__ import annotations

import typing
from enum import Enum
from typing import Any

from .enum_values import enum_kind, normalize_enum


class PrimitiveKind(str, Enum):
    """JSON Schema primitive kinds produced by the registry."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


_BUILTIN_KINDS: dict[Any, PrimitiveKind] = {
    str: PrimitiveKind.STRING,
    int: PrimitiveKind.NUMBER,
    float: PrimitiveKind.NUMBER,
    bool: PrimitiveKind.BOOLEAN,
    list: PrimitiveKind.ARRAY,
    tuple: PrimitiveKind.ARRAY,
    dict: PrimitiveKind.OBJECT,
}

_KIND_ALIASES = {"integer": PrimitiveKind.NUMBER}


def classify_primitive(type_token: Any) -> PrimitiveKind:
    """Map a declared type token onto a primitive kind.

    Unrecognized tokens fall back to ``string``.
    """
    if isinstance(type_token, PrimitiveKind):
        return type_token
    if isinstance(type_token, str):
        if type_token in _KIND_ALIASES:
            return _KIND_ALIASES[type_token]
        try:
            return PrimitiveKind(type_token)
        except ValueError:
            return PrimitiveKind.STRING

    origin = typing.get_origin(type_token)
    if origin is not None and origin in _BUILTIN_KINDS:
        return _BUILTIN_KINDS[origin]
    if isinstance(type_token, type) and type_token in _BUILTIN_KINDS:
        return _BUILTIN_KINDS[type_token]
    if is_enum_type(type_token):
        return PrimitiveKind(enum_kind(normalize_enum(type_token)))
    if is_structured_type(type_token):
        return PrimitiveKind.OBJECT
    return PrimitiveKind.STRING


def is_structured_type(type_token: Any) -> bool:
    """Return True when the token is a user class that carries its own schema."""
    return (
        isinstance(type_token, type)
        and typing.get_origin(type_token) is None
        and type_token not in _BUILTIN_KINDS
        and type_token is not object
        and not is_enum_type(type_token)
    )


def is_enum_type(type_token: Any) -> bool:
    return (
        isinstance(type_token, type)
        and typing.get_origin(type_token) is None
        and issubclass(type_token, Enum)
    )
