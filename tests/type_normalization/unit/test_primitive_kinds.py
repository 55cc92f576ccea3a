"""Primitive kind classification tests."""

from __future__ import annotations

from enum import Enum

import pytest
from schema_forge.type_normalization import (
    PrimitiveKind,
    classify_primitive,
    is_enum_type,
    is_structured_type,
)


class Color(Enum):
    RED = "red"
    BLUE = "blue"


class Level(Enum):
    ONE = 1
    TWO = 2


class Address:
    pass


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        (str, PrimitiveKind.STRING),
        (int, PrimitiveKind.NUMBER),
        (float, PrimitiveKind.NUMBER),
        (bool, PrimitiveKind.BOOLEAN),
        (list, PrimitiveKind.ARRAY),
        (tuple, PrimitiveKind.ARRAY),
        (dict, PrimitiveKind.OBJECT),
        (list[str], PrimitiveKind.ARRAY),
        (dict[str, int], PrimitiveKind.OBJECT),
        ("boolean", PrimitiveKind.BOOLEAN),
        ("integer", PrimitiveKind.NUMBER),
        (Color, PrimitiveKind.STRING),
        (Level, PrimitiveKind.NUMBER),
        (Address, PrimitiveKind.OBJECT),
    ],
)
def test_classify_primitive_maps_known_tokens(token: object, expected: PrimitiveKind) -> None:
    assert classify_primitive(token) is expected


def test_unrecognized_tokens_fall_back_to_string() -> None:
    assert classify_primitive(None) is PrimitiveKind.STRING
    assert classify_primitive("uuid") is PrimitiveKind.STRING
    assert classify_primitive(object()) is PrimitiveKind.STRING


def test_structured_type_excludes_builtins_and_enums() -> None:
    assert is_structured_type(Address)
    assert not is_structured_type(str)
    assert not is_structured_type(dict)
    assert not is_structured_type(object)
    assert not is_structured_type(Color)
    assert not is_structured_type("object")


def test_is_enum_type() -> None:
    assert is_enum_type(Color)
    assert not is_enum_type(Color.RED)
    assert not is_enum_type(Address)
