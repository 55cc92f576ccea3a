"""Decorator front-end tests."""

from enum import Enum
from typing import Annotated

import pytest
from schema_forge.property_registry import (
    ClassMetadata,
    MissingArrayItemTypeError,
    SchemaRegistry,
    default_registry,
    tool_dto,
    tool_meta,
    tool_prop,
)

REGISTRY = SchemaRegistry()


class Status(Enum):
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"


@tool_dto(registry=REGISTRY)
class LocationDto:
    country: Annotated[str, tool_prop(description="Country name")]
    city: Annotated[str | None, tool_prop(description="City")]
    population: int


@tool_meta(name="game_character", description="A game character", registry=REGISTRY)
class GameCharacterDto:
    name: Annotated[str, tool_prop(description="Name")]
    location: Annotated[LocationDto, tool_prop(description="Location info")]
    banks: Annotated[list[LocationDto], tool_prop(description="Banks")]
    status: Annotated[Status, tool_prop()]
    levels: Annotated[list[int], tool_prop(enum=[1, 2, 3])]
    nickname: Annotated[str | None, tool_prop(is_optional=False)]


@tool_dto(registry=REGISTRY)
class HeroDto(GameCharacterDto):
    power: Annotated[int, tool_prop(description="Power")]


@tool_dto
class DefaultRegistryDto:
    active: Annotated[bool, tool_prop(description="Active flag")]


_LOCATION_SCHEMA = {
    "type": "object",
    "properties": {
        "country": {"type": "string", "description": "Country name"},
        "city": {"type": "string", "description": "City"},
    },
    "required": ["country"],
}


def test_annotated_attributes_are_declared_and_optionals_inferred() -> None:
    snapshot = REGISTRY.snapshot(LocationDto)

    assert snapshot.properties == _LOCATION_SCHEMA["properties"]
    assert snapshot.required == ["country"]


def test_nested_and_array_annotations() -> None:
    properties = REGISTRY.snapshot(GameCharacterDto).properties

    assert properties["location"] == {**_LOCATION_SCHEMA, "description": "Location info"}
    assert properties["banks"] == {
        "type": "array",
        "items": _LOCATION_SCHEMA,
        "description": "Banks",
    }
    assert properties["status"] == {"type": "string", "enum": ["ONLINE", "OFFLINE"]}
    assert properties["levels"] == {
        "type": "array",
        "items": {"type": "number", "enum": [1, 2, 3]},
    }


def test_explicit_optionality_wins_over_annotation() -> None:
    required = REGISTRY.snapshot(GameCharacterDto).required

    assert required == ["name", "location", "banks", "status", "levels", "nickname"]


def test_tool_meta_stores_metadata() -> None:
    assert REGISTRY.metadata_for(GameCharacterDto) == ClassMetadata(
        name="game_character", description="A game character"
    )


def test_subclass_declares_only_its_own_annotations_on_top_of_parent() -> None:
    snapshot = REGISTRY.snapshot(HeroDto)

    assert list(snapshot.properties) == [
        "name",
        "location",
        "banks",
        "status",
        "levels",
        "nickname",
        "power",
    ]
    assert REGISTRY.metadata_for(HeroDto).name == "game_character"
    assert "power" not in REGISTRY.snapshot(GameCharacterDto).properties


def test_bare_decorator_uses_default_registry() -> None:
    assert default_registry.snapshot(DefaultRegistryDto).properties == {
        "active": {"type": "boolean", "description": "Active flag"}
    }


def test_bare_list_annotation_without_items_is_rejected() -> None:
    registry = SchemaRegistry()

    with pytest.raises(MissingArrayItemTypeError, match='"tags"'):

        @tool_dto(registry=registry)
        class Untyped:
            tags: Annotated[list, tool_prop(description="Tags")]
