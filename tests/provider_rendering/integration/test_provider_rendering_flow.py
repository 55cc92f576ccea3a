"""End-to-end rendering flows from decorated classes to provider envelopes."""

from typing import Annotated

from schema_forge.property_registry import SchemaRegistry, tool_dto, tool_meta, tool_prop
from schema_forge.provider_rendering import (
    RenderOptions,
    WireFormat,
    class_to_gemini_tool,
    class_to_json_schema,
    class_to_openai_response_format_json_schema,
    class_to_openai_tool,
    render_class,
    schema_from_wire_format,
    wire_format_from_schema,
)

REGISTRY = SchemaRegistry()


@tool_meta(name="CapitalTool", description="Find the capital of a given state", registry=REGISTRY)
class CapitalTool:
    name: Annotated[str, tool_prop(description="The name of the capital to find")]


@tool_meta(name="pick_numbers", description="Pick lucky numbers", registry=REGISTRY)
class NumberPicker:
    numbers: Annotated[
        list[int], tool_prop(description="Numbers to pick", enum=[1, 2, 3, 4, 5])
    ]


@tool_dto(registry=REGISTRY)
class ThirdLevelDto:
    name: Annotated[str, tool_prop(description="Third level name")]
    code: Annotated[str, tool_prop(description="Third level code")]


@tool_dto(registry=REGISTRY)
class SecondLevelDto:
    third_level_objs: Annotated[list[ThirdLevelDto], tool_prop(description="Third level items")]
    label: Annotated[str | None, tool_prop(description="Label")]


@tool_meta(name="first_level", description="Three nested levels", registry=REGISTRY)
class FirstLevelDto:
    second: Annotated[SecondLevelDto, tool_prop(description="Second level")]
    title: Annotated[str, tool_prop(description="Title")]


def test_single_required_property_renders_openai_tool() -> None:
    assert class_to_openai_tool(CapitalTool, registry=REGISTRY) == {
        "type": "function",
        "function": {
            "name": "CapitalTool",
            "description": "Find the capital of a given state",
            "parameters": {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "description": "The name of the capital to find"}
                },
                "required": ["name"],
            },
        },
    }


def test_array_enum_property_renders_enum_items() -> None:
    schema = class_to_json_schema(NumberPicker, registry=REGISTRY)

    assert schema["properties"]["numbers"] == {
        "type": "array",
        "items": {"type": "number", "enum": [1, 2, 3, 4, 5]},
        "description": "Numbers to pick",
    }


def test_permanent_enum_override_through_nested_array_updates_only_leaf() -> None:
    before = class_to_json_schema(FirstLevelDto, registry=REGISTRY)

    REGISTRY.update_property(FirstLevelDto, "second.third_level_objs.name", {"enum": ["a", "b"]})

    after = class_to_json_schema(FirstLevelDto, registry=REGISTRY)
    items = after["properties"]["second"]["properties"]["third_level_objs"]["items"]
    assert items["properties"]["name"] == {
        "type": "string",
        "enum": ["a", "b"],
        "description": "Third level name",
    }
    assert items["properties"]["code"] == {"type": "string", "description": "Third level code"}
    assert items["required"] == ["name", "code"]
    assert after["required"] == before["required"] == ["second", "title"]
    assert "enum" not in (
        class_to_json_schema(SecondLevelDto, registry=REGISTRY)["properties"]["third_level_objs"][
            "items"
        ]["properties"]["name"]
    )


def test_gemini_and_openai_share_properties_and_required() -> None:
    openai = class_to_openai_tool(FirstLevelDto, registry=REGISTRY)["function"]["parameters"]
    gemini = class_to_gemini_tool(FirstLevelDto, registry=REGISTRY)["parameters"]

    assert gemini["properties"] == openai["properties"]
    assert gemini["required"] == openai["required"]
    assert gemini["type"] == "OBJECT"
    assert openai["type"] == "object"


def test_cross_provider_conversion_without_the_class() -> None:
    options = RenderOptions(for_structured_output=True, handle_optionals=True)
    openai = class_to_openai_response_format_json_schema(FirstLevelDto, options, registry=REGISTRY)

    extracted = schema_from_wire_format(openai)
    anthropic = wire_format_from_schema(
        extracted.schema, extracted.metadata, WireFormat.ANTHROPIC_TOOL
    )

    assert anthropic["name"] == "first_level"
    assert anthropic["description"] == "Three nested levels"
    assert anthropic["input_schema"]["properties"] == openai["json_schema"]["schema"]["properties"]
    second = anthropic["input_schema"]["properties"]["second"]
    assert second["additionalProperties"] is False
    assert second["required"] == ["third_level_objs", "label"]
    assert second["properties"]["label"]["type"] == ["string", "null"]


_DETECTED_AS = {
    WireFormat.VERTEX_TOOL: WireFormat.GEMINI_TOOL,
    WireFormat.VERTEX_RESPONSE_SCHEMA: WireFormat.GEMINI_RESPONSE_SCHEMA,
}


def test_every_wire_format_renders_and_round_trips_properties() -> None:
    expected = class_to_json_schema(CapitalTool, registry=REGISTRY)

    for wire_format in WireFormat:
        envelope = render_class(
            CapitalTool, wire_format, RenderOptions(strict=False), registry=REGISTRY
        )
        extracted = schema_from_wire_format(envelope)

        assert extracted.source_format is _DETECTED_AS.get(wire_format, wire_format)
        assert extracted.schema["properties"] == expected["properties"]
