"""Extraction of a JSON Schema and tool metadata back out of provider envelopes."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from schema_forge.property_registry import ClassMetadata

from .envelope_builders import GEMINI_OBJECT_TYPE, GEMINI_OLD_OBJECT_TYPE
from .render_options import WireFormat, WireFormatError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractedSchema:
    schema: dict[str, Any]
    metadata: ClassMetadata
    source_format: WireFormat


def openai_tool_to_json_schema(tool: Mapping[str, Any]) -> ExtractedSchema:
    function = _require_mapping(tool.get("function"), "function")
    return ExtractedSchema(
        schema=_copy_schema(function.get("parameters"), "function.parameters"),
        metadata=_metadata(function),
        source_format=WireFormat.OPENAI_TOOL,
    )


def openai_response_api_tool_to_json_schema(tool: Mapping[str, Any]) -> ExtractedSchema:
    return ExtractedSchema(
        schema=_copy_schema(tool.get("parameters"), "parameters"),
        metadata=_metadata(tool),
        source_format=WireFormat.OPENAI_RESPONSE_API_TOOL,
    )


def openai_response_format_to_json_schema(response_format: Mapping[str, Any]) -> ExtractedSchema:
    json_schema = _require_mapping(response_format.get("json_schema"), "json_schema")
    return ExtractedSchema(
        schema=_copy_schema(json_schema.get("schema"), "json_schema.schema"),
        metadata=_metadata(json_schema),
        source_format=WireFormat.OPENAI_RESPONSE_FORMAT,
    )


def openai_response_api_text_to_json_schema(text_format: Mapping[str, Any]) -> ExtractedSchema:
    return ExtractedSchema(
        schema=_copy_schema(text_format.get("schema"), "schema"),
        metadata=_metadata(text_format),
        source_format=WireFormat.OPENAI_RESPONSE_API_TEXT,
    )


def anthropic_tool_to_json_schema(tool: Mapping[str, Any]) -> ExtractedSchema:
    input_schema = _require_mapping(tool.get("input_schema"), "input_schema")
    return ExtractedSchema(
        schema=_object_schema(input_schema),
        metadata=_metadata(tool),
        source_format=WireFormat.ANTHROPIC_TOOL,
    )


def gemini_tool_to_json_schema(tool: Mapping[str, Any]) -> ExtractedSchema:
    """Extract a Gemini or Vertex function declaration.

    Both generations render to the same shape apart from the object tag, so the tag
    decides which one is reported as ``source_format``.
    """
    parameters = _require_mapping(tool.get("parameters"), "parameters")
    source_format = (
        WireFormat.GEMINI_OLD_TOOL
        if parameters.get("type") == GEMINI_OLD_OBJECT_TYPE
        else WireFormat.GEMINI_TOOL
    )
    return ExtractedSchema(
        schema=_object_schema(parameters),
        metadata=_metadata(tool),
        source_format=source_format,
    )


def gemini_response_schema_to_json_schema(response_schema: Mapping[str, Any]) -> ExtractedSchema:
    source_format = (
        WireFormat.GEMINI_OLD_RESPONSE_SCHEMA
        if response_schema.get("type") == GEMINI_OLD_OBJECT_TYPE
        else WireFormat.GEMINI_RESPONSE_SCHEMA
    )
    return ExtractedSchema(
        schema=_object_schema(response_schema),
        metadata=ClassMetadata(description=_text(response_schema.get("description"))),
        source_format=source_format,
    )


def schema_from_wire_format(wire_object: Mapping[str, Any]) -> ExtractedSchema:
    """Detect the envelope shape of ``wire_object`` and extract its schema.

    Raises:
      WireFormatError: the object matches none of the supported envelopes.
    """
    if not isinstance(wire_object, Mapping):
        raise WireFormatError("Wire object must be a mapping")

    envelope_type = wire_object.get("type")
    if envelope_type == "function" and isinstance(wire_object.get("function"), Mapping):
        extracted = openai_tool_to_json_schema(wire_object)
    elif envelope_type == "function" and isinstance(wire_object.get("parameters"), Mapping):
        extracted = openai_response_api_tool_to_json_schema(wire_object)
    elif envelope_type == "json_schema" and isinstance(wire_object.get("json_schema"), Mapping):
        extracted = openai_response_format_to_json_schema(wire_object)
    elif envelope_type == "json_schema" and isinstance(wire_object.get("schema"), Mapping):
        extracted = openai_response_api_text_to_json_schema(wire_object)
    elif isinstance(wire_object.get("input_schema"), Mapping):
        extracted = anthropic_tool_to_json_schema(wire_object)
    elif isinstance(wire_object.get("parameters"), Mapping) and "name" in wire_object:
        extracted = gemini_tool_to_json_schema(wire_object)
    elif envelope_type in (GEMINI_OBJECT_TYPE, GEMINI_OLD_OBJECT_TYPE) and isinstance(
        wire_object.get("properties"), Mapping
    ):
        extracted = gemini_response_schema_to_json_schema(wire_object)
    else:
        raise WireFormatError(
            f"Unrecognized wire object shape (keys: {', '.join(sorted(map(str, wire_object)))})"
        )

    _LOGGER.debug("Detected %s envelope", extracted.source_format.value)
    return extracted


def _require_mapping(value: Any, location: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise WireFormatError(f"Wire object field '{location}' must be an object")
    return value


def _copy_schema(value: Any, location: str) -> dict[str, Any]:
    return copy.deepcopy(dict(_require_mapping(value, location)))


def _object_schema(node: Mapping[str, Any]) -> dict[str, Any]:
    schema: dict[str, Any] = {
        "type": "object",
        "properties": copy.deepcopy(dict(node.get("properties") or {})),
    }
    required = list(node.get("required") or [])
    if required:
        schema["required"] = required
    return schema


def _metadata(source: Mapping[str, Any]) -> ClassMetadata:
    return ClassMetadata(
        name=_text(source.get("name")), description=_text(source.get("description"))
    )


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""
