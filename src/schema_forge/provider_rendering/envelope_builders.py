"""Provider envelope builders over an already assembled schema.

Builders use the schema they are given as-is; structured-output normalization is
decided by the caller (see ``schema_rendering``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from schema_forge.property_registry import ClassMetadata

GEMINI_OBJECT_TYPE = "OBJECT"
GEMINI_OLD_OBJECT_TYPE = "object"

Envelope = dict[str, Any]


def json_schema_to_openai_tool(
    schema: Mapping[str, Any], metadata: ClassMetadata, *, strict: bool = False
) -> Envelope:
    function: dict[str, Any] = {
        "name": metadata.name,
        "description": metadata.description,
        "parameters": dict(schema),
    }
    if strict:
        function["strict"] = True
    return {"type": "function", "function": function}


def json_schema_to_openai_response_format(
    schema: Mapping[str, Any], metadata: ClassMetadata, *, strict: bool = False
) -> Envelope:
    json_schema: dict[str, Any] = {"name": metadata.name}
    if metadata.description:
        json_schema["description"] = metadata.description
    json_schema["schema"] = dict(schema)
    json_schema["strict"] = strict
    return {"type": "json_schema", "json_schema": json_schema}


def json_schema_to_openai_response_api_tool(
    schema: Mapping[str, Any], metadata: ClassMetadata, *, strict: bool = True
) -> Envelope:
    envelope: Envelope = {"type": "function", "name": metadata.name}
    if metadata.description:
        envelope["description"] = metadata.description
    envelope["parameters"] = dict(schema)
    envelope["strict"] = strict
    return envelope


def json_schema_to_openai_response_api_text(
    schema: Mapping[str, Any], metadata: ClassMetadata, *, strict: bool | None = None
) -> Envelope:
    envelope: Envelope = {"type": "json_schema", "name": metadata.name}
    if metadata.description:
        envelope["description"] = metadata.description
    envelope["schema"] = dict(schema)
    if strict is not None:
        envelope["strict"] = strict
    return envelope


def json_schema_to_anthropic_tool(schema: Mapping[str, Any], metadata: ClassMetadata) -> Envelope:
    return {
        "name": metadata.name,
        "description": metadata.description,
        "input_schema": {
            "type": "object",
            "properties": schema.get("properties", {}),
            "required": schema.get("required") or [],
        },
    }


def json_schema_to_gemini_tool(schema: Mapping[str, Any], metadata: ClassMetadata) -> Envelope:
    return _gemini_tool(schema, metadata, GEMINI_OBJECT_TYPE)


def json_schema_to_gemini_old_tool(
    schema: Mapping[str, Any], metadata: ClassMetadata
) -> Envelope:
    return _gemini_tool(schema, metadata, GEMINI_OLD_OBJECT_TYPE)


def json_schema_to_gemini_response_schema(
    schema: Mapping[str, Any], metadata: ClassMetadata
) -> Envelope:
    return _gemini_response_schema(schema, metadata, GEMINI_OBJECT_TYPE)


def json_schema_to_gemini_old_response_schema(
    schema: Mapping[str, Any], metadata: ClassMetadata
) -> Envelope:
    return _gemini_response_schema(schema, metadata, GEMINI_OLD_OBJECT_TYPE)


# Vertex AI takes the same declarations as the current Gemini SDK.
json_schema_to_vertex_tool = json_schema_to_gemini_tool
json_schema_to_vertex_response_schema = json_schema_to_gemini_response_schema


def _gemini_tool(schema: Mapping[str, Any], metadata: ClassMetadata, object_type: str) -> Envelope:
    return {
        "name": metadata.name,
        "description": metadata.description,
        "parameters": {
            "type": object_type,
            "description": metadata.description,
            "properties": schema.get("properties", {}),
            "required": schema.get("required") or [],
        },
    }


def _gemini_response_schema(
    schema: Mapping[str, Any], metadata: ClassMetadata, object_type: str
) -> Envelope:
    return {
        "description": metadata.description,
        "type": object_type,
        "properties": schema.get("properties", {}),
        "required": schema.get("required") or [],
    }
