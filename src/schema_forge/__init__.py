"""Schema-forge: JSON Schema and LLM provider envelopes from annotated classes."""

import logging

from schema_forge.property_registry import (
    ClassMetadata,
    CyclicSchemaError,
    MissingArrayItemTypeError,
    MissingPropertyTypeError,
    PropertyOptions,
    SchemaDeclarationError,
    SchemaRegistry,
    add_schema_property,
    class_metadata,
    declare_class_metadata,
    declare_property,
    default_registry,
    register_class,
    tool_dto,
    tool_meta,
    tool_prop,
    update_schema_property,
)
from schema_forge.provider_rendering import (
    ExtractedSchema,
    RenderOptions,
    WireFormat,
    WireFormatError,
    class_to_anthropic_tool,
    class_to_gemini_old_response_schema,
    class_to_gemini_old_tool,
    class_to_gemini_response_schema,
    class_to_gemini_tool,
    class_to_json_schema,
    class_to_openai_response_api_text_schema,
    class_to_openai_response_api_tool,
    class_to_openai_response_format_json_schema,
    class_to_openai_tool,
    class_to_vertex_response_schema,
    class_to_vertex_tool,
    render_class,
    schema_from_wire_format,
    wire_format_from_schema,
)
from schema_forge.schema_assembly import assemble_schema

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ClassMetadata",
    "CyclicSchemaError",
    "ExtractedSchema",
    "MissingArrayItemTypeError",
    "MissingPropertyTypeError",
    "PropertyOptions",
    "RenderOptions",
    "SchemaDeclarationError",
    "SchemaRegistry",
    "WireFormat",
    "WireFormatError",
    "add_schema_property",
    "assemble_schema",
    "class_metadata",
    "class_to_anthropic_tool",
    "class_to_gemini_old_response_schema",
    "class_to_gemini_old_tool",
    "class_to_gemini_response_schema",
    "class_to_gemini_tool",
    "class_to_json_schema",
    "class_to_openai_response_api_text_schema",
    "class_to_openai_response_api_tool",
    "class_to_openai_response_format_json_schema",
    "class_to_openai_tool",
    "class_to_vertex_response_schema",
    "class_to_vertex_tool",
    "declare_class_metadata",
    "declare_property",
    "default_registry",
    "register_class",
    "render_class",
    "schema_from_wire_format",
    "tool_dto",
    "tool_meta",
    "tool_prop",
    "update_schema_property",
    "wire_format_from_schema",
]
