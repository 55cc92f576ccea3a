"""Provider rendering exports."""

from .envelope_builders import (
    GEMINI_OBJECT_TYPE,
    GEMINI_OLD_OBJECT_TYPE,
    Envelope,
    json_schema_to_anthropic_tool,
    json_schema_to_gemini_old_response_schema,
    json_schema_to_gemini_old_tool,
    json_schema_to_gemini_response_schema,
    json_schema_to_gemini_tool,
    json_schema_to_openai_response_api_text,
    json_schema_to_openai_response_api_tool,
    json_schema_to_openai_response_format,
    json_schema_to_openai_tool,
    json_schema_to_vertex_response_schema,
    json_schema_to_vertex_tool,
)
from .render_options import RenderOptions, WireFormat, WireFormatError, parse_wire_format
from .schema_rendering import (
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
    wire_format_from_schema,
)
from .wire_extraction import (
    ExtractedSchema,
    anthropic_tool_to_json_schema,
    gemini_response_schema_to_json_schema,
    gemini_tool_to_json_schema,
    openai_response_api_text_to_json_schema,
    openai_response_api_tool_to_json_schema,
    openai_response_format_to_json_schema,
    openai_tool_to_json_schema,
    schema_from_wire_format,
)

__all__ = [
    "GEMINI_OBJECT_TYPE",
    "GEMINI_OLD_OBJECT_TYPE",
    "Envelope",
    "ExtractedSchema",
    "RenderOptions",
    "WireFormat",
    "WireFormatError",
    "anthropic_tool_to_json_schema",
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
    "gemini_response_schema_to_json_schema",
    "gemini_tool_to_json_schema",
    "json_schema_to_anthropic_tool",
    "json_schema_to_gemini_old_response_schema",
    "json_schema_to_gemini_old_tool",
    "json_schema_to_gemini_response_schema",
    "json_schema_to_gemini_tool",
    "json_schema_to_openai_response_api_text",
    "json_schema_to_openai_response_api_tool",
    "json_schema_to_openai_response_format",
    "json_schema_to_openai_tool",
    "json_schema_to_vertex_response_schema",
    "json_schema_to_vertex_tool",
    "openai_response_api_text_to_json_schema",
    "openai_response_api_tool_to_json_schema",
    "openai_response_format_to_json_schema",
    "openai_tool_to_json_schema",
    "parse_wire_format",
    "render_class",
    "schema_from_wire_format",
    "wire_format_from_schema",
]
