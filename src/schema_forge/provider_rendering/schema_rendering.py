"""Rendering of classes and raw schemas into provider envelopes."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from schema_forge.property_registry import ClassMetadata, SchemaRegistry, default_registry
from schema_forge.schema_assembly import AssembledSchema, assemble_schema
from schema_forge.structured_output import prepare_for_structured_output

from . import envelope_builders as builders
from .envelope_builders import Envelope
from .render_options import RenderOptions, WireFormat, parse_wire_format

_GEMINI_FAMILY = frozenset(
    {
        WireFormat.GEMINI_TOOL,
        WireFormat.GEMINI_OLD_TOOL,
        WireFormat.GEMINI_RESPONSE_SCHEMA,
        WireFormat.GEMINI_OLD_RESPONSE_SCHEMA,
        WireFormat.VERTEX_TOOL,
        WireFormat.VERTEX_RESPONSE_SCHEMA,
    }
)

_Builder = Callable[[Mapping[str, Any], ClassMetadata], Envelope]

_SCHEMA_ONLY_BUILDERS: dict[WireFormat, _Builder] = {
    WireFormat.ANTHROPIC_TOOL: builders.json_schema_to_anthropic_tool,
    WireFormat.GEMINI_TOOL: builders.json_schema_to_gemini_tool,
    WireFormat.GEMINI_OLD_TOOL: builders.json_schema_to_gemini_old_tool,
    WireFormat.GEMINI_RESPONSE_SCHEMA: builders.json_schema_to_gemini_response_schema,
    WireFormat.GEMINI_OLD_RESPONSE_SCHEMA: builders.json_schema_to_gemini_old_response_schema,
    WireFormat.VERTEX_TOOL: builders.json_schema_to_vertex_tool,
    WireFormat.VERTEX_RESPONSE_SCHEMA: builders.json_schema_to_vertex_response_schema,
}


def wire_format_from_schema(
    schema: Mapping[str, Any],
    metadata: ClassMetadata,
    wire_format: WireFormat | str,
    options: RenderOptions | None = None,
) -> Envelope:
    """Wrap a raw object schema in the envelope of ``wire_format``.

    ``options.property_overrides`` only applies when rendering from a class.
    """
    target = parse_wire_format(wire_format)
    options = options or RenderOptions()
    strict = _effective_strict(target, options)

    prepared: Mapping[str, Any] = schema
    if target not in _GEMINI_FAMILY and (options.for_structured_output or strict is True):
        prepared = prepare_for_structured_output(schema, options.handle_optionals)

    if target is WireFormat.OPENAI_TOOL:
        return builders.json_schema_to_openai_tool(prepared, metadata, strict=bool(strict))
    if target is WireFormat.OPENAI_RESPONSE_FORMAT:
        return builders.json_schema_to_openai_response_format(
            prepared, metadata, strict=bool(strict)
        )
    if target is WireFormat.OPENAI_RESPONSE_API_TOOL:
        return builders.json_schema_to_openai_response_api_tool(
            prepared, metadata, strict=bool(strict)
        )
    if target is WireFormat.OPENAI_RESPONSE_API_TEXT:
        return builders.json_schema_to_openai_response_api_text(prepared, metadata, strict=strict)
    return _SCHEMA_ONLY_BUILDERS[target](prepared, metadata)


def _effective_strict(target: WireFormat, options: RenderOptions) -> bool | None:
    if target is WireFormat.OPENAI_RESPONSE_API_TOOL:
        return True if options.strict is None else options.strict
    if target is WireFormat.OPENAI_RESPONSE_API_TEXT:
        if options.strict is not None:
            return options.strict
        return True if options.for_structured_output else None
    if target is WireFormat.OPENAI_TOOL:
        return bool(options.strict or options.for_structured_output)
    if target is WireFormat.OPENAI_RESPONSE_FORMAT:
        return options.for_structured_output if options.strict is None else options.strict
    return None


def class_to_json_schema(
    cls: type,
    options: RenderOptions | None = None,
    *,
    registry: SchemaRegistry | None = None,
) -> AssembledSchema:
    """Assemble the schema of ``cls``, normalized when structured output is requested."""
    options = options or RenderOptions()
    schema = assemble_schema(cls, options.property_overrides, registry=registry)
    if options.closes_schema:
        normalized: AssembledSchema = prepare_for_structured_output(
            schema, options.handle_optionals
        )
        return normalized
    return schema


def render_class(
    cls: type,
    wire_format: WireFormat | str,
    options: RenderOptions | None = None,
    *,
    registry: SchemaRegistry | None = None,
) -> Envelope:
    """Assemble ``cls`` and wrap it in the envelope of ``wire_format``."""
    store = registry if registry is not None else default_registry
    options = options or RenderOptions()
    schema = assemble_schema(cls, options.property_overrides, registry=store)
    return wire_format_from_schema(schema, store.metadata_for(cls), wire_format, options)


def class_to_openai_tool(
    cls: type, options: RenderOptions | None = None, *, registry: SchemaRegistry | None = None
) -> Envelope:
    return render_class(cls, WireFormat.OPENAI_TOOL, options, registry=registry)


def class_to_openai_response_format_json_schema(
    cls: type, options: RenderOptions | None = None, *, registry: SchemaRegistry | None = None
) -> Envelope:
    return render_class(cls, WireFormat.OPENAI_RESPONSE_FORMAT, options, registry=registry)


def class_to_openai_response_api_tool(
    cls: type, options: RenderOptions | None = None, *, registry: SchemaRegistry | None = None
) -> Envelope:
    return render_class(cls, WireFormat.OPENAI_RESPONSE_API_TOOL, options, registry=registry)


def class_to_openai_response_api_text_schema(
    cls: type, options: RenderOptions | None = None, *, registry: SchemaRegistry | None = None
) -> Envelope:
    return render_class(cls, WireFormat.OPENAI_RESPONSE_API_TEXT, options, registry=registry)


def class_to_anthropic_tool(
    cls: type, options: RenderOptions | None = None, *, registry: SchemaRegistry | None = None
) -> Envelope:
    return render_class(cls, WireFormat.ANTHROPIC_TOOL, options, registry=registry)


def class_to_gemini_tool(
    cls: type, options: RenderOptions | None = None, *, registry: SchemaRegistry | None = None
) -> Envelope:
    return render_class(cls, WireFormat.GEMINI_TOOL, options, registry=registry)


def class_to_gemini_old_tool(
    cls: type, options: RenderOptions | None = None, *, registry: SchemaRegistry | None = None
) -> Envelope:
    return render_class(cls, WireFormat.GEMINI_OLD_TOOL, options, registry=registry)


def class_to_gemini_response_schema(
    cls: type, options: RenderOptions | None = None, *, registry: SchemaRegistry | None = None
) -> Envelope:
    return render_class(cls, WireFormat.GEMINI_RESPONSE_SCHEMA, options, registry=registry)


def class_to_gemini_old_response_schema(
    cls: type, options: RenderOptions | None = None, *, registry: SchemaRegistry | None = None
) -> Envelope:
    return render_class(cls, WireFormat.GEMINI_OLD_RESPONSE_SCHEMA, options, registry=registry)


def class_to_vertex_tool(
    cls: type, options: RenderOptions | None = None, *, registry: SchemaRegistry | None = None
) -> Envelope:
    return render_class(cls, WireFormat.VERTEX_TOOL, options, registry=registry)


def class_to_vertex_response_schema(
    cls: type, options: RenderOptions | None = None, *, registry: SchemaRegistry | None = None
) -> Envelope:
    return render_class(cls, WireFormat.VERTEX_RESPONSE_SCHEMA, options, registry=registry)
