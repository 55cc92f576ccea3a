"""Provider rendering entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class WireFormatError(Exception):
    """Raised for unknown wire format names or unrecognized envelope shapes."""


class WireFormat(str, Enum):
    """Supported provider envelopes."""

    OPENAI_TOOL = "openai-tool"
    OPENAI_RESPONSE_FORMAT = "openai-response-format"
    OPENAI_RESPONSE_API_TOOL = "openai-response-api-tool"
    OPENAI_RESPONSE_API_TEXT = "openai-response-api-text"
    ANTHROPIC_TOOL = "anthropic-tool"
    GEMINI_TOOL = "gemini-tool"
    GEMINI_OLD_TOOL = "gemini-old-tool"
    GEMINI_RESPONSE_SCHEMA = "gemini-response-schema"
    GEMINI_OLD_RESPONSE_SCHEMA = "gemini-old-response-schema"
    VERTEX_TOOL = "vertex-tool"
    VERTEX_RESPONSE_SCHEMA = "vertex-response-schema"


def parse_wire_format(value: WireFormat | str) -> WireFormat:
    if isinstance(value, WireFormat):
        return value
    try:
        return WireFormat(value.strip().lower())
    except ValueError as exc:
        supported = ", ".join(item.value for item in WireFormat)
        raise WireFormatError(
            f"Unsupported wire format: {value} (expected one of {supported})"
        ) from exc


@dataclass(frozen=True)
class RenderOptions:
    """Per-render configuration.

    ``strict=True`` implies structured-output normalization. Gemini and Vertex
    envelopes ignore both structured-output switches.
    """

    property_overrides: Mapping[str, Mapping[str, Any]] | None = None
    for_structured_output: bool = False
    strict: bool | None = None
    handle_optionals: bool = False

    @property
    def closes_schema(self) -> bool:
        return self.for_structured_output or self.strict is True
