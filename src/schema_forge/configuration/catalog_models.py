"""Tool catalog entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from schema_forge.property_registry import SchemaRegistry


class ConfigurationError(Exception):
    """Raised when the tool catalog file is invalid."""


@dataclass(frozen=True)
class ToolCatalog:
    """Tool classes declared from one catalog file, with the registry holding them."""

    path: Path
    registry: SchemaRegistry
    tools: Mapping[str, type]

    def tool(self, key: str) -> type:
        try:
            return self.tools[key]
        except KeyError as exc:
            known = ", ".join(self.tools) or "none"
            raise ConfigurationError(
                f"Unknown tool '{key}' in {self.path} (defined tools: {known})"
            ) from exc
