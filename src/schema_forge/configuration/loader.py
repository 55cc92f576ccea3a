"""Tool catalog loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_forge.property_registry import (
    PropertyOptions,
    SchemaDeclarationError,
    SchemaRegistry,
)
from schema_forge.type_normalization import PrimitiveKind, classify_primitive

from .catalog_models import ConfigurationError, ToolCatalog

_LOGGER = logging.getLogger(__name__)

_TYPE_NAMES = frozenset({kind.value for kind in PrimitiveKind} | {"integer"})
_PROPERTY_KEYS = frozenset({"type", "description", "enum", "items", "optional", "constraints"})


def load_tool_catalog(catalog_path: Path | str) -> ToolCatalog:
    """Load a tool catalog file and declare its tools in a fresh registry.

    Raises:
      ConfigurationError: If the file is missing, unparsable or declares invalid tools.
    """
    path = Path(catalog_path)
    if not path.exists():
        raise ConfigurationError(f"Tool catalog file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Tool catalog file is not valid UTF-8: {path}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse tool catalog file: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Tool catalog root must be a mapping.")

    tools_section = _require_mapping(parsed.get("tools"), "tools")
    if not tools_section:
        raise ConfigurationError("Tool catalog must define at least one tool under 'tools'.")

    registry = SchemaRegistry()
    tools: dict[str, type] = {}
    for key, definition in tools_section.items():
        tool_key = _require_non_empty_string(key, "tools key")
        tools[tool_key] = _declare_tool(
            tool_key, _require_mapping(definition, f"tools.{tool_key}"), tools, registry
        )

    _LOGGER.debug("Loaded %d tools from %s", len(tools), path)
    return ToolCatalog(path=path, registry=registry, tools=tools)


def _declare_tool(
    key: str, definition: Mapping[str, Any], known: Mapping[str, type], registry: SchemaRegistry
) -> type:
    location = f"tools.{key}"
    parent: type | None = None
    extends = definition.get("extends")
    if extends is not None:
        parent_key = _require_non_empty_string(extends, f"{location}.extends")
        if parent_key not in known:
            raise ConfigurationError(
                f"{location}.extends '{parent_key}' must name a tool defined earlier in the file."
            )
        parent = known[parent_key]

    tool_cls = type(key, (parent,) if parent is not None else (), {"__module__": __name__})
    registry.register_class(tool_cls, extends=parent)

    name = _optional_string(definition.get("name"), f"{location}.name")
    description = _optional_string(definition.get("description"), f"{location}.description")
    registry.declare_class_metadata(tool_cls, name=name or key, description=description)

    properties = definition.get("properties")
    if properties is None and parent is None:
        raise ConfigurationError(f"{location}.properties is required.")
    for prop_name, prop_definition in _require_mapping(
        properties or {}, f"{location}.properties"
    ).items():
        prop_location = f"{location}.properties.{prop_name}"
        declared_type, options = _parse_property(
            _require_mapping(prop_definition, prop_location), prop_location, known
        )
        try:
            registry.declare_property(tool_cls, str(prop_name), declared_type, options)
        except SchemaDeclarationError as exc:
            raise ConfigurationError(f"{prop_location}: {exc}") from exc

    _LOGGER.debug("Declared tool %s", key)
    return tool_cls


def _parse_property(
    section: Mapping[str, Any], location: str, known: Mapping[str, type]
) -> tuple[Any, PropertyOptions]:
    unknown = sorted(str(key) for key in section if key not in _PROPERTY_KEYS)
    if unknown:
        raise ConfigurationError(f"{location} has unsupported keys: {', '.join(unknown)}.")

    raw_type = section.get("type")
    enum = section.get("enum")
    if raw_type is None and enum is None:
        raise ConfigurationError(f"{location} requires a type or an enum.")
    declared_type = (
        _resolve_type(raw_type, f"{location}.type", known) if raw_type is not None else None
    )

    if enum is not None and not isinstance(enum, (list, Mapping)):
        raise ConfigurationError(f"{location}.enum must be a list or a mapping.")

    items = section.get("items")
    resolved_items: dict[str, Any] | None = None
    if items is not None:
        items_section = _require_mapping(items, f"{location}.items")
        resolved_items = dict(items_section)
        if "type" in items_section:
            resolved_items["type"] = _resolve_type(
                items_section["type"], f"{location}.items.type", known
            )

    constraints = section.get("constraints")
    if constraints is not None:
        constraints = dict(_require_mapping(constraints, f"{location}.constraints"))

    optional = section.get("optional", False)
    if not isinstance(optional, bool):
        raise ConfigurationError(f"{location}.optional must be a boolean.")

    return declared_type, PropertyOptions(
        description=_optional_string(section.get("description"), f"{location}.description"),
        enum=enum,
        items=resolved_items,
        is_optional=optional,
        constraints=constraints,
    )


def _resolve_type(value: Any, location: str, known: Mapping[str, type]) -> Any:
    type_name = _require_non_empty_string(value, location)
    if type_name in known:
        return known[type_name]
    if type_name.lower() in _TYPE_NAMES:
        return classify_primitive(type_name.lower()).value
    raise ConfigurationError(
        f"{location} '{type_name}' is neither a JSON type nor a tool defined earlier in the file."
    )


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Tool catalog section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
