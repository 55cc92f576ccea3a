"""Schema assembly service."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from schema_forge.path_overrides import apply_override, split_path
from schema_forge.property_registry import SchemaRegistry, default_registry

AssembledSchema = dict[str, Any]
PropertyOverrides = Mapping[str, Mapping[str, Any]]


def assemble_schema(
    cls: type,
    overrides: PropertyOverrides | None = None,
    *,
    registry: SchemaRegistry | None = None,
) -> AssembledSchema:
    """Build the root object schema of ``cls``.

    ``overrides`` maps dotted property paths to partial descriptor updates. They are
    applied in insertion order to a private copy of the registry and never persist.
    """
    store = registry if registry is not None else default_registry
    snapshot = store.snapshot(cls)
    for path, update in (overrides or {}).items():
        apply_override(snapshot.properties, split_path(path), update, snapshot.context)

    schema: AssembledSchema = {"type": "object", "properties": snapshot.properties}
    if snapshot.required:
        schema["required"] = snapshot.required
    return schema
