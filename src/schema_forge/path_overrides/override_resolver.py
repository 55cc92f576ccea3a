"""Dotted-path override resolution over JSON Schema property trees.

A property tree is the ``properties`` mapping of an object schema. Each hop of a
dotted path descends through ``properties`` when the current node is an object and
through ``items.properties`` when it is an array. Missing intermediate nodes are
created on the way down, so no path is ever rejected.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, MutableMapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from schema_forge.type_normalization import (
    PrimitiveKind,
    classify_primitive,
    enum_kind,
    normalize_enum,
)

PropertyTree = MutableMapping[str, Any]


class NodeKind(str, Enum):
    """Structural tag of a schema node."""

    LEAF = "leaf"
    OBJECT = "object"
    ARRAY = "array"


@dataclass(frozen=True)
class OverrideContext:
    """Read-only class data consulted while resolving an override.

    ``declared_types`` maps top-level property names to the type token they were
    declared with; a leaf enum override on a name declared as an array rewrites the
    array's ``items`` instead of the property itself. ``stored_properties`` is the
    registry's own property tree, used as a description fallback for nested enum
    targets that have none.
    """

    declared_types: Mapping[str, Any] = field(default_factory=dict)
    stored_properties: Mapping[str, Any] = field(default_factory=dict)


def node_kind(node: Mapping[str, Any]) -> NodeKind:
    node_type = node.get("type")
    if node_type == PrimitiveKind.ARRAY.value:
        return NodeKind.ARRAY
    if node_type == PrimitiveKind.OBJECT.value:
        return NodeKind.OBJECT
    return NodeKind.LEAF


def child_properties(node: MutableMapping[str, Any], kind: NodeKind) -> PropertyTree:
    """Return the mapping one level below ``node``, creating it when absent."""
    if kind is NodeKind.ARRAY:
        items = node.setdefault("items", {})
        return items.setdefault("properties", {})
    return node.setdefault("properties", {})


def split_path(path: str) -> list[str]:
    return path.split(".")


def apply_override(
    properties: PropertyTree,
    segments: Sequence[str],
    update: Mapping[str, Any],
    context: OverrideContext | None = None,
) -> None:
    """Apply ``update`` to the node addressed by ``segments``, mutating ``properties``."""
    context = context or OverrideContext()
    head, *rest = segments
    if not rest:
        _apply_leaf_update(properties, head, update, context)
        return

    node = properties.setdefault(head, {})
    if update.get("enum") is not None:
        fallback = _stored_description(context.stored_properties, segments)
        _apply_nested_enum(node, rest, update["enum"], fallback)
        return

    kind = node_kind(node)
    if kind is NodeKind.LEAF:
        # Untyped or scalar nodes have no level below them.
        return
    apply_override(child_properties(node, kind), rest, update, context)


def _apply_leaf_update(
    properties: PropertyTree,
    name: str,
    update: Mapping[str, Any],
    context: OverrideContext,
) -> None:
    descriptor = dict(properties.get(name) or {})
    normalized = _normalized_update(update)
    enum_source = normalized.pop("enum", None)
    if enum_source is not None:
        values = normalize_enum(enum_source)
        kind = enum_kind(values)
        if classify_primitive(context.declared_types.get(name)) is PrimitiveKind.ARRAY:
            descriptor["type"] = PrimitiveKind.ARRAY.value
            descriptor["items"] = {"type": kind, "enum": values}
        else:
            descriptor["type"] = kind
            descriptor["enum"] = values
    descriptor.update(normalized)
    properties[name] = descriptor


def _apply_nested_enum(
    node: MutableMapping[str, Any],
    rest: Sequence[str],
    enum_source: Any,
    fallback_description: str | None,
) -> None:
    kind = node_kind(node)
    if kind is NodeKind.LEAF:
        return
    values = normalize_enum(enum_source)
    value_kind = enum_kind(values)

    current = child_properties(node, kind)
    for segment in rest[:-1]:
        child = current.get(segment)
        if child is None:
            child = current[segment] = {"type": PrimitiveKind.OBJECT.value, "properties": {}}
        child_kind = NodeKind.ARRAY if node_kind(child) is NodeKind.ARRAY else NodeKind.OBJECT
        current = child_properties(child, child_kind)

    last = rest[-1]
    target = current.get(last)
    if target is not None and node_kind(target) is NodeKind.ARRAY:
        target["items"] = {"type": value_kind, "enum": values}
        return

    replacement = dict(target or {})
    replacement["type"] = value_kind
    replacement["enum"] = values
    description = (target or {}).get("description") or fallback_description
    if description is not None:
        replacement["description"] = description
    current[last] = replacement


def _stored_description(stored: Mapping[str, Any], segments: Sequence[str]) -> str | None:
    node: Mapping[str, Any] = stored
    for segment in segments:
        node = _first_mapping(
            node.get(segment),
            _dig(node, "items", "properties", segment),
            _dig(node, "properties", segment),
        )
    description = node.get("description")
    return description if isinstance(description, str) else None


def _dig(node: Mapping[str, Any], *keys: str) -> Any:
    current: Any = node
    for key in keys:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def _first_mapping(*candidates: Any) -> Mapping[str, Any]:
    for candidate in candidates:
        if isinstance(candidate, Mapping) and candidate:
            return candidate
    return {}


def _normalized_update(update: Mapping[str, Any]) -> dict[str, Any]:
    normalized = copy.deepcopy(dict(update))
    type_token = normalized.get("type")
    if type_token is not None and not isinstance(type_token, (str, list)):
        normalized["type"] = classify_primitive(type_token).value
    return normalized
