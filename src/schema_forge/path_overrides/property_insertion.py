"""Direct insertion of brand-new properties into a property tree."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from schema_forge.type_normalization import PrimitiveKind

from .override_resolver import NodeKind, PropertyTree, child_properties, node_kind


def insert_property(
    properties: PropertyTree,
    segments: Sequence[str],
    descriptor: dict[str, Any],
) -> dict[str, Any] | None:
    """Insert ``descriptor`` at ``segments``, fabricating wrapper nodes along the way.

    Array nodes are entered through ``items.properties``. Any other intermediate node
    that does not already hold a ``properties`` mapping is replaced by an empty object
    wrapper. Returns the node that owns the inserted property, or ``None`` when the
    property was inserted at the top level.
    """
    current = properties
    container: dict[str, Any] | None = None
    for segment in segments[:-1]:
        node = current.get(segment)
        if node is not None and node_kind(node) is NodeKind.ARRAY:
            container = node.setdefault("items", {})
            current = child_properties(node, NodeKind.ARRAY)
            continue
        if node is None or not isinstance(node.get("properties"), dict):
            node = current[segment] = {"type": PrimitiveKind.OBJECT.value, "properties": {}}
        container = node
        current = node["properties"]

    current[segments[-1]] = descriptor
    return container
