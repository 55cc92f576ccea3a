"""Closed-schema normalization for providers with strict structured output.

Every object node gets ``additionalProperties: false`` and lists all of its
properties as required. Optionality is then expressed through a nullable type, and
keywords the providers reject are stripped according to the node's type.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_UNSUPPORTED_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("string", ("minLength", "maxLength", "pattern", "format")),
    ("number", ("minimum", "maximum", "multipleOf")),
    (
        "object",
        (
            "patternProperties",
            "unevaluatedProperties",
            "propertyNames",
            "minProperties",
            "maxProperties",
        ),
    ),
    (
        "array",
        (
            "unevaluatedItems",
            "contains",
            "minContains",
            "maxContains",
            "minItems",
            "maxItems",
            "uniqueItems",
        ),
    ),
)


def prepare_for_structured_output(node: Any, handle_optionals: bool = False) -> Any:
    """Return a normalized copy of ``node``; the input is never modified.

    Args:
      node: Schema node, or any value found inside one.
      handle_optionals: Rewrite the type of every originally optional property to
        ``[type, "null"]``.
    """
    if isinstance(node, list):
        return [prepare_for_structured_output(item, handle_optionals) for item in node]
    if not isinstance(node, Mapping):
        return node

    result = dict(node)
    if "properties" in result:
        _close_object(result, handle_optionals)
    _strip_unsupported(result)

    for key, value in result.items():
        if isinstance(value, (Mapping, list)):
            result[key] = prepare_for_structured_output(value, handle_optionals)
    return result


def _close_object(node: dict[str, Any], handle_optionals: bool) -> None:
    node["additionalProperties"] = False
    original_required = list(node.get("required") or [])
    properties = dict(node["properties"] or {})
    node["properties"] = properties
    if properties:
        node["required"] = list(properties)

    if not handle_optionals:
        return
    for name, prop in properties.items():
        if name in original_required or not isinstance(prop, Mapping) or not prop.get("type"):
            continue
        properties[name] = {**prop, "type": _nullable(prop["type"])}


def _nullable(type_value: Any) -> list[Any]:
    if isinstance(type_value, list):
        return type_value if "null" in type_value else [*type_value, "null"]
    return [type_value, "null"]


def _strip_unsupported(node: dict[str, Any]) -> None:
    node_type = node.get("type")
    for type_name, keywords in _UNSUPPORTED_KEYWORDS:
        if node_type == type_name or (isinstance(node_type, list) and type_name in node_type):
            for keyword in keywords:
                node.pop(keyword, None)
            return
