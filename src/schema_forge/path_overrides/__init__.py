"""Path-addressed override exports."""

from .override_resolver import (
    NodeKind,
    OverrideContext,
    apply_override,
    child_properties,
    node_kind,
    split_path,
)
from .property_insertion import insert_property

__all__ = [
    "NodeKind",
    "OverrideContext",
    "apply_override",
    "child_properties",
    "insert_property",
    "node_kind",
    "split_path",
]
