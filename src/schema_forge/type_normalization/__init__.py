"""Type and enum normalization exports."""

from .enum_values import enum_kind, normalize_enum
from .primitive_kinds import PrimitiveKind, classify_primitive, is_enum_type, is_structured_type

__all__ = [
    "PrimitiveKind",
    "classify_primitive",
    "enum_kind",
    "is_enum_type",
    "is_structured_type",
    "normalize_enum",
]
