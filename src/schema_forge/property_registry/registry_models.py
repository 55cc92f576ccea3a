"""Property registry entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from schema_forge.path_overrides import OverrideContext


@dataclass(frozen=True)
class PropertyOptions:
    """Options attached to one property declaration."""

    description: str | None = None
    enum: Any = None
    items: Mapping[str, Any] | None = None
    is_optional: bool = False
    type: Any = None
    constraints: Mapping[str, Any] | None = None


@dataclass
class ClassRegistry:
    """Accumulated schema state of one class."""

    properties: dict[str, dict[str, Any]] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)
    declared_types: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ClassMetadata:
    """Class-level name and description used by provider envelopes."""

    name: str = ""
    description: str = ""


@dataclass(frozen=True)
class RegistrySnapshot:
    """Detached copy of a class registry, safe to mutate."""

    properties: dict[str, dict[str, Any]]
    required: list[str]
    context: OverrideContext
