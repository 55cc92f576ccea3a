"""Decorator front-end over the property registry.

Properties are declared with ``typing.Annotated`` markers and collected by a class
decorator, in the order the class body annotates them::

    @tool_meta(name="find_capital", description="Find the capital of a given state")
    class CapitalTool:
        name: Annotated[str, tool_prop(description="The name of the capital to find")]
"""

from __future__ import annotations

import inspect
import types
import typing
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Annotated, Any, TypeVar

from .class_registry import SchemaRegistry, default_registry
from .registry_models import PropertyOptions

_ClassT = TypeVar("_ClassT", bound=type)


@dataclass(frozen=True)
class ToolProp:
    """``Annotated`` marker carrying the options of one property.

    ``is_optional`` left as ``None`` is inferred from the annotation: ``T | None``
    makes the property optional.
    """

    description: str | None = None
    enum: Any = None
    items: Mapping[str, Any] | None = None
    is_optional: bool | None = None
    type: Any = None
    constraints: Mapping[str, Any] | None = None

    def to_options(self, *, inferred_optional: bool) -> PropertyOptions:
        is_optional = inferred_optional if self.is_optional is None else self.is_optional
        return PropertyOptions(
            description=self.description,
            enum=self.enum,
            items=self.items,
            is_optional=is_optional,
            type=self.type,
            constraints=self.constraints,
        )


def tool_prop(
    *,
    description: str | None = None,
    enum: Any = None,
    items: Mapping[str, Any] | None = None,
    is_optional: bool | None = None,
    type: Any = None,
    constraints: Mapping[str, Any] | None = None,
) -> ToolProp:
    return ToolProp(
        description=description,
        enum=enum,
        items=items,
        is_optional=is_optional,
        type=type,
        constraints=constraints,
    )


def tool_dto(
    cls: _ClassT | None = None, *, registry: SchemaRegistry | None = None
) -> Any:
    """Declare every ``Annotated[..., tool_prop(...)]`` attribute of the decorated class."""

    def decorate(target: _ClassT) -> _ClassT:
        declare_annotated_properties(target, registry=registry)
        return target

    if cls is None:
        return decorate
    return decorate(cls)


def tool_meta(
    *,
    name: str | None = None,
    description: str | None = None,
    registry: SchemaRegistry | None = None,
) -> Callable[[_ClassT], _ClassT]:
    """Attach class metadata and declare the class's annotated properties."""
    store = registry if registry is not None else default_registry

    def decorate(target: _ClassT) -> _ClassT:
        store.declare_class_metadata(target, name=name, description=description)
        declare_annotated_properties(target, registry=store)
        return target

    return decorate


def declare_annotated_properties(cls: type, *, registry: SchemaRegistry | None = None) -> None:
    store = registry if registry is not None else default_registry
    own_names = list(inspect.get_annotations(cls))
    if not own_names:
        return
    hints = typing.get_type_hints(cls, include_extras=True)
    for name in own_names:
        hint = hints.get(name)
        if typing.get_origin(hint) is not Annotated:
            continue
        base, *metadata = typing.get_args(hint)
        marker = next((item for item in metadata if isinstance(item, ToolProp)), None)
        if marker is None:
            continue
        declared_type, inferred_optional = _unwrap_optional(base)
        store.declare_property(
            cls,
            name,
            declared_type,
            marker.to_options(inferred_optional=inferred_optional),
        )


def _unwrap_optional(hint: Any) -> tuple[Any, bool]:
    origin = typing.get_origin(hint)
    if origin is typing.Union or origin is types.UnionType:
        members = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(members) == 1:
            return members[0], True
    return hint, False
