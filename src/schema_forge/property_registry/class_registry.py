"""Per-class property registry service."""

from __future__ import annotations

import copy
import logging
import threading
import typing
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any

from schema_forge.path_overrides import (
    OverrideContext,
    apply_override,
    insert_property,
    split_path,
)
from schema_forge.type_normalization import (
    PrimitiveKind,
    classify_primitive,
    enum_kind,
    is_enum_type,
    is_structured_type,
    normalize_enum,
)

from .registry_models import ClassMetadata, ClassRegistry, PropertyOptions, RegistrySnapshot

_LOGGER = logging.getLogger(__name__)


class SchemaDeclarationError(Exception):
    """Raised when a property or class declaration cannot be turned into a schema."""


class MissingArrayItemTypeError(SchemaDeclarationError):
    """Raised when an array property is declared without item type information."""


class MissingPropertyTypeError(SchemaDeclarationError):
    """Raised when a property is added without a type or an enum."""


class CyclicSchemaError(SchemaDeclarationError):
    """Raised when a nested class refers back to a class being resolved."""


class SchemaRegistry:
    """Store of class registries and class metadata, keyed by class identity.

    Reads of a class without its own registry fall back to the nearest registered
    ancestor. The first write to such a class seeds its own registry from a deep
    copy of the ancestor's, so ancestors never observe child mutations.
    """

    def __init__(self) -> None:
        self._entries: dict[type, ClassRegistry] = {}
        self._metadata: dict[type, ClassMetadata] = {}
        self._parents: dict[type, type] = {}
        self._resolving: list[type] = []
        self._lock = threading.RLock()

    def register_class(self, cls: type, *, extends: type | None = None) -> None:
        """Record ``extends`` as the parent whose properties ``cls`` inherits."""
        with self._lock:
            if extends is None:
                self._parents.pop(cls, None)
            else:
                self._parents[cls] = extends

    def is_registered(self, cls: type) -> bool:
        with self._lock:
            return cls in self._entries

    def parent_of(self, cls: type) -> type | None:
        with self._lock:
            explicit = self._parents.get(cls)
            if explicit is not None:
                return explicit
            for klass in self._lineage(cls):
                if klass is not cls and klass in self._entries:
                    return klass
        return None

    def declare_property(
        self,
        cls: type,
        name: str,
        declared_type: Any,
        options: PropertyOptions | None = None,
    ) -> None:
        """Declare one property of ``cls``.

        Args:
          cls: Class that owns the property.
          name: Property name.
          declared_type: Caller-stated type token of the property.
          options: Description, enum, items, optionality and overrides.

        Raises:
          MissingArrayItemTypeError: If an array property has neither items nor enum.
          CyclicSchemaError: If a nested class resolves back to ``cls``.
        """
        options = options or PropertyOptions()
        with self._lock:
            with self._resolving_class(cls):
                descriptor = self._build_descriptor(cls, name, declared_type, options)

            entry = self._seed(cls)
            entry.properties[name] = descriptor
            entry.declared_types[name] = declared_type
            if options.is_optional:
                entry.required = [prop for prop in entry.required if prop != name]
            elif name not in entry.required:
                entry.required.append(name)
            self._entries[cls] = entry
        _LOGGER.debug(
            "Declared %s.%s as %s", cls.__qualname__, name, descriptor.get("type")
        )

    def declare_class_metadata(
        self, cls: type, *, name: str | None = None, description: str | None = None
    ) -> None:
        with self._lock:
            self._metadata[cls] = ClassMetadata(name=name or "", description=description or "")

    def metadata_for(self, cls: type) -> ClassMetadata:
        """Return the class metadata of ``cls`` or its nearest annotated ancestor."""
        with self._lock:
            for klass in self._lineage(cls):
                if klass in self._metadata:
                    return self._metadata[klass]
        return ClassMetadata()

    def snapshot(self, cls: type) -> RegistrySnapshot:
        """Return a deep copy of the registry visible for ``cls``."""
        with self._lock:
            entry = self._readable_entry(cls)
            if entry is None:
                return RegistrySnapshot(properties={}, required=[], context=OverrideContext())
            return RegistrySnapshot(
                properties=copy.deepcopy(entry.properties),
                required=list(entry.required),
                context=OverrideContext(
                    declared_types=dict(entry.declared_types),
                    stored_properties=MappingProxyType(copy.deepcopy(entry.properties)),
                ),
            )

    def nested_schema(self, cls: type) -> dict[str, Any]:
        """Return the object schema ``cls`` contributes when used as a nested type."""
        with self._lock:
            if cls in self._resolving:
                chain = " -> ".join(klass.__qualname__ for klass in (*self._resolving, cls))
                raise CyclicSchemaError(f"Cyclic schema reference: {chain}")
            snapshot = self.snapshot(cls)
        schema: dict[str, Any] = {
            "type": PrimitiveKind.OBJECT.value,
            "properties": snapshot.properties,
        }
        if snapshot.required:
            schema["required"] = snapshot.required
        return schema

    def update_property(self, cls: type, path: str, updates: Mapping[str, Any]) -> None:
        """Permanently apply ``updates`` at ``path`` in the stored registry of ``cls``."""
        with self._lock:
            entry = self._own_entry(cls)
            context = OverrideContext(
                declared_types=entry.declared_types, stored_properties=entry.properties
            )
            apply_override(entry.properties, split_path(path), updates, context)
        _LOGGER.debug("Updated %s.%s with %s", cls.__qualname__, path, sorted(updates))

    def add_property(self, cls: type, path: str, options: PropertyOptions) -> None:
        """Insert a new property at ``path`` without going through a declaration.

        Top-level properties join the class's required list and nested ones join the
        ``required`` list of the node that owns them, unless ``options.is_optional``.

        Raises:
          MissingPropertyTypeError: If ``options`` has neither ``type`` nor ``enum``.
        """
        segments = split_path(path)
        with self._lock:
            with self._resolving_class(cls):
                descriptor = self._added_descriptor(cls, path, options)
            entry = self._own_entry(cls)
            container = insert_property(entry.properties, segments, descriptor)
            if not options.is_optional:
                required = entry.required if container is None else container.setdefault(
                    "required", []
                )
                if segments[-1] not in required:
                    required.append(segments[-1])
        _LOGGER.debug("Added %s.%s as %s", cls.__qualname__, path, descriptor.get("type"))

    def _build_descriptor(
        self, cls: type, name: str, declared_type: Any, options: PropertyOptions
    ) -> dict[str, Any]:
        kind = classify_primitive(declared_type)
        explicit_kind = classify_primitive(options.type) if options.type is not None else None
        enum_source = options.enum
        if enum_source is None and is_enum_type(declared_type):
            enum_source = declared_type

        descriptor: dict[str, Any]
        if PrimitiveKind.ARRAY in (kind, explicit_kind):
            descriptor = {
                "type": PrimitiveKind.ARRAY.value,
                "items": self._array_items(cls, name, declared_type, options),
            }
        elif enum_source is not None:
            values = normalize_enum(enum_source)
            descriptor = {"type": enum_kind(values), "enum": values}
        elif is_structured_type(declared_type):
            nested = self.nested_schema(declared_type)
            descriptor = {"type": PrimitiveKind.OBJECT.value, "properties": nested["properties"]}
            if "required" in nested:
                descriptor["required"] = nested["required"]
        elif explicit_kind is not None:
            descriptor = {"type": explicit_kind.value}
        else:
            descriptor = {"type": kind.value}

        return _with_common_fields(descriptor, options)

    def _array_items(
        self, cls: type, name: str, declared_type: Any, options: PropertyOptions
    ) -> dict[str, Any]:
        if options.enum is not None:
            values = normalize_enum(options.enum)
            return {"type": enum_kind(values), "enum": values}
        items = options.items
        if items is None:
            element = _element_type(declared_type)
            if element is None:
                raise MissingArrayItemTypeError(
                    f'Array property "{name}" of {cls.__qualname__} needs explicit '
                    "item type information (items or enum)."
                )
            items = {"type": element}
        return self._resolve_items(items)

    def _resolve_items(self, items: Mapping[str, Any]) -> dict[str, Any]:
        item_type = items.get("type")
        if is_structured_type(item_type):
            return self.nested_schema(item_type)
        resolved = copy.deepcopy(dict(items))
        if is_enum_type(item_type) and resolved.get("enum") is None:
            values = normalize_enum(item_type)
            return {"type": enum_kind(values), "enum": values}
        if item_type is not None and not isinstance(item_type, str):
            resolved["type"] = classify_primitive(item_type).value
        if resolved.get("enum") is not None:
            resolved["enum"] = normalize_enum(resolved["enum"])
        return resolved

    def _added_descriptor(
        self, cls: type, path: str, options: PropertyOptions
    ) -> dict[str, Any]:
        values: list[Any] | None = None
        if options.enum is not None:
            values = normalize_enum(options.enum)
            json_type = enum_kind(values)
        elif options.type is None:
            raise MissingPropertyTypeError(
                f'Property "{path}" of {cls.__qualname__}: either type or enum must be specified.'
            )
        elif is_structured_type(options.type):
            nested = self.nested_schema(options.type)
            return _with_common_fields(nested, options)
        else:
            json_type = classify_primitive(options.type).value

        descriptor: dict[str, Any] = {"type": json_type}
        if values is not None:
            descriptor["enum"] = values
        if options.items is not None:
            descriptor = {
                "type": PrimitiveKind.ARRAY.value,
                "items": self._resolve_items(options.items),
            }
        return _with_common_fields(descriptor, options)

    def _seed(self, cls: type) -> ClassRegistry:
        own = self._entries.get(cls)
        parent = self.parent_of(cls)
        inherited = self._readable_entry(parent) if parent is not None else None
        if inherited is None:
            return copy.deepcopy(own) if own is not None else ClassRegistry()

        seeded = ClassRegistry(
            properties=copy.deepcopy(inherited.properties),
            required=list(inherited.required),
            declared_types=dict(inherited.declared_types),
        )
        if own is None:
            return seeded

        seeded.properties.update(copy.deepcopy(own.properties))
        seeded.declared_types.update(own.declared_types)
        # Properties the class already holds keep the optionality it gave them.
        required = [
            prop
            for prop in seeded.required
            if prop in own.required or prop not in own.properties
        ]
        required.extend(prop for prop in own.required if prop not in required)
        seeded.required = required
        return seeded

    def _own_entry(self, cls: type) -> ClassRegistry:
        entry = self._entries.get(cls)
        if entry is None:
            entry = self._entries[cls] = self._seed(cls)
        return entry

    def _readable_entry(self, cls: type) -> ClassRegistry | None:
        for klass in self._lineage(cls):
            if klass in self._entries:
                return self._entries[klass]
        return None

    def _lineage(self, cls: type) -> Iterator[type]:
        """Yield ``cls`` and its ancestors, following explicit parents before the MRO."""
        seen: set[type] = set()
        pending: list[tuple[type, bool]] = [(cls, True)]
        while pending:
            current, walk_mro = pending.pop(0)
            if current is object or current in seen:
                continue
            seen.add(current)
            yield current
            explicit = self._parents.get(current)
            if explicit is not None:
                pending.insert(0, (explicit, True))
            elif walk_mro:
                pending[0:0] = [(klass, False) for klass in current.__mro__[1:]]

    @contextmanager
    def _resolving_class(self, cls: type) -> Iterator[None]:
        self._resolving.append(cls)
        try:
            yield
        finally:
            self._resolving.pop()


def _element_type(declared_type: Any) -> Any:
    args = typing.get_args(declared_type)
    return args[0] if args else None


def _with_common_fields(descriptor: dict[str, Any], options: PropertyOptions) -> dict[str, Any]:
    if options.description is not None:
        descriptor["description"] = options.description
    if options.constraints:
        descriptor.update(copy.deepcopy(dict(options.constraints)))
    return descriptor


default_registry = SchemaRegistry()


def _resolve(registry: SchemaRegistry | None) -> SchemaRegistry:
    return registry if registry is not None else default_registry


def register_class(
    cls: type, *, extends: type | None = None, registry: SchemaRegistry | None = None
) -> None:
    _resolve(registry).register_class(cls, extends=extends)


def declare_property(
    cls: type,
    name: str,
    declared_type: Any,
    options: PropertyOptions | None = None,
    *,
    registry: SchemaRegistry | None = None,
) -> None:
    """Declare one property of ``cls`` in ``registry`` (the default registry when omitted)."""
    _resolve(registry).declare_property(cls, name, declared_type, options)


def declare_class_metadata(
    cls: type,
    *,
    name: str | None = None,
    description: str | None = None,
    registry: SchemaRegistry | None = None,
) -> None:
    _resolve(registry).declare_class_metadata(cls, name=name, description=description)


def class_metadata(cls: type, *, registry: SchemaRegistry | None = None) -> ClassMetadata:
    return _resolve(registry).metadata_for(cls)


def update_schema_property(
    cls: type,
    path: str,
    updates: Mapping[str, Any],
    *,
    registry: SchemaRegistry | None = None,
) -> None:
    """Permanently override the property at dotted ``path`` of ``cls``."""
    _resolve(registry).update_property(cls, path, updates)


def add_schema_property(
    cls: type,
    path: str,
    options: PropertyOptions,
    *,
    registry: SchemaRegistry | None = None,
) -> None:
    """Add a new property at dotted ``path`` of ``cls``."""
    _resolve(registry).add_property(cls, path, options)
