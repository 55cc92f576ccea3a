"""Property registry exports."""

from .class_registry import (
    CyclicSchemaError,
    MissingArrayItemTypeError,
    MissingPropertyTypeError,
    SchemaDeclarationError,
    SchemaRegistry,
    add_schema_property,
    class_metadata,
    declare_class_metadata,
    declare_property,
    default_registry,
    register_class,
    update_schema_property,
)
from .declarations import ToolProp, declare_annotated_properties, tool_dto, tool_meta, tool_prop
from .registry_models import ClassMetadata, ClassRegistry, PropertyOptions, RegistrySnapshot

__all__ = [
    "ClassMetadata",
    "ClassRegistry",
    "CyclicSchemaError",
    "MissingArrayItemTypeError",
    "MissingPropertyTypeError",
    "PropertyOptions",
    "RegistrySnapshot",
    "SchemaDeclarationError",
    "SchemaRegistry",
    "ToolProp",
    "add_schema_property",
    "class_metadata",
    "declare_annotated_properties",
    "declare_class_metadata",
    "declare_property",
    "default_registry",
    "register_class",
    "tool_dto",
    "tool_meta",
    "tool_prop",
    "update_schema_property",
]
