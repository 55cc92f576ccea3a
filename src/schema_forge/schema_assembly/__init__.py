"""Schema assembly exports."""

from .schema_assembler import AssembledSchema, PropertyOverrides, assemble_schema

__all__ = ["AssembledSchema", "PropertyOverrides", "assemble_schema"]
