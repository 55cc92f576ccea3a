"""Configuration domain exports."""

from .catalog_models import ConfigurationError, ToolCatalog
from .catalog_scaffold_builder import (
    DEFAULT_CATALOG_FILENAME,
    build_placeholder_catalog,
    write_placeholder_catalog,
)
from .loader import load_tool_catalog

__all__ = [
    "ConfigurationError",
    "ToolCatalog",
    "load_tool_catalog",
    "DEFAULT_CATALOG_FILENAME",
    "build_placeholder_catalog",
    "write_placeholder_catalog",
]
