"""Tool catalog scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CATALOG_FILENAME = "tools.yaml"

_CATALOG_SCAFFOLD_TEMPLATE = """# Tool catalog template for schema-forge.
# Every key under tools becomes one tool class. Replace the <REQUIRED> placeholders
# and delete the properties you do not need before running render.

tools:
  Location:
    description: "<OPTIONAL>"
    properties:
      country:
        # Types: string, number, integer, boolean, array, object or an earlier tool key.
        type: string
        description: "<REQUIRED>"

  Example:
    # name and description end up in the provider envelope.
    name: "<REQUIRED>"
    description: "<REQUIRED>"
    # extends: Location
    properties:
      title:
        type: string
        description: "<REQUIRED>"
      status:
        # An enum without a type takes the kind of its first value.
        enum: [OPEN, CLOSED]
      home:
        type: Location
        description: "<OPTIONAL>"
      tags:
        # Arrays need items (or an enum).
        type: array
        items:
          type: string
      nickname:
        type: string
        optional: true
        constraints:
          maxLength: 20
"""


def build_placeholder_catalog() -> str:
    """Build a YAML tool catalog template with placeholders and inline guidance."""
    return _CATALOG_SCAFFOLD_TEMPLATE


def write_placeholder_catalog(output_path: Path | str) -> Path:
    """Write the placeholder tool catalog to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Tool catalog file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_catalog(), encoding="utf-8")
    return destination.resolve()
