"""Tool catalog scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from schema_forge.configuration import load_tool_catalog
from schema_forge.configuration.catalog_scaffold_builder import (
    DEFAULT_CATALOG_FILENAME,
    build_placeholder_catalog,
    write_placeholder_catalog,
)


def test_build_placeholder_catalog_contains_guidance() -> None:
    scaffold = build_placeholder_catalog()

    assert "Tool catalog template" in scaffold
    assert "tools:" in scaffold
    assert "properties:" in scaffold
    assert "items:" in scaffold
    assert "enum:" in scaffold
    assert "<REQUIRED>" in scaffold
    assert "<OPTIONAL>" in scaffold
    assert "# extends: Location" in scaffold


def test_write_placeholder_catalog_writes_file(tmp_path: Path) -> None:
    output_path = tmp_path / DEFAULT_CATALOG_FILENAME

    written_path = write_placeholder_catalog(output_path)

    assert written_path == output_path.resolve()
    assert "<REQUIRED>" in output_path.read_text(encoding="utf-8")


def test_written_scaffold_loads_as_catalog(tmp_path: Path) -> None:
    catalog = load_tool_catalog(write_placeholder_catalog(tmp_path / "tools.yaml"))

    assert list(catalog.tools) == ["Location", "Example"]


def test_write_placeholder_catalog_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "tools.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_catalog(output_path)
