"""Boundary tests for the schema engine's internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_engine_does_not_import_cli_or_configuration() -> None:
    package_dir = _project_root() / "src" / "schema_forge"
    engine_packages = (
        "type_normalization",
        "path_overrides",
        "property_registry",
        "schema_assembly",
        "structured_output",
        "provider_rendering",
    )
    forbidden_import_fragments = (
        "schema_forge.cli",
        "schema_forge.configuration",
        "import click",
        "import yaml",
    )

    for package in engine_packages:
        for module_path in sorted((package_dir / package).glob("*.py")):
            text = module_path.read_text(encoding="utf-8")
            for fragment in forbidden_import_fragments:
                assert fragment not in text, (
                    f"Forbidden engine dependency in {module_path}: {fragment}"
                )


def test_type_normalization_is_a_leaf_package() -> None:
    package_dir = _project_root() / "src" / "schema_forge" / "type_normalization"

    for module_path in sorted(package_dir.glob("*.py")):
        assert "from schema_forge." not in module_path.read_text(encoding="utf-8")
