"""Command line interface entry point."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import click

from schema_forge.configuration import (
    DEFAULT_CATALOG_FILENAME,
    ConfigurationError,
    load_tool_catalog,
    write_placeholder_catalog,
)
from schema_forge.property_registry import SchemaDeclarationError
from schema_forge.provider_rendering import (
    RenderOptions,
    WireFormat,
    WireFormatError,
    render_class,
    schema_from_wire_format,
    wire_format_from_schema,
)

_FORMAT_NAMES = [wire_format.value for wire_format in WireFormat]


class CliError(Exception):
    """Custom CLI error."""


def _structured_output_options(command: Any) -> Any:
    command = click.option(
        "--handle-optionals",
        is_flag=True,
        default=False,
        help="Encode originally optional properties as nullable types.",
    )(command)
    command = click.option(
        "--strict/--no-strict",
        default=None,
        help="Force the strict flag of OpenAI envelopes (strict implies structured output).",
    )(command)
    command = click.option(
        "--structured-output",
        "structured_output",
        is_flag=True,
        default=False,
        help="Close every object node and require all properties.",
    )(command)
    return command


def _format_option(command: Any) -> Any:
    return click.option(
        "--format",
        "format_name",
        required=True,
        type=click.Choice(_FORMAT_NAMES, case_sensitive=False),
        help="Target wire format",
    )(command)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-forge")
def cli() -> None:
    """Render tool schemas for LLM provider APIs."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CATALOG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML tool catalog template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML tool catalog with guidance comments."""
    try:
        resolved_output = write_placeholder_catalog(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="formats")
def list_formats() -> None:
    """List the supported wire formats."""
    for name in _FORMAT_NAMES:
        click.echo(name)


@cli.command(name="render")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON tool catalog file",
)
@click.option("--tool", "tool_key", required=True, help="Tool key inside the catalog")
@_format_option
@_structured_output_options
@click.option(
    "--override",
    "overrides",
    multiple=True,
    metavar="PATH=JSON",
    help="Temporary property override, e.g. 'location.country={\"description\": \"...\"}'.",
)
def render(
    config_path: str,
    tool_key: str,
    format_name: str,
    structured_output: bool,
    strict: bool | None,
    handle_optionals: bool,
    overrides: tuple[str, ...],
) -> None:
    """Render one catalog tool as a provider envelope."""
    options = RenderOptions(
        property_overrides=_parse_overrides(overrides) or None,
        for_structured_output=structured_output,
        strict=strict,
        handle_optionals=handle_optionals,
    )
    try:
        catalog = load_tool_catalog(config_path)
        envelope = render_class(
            catalog.tool(tool_key), format_name, options, registry=catalog.registry
        )
    except (ConfigurationError, SchemaDeclarationError, WireFormatError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(json.dumps(envelope, indent=2))


@cli.command(name="convert")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a JSON file holding a provider envelope",
)
@_format_option
@_structured_output_options
def convert(
    input_path: str,
    format_name: str,
    structured_output: bool,
    strict: bool | None,
    handle_optionals: bool,
) -> None:
    """Re-render a provider envelope in another wire format."""
    try:
        wire_object = json.loads(Path(input_path).read_text(encoding="utf-8"))
        extracted = schema_from_wire_format(wire_object)
        envelope = wire_format_from_schema(
            extracted.schema,
            extracted.metadata,
            format_name,
            RenderOptions(
                for_structured_output=structured_output,
                strict=strict,
                handle_optionals=handle_optionals,
            ),
        )
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CliError(f"Failed to parse {input_path}: {exc}") from exc
    except (WireFormatError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(json.dumps(envelope, indent=2))


def _parse_overrides(raw_overrides: Sequence[str]) -> dict[str, dict[str, Any]]:
    overrides: dict[str, dict[str, Any]] = {}
    for raw in raw_overrides:
        path, separator, payload = raw.partition("=")
        if not separator or not path.strip():
            raise CliError(f"Override must look like PATH=JSON: {raw}")
        try:
            update = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise CliError(f"Override for {path.strip()} is not valid JSON: {exc}") from exc
        if not isinstance(update, dict):
            raise CliError(f"Override for {path.strip()} must be a JSON object.")
        overrides[path.strip()] = update
    return overrides


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
