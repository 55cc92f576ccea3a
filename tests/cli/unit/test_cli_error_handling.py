"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from schema_forge.cli import main


def _write_catalog(tmp_path: Path) -> Path:
    path = tmp_path / "tools.yaml"
    path.write_text(
        "tools:\n  Search:\n    properties:\n      query: {type: string}\n", encoding="utf-8"
    )
    return path


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["render", "--tool", "Search", "--format", "openai-tool"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--config" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["render", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_format_is_a_usage_error(tmp_path: Path, capsys) -> None:
    catalog = _write_catalog(tmp_path)

    exit_code = main(
        ["render", "--config", str(catalog), "--tool", "Search", "--format", "bedrock"]
    )
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "bedrock" in captured.err


def test_missing_catalog_returns_error_code(tmp_path: Path, capsys) -> None:
    exit_code = main(
        [
            "render",
            "--config",
            str(tmp_path / "missing.yaml"),
            "--tool",
            "Search",
            "--format",
            "openai-tool",
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Tool catalog file not found" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_tool_returns_error_code(tmp_path: Path, capsys) -> None:
    catalog = _write_catalog(tmp_path)

    exit_code = main(
        ["render", "--config", str(catalog), "--tool", "Nope", "--format", "openai-tool"]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Unknown tool 'Nope'" in captured.err


def test_malformed_override_returns_error_code(tmp_path: Path, capsys) -> None:
    catalog = _write_catalog(tmp_path)

    exit_code = main(
        [
            "render",
            "--config",
            str(catalog),
            "--tool",
            "Search",
            "--format",
            "openai-tool",
            "--override",
            "query={not json}",
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Override for query is not valid JSON" in captured.err


def test_convert_rejects_unrecognized_envelope(tmp_path: Path, capsys) -> None:
    input_path = tmp_path / "envelope.json"
    input_path.write_text('{"type": "string"}', encoding="utf-8")

    exit_code = main(["convert", "--input", str(input_path), "--format", "gemini-tool"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Unrecognized wire object shape" in captured.err


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    existing = tmp_path / "tools.yaml"
    existing.write_text("tools: {}\n", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(existing)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err


def test_convert_rejects_non_utf8_input(tmp_path: Path, capsys) -> None:
    input_path = tmp_path / "envelope.json"
    input_path.write_bytes(b"\xff\xfe{}")

    exit_code = main(["convert", "--input", str(input_path), "--format", "openai-tool"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to parse" in captured.err
    assert "Traceback" not in captured.err


def test_render_rejects_non_utf8_catalog(tmp_path: Path, capsys) -> None:
    catalog = tmp_path / "tools.yaml"
    catalog.write_bytes(b"tools:\n  \xff: {}\n")

    exit_code = main(
        ["render", "--config", str(catalog), "--tool", "Search", "--format", "openai-tool"]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "not valid UTF-8" in captured.err
    assert "Traceback" not in captured.err
