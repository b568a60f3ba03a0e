"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from schema_field_resolver.cli import main


def test_missing_option_value_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate-config", "--output"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "--output" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["fields", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_format_choice_returns_clean_click_error(capsys) -> None:
    exit_code = main(["fields", "--schema", "schema.json", "--format", "xml"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "--format" in captured.err


def test_fields_without_schema_source_returns_cli_error(capsys) -> None:
    exit_code = main(["fields"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Provide exactly one of --config or --schema." in captured.err


def test_fields_with_both_schema_sources_returns_cli_error(capsys) -> None:
    exit_code = main(["fields", "--config", "config.yaml", "--schema", "schema.json"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Provide exactly one of --config or --schema." in captured.err


def test_fields_with_unresolvable_schema_returns_cli_error(tmp_path: Path, capsys) -> None:
    schema_path = tmp_path / "schema.json"
    schema_path.write_text(
        '{"type": "object", "properties": {"a": {"$ref": "http://example.com/a.json"}}}',
        encoding="utf-8",
    )

    exit_code = main(["fields", "--schema", str(schema_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Reference not Supported: http://example.com/a.json" in captured.err
    assert "Traceback" not in captured.err


def test_fields_with_non_utf8_schema_returns_cli_error(tmp_path: Path, capsys) -> None:
    schema_path = tmp_path / "schema.json"
    schema_path.write_bytes(b'{"type": "object", "title": "\xff"}')

    exit_code = main(["fields", "--schema", str(schema_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Schema file is not valid UTF-8" in captured.err
    assert "Traceback" not in captured.err
