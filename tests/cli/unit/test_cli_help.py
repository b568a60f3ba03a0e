"""CLI smoke tests."""

from click.testing import CliRunner
from schema_field_resolver.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "fields" in result.output


def test_fields_help_lists_schema_sources() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["fields", "-h"])

    assert result.exit_code == 0
    assert "--config" in result.output
    assert "--schema" in result.output
    assert "--seed" in result.output
