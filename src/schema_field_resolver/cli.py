"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Sequence

import click

from schema_field_resolver.configuration import (
    DEFAULT_CONFIG_FILENAME,
    OUTPUT_FORMATS,
    ConfigurationError,
    ResolutionSettings,
    load_configuration,
    load_schema_config,
    write_placeholder_configuration,
)
from schema_field_resolver.configuration.runtime_settings import (
    JSON_OUTPUT_FORMAT,
    TEXT_OUTPUT_FORMAT,
)
from schema_field_resolver.schema_management import (
    FlattenedField,
    SchemaError,
    flatten_schema,
    load_schema_document,
)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-field-resolver")
def cli() -> None:
    """JSON schema field resolution utility."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="fields")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--schema",
    "schema_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a JSON schema file (instead of --config)",
)
@click.option(
    "--seed",
    required=False,
    type=int,
    help="Seed for reproducible anyOf/oneOf branch selection",
)
@click.option(
    "--format",
    "output_format",
    required=False,
    type=click.Choice(OUTPUT_FORMATS),
    help="Output format; defaults to the configured format or text",
)
@click.option("--verbose", is_flag=True, default=False, help="Log resolution steps to stderr.")
def list_fields(
    config_path: str | None,
    schema_path: str | None,
    seed: int | None,
    output_format: str | None,
    verbose: bool,
) -> None:
    """Resolve a JSON schema and print its flattened field list."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format=_LOG_FORMAT)
    if (config_path is None) == (schema_path is None):
        raise CliError("Provide exactly one of --config or --schema.")

    try:
        if config_path is not None:
            configuration = load_configuration(config_path)
            schema_config = configuration.schema
            resolution = configuration.resolution
            output_format = output_format or configuration.output.format
        else:
            schema_config = load_schema_config(schema_path or "")
            resolution = ResolutionSettings()
        if seed is not None:
            resolution = ResolutionSettings(seed=seed)
        fields = flatten_schema(
            load_schema_document(schema_config, branch_selector=resolution.branch_selector())
        )
    except (ConfigurationError, SchemaError, OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc

    click.echo(_render_fields(fields, output_format or TEXT_OUTPUT_FORMAT))


def _render_fields(fields: Sequence[FlattenedField], output_format: str) -> str:
    if output_format == JSON_OUTPUT_FORMAT:
        return json.dumps(
            [
                {"path": field.path, "type": field.field_type, "required": field.required}
                for field in fields
            ],
            indent=2,
        )
    return "\n".join(
        f"{field.path}{'*' if field.required else ''}\t{field.field_type}" for field in fields
    )


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
