"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_field_resolver.schema_management.schema_projection import (
    JSON_SCHEMA_TYPE,
    SchemaError,
    flatten_schema,
    load_schema_document,
)

from .runtime_settings import (
    OUTPUT_FORMATS,
    TEXT_OUTPUT_FORMAT,
    Configuration,
    OutputSettings,
    ResolutionSettings,
    SchemaConfig,
)

_OUT_OF_SCOPE_SCHEMA_TYPES = ("avsc", "protobuf")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schema = _parse_schema_section(parsed.get("schema"), path.parent)
    resolution = _parse_resolution_section(parsed.get("resolution"))
    output = _parse_output_section(parsed.get("output"))
    try:
        flatten_schema(
            load_schema_document(schema, branch_selector=resolution.branch_selector())
        )
    except SchemaError as exc:
        raise ConfigurationError(str(exc)) from exc

    return Configuration(path=path, schema=schema, resolution=resolution, output=output)


def load_schema_config(schema_path: Path | str) -> SchemaConfig:
    """Build schema settings for a standalone JSON schema file."""
    path = Path(schema_path)
    text = _require_schema_text(_read_schema_file(path))
    return SchemaConfig(schema_type=JSON_SCHEMA_TYPE, text=text, source_path=path.resolve())


def _parse_schema_section(value: Any, base_path: Path) -> SchemaConfig:
    section = _require_mapping(value, "schema")
    for schema_type in _OUT_OF_SCOPE_SCHEMA_TYPES:
        if section.get(schema_type):
            raise ConfigurationError(
                f"Schema type '{schema_type}' is not supported; use {JSON_SCHEMA_TYPE}."
            )
    definition = section.get(JSON_SCHEMA_TYPE)
    if not definition:
        raise ConfigurationError(f"A {JSON_SCHEMA_TYPE} schema definition must be provided.")

    text, source_path = _load_schema_definition(definition, base_path)
    return SchemaConfig(
        schema_type=JSON_SCHEMA_TYPE, text=_require_schema_text(text), source_path=source_path
    )


def _load_schema_definition(definition: Any, base_path: Path) -> tuple[str, Path | None]:
    if isinstance(definition, str):
        return definition, None
    mapping = _require_mapping(definition, "schema definition")
    inline = mapping.get("inline")
    path_value = mapping.get("path")
    if inline and path_value:
        raise ConfigurationError("Schema definition must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError("Schema inline value must be a string.")
        return inline, None
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("Schema path must be a string.")
        schema_path = _resolve_path(base_path, path_value)
        return _read_schema_file(schema_path), schema_path
    raise ConfigurationError("Schema definition requires either inline or path.")


def _read_schema_file(schema_path: Path) -> str:
    if not schema_path.is_file():
        raise ConfigurationError(f"Schema file not found: {schema_path}")
    try:
        return schema_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Schema file is not valid UTF-8: {schema_path}") from exc


def _require_schema_text(text: str) -> str:
    if not text.strip():
        raise ConfigurationError("Schema text cannot be empty.")
    return text


def _parse_resolution_section(value: Any) -> ResolutionSettings:
    if value is None:
        return ResolutionSettings()
    section = _require_mapping(value, "resolution")
    seed = section.get("seed")
    if seed is None:
        return ResolutionSettings()
    return ResolutionSettings(seed=_require_int(seed, "resolution.seed"))


def _parse_output_section(value: Any) -> OutputSettings:
    if value is None:
        return OutputSettings()
    section = _require_mapping(value, "output")
    output_format = _require_non_empty_string(
        section.get("format", TEXT_OUTPUT_FORMAT), "output.format"
    ).lower()
    if output_format not in OUTPUT_FORMATS:
        raise ConfigurationError(
            f"output.format must be one of: {', '.join(OUTPUT_FORMATS)}."
        )
    return OutputSettings(format=output_format)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    return value
