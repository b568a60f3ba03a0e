"""Schema loading and flattening service."""

from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING

from schema_field_resolver.field_model import ArrayField, Field, FieldKind, MapField, ObjectField
from schema_field_resolver.schema_resolution import (
    BranchSelector,
    SchemaResolutionError,
    parse_json_schema,
)

from .schema_models import FlattenedField, SchemaDocument

if TYPE_CHECKING:
    from schema_field_resolver.configuration.runtime_settings import SchemaConfig

JSON_SCHEMA_TYPE = "json_schema"
ARRAY_PATH_SUFFIX = "[]"
MAP_PATH_SUFFIX = "[:]"
ARRAY_TYPE_SUFFIX = "-array"
MAP_TYPE_SUFFIX = "-map"


class SchemaError(Exception):
    """Raised for schema parsing or flattening failures."""


def load_schema_document(
    config: SchemaConfig, *, branch_selector: BranchSelector | None = None
) -> SchemaDocument:
    """Resolve configured schema text into a structured document."""
    if config.schema_type != JSON_SCHEMA_TYPE:
        raise SchemaError(f"Unsupported schema type: {config.schema_type}")
    try:
        schema = parse_json_schema(config.text, branch_selector=branch_selector)
    except SchemaResolutionError as exc:
        raise SchemaError(f"Invalid {config.schema_type} schema: {exc}") from exc

    return SchemaDocument(schema_type=config.schema_type, schema=schema)


def flatten_schema(document: SchemaDocument) -> list[FlattenedField]:
    """Return deterministic flattened fields.

    Every leaf becomes one entry keyed by its dotted path. Array members are
    addressed with ``[]`` and map values with ``[:]``; their type names carry
    ``-array``/``-map`` suffixes. A field counts as required when it is marked
    required itself or listed in its parent object's ``required`` names.
    """
    fields: list[FlattenedField] = []
    seen_paths: set[str] = set()

    root_required = set(document.schema.required_fields)
    for field in document.schema.properties:
        _flatten_field(
            field,
            path=_child_path("", field.name),
            type_suffix="",
            required=_is_required(field, root_required),
            fields=fields,
            seen_paths=seen_paths,
        )

    return fields


def _flatten_field(
    field: Field,
    *,
    path: str,
    type_suffix: str,
    required: bool,
    fields: list[FlattenedField],
    seen_paths: set[str],
) -> None:
    if isinstance(field, ObjectField):
        if not field.fields:
            _register_field(
                path, FieldKind.OBJECT.value + type_suffix, required, fields, seen_paths
            )
            return
        for child in field.fields:
            _flatten_field(
                child,
                path=_child_path(path, child.name),
                type_suffix="",
                required=_is_required(child, field.required),
                fields=fields,
                seen_paths=seen_paths,
            )
        return

    if isinstance(field, ArrayField):
        _flatten_field(
            field.element,
            path=path + ARRAY_PATH_SUFFIX,
            type_suffix=ARRAY_TYPE_SUFFIX + type_suffix,
            required=required,
            fields=fields,
            seen_paths=seen_paths,
        )
        return

    if isinstance(field, MapField):
        _flatten_field(
            field.value_type,
            path=path + MAP_PATH_SUFFIX,
            type_suffix=MAP_TYPE_SUFFIX + type_suffix,
            required=required,
            fields=fields,
            seen_paths=seen_paths,
        )
        return

    _register_field(path, field.kind.value + type_suffix, required, fields, seen_paths)


def _is_required(field: Field, parent_required: Collection[str]) -> bool:
    return field.is_field_required is True or field.name in parent_required


def _child_path(prefix: str, name: str | None) -> str:
    if not name:
        raise SchemaError(f"Cannot flatten an unnamed field below '{prefix or '<root>'}'.")
    return name if not prefix else f"{prefix}.{name}"


def _register_field(
    path: str,
    field_type: str,
    required: bool,
    fields: list[FlattenedField],
    seen_paths: set[str],
) -> None:
    if not path:
        raise SchemaError("Cannot register a field without a path.")
    if path in seen_paths:
        raise SchemaError(f"Duplicate flattened field detected: {path}")
    seen_paths.add(path)
    fields.append(FlattenedField(path=path, field_type=field_type, required=required))
