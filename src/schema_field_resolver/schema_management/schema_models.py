"""Schema management entities."""

from __future__ import annotations

from dataclasses import dataclass

from schema_field_resolver.field_model import Schema


@dataclass(frozen=True)
class SchemaDocument:
    """Resolved schema together with the configured schema type."""

    schema_type: str
    schema: Schema


@dataclass(frozen=True)
class FlattenedField:
    """Flattened schema field: dotted path, type name and requiredness."""

    path: str
    field_type: str
    required: bool = False
