"""Schema management service tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from schema_field_resolver.configuration.runtime_settings import SchemaConfig
from schema_field_resolver.field_model import IntegerField, ObjectField, Schema
from schema_field_resolver.schema_management.schema_models import FlattenedField, SchemaDocument
from schema_field_resolver.schema_management.schema_projection import (
    SchemaError,
    flatten_schema,
    load_schema_document,
)
from schema_field_resolver.schema_resolution import first_branch_selector


def _schema_config(schema_type: str, text: str, source_path: Path | None = None) -> SchemaConfig:
    return SchemaConfig(schema_type=schema_type, text=text, source_path=source_path)


def _flatten_text(schema_text: str) -> list[FlattenedField]:
    document = load_schema_document(
        _schema_config("json_schema", schema_text), branch_selector=first_branch_selector
    )
    return flatten_schema(document)


def test_json_schema_flattening_uses_sample_schema() -> None:
    sample_path = Path(__file__).resolve().parents[3] / "samples" / "sample-json-schema.json"
    schema_text = sample_path.read_text(encoding="utf-8")

    document = load_schema_document(_schema_config("json_schema", schema_text, sample_path))
    fields = flatten_schema(document)

    assert document.schema_type == "json_schema"
    assert document.schema.required_fields == (
        "event_id",
        "received_at",
        "sender",
        "model_output.classifications",
    )
    assert [(field.path, field.field_type, field.required) for field in fields] == [
        ("event_id", "uuid", True),
        ("received_at", "date", True),
        ("channel", "enum", False),
        ("sender.email", "string", True),
        ("sender.display_name", "string", False),
        ("recipients[].email", "string", True),
        ("recipients[].display_name", "string", False),
        ("subject", "string", False),
        ("model_output.classifications[]", "string-array", True),
        ("model_output.confidence", "number", False),
        ("model_output.attributes[:]", "string-map", True),
        ("attachment_count", "integer", False),
        ("spam", "boolean", False),
    ]


def test_nested_collections_stack_path_and_type_suffixes() -> None:
    fields = _flatten_text(
        """
{
  "type": "object",
  "properties": {
    "matrix": {"type": "array", "items": {"type": "array", "items": {"type": "number"}}},
    "index": {
      "type": "object",
      "additionalProperties": {"type": "array", "items": {"type": "integer"}}
    }
  }
}
"""
    )

    assert [(field.path, field.field_type) for field in fields] == [
        ("matrix[][]", "number-array-array"),
        ("index[:][]", "integer-array-map"),
    ]


def test_empty_object_is_flattened_as_leaf() -> None:
    fields = _flatten_text(
        '{"type": "object", "properties": {"meta": {"type": "object", "properties": {}}}}'
    )

    assert fields == [FlattenedField(path="meta", field_type="object", required=False)]


def test_detects_duplicate_field_names_after_flattening() -> None:
    schema_text = """
{
  "type": "object",
  "properties": {
    "customer": {
      "type": "object",
      "properties": {
        "address": {
          "type": "object",
          "properties": {
            "zip": {"type": "string"}
          }
        }
      }
    },
    "customer.address.zip": {"type": "string"}
  }
}
"""

    document = load_schema_document(_schema_config("json_schema", schema_text))

    with pytest.raises(SchemaError, match="Duplicate flattened field"):
        flatten_schema(document)


def test_unnamed_field_cannot_be_flattened() -> None:
    document = SchemaDocument(
        schema_type="json_schema",
        schema=Schema(
            id="",
            name="",
            type="object",
            required_fields=(),
            properties=(ObjectField(name=None, fields=(IntegerField(name="id"),)),),
        ),
    )

    with pytest.raises(SchemaError, match="unnamed field"):
        flatten_schema(document)


def test_invalid_schema_text_raises_schema_error() -> None:
    bad_text = "{not-valid-json}"

    with pytest.raises(SchemaError, match="Invalid json_schema schema: Wrong Json Schema"):
        load_schema_document(_schema_config("json_schema", bad_text))


def test_semantic_resolution_errors_raise_schema_error() -> None:
    text = '{"type": "object", "properties": {"a": {"$ref": "#/definitions/Missing"}}}'

    with pytest.raises(SchemaError, match="Missing definition"):
        load_schema_document(_schema_config("json_schema", text))


@pytest.mark.parametrize("schema_type", ["avsc", "protobuf"])
def test_other_schema_types_are_unsupported(schema_type: str) -> None:
    with pytest.raises(SchemaError, match=f"Unsupported schema type: {schema_type}"):
        load_schema_document(_schema_config(schema_type, "{}"))
