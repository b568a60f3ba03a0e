"""Integration tests resolving the bundled sample schema."""

from __future__ import annotations

from pathlib import Path

from schema_field_resolver.field_model import (
    ArrayField,
    DateField,
    EnumField,
    FieldKind,
    MapField,
    NumberField,
    ObjectField,
    StringField,
    UUIDField,
)
from schema_field_resolver.schema_resolution import JsonSchemaResolver, first_branch_selector


def _sample_text() -> str:
    sample_path = Path(__file__).resolve().parents[3] / "samples" / "sample-json-schema.json"
    return sample_path.read_text(encoding="utf-8")


def test_sample_schema_resolves_into_field_tree() -> None:
    schema = JsonSchemaResolver(first_branch_selector).parse(_sample_text())

    assert schema.id == "https://example.com/schemas/email-event.json"
    assert list(schema.definitions) == ["Address", "Score", "Sender"]
    assert schema.definitions["Sender"] == schema.definitions["Address"].clone_as("Sender")

    fields = {field.name: field for field in schema.properties}
    assert list(fields) == [
        "event_id",
        "received_at",
        "channel",
        "sender",
        "recipients",
        "subject",
        "model_output",
        "attachment_count",
        "spam",
    ]
    assert isinstance(fields["event_id"], UUIDField)
    assert fields["received_at"] == DateField(name="received_at", format="date-time")
    assert fields["channel"] == EnumField(
        name="channel", default_value="EMAIL", enum_values=("EMAIL", "FAX", "LETTER")
    )
    assert fields["subject"] == StringField(name="subject", min_length=1, max_length=255)
    assert fields["attachment_count"].kind is FieldKind.INTEGER


def test_sample_schema_references_are_cloned_per_use_site() -> None:
    schema = JsonSchemaResolver(first_branch_selector).parse(_sample_text())
    fields = {field.name: field for field in schema.properties}
    address = schema.definitions["Address"]

    sender = fields["sender"]
    assert isinstance(sender, ObjectField)
    assert sender.is_field_required is True
    assert sender.required == ("email",)
    assert sender.fields == address.properties()

    recipients = fields["recipients"]
    assert isinstance(recipients, ArrayField)
    assert recipients.min_items == 1
    assert recipients.is_field_required is True
    assert recipients.element.name is None
    assert recipients.element.is_field_required is True
    assert recipients.element.properties() == address.properties()


def test_sample_schema_nested_object_resolves_collections_and_references() -> None:
    schema = JsonSchemaResolver(first_branch_selector).parse(_sample_text())
    model_output = {field.name: field for field in schema.properties}["model_output"]

    assert isinstance(model_output, ObjectField)
    assert model_output.required == ("classifications",)
    classifications, confidence, attributes = model_output.fields
    assert classifications == ArrayField(
        name="classifications",
        element=StringField(name=None),
        unique_items=True,
        is_field_required=True,
    )
    assert confidence == NumberField(name="confidence", minimum=0, maximum=1, multiple_of=0.01)
    assert isinstance(attributes, MapField)
    assert attributes.value_type == StringField(name="internalMapField")
