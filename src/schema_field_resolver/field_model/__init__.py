"""Field model exports."""

from .field_variants import (
    COLLECTION_KINDS,
    INTERNAL_MAP_FIELD,
    SCALAR_KINDS,
    ArrayField,
    BooleanField,
    DateField,
    EnumField,
    Field,
    FieldKind,
    IntegerField,
    MapField,
    Number,
    NumberField,
    ObjectField,
    Schema,
    StringField,
    UUIDField,
    required_collection,
)

__all__ = [
    "COLLECTION_KINDS",
    "INTERNAL_MAP_FIELD",
    "SCALAR_KINDS",
    "ArrayField",
    "BooleanField",
    "DateField",
    "EnumField",
    "Field",
    "FieldKind",
    "IntegerField",
    "MapField",
    "Number",
    "NumberField",
    "ObjectField",
    "Schema",
    "StringField",
    "UUIDField",
    "required_collection",
]
