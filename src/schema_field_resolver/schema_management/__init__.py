"""Schema management exports."""

from .schema_models import FlattenedField, SchemaDocument
from .schema_projection import SchemaError, flatten_schema, load_schema_document

__all__ = [
    "FlattenedField",
    "SchemaDocument",
    "SchemaError",
    "flatten_schema",
    "load_schema_document",
]
