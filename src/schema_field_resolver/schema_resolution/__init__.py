"""Schema resolution exports."""

from .branch_selection import (
    BranchSelector,
    first_branch_selector,
    random_branch_selector,
    seeded_branch_selector,
)
from .json_schema_resolver import JsonSchemaResolver, parse_json_schema
from .resolution_context import ResolutionContext
from .resolution_errors import (
    IncorrectCombinationTypeError,
    MissingDefinitionError,
    MixedCombinationError,
    NoTypeFoundError,
    SchemaFormatError,
    SchemaResolutionError,
    SchemaSemanticError,
    UnsupportedReferenceError,
    UnsupportedSchemaShapeError,
)

__all__ = [
    "BranchSelector",
    "first_branch_selector",
    "random_branch_selector",
    "seeded_branch_selector",
    "JsonSchemaResolver",
    "parse_json_schema",
    "ResolutionContext",
    "IncorrectCombinationTypeError",
    "MissingDefinitionError",
    "MixedCombinationError",
    "NoTypeFoundError",
    "SchemaFormatError",
    "SchemaResolutionError",
    "SchemaSemanticError",
    "UnsupportedReferenceError",
    "UnsupportedSchemaShapeError",
]
