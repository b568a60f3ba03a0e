"""Schema resolution error taxonomy."""

from __future__ import annotations


class SchemaResolutionError(Exception):
    """Base class for every failure raised while resolving a schema document."""


class SchemaFormatError(SchemaResolutionError):
    """Raised when the schema document is not parseable JSON."""


class SchemaSemanticError(SchemaResolutionError):
    """Raised when a parseable schema document is structurally unusable."""


class MissingDefinitionError(SchemaSemanticError):
    """Raised when a reference target is absent, unresolved, or mutually cyclic."""


class UnsupportedReferenceError(SchemaSemanticError):
    """Raised when a reference points outside the current document."""


class NoTypeFoundError(SchemaSemanticError):
    """Raised when a node declares ``type`` without a usable type name."""


class UnsupportedSchemaShapeError(SchemaSemanticError):
    """Raised when a property node matches none of the supported shapes."""


class IncorrectCombinationTypeError(SchemaSemanticError):
    """Raised when ``allOf`` is applied to purely scalar branches."""


class MixedCombinationError(SchemaSemanticError):
    """Raised when a combinator mixes structural and scalar branches."""
