"""Resolved field model entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar

Number = int | float

INTERNAL_MAP_FIELD = "internalMapField"


class FieldKind(str, Enum):
    """Closed set of resolved field variants."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    UUID = "uuid"
    ENUM = "enum"
    ARRAY = "array"
    OBJECT = "object"
    MAP = "map"


COLLECTION_KINDS = frozenset({FieldKind.ARRAY, FieldKind.MAP})
SCALAR_KINDS = frozenset(
    {
        FieldKind.STRING,
        FieldKind.INTEGER,
        FieldKind.NUMBER,
        FieldKind.BOOLEAN,
        FieldKind.DATE,
        FieldKind.UUID,
        FieldKind.ENUM,
    }
)


def required_collection(is_parent_object: bool | None, required: bool | None) -> bool:
    """Return requiredness for an Array/Map field.

    A collection is required when its immediate parent is an object or when it
    is listed in the parent's ``required`` array.
    """
    return bool(is_parent_object) or bool(required)


@dataclass(frozen=True, kw_only=True)
class Field:
    """Common attributes shared by every resolved field variant.

    ``is_field_required`` is tri-state: ``True``/``False`` when the schema
    decided it, ``None`` when unspecified.
    """

    kind: ClassVar[FieldKind]

    name: str | None
    is_field_required: bool | None = None

    def clone_as(self, new_name: str | None) -> Field:
        """Return a value-equal copy carrying ``new_name``."""
        return replace(self, name=new_name)

    def properties(self) -> tuple[Field, ...]:
        """Return the fields this node contributes when merged into an object."""
        return (self,)

    def with_required(
        self, required: bool | None, *, is_parent_object: bool | None = None
    ) -> Field:
        """Return a copy with ``is_field_required`` overridden."""
        del is_parent_object
        return replace(self, is_field_required=required)

    @property
    def is_collection(self) -> bool:
        return self.kind in COLLECTION_KINDS


@dataclass(frozen=True, kw_only=True)
class StringField(Field):
    kind: ClassVar[FieldKind] = FieldKind.STRING

    pattern: str | None = None
    min_length: int = 0
    max_length: int = 0
    format: str | None = None


@dataclass(frozen=True, kw_only=True)
class IntegerField(Field):
    kind: ClassVar[FieldKind] = FieldKind.INTEGER


@dataclass(frozen=True, kw_only=True)
class NumberField(Field):
    kind: ClassVar[FieldKind] = FieldKind.NUMBER

    maximum: Number = 0
    minimum: Number = 0
    exclusive_maximum: Number = 0
    exclusive_minimum: Number = 0
    multiple_of: Number = 0


@dataclass(frozen=True, kw_only=True)
class BooleanField(Field):
    kind: ClassVar[FieldKind] = FieldKind.BOOLEAN


@dataclass(frozen=True, kw_only=True)
class DateField(Field):
    """Temporal string; ``format`` is one of ``date-time``, ``time`` or ``date``."""

    kind: ClassVar[FieldKind] = FieldKind.DATE

    format: str


@dataclass(frozen=True, kw_only=True)
class UUIDField(Field):
    kind: ClassVar[FieldKind] = FieldKind.UUID

    regex: str | None = None
    format: str | None = "uuid"


@dataclass(frozen=True, kw_only=True)
class EnumField(Field):
    """Closed set of string values; the first value is the default."""

    kind: ClassVar[FieldKind] = FieldKind.ENUM

    default_value: str
    enum_values: tuple[str, ...]


@dataclass(frozen=True, kw_only=True)
class ArrayField(Field):
    """Sequence of ``element`` values."""

    kind: ClassVar[FieldKind] = FieldKind.ARRAY

    element: Field
    min_items: int = 0
    unique_items: bool = False

    def properties(self) -> tuple[Field, ...]:
        raise TypeError(
            f"Array field '{self.name}' has no properties; use its element field instead."
        )

    def with_required(
        self, required: bool | None, *, is_parent_object: bool | None = None
    ) -> Field:
        return replace(
            self, is_field_required=required_collection(is_parent_object, required)
        )


@dataclass(frozen=True, kw_only=True)
class ObjectField(Field):
    """Ordered property fields plus the names listed as required."""

    kind: ClassVar[FieldKind] = FieldKind.OBJECT

    fields: tuple[Field, ...] = ()
    required: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        names = {prop.name for prop in self.fields}
        missing = [name for name in self.required if name not in names]
        if missing:
            raise ValueError(
                f"Object field '{self.name}' requires unknown properties: {', '.join(missing)}"
            )

    def properties(self) -> tuple[Field, ...]:
        return self.fields


@dataclass(frozen=True, kw_only=True)
class MapField(Field):
    """Open-ended keys whose values all resolve to ``value_type``."""

    kind: ClassVar[FieldKind] = FieldKind.MAP

    value_type: Field

    def properties(self) -> tuple[Field, ...]:
        raise TypeError(
            f"Map field '{self.name}' has no properties; use its value field instead."
        )

    def with_required(
        self, required: bool | None, *, is_parent_object: bool | None = None
    ) -> Field:
        return replace(
            self, is_field_required=required_collection(is_parent_object, required)
        )


@dataclass(frozen=True)
class Schema:
    """Fully resolved root of a JSON schema document.

    ``name`` carries the document's ``$schema`` value and is used for display
    only. ``required_fields`` holds the root ``required`` names followed by the
    dotted ``property.child`` paths declared by top-level object properties.
    """

    id: str
    name: str
    type: str
    required_fields: tuple[str, ...]
    properties: tuple[Field, ...]
    definitions: Mapping[str, Field] = field(default_factory=dict)
