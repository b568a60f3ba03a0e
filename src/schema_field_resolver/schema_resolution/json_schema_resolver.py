"""JSON schema resolution service.

Compiles a draft-07 style JSON schema document into a cycle-free tree of
resolved fields. Every ``definitions`` entry is resolved up front so that
``$ref`` use sites only clone cached definitions under their own names.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from schema_field_resolver.field_model import (
    INTERNAL_MAP_FIELD,
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

from .branch_selection import BranchSelector, random_branch_selector
from .resolution_context import ResolutionContext
from .resolution_errors import (
    IncorrectCombinationTypeError,
    MissingDefinitionError,
    MixedCombinationError,
    NoTypeFoundError,
    SchemaFormatError,
    SchemaSemanticError,
    UnsupportedReferenceError,
    UnsupportedSchemaShapeError,
)

_LOGGER = logging.getLogger(__name__)
_LOGGER.addHandler(logging.NullHandler())

REQUIRED = "required"
PROPERTIES = "properties"
ADDITIONAL_PROPERTIES = "additionalProperties"
DEFINITIONS = "definitions"
ID = "$id"
SCHEMA = "$schema"
REF = "$ref"
TYPE = "type"
ITEMS = "items"
MIN_ITEMS = "minItems"
UNIQUE_ITEMS = "uniqueItems"
ENUM = "enum"
PATTERN = "pattern"
MIN_LENGTH = "minLength"
MAX_LENGTH = "maxLength"
FORMAT = "format"
MAXIMUM = "maximum"
MINIMUM = "minimum"
EXCLUSIVE_MAXIMUM = "exclusiveMaximum"
EXCLUSIVE_MINIMUM = "exclusiveMinimum"
MULTIPLE_OF = "multipleOf"

ANY_OF = "anyOf"
ALL_OF = "allOf"
ONE_OF = "oneOf"
_COMBINATORS = (ANY_OF, ALL_OF, ONE_OF)

TYPE_OBJECT = "object"
TYPE_INTEGER = "integer"
TYPE_NUMBER = "number"
TYPE_ARRAY = "array"
TYPE_BOOLEAN = "boolean"
TYPE_NULL = "null"

LOCAL_REFERENCE_PREFIX = "#"
_DATE_FORMATS = frozenset({"date-time", "time", "date"})
_UUID_FORMAT = "uuid"

# Keys that never name a property when an object is synthesized from its own entries.
_SCHEMA_KEYWORDS = frozenset(
    {
        ID,
        SCHEMA,
        REF,
        TYPE,
        REQUIRED,
        PROPERTIES,
        ADDITIONAL_PROPERTIES,
        DEFINITIONS,
        ANY_OF,
        ALL_OF,
        ONE_OF,
        "title",
        "description",
        "default",
        "examples",
        "$comment",
        "propertyNames",
        "patternProperties",
        "dependencies",
        "not",
        "if",
        "then",
        "else",
        "contains",
        "const",
    }
)

ERROR_WRONG_JSON_SCHEMA = "Wrong Json Schema"
ERROR_MISSING_DEFINITION = "Wrong Json Schema, Missing definition"
ERROR_NOT_TYPE_OBJECT_FOUND = "Not Type Object found"
ERROR_REFERENCE_NOT_SUPPORTED = "Reference not Supported"
ERROR_NOT_SUPPORTED_FILE = "Not supported file"
ERROR_INCORRECT_TYPE_IN_COMBINATION = "Incorrect type in combination"
ERROR_TYPES_AND_PROPERTIES_MIXED = "Incorrect combination, types and properties mixed"


class JsonSchemaResolver:
    """Resolve JSON schema documents into ``Schema`` trees.

    The resolver itself holds no per-document state; each ``parse`` call
    builds its own definitions cache and cycle guard.
    """

    def __init__(self, branch_selector: BranchSelector | None = None) -> None:
        self._branch_selector = branch_selector or random_branch_selector

    def parse(self, document: str | bytes | Mapping[str, Any]) -> Schema:
        """Resolve raw schema text or an already parsed JSON object."""
        root = _load_document(document)
        definitions = root.get(DEFINITIONS)
        context = ResolutionContext(
            definitions=definitions if isinstance(definitions, Mapping) else {},
            branch_selector=self._branch_selector,
        )
        try:
            return _SchemaWalker(context).build_schema(root)
        except RecursionError as exc:
            raise SchemaSemanticError(
                f"{ERROR_NOT_SUPPORTED_FILE}: schema nesting is too deep to resolve."
            ) from exc


def parse_json_schema(
    document: str | bytes | Mapping[str, Any], *, branch_selector: BranchSelector | None = None
) -> Schema:
    """Resolve a schema document with a one-off resolver."""
    return JsonSchemaResolver(branch_selector).parse(document)


def _load_document(document: str | bytes | Mapping[str, Any]) -> Mapping[str, Any]:
    if isinstance(document, Mapping):
        root: Any = document
    else:
        try:
            root = json.loads(document)
        except (TypeError, ValueError, RecursionError) as exc:
            raise SchemaFormatError(f"{ERROR_WRONG_JSON_SCHEMA}: {exc}") from exc
    if not isinstance(root, Mapping):
        raise SchemaFormatError(f"{ERROR_WRONG_JSON_SCHEMA}: the root must be a JSON object.")
    return root


class _SchemaWalker:
    """Depth-first resolution of one document against one context."""

    def __init__(self, context: ResolutionContext) -> None:
        self._context = context

    def build_schema(self, root: Mapping[str, Any]) -> Schema:
        self._process_definitions()

        schema_type = _safe_type(root) or ""
        properties = _as_mapping(root.get(PROPERTIES))
        required_fields = [_text(name) for name in _as_list(root.get(REQUIRED))]
        for property_name, property_node in properties.items():
            if isinstance(property_node, Mapping):
                required_fields.extend(
                    f"{property_name}.{_text(name)}"
                    for name in _as_list(property_node.get(REQUIRED))
                )

        fields = tuple(
            self.build_property(
                property_name,
                property_node,
                required=property_name in required_fields,
                is_parent_object=schema_type == TYPE_OBJECT,
            )
            for property_name, property_node in properties.items()
        )

        return Schema(
            id=_text(root.get(ID)),
            name=_text(root.get(SCHEMA)),
            type=_text(root.get(TYPE)),
            required_fields=tuple(required_fields),
            properties=fields,
            definitions=dict(self._context.cache),
        )

    # Definitions pre-pass

    def _process_definitions(self) -> None:
        definitions = self._context.definitions
        cache = self._context.cache
        for definition_name, definition_node in definitions.items():
            _LOGGER.debug("Resolving definition '%s'.", definition_name)
            if not _is_ref(definition_node):
                resolved = self.build_definition(definition_name, definition_node)
                if resolved is None:
                    _LOGGER.debug("Definition '%s' resolved to nothing.", definition_name)
                elif definition_name in cache:
                    _LOGGER.debug("Definition '%s' already cached; keeping it.", definition_name)
                else:
                    cache[definition_name] = resolved
                continue

            reference_name = _reference_name(definition_node)
            if reference_name in cache:
                resolved = self.build_definition(definition_name, definition_node)
                if resolved is not None:
                    cache[definition_name] = resolved
                continue

            target = definitions.get(reference_name)
            if not isinstance(target, Mapping) or _is_ref(target):
                raise MissingDefinitionError(
                    f"{ERROR_MISSING_DEFINITION}: '{definition_name}' references "
                    f"unresolved definition '{reference_name}'."
                )
            with self._context.guard(reference_name) as entered:
                if not entered:
                    raise MissingDefinitionError(
                        f"{ERROR_MISSING_DEFINITION}: '{definition_name}' and "
                        f"'{reference_name}' reference each other."
                    )
                resolved = self.build_definition(definition_name, target)
            if resolved is not None:
                cache[definition_name] = resolved

    # Definition path

    def build_definition(
        self,
        name: str | None,
        node: Any,
        required: bool | None = None,
        is_parent_object: bool | None = None,
    ) -> Field | None:
        """Resolve a node reached from ``definitions``.

        Returns ``None`` when the node is a reference already being resolved
        further up the stack.
        """
        if not isinstance(node, Mapping):
            raise UnsupportedSchemaShapeError(f"{ERROR_NOT_SUPPORTED_FILE}: field '{name}'.")
        if _has_type(node):
            node_type = _safe_type(node)
            if node_type is None:
                raise NoTypeFoundError(f"{ERROR_NOT_TYPE_OBJECT_FOUND}: field '{name}'.")
            return self._build_typed_field(
                name,
                node,
                node_type,
                required=required,
                is_parent_object=is_parent_object,
                in_definition=True,
            )
        if _is_ref(node):
            return self._resolve_definition_reference(name, node, required, is_parent_object)
        combinator = _combinator(node)
        if combinator is not None:
            return self._choose_definition_branch(name, node, combinator)
        return self._build_object_field(
            name, node, required=None, is_parent_object=None, in_definition=True
        )

    def _resolve_definition_reference(
        self,
        name: str | None,
        node: Mapping[str, Any],
        required: bool | None,
        is_parent_object: bool | None,
    ) -> Field | None:
        reference_name = _reference_name(node)
        cached = self._context.cache.get(reference_name)
        if cached is not None:
            _LOGGER.debug("Reusing cached definition '%s' for field '%s'.", reference_name, name)
            return cached.clone_as(name)
        with self._context.guard(reference_name) as entered:
            if not entered:
                _LOGGER.debug(
                    "Definition '%s' is already being resolved; leaving field '%s' unexpanded.",
                    reference_name,
                    name,
                )
                return None
            definition = self._extract_definition(reference_name, required, is_parent_object)
        return definition.clone_as(name) if definition is not None else None

    def _extract_definition(
        self, reference_name: str, required: bool | None, is_parent_object: bool | None
    ) -> Field | None:
        target = self._context.definitions.get(reference_name)
        if not isinstance(target, Mapping):
            raise MissingDefinitionError(
                f"{ERROR_MISSING_DEFINITION}: '{reference_name}' is not declared."
            )
        definition = self.build_definition(reference_name, target, required, is_parent_object)
        if definition is not None:
            self._context.cache[reference_name] = definition
        return definition

    def _choose_definition_branch(
        self, name: str | None, node: Mapping[str, Any], combinator: str
    ) -> Field | None:
        branches = _branches(node, combinator, name)
        if combinator == ALL_OF:
            if not branches:
                return ObjectField(name=name)
            return self.build_definition(name, branches[0])
        index = self._select_branch(name, combinator, branches)
        return self.build_definition(name, branches[index])

    # Property path

    def build_property(
        self,
        name: str | None,
        node: Any,
        required: bool | None = None,
        is_parent_object: bool | None = None,
    ) -> Field:
        """Resolve an in-document property node."""
        if not isinstance(node, Mapping):
            raise UnsupportedSchemaShapeError(f"{ERROR_NOT_SUPPORTED_FILE}: field '{name}'.")
        if _is_ref(node):
            return self._resolve_property_reference(name, node, required, is_parent_object)
        if _has_type(node):
            return self._build_field(name, node, required, is_parent_object)
        combinator = _combinator(node)
        if combinator is not None:
            return self._choose_property_branch(name, node, combinator)
        if node.get(PROPERTIES) is not None:
            return _expect_field(
                self._build_object_field(
                    name, node, required=required, is_parent_object=None, in_definition=False
                ),
                name,
            )
        raise UnsupportedSchemaShapeError(f"{ERROR_NOT_SUPPORTED_FILE}: field '{name}'.")

    def _build_field(
        self,
        name: str | None,
        node: Mapping[str, Any],
        required: bool | None = None,
        is_parent_object: bool | None = None,
    ) -> Field:
        node_type = _safe_type(node)
        if node_type is None:
            raise NoTypeFoundError(f"{ERROR_NOT_TYPE_OBJECT_FOUND}: field '{name}'.")
        return _expect_field(
            self._build_typed_field(
                name,
                node,
                node_type,
                required=required,
                is_parent_object=is_parent_object,
                in_definition=False,
            ),
            name,
        )

    def _resolve_property_reference(
        self,
        name: str | None,
        node: Mapping[str, Any],
        required: bool | None,
        is_parent_object: bool | None,
    ) -> Field:
        definition = self._cached_definition(_reference_name(node))
        if _safe_type(node) == TYPE_ARRAY:
            return _array_of(
                name,
                node,
                definition.clone_as(None),
                required_collection(is_parent_object, required),
            )
        return _propagate_required(definition.clone_as(name), required, is_parent_object)

    def _cached_definition(self, reference_name: str) -> Field:
        definition = self._context.cache.get(reference_name)
        if definition is None:
            raise MissingDefinitionError(
                f"{ERROR_MISSING_DEFINITION}: '{reference_name}' is not declared."
            )
        return definition

    def _choose_property_branch(
        self, name: str | None, node: Mapping[str, Any], combinator: str
    ) -> Field:
        branches = _branches(node, combinator, name)
        structural = [_is_structural_branch(branch) for branch in branches]
        if all(structural):
            if combinator == ALL_OF:
                return self._build_combined_field(name, branches)
            index = self._select_branch(name, combinator, branches)
            return self._build_combined_field(name, [branches[index]])
        if not any(structural):
            if combinator == ALL_OF:
                raise IncorrectCombinationTypeError(
                    f"{ERROR_INCORRECT_TYPE_IN_COMBINATION}: field '{name}'."
                )
            index = self._select_branch(name, combinator, branches)
            return self._build_field(name, branches[index])
        raise MixedCombinationError(f"{ERROR_TYPES_AND_PROPERTIES_MIXED}: field '{name}'.")

    def _build_combined_field(
        self, name: str | None, branches: Sequence[Mapping[str, Any]]
    ) -> ObjectField:
        fields: list[Field] = []
        for branch in branches:
            if _is_ref(branch):
                reference_field = self._cached_definition(_reference_name(branch)).clone_as(name)
                if _has_type(branch) or reference_field.is_collection:
                    fields.append(reference_field)
                else:
                    fields.extend(reference_field.properties())
                continue
            for property_name, property_node in _as_mapping(branch.get(PROPERTIES)).items():
                fields.append(self.build_property(property_name, property_node))
        return ObjectField(name=name, fields=tuple(fields), is_field_required=False)

    def _select_branch(
        self, name: str | None, combinator: str, branches: Sequence[Mapping[str, Any]]
    ) -> int:
        if not branches:
            raise SchemaSemanticError(f"Combination '{combinator}' of field '{name}' is empty.")
        index = self._context.choose_branch(len(branches))
        _LOGGER.debug(
            "Selected %s branch %d of %d for field '%s'.", combinator, index, len(branches), name
        )
        return index

    # Shared type dispatch

    def _build_typed_field(
        self,
        name: str | None,
        node: Mapping[str, Any],
        node_type: str,
        *,
        required: bool | None,
        is_parent_object: bool | None,
        in_definition: bool,
    ) -> Field | None:
        if node_type == TYPE_INTEGER:
            return IntegerField(name=name)
        if node_type == TYPE_NUMBER:
            return _build_number_field(name, node)
        if node_type == TYPE_ARRAY:
            return self._build_array_field(
                name,
                node,
                required_collection(is_parent_object, required),
                in_definition=in_definition,
            )
        if node_type == TYPE_OBJECT:
            return self._build_object_field(
                name,
                node,
                required=required,
                is_parent_object=is_parent_object,
                in_definition=in_definition,
            )
        if node_type == TYPE_BOOLEAN:
            return BooleanField(name=name)
        return _build_string_field(name, node)

    def _resolve_child(
        self,
        name: str | None,
        node: Any,
        *,
        required: bool | None,
        is_parent_object: bool | None,
        in_definition: bool,
    ) -> Field | None:
        if in_definition:
            return self.build_definition(name, node, required, is_parent_object)
        return self.build_property(name, node, required, is_parent_object)

    def _build_array_field(
        self,
        name: str | None,
        node: Mapping[str, Any],
        required: bool,
        *,
        in_definition: bool,
    ) -> ArrayField | None:
        items = node.get(ITEMS)
        if not isinstance(items, Mapping):
            raise UnsupportedSchemaShapeError(
                f"{ERROR_NOT_SUPPORTED_FILE}: array field '{name}' declares no items schema."
            )
        element = self._resolve_child(
            None,
            items,
            required=_element_required(node),
            is_parent_object=None,
            in_definition=in_definition,
        )
        if element is None:
            _LOGGER.debug("Array field '%s' has an unexpanded element; dropping it.", name)
            return None
        return _array_of(name, node, element, required)

    def _build_object_field(
        self,
        name: str | None,
        node: Mapping[str, Any],
        *,
        required: bool | None,
        is_parent_object: bool | None,
        in_definition: bool,
    ) -> Field | None:
        combinator = _combinator(node)
        if combinator is not None:
            if in_definition:
                return self._choose_definition_branch(name, node, combinator)
            return self._choose_property_branch(name, node, combinator)

        properties = node.get(PROPERTIES)
        if isinstance(properties, Mapping):
            required_names = _required_names(node)
            fields: list[Field] = []
            for property_name, property_node in properties.items():
                resolved = self._resolve_child(
                    property_name,
                    property_node,
                    required=property_name in required_names,
                    is_parent_object=True,
                    in_definition=in_definition,
                )
                if resolved is None:
                    _LOGGER.debug("Dropping unexpanded property '%s' of '%s'.", property_name, name)
                    continue
                fields.append(resolved)
            present = {resolved.name for resolved in fields}
            return ObjectField(
                name=name,
                fields=tuple(fields),
                required=tuple(item for item in required_names if item in present),
                is_field_required=required,
            )

        additional = node.get(ADDITIONAL_PROPERTIES)
        if isinstance(additional, Mapping) and additional:
            value_type = self._resolve_child(
                INTERNAL_MAP_FIELD,
                additional,
                required=required if in_definition else False,
                is_parent_object=None,
                in_definition=in_definition,
            )
            if value_type is None:
                _LOGGER.debug("Map field '%s' has an unexpanded value type; dropping it.", name)
                return None
            return MapField(
                name=name,
                value_type=value_type,
                is_field_required=required_collection(is_parent_object, required),
            )

        if _is_ref(node):
            if in_definition:
                return self._resolve_definition_reference(name, node, required, is_parent_object)
            return self._resolve_property_reference(name, node, required, is_parent_object)

        return self._synthesize_object_field(name, node, in_definition=in_definition)

    def _synthesize_object_field(
        self, name: str | None, node: Mapping[str, Any], *, in_definition: bool
    ) -> ObjectField:
        fields: list[Field] = []
        for key, value in node.items():
            if key in _SCHEMA_KEYWORDS or not isinstance(value, Mapping):
                continue
            resolved = self._resolve_child(
                key, value, required=None, is_parent_object=None, in_definition=in_definition
            )
            if resolved is not None:
                fields.append(resolved)
        return ObjectField(name=name, fields=tuple(fields))


def _expect_field(field: Field | None, name: str | None) -> Field:
    if field is None:
        raise MissingDefinitionError(f"{ERROR_MISSING_DEFINITION}: field '{name}' is unresolved.")
    return field


def _propagate_required(
    field: Field, required: bool | None, is_parent_object: bool | None
) -> Field:
    if field.kind in (FieldKind.OBJECT, FieldKind.ARRAY, FieldKind.MAP):
        return field.with_required(required, is_parent_object=is_parent_object)
    return field


def _array_of(
    name: str | None, node: Mapping[str, Any], element: Field, required: bool
) -> ArrayField:
    return ArrayField(
        name=name,
        element=element,
        is_field_required=required,
        min_items=_parse_int(node.get(MIN_ITEMS), MIN_ITEMS, name),
        unique_items=_parse_bool(node.get(UNIQUE_ITEMS)),
    )


def _build_number_field(name: str | None, node: Mapping[str, Any]) -> NumberField:
    return NumberField(
        name=name,
        maximum=_parse_number(node.get(MAXIMUM), MAXIMUM, name),
        minimum=_parse_number(node.get(MINIMUM), MINIMUM, name),
        exclusive_maximum=_parse_number(node.get(EXCLUSIVE_MAXIMUM), EXCLUSIVE_MAXIMUM, name),
        exclusive_minimum=_parse_number(node.get(EXCLUSIVE_MINIMUM), EXCLUSIVE_MINIMUM, name),
        multiple_of=_parse_number(node.get(MULTIPLE_OF), MULTIPLE_OF, name),
    )


def _build_string_field(name: str | None, node: Mapping[str, Any]) -> Field:
    if node.get(ENUM) is not None:
        return _build_enum_field(name, node)
    schema_format = node.get(FORMAT)
    if schema_format is not None:
        format_text = _text(schema_format)
        if format_text in _DATE_FORMATS:
            return DateField(name=name, format=format_text)
        if format_text == _UUID_FORMAT:
            return UUIDField(name=name)
        return StringField(name=name, format=format_text)
    pattern = node.get(PATTERN)
    return StringField(
        name=name,
        pattern=_text(pattern) if pattern is not None else None,
        min_length=_parse_int(node.get(MIN_LENGTH), MIN_LENGTH, name),
        max_length=_parse_int(node.get(MAX_LENGTH), MAX_LENGTH, name),
    )


def _build_enum_field(name: str | None, node: Mapping[str, Any]) -> EnumField:
    values = tuple(
        TYPE_NULL if value is None else _text(value) for value in _as_list(node.get(ENUM))
    )
    if not values:
        raise SchemaSemanticError(f"Enum field '{name}' declares no values to default to.")
    return EnumField(name=name, default_value=values[0], enum_values=values)


def _parse_number(value: Any, keyword: str, name: str | None) -> Number:
    if value is None:
        return 0
    if isinstance(value, bool):
        raise SchemaSemanticError(f"{keyword} of field '{name}' must be numeric, got {value!r}.")
    if isinstance(value, (int, float)):
        return value
    literal = _text(value).strip()
    try:
        return float(literal) if "." in literal else int(literal)
    except ValueError as exc:
        raise SchemaSemanticError(
            f"{keyword} of field '{name}' must be numeric, got {value!r}."
        ) from exc


def _parse_int(value: Any, keyword: str, name: str | None) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        raise SchemaSemanticError(f"{keyword} of field '{name}' must be an integer.")
    number = _parse_number(value, keyword, name)
    if isinstance(number, float):
        if not number.is_integer():
            raise SchemaSemanticError(f"{keyword} of field '{name}' must be an integer.")
        return int(number)
    return number


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return _text(value).strip().lower() == "true"


def _element_required(node: Mapping[str, Any]) -> bool:
    min_items = _text(node.get(MIN_ITEMS)).strip()
    return bool(min_items) and min_items != "0"


def _required_names(node: Mapping[str, Any]) -> list[str]:
    names = (_text(item) for item in _as_list(node.get(REQUIRED)))
    return list(dict.fromkeys(name for name in names if name))


def _is_structural_branch(branch: Mapping[str, Any]) -> bool:
    return branch.get(PROPERTIES) is not None or branch.get(REF) is not None


def _branches(
    node: Mapping[str, Any], combinator: str, name: str | None
) -> list[Mapping[str, Any]]:
    branches = node.get(combinator)
    if not isinstance(branches, list) or not all(
        isinstance(branch, Mapping) for branch in branches
    ):
        raise UnsupportedSchemaShapeError(
            f"{ERROR_NOT_SUPPORTED_FILE}: '{combinator}' of field '{name}' must list schemas."
        )
    return branches


def _combinator(node: Mapping[str, Any]) -> str | None:
    for combinator in _COMBINATORS:
        if node.get(combinator) is not None:
            return combinator
    return None


def _has_type(node: Mapping[str, Any]) -> bool:
    return node.get(TYPE) is not None


def _safe_type(node: Mapping[str, Any]) -> str | None:
    """Return the lowercased declared type, skipping ``null`` members of type lists."""
    declared = node.get(TYPE)
    if isinstance(declared, str):
        return declared.lower()
    if isinstance(declared, list):
        for candidate in declared:
            if candidate is None:
                continue
            text = _text(candidate).lower()
            if text != TYPE_NULL:
                return text
    return None


def _is_ref(node: Any) -> bool:
    return isinstance(node, Mapping) and node.get(REF) is not None


def _reference_name(node: Mapping[str, Any]) -> str:
    reference = _text(node.get(REF))
    if not reference.startswith(LOCAL_REFERENCE_PREFIX):
        raise UnsupportedReferenceError(f"{ERROR_REFERENCE_NOT_SUPPORTED}: {reference}")
    return reference.rsplit("/", 1)[-1]


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _as_list(value: Any) -> list[Any]:
    return list(value) if isinstance(value, list) else []
