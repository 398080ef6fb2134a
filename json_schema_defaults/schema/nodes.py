"""
Schema model used by the default value generator.

A JsonSchema node may point somewhere else (a $ref, or a lone allOf/oneOf/anyOf
entry wrapping a reference). The "actual" schema is what is left once that
indirection has been followed. Nodes are built once by the loader and are
read-only afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Flag
from typing import Any

from ..exceptions import SchemaReferenceError


class JsonObjectType(Flag):
    """Set of JSON Schema types declared by a schema ("type" may be a list)."""

    NONE = 0
    ARRAY = 1
    BOOLEAN = 2
    INTEGER = 4
    NULL = 8
    NUMBER = 16
    OBJECT = 32
    STRING = 64

    @classmethod
    def from_schema_value(cls, value: str | list[str] | None) -> JsonObjectType:
        """Build the flag set from the value of a schema's "type" keyword.

        Examples:
            "string" -> STRING
            ["string", "null"] -> STRING | NULL
            None -> NONE
        """
        if value is None:
            return cls.NONE
        names = [value] if isinstance(value, str) else value

        flags = cls.NONE
        for name in names:
            if name not in _SCHEMA_TYPE_NAMES:
                raise ValueError(f"Unknown JSON Schema type: {name}")
            flags |= _SCHEMA_TYPE_NAMES[name]
        return flags


_SCHEMA_TYPE_NAMES = {
    "array": JsonObjectType.ARRAY,
    "boolean": JsonObjectType.BOOLEAN,
    "integer": JsonObjectType.INTEGER,
    "null": JsonObjectType.NULL,
    "number": JsonObjectType.NUMBER,
    "object": JsonObjectType.OBJECT,
    "string": JsonObjectType.STRING,
}


@dataclass(eq=False)
class JsonSchema:
    """One schema (sub)definition.

    Nodes compare and hash by identity, so they can key caches.
    """

    type: JsonObjectType = JsonObjectType.NONE
    default: Any = None

    # Enumeration values and their display names, positionally parallel
    enumeration: list[Any] = field(default_factory=list)
    enumeration_names: list[str] = field(default_factory=list)

    title: str | None = None
    # Key under "definitions"/"$defs" when the node is a definition
    definition_name: str | None = None

    # $ref target once linked, and the raw $ref string
    reference: JsonSchema | None = field(default=None, repr=False)
    reference_path: str | None = None

    all_of: list[JsonSchema] = field(default_factory=list, repr=False)
    one_of: list[JsonSchema] = field(default_factory=list, repr=False)
    any_of: list[JsonSchema] = field(default_factory=list, repr=False)

    properties: dict[str, JsonProperty] = field(default_factory=dict, repr=False)
    items: JsonSchema | None = field(default=None, repr=False)
    definitions: dict[str, JsonSchema] = field(default_factory=dict, repr=False)

    # Location in the source document (for error messages)
    source_path: str = ""

    # Raw x-* extensions
    metadata: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def is_enumeration(self) -> bool:
        return len(self.enumeration) > 0

    @property
    def is_nullable(self) -> bool:
        if JsonObjectType.NULL in self.type:
            return True
        return any(variant.is_null_schema for variant in self.one_of + self.any_of)

    @property
    def is_null_schema(self) -> bool:
        return self.type == JsonObjectType.NULL and self.reference_path is None

    @property
    def has_reference(self) -> bool:
        return self.reference is not None or self.reference_path is not None or self._wrapped_reference() is not None

    @property
    def actual_schema(self) -> JsonSchema:
        """The schema left once $ref and reference-only wrappers are followed.

        Resolving a node that has no indirection returns the node itself.

        Raises:
            SchemaReferenceError: On a reference cycle or an unlinked $ref
        """
        return self._get_actual_schema([])

    @property
    def actual_type_schema(self) -> JsonSchema:
        """The actual schema with the nullable oneOf/anyOf pattern unwrapped.

        ``{"oneOf": [{"type": "null"}, {"$ref": "#/definitions/Foo"}]}`` resolves to Foo.
        """
        schema = self.actual_schema
        variants = schema.one_of or schema.any_of
        if variants:
            non_null = [variant for variant in variants if not variant.is_null_schema]
            if len(non_null) == 1 and len(non_null) < len(variants):
                return non_null[0].actual_schema
        return schema

    def _wrapped_reference(self) -> JsonSchema | None:
        """Return the single referencing allOf/oneOf/anyOf entry this node only wraps."""
        if self.type != JsonObjectType.NONE or self.properties or self.is_enumeration or self.items is not None:
            return None

        compositions = [entries for entries in (self.all_of, self.one_of, self.any_of) if entries]
        if len(compositions) != 1 or len(compositions[0]) != 1:
            return None

        entry = compositions[0][0]
        return entry if entry.has_reference else None

    def _get_actual_schema(self, checked: list[JsonSchema]) -> JsonSchema:
        if self in checked:
            raise SchemaReferenceError(f"Cyclic references detected at '{self.source_path or '#'}'")
        if self.reference_path is not None and self.reference is None:
            raise SchemaReferenceError(f"The schema reference path '{self.reference_path}' has not been resolved")

        wrapped = self._wrapped_reference()
        if wrapped is not None:
            checked.append(self)
            return wrapped._get_actual_schema(checked)
        if self.reference is not None:
            checked.append(self)
            return self.reference._get_actual_schema(checked)
        return self


@dataclass(eq=False)
class JsonProperty(JsonSchema):
    """A schema used as an object property."""

    name: str = ""
    is_required: bool = False
    parent: JsonSchema | None = field(default=None, repr=False)

    @property
    def actual_property_schema(self) -> JsonSchema:
        """Property-level resolution.

        An enumeration declared on the property itself overrides whatever
        enumeration its $ref points to.
        """
        if self.is_enumeration:
            return self
        return self.actual_type_schema
