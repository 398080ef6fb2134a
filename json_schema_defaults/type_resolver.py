"""
Type resolvers mapping schemas to target-language type identifiers.

A resolver is deterministic within one generation run: the same schema
instance always gets the same identifier, so enum literals and the enum
declarations emitted elsewhere agree on the type name.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from .schema.nodes import JsonObjectType, JsonSchema
from .utils import snake_to_pascal_case

# Primitive types in the order they take precedence when several are set
PRIMITIVE_PRECEDENCE = (
    JsonObjectType.STRING,
    JsonObjectType.BOOLEAN,
    JsonObjectType.NUMBER,
    JsonObjectType.INTEGER,
)


class TypeResolver(ABC):
    """Abstract base class for language-specific type resolvers."""

    # Type mapping from schema types to language types
    TYPE_MAP: dict[JsonObjectType, str] = {}

    # Type used when nothing more specific is known
    ANY_TYPE: str = ""

    def __init__(self):
        self._type_names: dict[JsonSchema, str] = {}
        self._used_names: set[str] = set()
        self._lock = threading.Lock()

    def resolve(self, schema: JsonSchema, is_nullable: bool, type_name_hint: str | None) -> str:
        """
        Resolve the type identifier of a schema.

        Args:
            schema: The schema to resolve (indirection is followed)
            is_nullable: Whether the identifier must accept null
            type_name_hint: Name to use when the schema has no name of its own

        Returns:
            Language-specific type identifier
        """
        # An enumeration declared next to a $ref overrides the referenced type
        if not schema.is_enumeration:
            schema = schema.actual_type_schema
        type_name = self._resolve_type_name(schema, type_name_hint)
        if is_nullable:
            return self.nullable_type(type_name)
        return type_name

    def _resolve_type_name(self, schema: JsonSchema, type_name_hint: str | None) -> str:
        if schema.is_enumeration or JsonObjectType.OBJECT in schema.type:
            return self.get_or_generate_type_name(schema, type_name_hint)

        if JsonObjectType.ARRAY in schema.type:
            item_type = self._resolve_type_name(schema.items.actual_type_schema, type_name_hint) if schema.items else self.ANY_TYPE
            return self.list_type(item_type)

        for flag in PRIMITIVE_PRECEDENCE:
            if flag in schema.type:
                return self.TYPE_MAP[flag]

        if schema.properties:
            return self.get_or_generate_type_name(schema, type_name_hint)
        return self.ANY_TYPE

    def get_or_generate_type_name(self, schema: JsonSchema, type_name_hint: str | None) -> str:
        """Return the cached name of a schema, generating a unique one the first time."""
        with self._lock:
            if schema not in self._type_names:
                self._type_names[schema] = self._generate_unique_name(schema, type_name_hint)
            return self._type_names[schema]

    def _generate_unique_name(self, schema: JsonSchema, type_name_hint: str | None) -> str:
        base_name = snake_to_pascal_case(schema.definition_name or schema.title or type_name_hint or "") or "Anonymous"
        name = base_name
        counter = 2
        while name in self._used_names:
            name = f"{base_name}{counter}"
            counter += 1
        self._used_names.add(name)
        return name

    @abstractmethod
    def nullable_type(self, type_name: str) -> str:
        """
        Make a type identifier accept null.

        Args:
            type_name: The non-nullable type identifier

        Returns:
            Nullable type identifier
        """

    @abstractmethod
    def list_type(self, item_type: str) -> str:
        """
        Build the list type of an item type.

        Args:
            item_type: The item type identifier

        Returns:
            List type identifier
        """


class PythonTypeResolver(TypeResolver):
    """Resolves Python type annotations."""

    TYPE_MAP = {
        JsonObjectType.STRING: "str",
        JsonObjectType.BOOLEAN: "bool",
        JsonObjectType.INTEGER: "int",
        JsonObjectType.NUMBER: "float",
    }
    ANY_TYPE = "Any"

    def nullable_type(self, type_name: str) -> str:
        return f"{type_name} | None"

    def list_type(self, item_type: str) -> str:
        return f"list[{item_type}]"


class CSharpTypeResolver(TypeResolver):
    """Resolves C# type names."""

    TYPE_MAP = {
        JsonObjectType.STRING: "string",
        JsonObjectType.BOOLEAN: "bool",
        JsonObjectType.INTEGER: "long",
        JsonObjectType.NUMBER: "double",
    }
    ANY_TYPE = "object"

    def nullable_type(self, type_name: str) -> str:
        if type_name.endswith("?"):
            return type_name
        return f"{type_name}?"

    def list_type(self, item_type: str) -> str:
        return f"List<{item_type}>"


def get_type_resolver(language: str) -> TypeResolver:
    """Create the type resolver of a target language ("cs" or "python")."""
    match language:
        case "python":
            return PythonTypeResolver()
        case "cs":
            return CSharpTypeResolver()
        case _:
            raise ValueError(f"Language '{language}' is not supported")
