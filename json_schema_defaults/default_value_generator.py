"""
Default value generators.

Convert a schema's "default" into a literal expression of the target language.
Resolution and enum member lookup live in DefaultValueGenerator; language
subclasses only override the literal formatting hooks.
"""

from __future__ import annotations

from typing import Any

from .exceptions import SchemaInconsistencyError
from .schema.nodes import JsonObjectType, JsonProperty, JsonSchema
from .type_resolver import TypeResolver
from .utils import pascal_to_upper_snake_case, to_upper_camel_case


class DefaultValueGenerator:
    """Converts a schema default value to a language-specific literal.

    Subclasses customize the literal syntax through the ``format_*`` hooks.
    ``format_enum_literal`` is the only step of the enum algorithm that may be
    overridden: type resolution and member lookup stay here.
    """

    def __init__(self, type_resolver: TypeResolver):
        """
        Initialize the generator.

        Args:
            type_resolver: Resolver used to name enumeration types
        """
        self.type_resolver = type_resolver

    def get_default_value(
        self,
        schema: JsonSchema,
        allows_null: bool,
        target_type: str | None,
        type_name_hint: str | None,
        use_schema_default: bool,
    ) -> str | None:
        """
        Get the default value literal of a schema.

        A default explicitly set to null cannot be told apart from no default,
        both give None.

        Args:
            schema: The schema or property declaring the default
            allows_null: Whether the assignment target also accepts null
            target_type: Type of the assignment target
            type_name_hint: Type name to use when the enum type has no name
            use_schema_default: Whether to use the schema default at all

        Returns:
            The literal, or None when no default value should be emitted

        Raises:
            SchemaInconsistencyError: If an enum default cannot be mapped to a member
        """
        if schema.default is None or not use_schema_default:
            return None

        actual_schema = schema.actual_property_schema if isinstance(schema, JsonProperty) else schema.actual_schema
        if (
            actual_schema.is_enumeration
            and JsonObjectType.OBJECT not in actual_schema.type
            and actual_schema.type != JsonObjectType.NONE
        ):
            return self.get_enum_default_value(schema, actual_schema, type_name_hint)

        if JsonObjectType.STRING in schema.type:
            return self.format_string_literal(schema.default)
        if JsonObjectType.BOOLEAN in schema.type:
            return self.format_boolean_literal(schema.default)
        if JsonObjectType.INTEGER in schema.type or JsonObjectType.NUMBER in schema.type:
            return self.format_numeric_literal(schema.default, target_type)

        return None

    def get_enum_default_value(self, schema: JsonSchema, actual_schema: JsonSchema, type_name_hint: str | None) -> str:
        """
        Get the enum member literal of a default value.

        Args:
            schema: The schema declaring the default
            actual_schema: The resolved enumeration schema
            type_name_hint: Type name to use when the enum type has no name

        Returns:
            The enum member literal
        """
        type_name = self.type_resolver.resolve(actual_schema, False, type_name_hint)

        if isinstance(schema.default, str):
            member_name = schema.default
        else:
            member_name = self._get_enumeration_name(schema, actual_schema)

        converted_name = to_upper_camel_case(member_name, True)
        if not converted_name:
            raise SchemaInconsistencyError(
                f"Enum member name {member_name!r} at '{schema.source_path or '#'}' has no identifier characters"
            )
        return self.format_enum_literal(type_name, converted_name)

    def _get_enumeration_name(self, schema: JsonSchema, actual_schema: JsonSchema) -> str:
        """Find the name paired with the default value in the enumeration."""
        if len(actual_schema.enumeration_names) != len(actual_schema.enumeration):
            raise SchemaInconsistencyError(
                f"Enumeration at '{actual_schema.source_path or '#'}' has {len(actual_schema.enumeration)} values "
                f"but {len(actual_schema.enumeration_names)} names"
            )

        for index, value in enumerate(actual_schema.enumeration):
            if _values_equal(value, schema.default):
                return str(actual_schema.enumeration_names[index])

        raise SchemaInconsistencyError(
            f"Default value {schema.default!r} at '{schema.source_path or '#'}' is not one of the enumeration values "
            f"{actual_schema.enumeration!r}"
        )

    def format_enum_literal(self, type_name: str, member_name: str) -> str:
        """Format the access to an enum member."""
        return f"{type_name}.{member_name}"

    def format_string_literal(self, value: Any) -> str:
        # Embedded quotes are not escaped
        return f'"{value}"'

    def format_boolean_literal(self, value: Any) -> str:
        return str(value).lower()

    def format_numeric_literal(self, value: Any, target_type: str | None) -> str:
        return str(value)


class CSharpDefaultValueGenerator(DefaultValueGenerator):
    """Default value generator for C#."""

    # Literal suffix by target type
    NUMERIC_SUFFIXES = {
        "long": "L",
        "float": "f",
        "double": "D",
        "decimal": "m",
    }

    def format_numeric_literal(self, value: Any, target_type: str | None) -> str:
        suffix = self.NUMERIC_SUFFIXES.get((target_type or "").rstrip("?"), "")
        # An integer suffix on a fractional value is not valid C#
        if suffix == "L" and not _is_integral(value):
            suffix = ""
        return str(value) + suffix


class PythonDefaultValueGenerator(DefaultValueGenerator):
    """Default value generator for Python."""

    def format_boolean_literal(self, value: Any) -> str:
        text = str(value)
        if text.lower() in ("true", "false"):
            return text.capitalize()
        return text

    def format_enum_literal(self, type_name: str, member_name: str) -> str:
        # Python enum members are UPPER_SNAKE_CASE
        return f"{type_name}.{pascal_to_upper_snake_case(member_name)}"


def get_default_value_generator(language: str, type_resolver: TypeResolver) -> DefaultValueGenerator:
    """Create the default value generator of a target language ("cs" or "python")."""
    match language:
        case "python":
            return PythonDefaultValueGenerator(type_resolver)
        case "cs":
            return CSharpDefaultValueGenerator(type_resolver)
        case _:
            raise ValueError(f"Language '{language}' is not supported")


def _values_equal(left: Any, right: Any) -> bool:
    """Compare enumeration values, never matching a bool with a number."""
    return isinstance(left, bool) == isinstance(right, bool) and left == right


def _is_integral(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
