"""
Exceptions raised while resolving schemas and generating default values.
"""


class JsonSchemaDefaultsError(Exception):
    """Base exception for json_schema_defaults errors."""

    pass


class SchemaInconsistencyError(JsonSchemaDefaultsError):
    """Raised when a schema's enumeration metadata contradicts its default.

    This can happen when:
    - The enumeration values and enumeration names are not parallel
    - The default value is not one of the enumeration values
    """

    pass


class SchemaReferenceError(JsonSchemaDefaultsError):
    """Raised when a $ref cannot be followed (dangling, unresolved or cyclic)."""

    pass
