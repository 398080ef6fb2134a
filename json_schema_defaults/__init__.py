"""JSON Schema default values

Converts the default values declared in a JSON Schema into literal
expressions of a target language (C# or Python), resolving $ref indirection
and mapping enumeration defaults to enum members.
"""

__version__ = "1.0.1"

from .config import DefaultValueConfig, OutputFormat
from .default_value_generator import (
    CSharpDefaultValueGenerator,
    DefaultValueGenerator,
    PythonDefaultValueGenerator,
    get_default_value_generator,
)
from .exceptions import JsonSchemaDefaultsError, SchemaInconsistencyError, SchemaReferenceError
from .schema import JsonObjectType, JsonProperty, JsonSchema, SchemaLoader
from .type_resolver import CSharpTypeResolver, PythonTypeResolver, TypeResolver, get_type_resolver

__all__ = [
    "DefaultValueGenerator",
    "CSharpDefaultValueGenerator",
    "PythonDefaultValueGenerator",
    "get_default_value_generator",
    "TypeResolver",
    "CSharpTypeResolver",
    "PythonTypeResolver",
    "get_type_resolver",
    "JsonObjectType",
    "JsonSchema",
    "JsonProperty",
    "SchemaLoader",
    "DefaultValueConfig",
    "OutputFormat",
    "JsonSchemaDefaultsError",
    "SchemaInconsistencyError",
    "SchemaReferenceError",
]
