"""
Schema model and loader.
"""

from .loader import SchemaLoader
from .nodes import JsonObjectType, JsonProperty, JsonSchema

__all__ = [
    "JsonObjectType",
    "JsonProperty",
    "JsonSchema",
    "SchemaLoader",
]
