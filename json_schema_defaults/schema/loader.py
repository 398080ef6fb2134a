"""
JSON Schema loader that builds the JsonSchema graph.

Parses a JSON Schema document into JsonSchema/JsonProperty nodes, then links
every local $ref to the node it points at. External references are left
unresolved.
"""

from __future__ import annotations

import logging
from typing import Any

from ..exceptions import SchemaReferenceError
from .nodes import JsonObjectType, JsonProperty, JsonSchema

logger = logging.getLogger(__name__)


class SchemaLoader:
    """Loads a JSON Schema dictionary into a linked JsonSchema graph."""

    DEFINITION_KEYS = ("definitions", "$defs")
    COMPOSITION_KEYS = {"allOf": "all_of", "oneOf": "one_of", "anyOf": "any_of"}

    def __init__(self):
        self._nodes_by_path: dict[str, JsonSchema] = {}
        self._pending_refs: list[JsonSchema] = []

    def load(self, document: dict[str, Any], root_name: str = "") -> JsonSchema:
        """
        Load a JSON Schema document.

        Args:
            document: The JSON Schema dictionary
            root_name: Name hint for the root schema (used when it has no title)

        Returns:
            The root JsonSchema, with local references linked

        Raises:
            SchemaReferenceError: If a local $ref points nowhere
        """
        self._nodes_by_path = {}
        self._pending_refs = []

        root = self._parse_schema(document, "#")
        if root_name and root.definition_name is None:
            root.definition_name = root_name

        self._link_references()
        return root

    def _parse_schema(self, schema: dict[str, Any], path: str, node: JsonSchema | None = None) -> JsonSchema:
        """Parse one schema dictionary (recursively) into a node registered under path."""
        if node is None:
            node = JsonSchema()
        node.source_path = path
        self._nodes_by_path[path] = node

        if not isinstance(schema, dict):
            # Boolean schemas (true/false) carry no type information
            return node

        node.type = JsonObjectType.from_schema_value(schema.get("type"))
        if schema.get("nullable") is True:
            node.type |= JsonObjectType.NULL

        node.default = schema.get("default")
        node.title = schema.get("title")
        node.metadata = {key: value for key, value in schema.items() if key.startswith("x-")}

        if "enum" in schema:
            node.enumeration = list(schema["enum"])
            node.enumeration_names = self._parse_enumeration_names(schema, node.enumeration)

        if "$ref" in schema:
            node.reference_path = schema["$ref"]
            self._pending_refs.append(node)

        for key, attribute in self.COMPOSITION_KEYS.items():
            entries = schema.get(key) or []
            setattr(node, attribute, [self._parse_schema(entry, f"{path}/{key}/{i}") for i, entry in enumerate(entries)])

        items = schema.get("items")
        if isinstance(items, dict):
            node.items = self._parse_schema(items, f"{path}/items")

        required = set(schema.get("required") or [])
        for name, property_schema in (schema.get("properties") or {}).items():
            prop = JsonProperty(name=name, is_required=name in required, parent=node)
            node.properties[name] = self._parse_schema(property_schema, f"{path}/properties/{_escape_pointer(name)}", prop)

        for key in self.DEFINITION_KEYS:
            for name, definition in (schema.get(key) or {}).items():
                # Skip comment entries
                if isinstance(definition, str) or name.startswith("_comment"):
                    continue
                definition_node = self._parse_schema(definition, f"{path}/{key}/{_escape_pointer(name)}")
                definition_node.definition_name = name
                node.definitions[name] = definition_node

        return node

    def _parse_enumeration_names(self, schema: dict[str, Any], values: list[Any]) -> list[str]:
        """Read the display names of an enumeration.

        x-enumNames and x-enum-varnames are lists kept as written; x-enum-members
        maps each value to its name. Without any of them each value names itself.
        """
        for key in ("x-enumNames", "x-enum-varnames"):
            if key in schema:
                return [str(name) for name in schema[key]]

        members = schema.get("x-enum-members")
        if isinstance(members, dict):
            return [str(members.get(value, members.get(str(value), value))) for value in values]

        return [str(value) for value in values]

    def _link_references(self) -> None:
        """Link every pending $ref to its target node."""
        for node in self._pending_refs:
            ref_path = node.reference_path
            if not ref_path.startswith("#"):
                logger.warning("External reference '%s' at '%s' is not loaded", ref_path, node.source_path)
                continue

            target = self._nodes_by_path.get(_normalize_pointer(ref_path))
            if target is None:
                raise SchemaReferenceError(f"Could not resolve reference '{ref_path}' at '{node.source_path}'")

            logger.debug("Linked '%s' -> '%s'", node.source_path, target.source_path)
            node.reference = target


def _escape_pointer(name: str) -> str:
    """Escape a key for use as a JSON pointer segment."""
    return name.replace("~", "~0").replace("/", "~1")


def _normalize_pointer(ref_path: str) -> str:
    """Normalize a local $ref so it matches the registered node paths."""
    if ref_path in ("#", "#/"):
        return "#"
    return ref_path.rstrip("/")
