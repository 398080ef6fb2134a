import logging

import pytest

from json_schema_defaults.exceptions import SchemaReferenceError
from json_schema_defaults.schema import JsonObjectType, JsonProperty, SchemaLoader

SCHEMA = {
    "title": "Order",
    "type": "object",
    "required": ["id"],
    "properties": {
        "id": {"type": "integer"},
        "note": {"type": "string", "nullable": True, "default": "none"},
        "priority": {"$ref": "#/definitions/priority_level", "default": 2},
        "tags": {"type": "array", "items": {"$ref": "#/$defs/Tag"}},
        "owner": {"$ref": "#/properties/id"},
    },
    "definitions": {
        "_comment": "definitions used by Order",
        "priority_level": {
            "type": "integer",
            "enum": [1, 2, 3],
            "x-enumNames": ["Low", "Medium", "High"],
        },
    },
    "$defs": {
        "Tag": {"type": "string", "enum": ["a", "b"], "x-enum-varnames": ["Alpha", "Beta"]},
    },
}


class TestSchemaLoader:
    def setup_method(self):
        self.root = SchemaLoader().load(SCHEMA, "order")

    def test_root(self):
        assert self.root.type == JsonObjectType.OBJECT
        assert self.root.title == "Order"
        assert self.root.definition_name == "order"
        assert self.root.source_path == "#"

    def test_properties(self):
        assert list(self.root.properties) == ["id", "note", "priority", "tags", "owner"]
        prop = self.root.properties["id"]
        assert isinstance(prop, JsonProperty)
        assert prop.is_required
        assert prop.parent is self.root
        assert not self.root.properties["note"].is_required

    def test_openapi_nullable(self):
        note = self.root.properties["note"]
        assert note.type == JsonObjectType.STRING | JsonObjectType.NULL
        assert note.default == "none"

    def test_definitions_skip_comments(self):
        assert list(self.root.definitions) == ["priority_level", "Tag"]
        assert self.root.definitions["priority_level"].definition_name == "priority_level"

    def test_enumeration_names(self):
        priority = self.root.definitions["priority_level"]
        assert priority.enumeration == [1, 2, 3]
        assert priority.enumeration_names == ["Low", "Medium", "High"]
        assert self.root.definitions["Tag"].enumeration_names == ["Alpha", "Beta"]

    def test_references_are_linked(self):
        priority = self.root.properties["priority"]
        assert priority.reference is self.root.definitions["priority_level"]
        assert priority.actual_schema is self.root.definitions["priority_level"]
        assert self.root.properties["tags"].items.reference is self.root.definitions["Tag"]

    def test_pointer_into_properties(self):
        assert self.root.properties["owner"].actual_schema is self.root.properties["id"]

    def test_root_reference(self):
        root = SchemaLoader().load({"type": "object", "properties": {"parent": {"$ref": "#"}}})
        assert root.properties["parent"].actual_schema is root

    def test_enum_members_extension(self):
        root = SchemaLoader().load({"enum": ["r", "g", "b"], "x-enum-members": {"r": "red", "g": "green"}})
        assert root.enumeration_names == ["red", "green", "b"]

    def test_unnamed_enumeration_uses_values(self):
        root = SchemaLoader().load({"type": "integer", "enum": [1, 2, 3]})
        assert root.enumeration_names == ["1", "2", "3"]

    def test_explicit_names_are_kept_as_written(self):
        root = SchemaLoader().load({"type": "integer", "enum": [1, 2, 3], "x-enumNames": ["one"]})
        assert root.enumeration_names == ["one"]

    def test_composition(self):
        root = SchemaLoader().load(
            {
                "allOf": [{"$ref": "#/definitions/Base"}, {"properties": {"extra": {"type": "string"}}}],
                "definitions": {"Base": {"type": "object"}},
            }
        )
        assert root.all_of[0].reference is root.definitions["Base"]
        assert "extra" in root.all_of[1].properties


class TestSchemaLoaderReferences:
    def test_dangling_local_reference(self):
        with pytest.raises(SchemaReferenceError, match="#/definitions/Missing"):
            SchemaLoader().load({"properties": {"x": {"$ref": "#/definitions/Missing"}}})

    def test_external_reference_left_unresolved(self, caplog):
        with caplog.at_level(logging.WARNING, logger="json_schema_defaults.schema.loader"):
            root = SchemaLoader().load({"properties": {"x": {"$ref": "other.json#/definitions/Thing"}}})

        prop = root.properties["x"]
        assert prop.reference is None
        assert prop.reference_path == "other.json#/definitions/Thing"
        assert "External reference" in caplog.text

    def test_escaped_pointer(self):
        root = SchemaLoader().load(
            {
                "properties": {"x": {"$ref": "#/definitions/a~1b"}},
                "definitions": {"a/b": {"type": "string"}},
            }
        )
        assert root.properties["x"].actual_schema is root.definitions["a/b"]

    def test_loader_is_reusable(self):
        loader = SchemaLoader()
        first = loader.load({"definitions": {"A": {"type": "string"}}, "properties": {"a": {"$ref": "#/definitions/A"}}})
        second = loader.load({"definitions": {"A": {"type": "integer"}}, "properties": {"a": {"$ref": "#/definitions/A"}}})
        assert first.properties["a"].actual_schema.type == JsonObjectType.STRING
        assert second.properties["a"].actual_schema.type == JsonObjectType.INTEGER
