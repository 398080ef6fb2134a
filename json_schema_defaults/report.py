"""
Default value report over every class property of a schema.

Walks the root schema and its definitions, asks the default value generator
for each property literal and renders the result with Jinja2 templates.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

import jinja2

from . import __version__
from .cli_utils import report_command_line
from .config import DefaultValueConfig, OutputFormat
from .default_value_generator import DefaultValueGenerator, get_default_value_generator
from .exceptions import SchemaReferenceError
from .schema.nodes import JsonProperty, JsonSchema
from .type_resolver import TypeResolver, get_type_resolver
from .utils import snake_to_pascal_case

logger = logging.getLogger(__name__)

CURRENT_DIR = Path(__file__).parent.resolve().absolute()


@dataclass
class DefaultEntry:
    """Default literal of one class property."""

    class_name: str = ""
    property_name: str = ""
    type_name: str = ""
    literal: str = ""


class DefaultsReport:
    """Collects and renders the default literals of a schema."""

    LANGUAGE_TO_EXTENSION = {"cs": "cs", "python": "py"}

    def __init__(self, name: str, schema: JsonSchema, config: DefaultValueConfig):
        """
        Initialize the report.

        Args:
            name: Class name of the root schema
            schema: The loaded root schema
            config: Generation configuration
        """
        if config.language not in self.LANGUAGE_TO_EXTENSION:
            raise ValueError(f"Language '{config.language}' is not supported")

        self.name = name
        self.schema = schema
        self.config = config
        self.type_resolver: TypeResolver = get_type_resolver(config.language)
        self.generator: DefaultValueGenerator = get_default_value_generator(config.language, self.type_resolver)

        template_dir = CURRENT_DIR / "templates" / config.language
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.template = self.jinja_env.get_template(f"defaults.{self.LANGUAGE_TO_EXTENSION[config.language]}.jinja2")

    def collect(self) -> list[DefaultEntry]:
        """Collect the default literal of every property that has one."""
        entries = []
        for class_name, class_schema in self._iter_classes():
            for prop in self._class_properties(class_schema).values():
                entry = self._make_entry(class_name, prop)
                if entry is not None:
                    entries.append(entry)
        return entries

    def render(self) -> str:
        """Render the report in the configured output format."""
        entries = self.collect()
        if self.config.output_format == OutputFormat.JSON:
            return json.dumps([asdict(entry) for entry in entries], indent=2) + "\n"

        return self.template.render(
            generation_comment=self._generate_command_comment(),
            entries=entries,
        )

    def _iter_classes(self):
        """Yield (class name, schema) for the root and every object definition."""
        if self._class_properties(self.schema):
            yield self.type_resolver.get_or_generate_type_name(self.schema, self.name), self.schema

        for name, definition in self.schema.definitions.items():
            if definition.has_reference or not self._class_properties(definition):
                continue
            yield self.type_resolver.get_or_generate_type_name(definition, name), definition

    def _class_properties(self, schema: JsonSchema) -> dict[str, JsonProperty]:
        """Own properties plus those of inline allOf extensions."""
        properties = dict(schema.properties)
        for entry in schema.all_of:
            if not entry.has_reference:
                properties.update(entry.properties)
        return properties

    def _make_entry(self, class_name: str, prop: JsonProperty) -> DefaultEntry | None:
        type_name_hint = snake_to_pascal_case(prop.name)
        try:
            type_name = self.type_resolver.resolve(prop, prop.is_nullable, type_name_hint)
            literal = self.generator.get_default_value(
                prop,
                self.config.allows_null,
                type_name,
                type_name_hint,
                self.config.use_schema_default,
            )
        except SchemaReferenceError as e:
            logger.warning("Skipping %s.%s: %s", class_name, prop.name, e)
            return None

        if literal is None:
            return None
        return DefaultEntry(class_name=class_name, property_name=prop.name, type_name=type_name, literal=literal)

    def _generate_command_comment(self) -> str:
        """Generate a command line comment for the report header."""
        comment_prefix = "//" if self.config.language == "cs" else "#"
        return f"{comment_prefix} Generated by json_schema_defaults v{__version__} : {report_command_line()}"
