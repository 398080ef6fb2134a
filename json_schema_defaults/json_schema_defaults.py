import json
import logging
from pathlib import Path

import click

from .config import DefaultValueConfig, OutputFormat
from .exceptions import JsonSchemaDefaultsError
from .report import DefaultsReport
from .schema import SchemaLoader


@click.command()
@click.option("--name", "-n", default=None, type=str)
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--language", "-l", default=None, type=click.Choice(["cs", "python"]))
@click.option(
    "--no-schema-default",
    is_flag=True,
    default=False,
    help="Ignore the default values declared in the schema",
)
@click.option("--output-format", "-f", default=None, type=click.Choice([f.value for f in OutputFormat]))
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log reference resolution details")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
def json_schema_defaults(name, config, language, no_schema_default, output_format, verbose, path):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    with open(path) as f:
        schema = json.load(f)

    if config is not None:
        with open(config) as f:
            config = DefaultValueConfig.from_dict(json.load(f))
    else:
        config = DefaultValueConfig()

    # CLI flags override the config file
    if language is not None:
        config.language = language
    if no_schema_default:
        config.use_schema_default = False
    if output_format is not None:
        config.output_format = OutputFormat(output_format)

    if name is None:
        name = Path(path).stem.split(".")[0]

    try:
        root = SchemaLoader().load(schema, name)
        out = DefaultsReport(name, root, config).render()
    except JsonSchemaDefaultsError as e:
        raise click.ClickException(str(e)) from e

    click.echo(out, nl=False)
