"""
Command line shown in the header of generated reports.
"""

from pathlib import Path
from typing import Any

import click

COMMAND_NAME = "json_schema_defaults"

# Options that change the report, in the order they are listed
REPORT_OPTIONS = (
    ("language", "--language"),
    ("no_schema_default", "--no-schema-default"),
    ("output_format", "--output-format"),
)


def report_command_line(params: dict[str, Any] | None = None) -> str:
    """
    Describe the invocation that produced a report.

    Only the schema file name and the options changing the literals are kept,
    so the header does not depend on where the command was run from.

    Args:
        params: Command parameters, those of the running click command by default

    Returns:
        Command line string
    """
    if params is None:
        ctx = click.get_current_context(silent=True)
        params = ctx.params if ctx is not None else {}

    parts = [COMMAND_NAME]
    if params.get("path"):
        parts.append(Path(params["path"]).name)

    for name, flag in REPORT_OPTIONS:
        value = params.get(name)
        if value is True:
            parts.append(flag)
        elif value:
            parts.extend([flag, str(value)])
    return " ".join(parts)
