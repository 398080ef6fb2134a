#!/usr/bin/env python3

import click
import pytest

from json_schema_defaults.cli_utils import report_command_line
from json_schema_defaults.json_schema_defaults import json_schema_defaults


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_without_context(self):
        """Without an active Click context the bare command name is returned"""
        assert report_command_line() == "json_schema_defaults"

    def test_schema_is_shown_by_file_name(self):
        """The schema path is reduced to its file name, whether it exists or not"""
        params = {"path": "/missing/dir/task.schema.json", "language": None, "no_schema_default": False}
        assert report_command_line(params) == "json_schema_defaults task.schema.json"

    def test_only_report_options_are_listed(self):
        """Options that do not change the literals are left out"""
        params = {
            "name": "task",
            "config": "/somewhere/config.json",
            "language": "python",
            "no_schema_default": True,
            "output_format": "json",
            "verbose": True,
            "path": "task.schema.json",
        }
        assert report_command_line(params) == (
            "json_schema_defaults task.schema.json --language python --no-schema-default --output-format json"
        )

    def test_reads_current_context(self):
        """Parameters default to those of the running command"""
        ctx = click.Context(json_schema_defaults)
        ctx.params = {
            "name": None,
            "language": "cs",
            "no_schema_default": False,
            "output_format": None,
            "verbose": False,
            "path": "missing/dir/task.schema.json",
        }
        with ctx:
            result = report_command_line()

        assert result == "json_schema_defaults task.schema.json --language cs"


if __name__ == "__main__":
    pytest.main([__file__])
