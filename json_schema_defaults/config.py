"""
Configuration for default value generation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutputFormat(str, Enum):
    """Output format of the command line report."""

    TEXT = "text"
    JSON = "json"


@dataclass
class DefaultValueConfig:
    """Configuration options for default value generation."""

    # Target language ("cs" or "python")
    language: str = "cs"

    # Use the default values declared in the schema
    use_schema_default: bool = True

    # Whether assignment targets accept null
    allows_null: bool = True

    # Report format of the command line tool
    output_format: OutputFormat = OutputFormat.TEXT

    @staticmethod
    def from_dict(d: dict) -> DefaultValueConfig:
        """Create a config from a dictionary."""
        config = DefaultValueConfig()
        for k, v in d.items():
            if k == "output_format" and isinstance(v, str):
                config.output_format = OutputFormat(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "language": self.language,
            "use_schema_default": self.use_schema_default,
            "allows_null": self.allows_null,
            "output_format": self.output_format.value,
        }
