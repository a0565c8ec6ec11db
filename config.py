"""
Configuration for jpaz
======================

Central configuration for the character analysis CLI. Values come from the
defaults below, overridden by environment variables (a ``.env`` file in the
working directory is loaded first). Invalid overrides are ignored and the
previous value is kept. Command-line flags take precedence over everything
here.
"""

import codecs
import logging
import os
from typing import Optional

from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

TRUTHY_ENV_VALUES = {"1", "true", "yes", "on"}


class ReportSettings(BaseModel):
    """Report rendering settings."""

    percent_decimals: int = Field(
        default=2,
        ge=0,
        le=6,
        description="Decimal places used for category percentages",
    )
    json_indent: bool = Field(
        default=False,
        description="Pretty-print JSON output with indentation",
    )


class Config(BaseModel):
    """Configuration settings for jpaz."""

    INPUT_ENCODING: str = Field(default="utf-8", description="Encoding used to decode input text")
    LOG_LEVEL: str = Field(default="WARNING", description="Default logging level for the CLI")
    REPORT: ReportSettings = Field(default_factory=ReportSettings, description="Report rendering settings")

    def __init__(self):
        super().__init__()
        self.load_from_environment()

    def load_from_environment(self):
        """Load configuration from environment variables."""
        encoding_override = os.getenv("JPAZ_INPUT_ENCODING")
        if encoding_override:
            try:
                self.INPUT_ENCODING = codecs.lookup(encoding_override.strip()).name
            except LookupError:
                pass

        level_override = os.getenv("JPAZ_LOG_LEVEL")
        if level_override:
            normalized = level_override.strip().upper()
            if isinstance(logging.getLevelName(normalized), int):
                self.LOG_LEVEL = normalized

        decimals_override = os.getenv("JPAZ_PERCENT_DECIMALS")
        if decimals_override:
            try:
                parsed = int(decimals_override)
                if 0 <= parsed <= 6:
                    self.REPORT.percent_decimals = parsed
            except ValueError:
                pass

        indent_override = os.getenv("JPAZ_JSON_INDENT")
        if indent_override:
            self.REPORT.json_indent = indent_override.strip().lower() in TRUTHY_ENV_VALUES

    def resolve_encoding(self, override: Optional[str] = None) -> str:
        """
        Return the input encoding to use, preferring an explicit override.

        Raises:
            LookupError: If ``override`` names an unknown codec
        """
        if override:
            return codecs.lookup(override).name
        return self.INPUT_ENCODING


# Global configuration instance
config = Config()
