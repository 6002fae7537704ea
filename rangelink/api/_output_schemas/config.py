"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command.

    Output structure:
    - errors: list[str] - list of error messages, empty list if no errors
    - warnings: list[str] - list of warning messages, empty list if no warnings
    - section: str - the section name, empty string if none provided (listing all sections)
    - content: dict[str, Any] - if section is empty, dict with "sections" key containing list of section names; if section provided, the section config dict
    - config_path: str - path to the configuration file
    - exists: bool - whether the configuration file exists (defaults are shown otherwise)
    """
    section: str = Field(..., description="Section name, empty string if none provided (listing all sections)")
    content: dict[str, Any] = Field(..., description="If section is empty: dict with 'sections' key containing list of section names; if section provided: the section config dict")
    config_path: str = Field(..., description="Path to the configuration file")
    exists: bool = Field(..., description="True if the configuration file exists")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""
    version: str = Field(..., description="Package version string")
    python_version: str = Field(..., description="Running Python version")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "version", ConfigVersionOutput)
