"""Base output schema with standard errors and warnings fields."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Base schema for all API command outputs.

    Every command reports problems through these two lists rather than by
    raising, so the CLI can always render a complete output document.
    """

    errors: list[str] = Field(default_factory=list, description="Error messages, empty list if no errors")
    warnings: list[str] = Field(default_factory=list, description="Warning messages, empty list if no warnings")
