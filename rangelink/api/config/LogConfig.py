"""Log configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LogConfig(BaseModel):
    """Logging configuration for the CLI."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field("INFO", description="Logging level")
    file: str = Field("rangelink.log", description="Log file name, relative to the RangeLink home directory")

    @property
    def numeric_level(self) -> int:
        """Level as a ``logging`` module constant."""
        return {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}[self.level]
