"""Top-level RangeLink configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..link.DelimiterConfig import DelimiterConfig
from ..link.RangeNotation import RangeNotation
from ..link.validate_delimiter_config import validate_delimiter_config
from .get_config_path import get_config_path
from .LogConfig import LogConfig


class RangeLinkConfig(BaseModel):
    """Top-level configuration: delimiters, notation and logging."""

    model_config = ConfigDict(extra="forbid")

    delimiters: DelimiterConfig = Field(default_factory=DelimiterConfig)
    notation: RangeNotation = Field(RangeNotation.AUTO, description="Column compaction override")
    log: LogConfig = Field(default_factory=LogConfig)

    @field_validator("delimiters")
    @classmethod
    def _check_delimiters(cls, value: DelimiterConfig) -> DelimiterConfig:
        result = validate_delimiter_config(value)
        if not result.success:
            raise ValueError(f"{result.error.code.value}: {result.error.message}")
        return value

    @property
    def path(self) -> Path:
        """Path to config file."""
        return get_config_path()

    @classmethod
    def load(cls) -> "RangeLinkConfig":
        """Load and validate config from file.

        A missing file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "delimiters": self.delimiters.model_dump(),
            "notation": self.notation.value,
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the configuration to its JSON file.

        Writes a temp file and renames it over the old one.
        """
        path = get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
