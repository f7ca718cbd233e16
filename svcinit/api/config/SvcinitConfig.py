"""Top-level svcinit configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import CONFIG_FILE_NAME
from ..service.ServiceConfig import ServiceConfig
from ..service.ServiceDescription import ServiceDescription
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig


class SvcinitConfig(BaseModel):
    """Top-level configuration: which backend, what to run, how to log."""

    model_config = ConfigDict(extra="forbid")

    service: ServiceConfig
    description: ServiceDescription
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on SVCINIT_HOME or default to ~/.svcinit."""
        return get_home_dir(CONFIG_FILE_NAME)

    @classmethod
    def load(cls) -> "SvcinitConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

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
        except TypeError as e:
            raise ValueError(f"Configuration validation error: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "service": self.service.model_dump(),
            "description": self.description.model_dump(mode="json"),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the configuration to its JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
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
