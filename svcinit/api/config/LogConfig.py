"""Log configuration."""

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .get_home_dir import get_home_dir
from ...constants import LOG_FILE_NAME


class LogConfig(BaseModel):
    """Where and how verbosely svcinit logs its own activity."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", description="Logging level")
    file: str = Field("", description="Log file path; empty uses svcinit.log under the svcinit home")

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)

    @property
    def path(self) -> Path:
        if self.file:
            return Path(self.file).expanduser()
        return get_home_dir(LOG_FILE_NAME)
