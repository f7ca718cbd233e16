"""Logging setup for svcinit's own activity (not the supervised program's)."""

import logging
import sys
from pathlib import Path

from .api.config.get_home_dir import get_home_dir
from .constants import LOG_FILE_NAME

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.INFO,
    log_file: Path | None = None,
    format_string: str = DEFAULT_FORMAT,
) -> None:
    """Configure the root logger with a file handler and a stderr handler.

    Args:
        level: Logging level (default INFO)
        log_file: Path to the log file (default ~/.svcinit/svcinit.log)
        format_string: Record format shared by both handlers
    """
    if log_file is None:
        log_file = get_home_dir(LOG_FILE_NAME)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.FileHandler(log_file), logging.StreamHandler(sys.stderr)],
    )


def setup_logging_from_config(verbose: bool = False) -> None:
    """Configure logging from the ``log`` section of config.json.

    A missing or invalid config file falls back to INFO under the svcinit home;
    the command itself reports the config problem.
    """
    from .api.config.LogConfig import LogConfig
    from .api.config.SvcinitConfig import SvcinitConfig

    try:
        log_config = SvcinitConfig.load().log
    except ValueError:
        log_config = LogConfig()
    setup_logging(level=logging.DEBUG if verbose else log_config.level_number, log_file=log_config.path)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``svcinit`` namespace."""
    return logging.getLogger(f"svcinit.{name}")
