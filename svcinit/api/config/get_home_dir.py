"""Get svcinit home directory path or path under it."""

import os
from pathlib import Path

from ...constants import SVCINIT_HOME_ENV, SVCINIT_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get svcinit home directory path or path under it.

    Checks SVCINIT_HOME environment variable first, defaults to ~/.svcinit if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json", "logs")

    Returns:
        Absolute path to svcinit home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/root/.svcinit")
        >>> get_home_dir("config.json")
        Path("/root/.svcinit/config.json")
    """
    home_env = os.environ.get(SVCINIT_HOME_ENV)
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # HOME is consulted directly so tests can isolate it
        user_home = os.environ.get("HOME")
        home = (Path(user_home) if user_home else Path.home()) / SVCINIT_HOME_EXT

    return home / Path(*parts) if parts else home
