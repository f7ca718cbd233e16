"""Detect whether the host runs Upstart."""

import subprocess
from pathlib import Path

from ._Data import _Data


def _detect(data: _Data | None = None) -> bool:
    """True if the udev bridge is installed or init reports itself as Upstart."""
    data = data or _Data()
    if Path(data.udev_bridge_path).exists():
        return True
    if not Path(data.init_path).exists():
        return False
    try:
        result = subprocess.run(
            [data.init_path, "--version"],
            check=True,
            capture_output=True,
            text=True,
            timeout=data.control_timeout_secs,
        )
    except (OSError, subprocess.SubprocessError):
        return False
    return "init (upstart" in result.stdout
