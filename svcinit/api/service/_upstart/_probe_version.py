"""Ask the host init binary for its version."""

import subprocess

from ....logging_config import get_logger
from ..InitVersion import InitVersion

logger = get_logger("service.upstart")


def _probe_version(init_path: str = "/sbin/init", timeout: float = 30.0) -> InitVersion:
    """Run `<init_path> --version` and extract the Upstart version.

    Any failure to run the command yields the unknown version; it is never raised.
    """
    try:
        result = subprocess.run(
            [init_path, "--version"],
            check=True,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Init version probe failed (%s): %s", init_path, e)
        return InitVersion.unknown()

    version = InitVersion.parse(result.stdout)
    if version.is_unknown:
        logger.debug("Init version not recognised in output of %s --version", init_path)
    return version
