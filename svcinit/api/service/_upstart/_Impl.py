"""Upstart service implementation - installs the program as an /etc/init job."""

import re
import subprocess
import time
from pathlib import Path
from typing import Any

from ....logging_config import get_logger
from .._AbstractImpl import _AbstractImpl
from ..Capabilities import Capabilities
from ..ServiceConfig import ServiceConfig
from ..ServiceDescription import ServiceDescription
from ..ServiceError import (
    AlreadyExistsError,
    ControlCommandFailedError,
    NotFoundError,
    UnsupportedConfigurationError,
)
from ..ServiceState import ServiceState
from ._Data import _Data
from ._probe_version import _probe_version
from ._render_config import _render_config, _resolve_executable
from ._resolve_capabilities import _resolve_capabilities

logger = get_logger("service.upstart")

# `initctl status foo` -> "foo start/running, process 1234" or "foo stop/waiting"
_STATUS_PATTERN = re.compile(r"\s(?P<goal>start|stop)/(?P<state>[\w-]+)(?:,\s+process\s+(?P<pid>\d+))?")


class _Impl(_AbstractImpl):
    """Upstart-specific service implementation driven by initctl."""

    def __init__(self, service_config: ServiceConfig, description: ServiceDescription):
        """Initialize Upstart service implementation.

        Args:
            service_config: Service configuration whose data is Upstart data
            description: What to install
        """
        if not isinstance(service_config.data, _Data):
            raise ValueError("Upstart service config data is required")
        self.config = service_config
        self._data: _Data = service_config.data
        self.description = description

    def config_path(self) -> Path:
        # Upstart has some support for user session jobs, but it differs too much
        # between releases to rely on.
        if self.description.user_service:
            raise UnsupportedConfigurationError("User services are not supported on Upstart.")
        return Path(self._data.config_dir) / f"{self.description.name}.conf"

    def capabilities(self) -> Capabilities:
        """Probe the host and resolve capability flags (never cached)."""
        version = _probe_version(self._data.init_path, timeout=self._data.control_timeout_secs)
        capabilities = _resolve_capabilities(version, self._data.start_stop_daemon_path)
        logger.debug("Upstart version %r -> %s", str(version), capabilities)
        return capabilities

    def render(self) -> str:
        """Render the job file for the current host without writing it."""
        executable = _resolve_executable(self.description.executable)
        return _render_config(self.description, self.capabilities(), executable)

    def install_service(self) -> dict[str, Any]:
        conf_path = self.config_path()
        if conf_path.exists():
            raise AlreadyExistsError(conf_path)

        executable = _resolve_executable(self.description.executable)
        capabilities = self.capabilities()
        content = _render_config(self.description, capabilities, executable)

        # Rendered in full before the file is created, so a failure leaves nothing behind
        try:
            with conf_path.open("x", encoding="utf-8") as fh:
                fh.write(content)
        except FileExistsError as e:
            raise AlreadyExistsError(conf_path) from e

        logger.info("Installed %s at %s", self.description.name, conf_path)
        return {
            "success": True,
            "type": "upstart",
            "name": self.description.name,
            "config_path": str(conf_path),
            "capabilities": capabilities.to_dict(),
        }

    def uninstall_service(self) -> dict[str, Any]:
        conf_path = self.config_path()
        try:
            conf_path.unlink()
        except FileNotFoundError as e:
            raise NotFoundError(conf_path) from e

        logger.info("Removed %s", conf_path)
        return {
            "success": True,
            "type": "upstart",
            "name": self.description.name,
            "config_path": str(conf_path),
        }

    def _initctl(self, action: str) -> str:
        command = [self._data.initctl, action, self.description.name]
        try:
            result = subprocess.run(
                command,
                check=False,
                capture_output=True,
                text=True,
                timeout=self._data.control_timeout_secs,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise ControlCommandFailedError(command, None, str(e)) from e
        output = (result.stdout or "") + (result.stderr or "")
        if result.returncode != 0:
            raise ControlCommandFailedError(command, result.returncode, output)
        return output

    def start_service(self) -> dict[str, Any]:
        self._initctl("start")
        logger.info("Started %s", self.description.name)
        return {"success": True, "type": "upstart", "name": self.description.name}

    def stop_service(self) -> dict[str, Any]:
        self._initctl("stop")
        logger.info("Stopped %s", self.description.name)
        return {"success": True, "type": "upstart", "name": self.description.name}

    def restart_service(self) -> dict[str, Any]:
        self.stop_service()
        # Give Upstart a moment to release the job before starting it again
        time.sleep(self._data.restart_delay_secs)
        return self.start_service()

    def get_service_status(self) -> dict[str, Any]:
        conf_path = self.config_path()
        status: dict[str, Any] = {
            "state": ServiceState.ABSENT,
            "pid": None,
            "config_path": str(conf_path),
        }
        if not conf_path.exists():
            return status

        status["state"] = ServiceState.INSTALLED
        try:
            output = self._initctl("status")
        except ControlCommandFailedError as e:
            logger.debug("Status unavailable for %s: %s", self.description.name, e)
            return status

        match = _STATUS_PATTERN.search(output)
        if match is None:
            return status
        if match.group("goal") == "start" and match.group("state") == "running":
            status["state"] = ServiceState.RUNNING
            if match.group("pid"):
                status["pid"] = int(match.group("pid"))
        elif match.group("goal") == "stop":
            status["state"] = ServiceState.STOPPED
        return status
