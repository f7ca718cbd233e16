"""Abstract base class for service implementations (init system backends)."""

import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from .Capabilities import Capabilities
from .Program import Program
from .ServiceDescription import ServiceDescription
from ._run_supervisor import _run_supervisor


class _AbstractImpl(ABC):
    """Abstract base class for init-system specific service implementations.

    Every backend exposes the same lifecycle: install, uninstall, start, stop,
    restart, status and run. Failures are raised as ServiceError subclasses.
    """

    description: ServiceDescription

    @abstractmethod
    def config_path(self) -> Path:
        """Path of the service definition file for this description."""

    @abstractmethod
    def capabilities(self) -> Capabilities:
        """Capability flags an install would use on this host right now."""

    @abstractmethod
    def install_service(self) -> dict[str, Any]:
        """Write the service definition file.

        Returns:
            Dictionary with installation result (success, type, name, config_path, capabilities)
        """

    @abstractmethod
    def uninstall_service(self) -> dict[str, Any]:
        """Remove the service definition file.

        Returns:
            Dictionary with uninstallation result
        """

    @abstractmethod
    def get_service_status(self) -> dict[str, Any]:
        """Get service status.

        Returns:
            Dictionary with status information (state, pid, config_path)
        """

    @abstractmethod
    def start_service(self) -> dict[str, Any]:
        """Start the installed service via the init system."""

    @abstractmethod
    def stop_service(self) -> dict[str, Any]:
        """Stop the service via the init system."""

    @abstractmethod
    def restart_service(self) -> dict[str, Any]:
        """Stop then start the service."""

    def run_service(self, program: Program, stop_event: threading.Event | None = None) -> None:
        """Run ``program`` in the foreground until a stop signal or ``stop_event``."""
        _run_supervisor(program, self.description, stop_event=stop_event)
