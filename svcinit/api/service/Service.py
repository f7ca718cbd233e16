"""Service public API - installs and controls a program as an init-system service."""

import importlib
import threading
from pathlib import Path
from typing import Any

from .Capabilities import Capabilities
from .Program import Program
from .ServiceConfig import _BACKEND_REGISTRY, ServiceConfig
from .ServiceDescription import ServiceDescription
from ._AbstractImpl import _AbstractImpl


class Service:
    """Public API for service operations.

    Use as a context manager; the backend implementation is chosen once on entry.
    """

    def __init__(self, service_config: ServiceConfig, description: ServiceDescription):
        self.service_config = service_config
        self.description = description
        self._impl: _AbstractImpl | None = None

    @staticmethod
    def detect_backend(service_config: ServiceConfig | None = None) -> str | None:
        """Return the registered backend type the host runs, or None.

        The configured backend is probed with its own data (so sandboxed paths
        are honoured); other backends are probed with their defaults.
        """
        for backend_type in _BACKEND_REGISTRY:
            data = None
            if service_config is not None and service_config.type == backend_type:
                data = service_config.data
            module = importlib.import_module(f"svcinit.api.service._{backend_type}._detect")
            if module._detect(data):
                return backend_type
        return None

    def __enter__(self):
        backend_type = self.service_config.type

        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        # Import implementation class directly from backend _Impl module
        module = __import__(f"svcinit.api.service._{backend_type}._Impl", fromlist=[""])
        impl_class = module._Impl
        self._impl = impl_class(self.service_config, self.description)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def _require_impl(self) -> _AbstractImpl:
        if not self._impl:
            raise RuntimeError("Service not initialized. Use as context manager first.")
        return self._impl

    def __str__(self) -> str:
        return str(self.description)

    def config_path(self) -> Path:
        return self._require_impl().config_path()

    def capabilities(self) -> Capabilities:
        return self._require_impl().capabilities()

    def install_service(self) -> dict[str, Any]:
        return self._require_impl().install_service()

    def uninstall_service(self) -> dict[str, Any]:
        return self._require_impl().uninstall_service()

    def start_service(self) -> dict[str, Any]:
        return self._require_impl().start_service()

    def stop_service(self) -> dict[str, Any]:
        return self._require_impl().stop_service()

    def restart_service(self) -> dict[str, Any]:
        return self._require_impl().restart_service()

    def get_service_status(self) -> dict[str, Any]:
        return self._require_impl().get_service_status()

    def run_service(self, program: Program, stop_event: threading.Event | None = None) -> None:
        """Run ``program`` in the foreground until a stop signal or ``stop_event``."""
        self._require_impl().run_service(program, stop_event=stop_event)
