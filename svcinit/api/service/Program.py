"""Business-logic contract supervised by `run`, plus a subprocess-backed implementation."""

import signal
import subprocess
from typing import Any, Protocol, runtime_checkable

from ...logging_config import get_logger

logger = get_logger("service.program")


@runtime_checkable
class Program(Protocol):
    """The caller's business logic.

    ``start`` must not block; ``stop`` should return once the work has stopped.
    """

    def start(self, service: Any) -> None: ...

    def stop(self, service: Any) -> None: ...


class ProcessProgram:
    """Runs an executable as a child process for the lifetime of `run`."""

    def __init__(self, executable: str, arguments: tuple[str, ...] | list[str] = (), stop_timeout: float = 10.0):
        self.command = [executable, *arguments]
        self.stop_timeout = stop_timeout
        self._process: subprocess.Popen | None = None

    @property
    def pid(self) -> int | None:
        return self._process.pid if self._process is not None else None

    def start(self, service: Any) -> None:
        if self._process is not None and self._process.poll() is None:
            raise RuntimeError(f"{service} is already running (pid {self._process.pid})")
        self._process = subprocess.Popen(self.command)
        logger.info("Started %s (pid %d)", service, self._process.pid)

    def stop(self, service: Any) -> None:
        process = self._process
        if process is None:
            return
        self._process = None
        if process.poll() is not None:
            logger.info("%s already exited with status %s", service, process.returncode)
            return
        process.send_signal(signal.SIGTERM)
        try:
            process.wait(timeout=self.stop_timeout)
        except subprocess.TimeoutExpired:
            logger.warning("%s did not exit within %.1fs, killing", service, self.stop_timeout)
            process.kill()
            process.wait()
        logger.info("Stopped %s", service)
