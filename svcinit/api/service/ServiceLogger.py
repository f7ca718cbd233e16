"""Logger handed to the supervised program: syslog when run by init, console otherwise."""

import logging
import logging.handlers
import os
import sys

SYSLOG_ADDRESS = "/dev/log"


def is_interactive() -> bool:
    """True unless the process was started by init (parent pid 1)."""
    return os.getppid() != 1


class ServiceLogger:
    """Accepts errors, warnings and info messages for one service.

    Delivery is delegated to a logging handler, so callers never block on it
    beyond what the handler does.
    """

    def __init__(self, name: str, handler: logging.Handler):
        self.name = name
        self._logger = logging.getLogger(f"svcinit.service.{name}")
        self._logger.propagate = False
        self._logger.setLevel(logging.INFO)
        for existing in list(self._logger.handlers):
            self._logger.removeHandler(existing)
            existing.close()
        self._logger.addHandler(handler)

    @classmethod
    def console(cls, name: str) -> "ServiceLogger":
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
        return cls(name, handler)

    @classmethod
    def system(cls, name: str, address: str = SYSLOG_ADDRESS) -> "ServiceLogger":
        """Log to the local syslog daemon.

        Raises:
            RuntimeError: If the syslog socket cannot be opened
        """
        try:
            handler = logging.handlers.SysLogHandler(
                address=address, facility=logging.handlers.SysLogHandler.LOG_DAEMON
            )
        except OSError as e:
            raise RuntimeError(f"System logger unavailable at {address}: {e}") from e
        handler.setFormatter(logging.Formatter(f"{name}: %(message)s"))
        return cls(name, handler)

    @classmethod
    def for_service(cls, name: str, interactive: bool | None = None) -> "ServiceLogger":
        if interactive is None:
            interactive = is_interactive()
        return cls.console(name) if interactive else cls.system(name)

    @property
    def handlers(self) -> list[logging.Handler]:
        return list(self._logger.handlers)

    def error(self, err: BaseException | str) -> None:
        self._logger.error("%s", err)

    def warning(self, message: str) -> None:
        self._logger.warning("%s", message)

    def info(self, message: str) -> None:
        self._logger.info("%s", message)

    def close(self) -> None:
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()
