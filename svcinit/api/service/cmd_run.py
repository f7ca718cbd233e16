"""Run the configured program in the foreground (what the init job executes)."""

import threading

from ...logging_config import get_logger
from ..config.SvcinitConfig import SvcinitConfig
from .Program import Program, ProcessProgram
from .Service import Service
from .ServiceLogger import ServiceLogger

logger = get_logger("service.run")


def cmd_run(
    program: Program | None = None,
    stop_event: threading.Event | None = None,
    service_logger: ServiceLogger | None = None,
) -> int:
    """Start the program, block until SIGINT/SIGTERM (or ``stop_event``), then stop it.

    Args:
        program: Business logic to supervise; defaults to the configured executable
        stop_event: Optional stop token, set by the caller instead of a signal
        service_logger: Sink for errors; defaults to syslog or console

    Returns:
        Process exit code (0 on clean stop, 1 on error)
    """
    config = SvcinitConfig.load()
    description = config.description
    if service_logger is None:
        service_logger = ServiceLogger.for_service(description.name)
    if program is None:
        program = ProcessProgram(description.executable, description.arguments)

    try:
        with Service(config.service, description) as service:
            service_logger.info(f"Running {service}")
            service.run_service(program, stop_event=stop_event)
    except Exception as e:
        logger.error("Run of %s failed: %s", description.name, e)
        service_logger.error(e)
        return 1
    finally:
        service_logger.close()

    logger.info("%s stopped", description)
    return 0
