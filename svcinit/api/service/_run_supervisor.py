"""Run business logic in the foreground until told to stop."""

import signal
import threading
from collections.abc import Iterable
from typing import Any

from .Program import Program

DEFAULT_STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _restore_handlers(previous: dict[signal.Signals, Any]) -> None:
    for sig, handler in previous.items():
        # None means the old handler was not installed from Python
        signal.signal(sig, signal.SIG_DFL if handler is None else handler)


def _run_supervisor(
    program: Program,
    service: Any,
    stop_event: threading.Event | None = None,
    signals: Iterable[signal.Signals] = DEFAULT_STOP_SIGNALS,
) -> None:
    """Start ``program``, block until ``stop_event`` is set, then stop it.

    Without ``stop_event`` an event is created and set from handlers for
    ``signals``. The handlers are installed before ``program.start`` so a
    failure to install them (e.g. off the main thread) never leaves a started
    program behind; the previous handlers are restored before returning.
    Errors from ``program.start`` propagate without calling ``stop``; errors
    from ``program.stop`` propagate to the caller.
    """
    previous: dict[signal.Signals, Any] = {}
    if stop_event is None:
        stop_event = threading.Event()

        def handle_signal(_signum, _frame):
            stop_event.set()

        try:
            for sig in signals:
                previous[sig] = signal.signal(sig, handle_signal)
        except (ValueError, OSError):
            _restore_handlers(previous)
            raise

    try:
        program.start(service)
        # Wake up periodically so signal handlers get to run on the main thread
        while not stop_event.wait(0.5):
            pass
    finally:
        _restore_handlers(previous)

    program.stop(service)
