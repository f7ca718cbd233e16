"""Service restart command - stop, short pause, start."""

from collections.abc import Iterator

from ..config.SvcinitConfig import SvcinitConfig
from ..StageResult import StageResult
from . import ServiceRestartOutput
from .Service import Service
from .ServiceError import ServiceError


def cmd_restart() -> StageResult:
    """Restart the service. If stopping fails the service is not started again."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = SvcinitConfig.load()

            yield (0.5, "Restarting via init system...")
            with Service(config.service, config.description) as service:
                service.restart_service()

            yield (1.0, "Complete")
            result_obj.result = f"Service {config.description.name!r} restarted"
            result_obj.output = ServiceRestartOutput(
                errors=[],
                warnings=[],
                message=result_obj.result,
                restarted=True,
            ).model_dump(mode="python")
            result_obj.success = True
        except (ServiceError, ValueError, RuntimeError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error restarting service: {e}"
            result_obj.output = ServiceRestartOutput(
                errors=[str(e)],
                warnings=[],
                message=str(e),
                restarted=False,
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce="Restarting service...",
        progress_callback=do_work,
    )
