"""Service stop command - asks the init system to stop the job."""

from collections.abc import Iterator

from ..config.SvcinitConfig import SvcinitConfig
from ..StageResult import StageResult
from . import ServiceStopOutput
from .Service import Service
from .ServiceError import ServiceError


def cmd_stop() -> StageResult:
    """Stop the service via the init control command."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = SvcinitConfig.load()

            yield (0.5, "Stopping via init system...")
            with Service(config.service, config.description) as service:
                service.stop_service()

            yield (1.0, "Complete")
            result_obj.result = f"Service {config.description.name!r} stopped"
            result_obj.output = ServiceStopOutput(
                errors=[],
                warnings=[],
                message=result_obj.result,
                stopped=True,
            ).model_dump(mode="python")
            result_obj.success = True
        except (ServiceError, ValueError, RuntimeError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error stopping service: {e}"
            result_obj.output = ServiceStopOutput(
                errors=[str(e)],
                warnings=[],
                message=str(e),
                stopped=False,
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce="Stopping service...",
        progress_callback=do_work,
    )
