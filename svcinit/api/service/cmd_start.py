"""Service start command - asks the init system to start the job."""

from collections.abc import Iterator

from ..config.SvcinitConfig import SvcinitConfig
from ..StageResult import StageResult
from . import ServiceStartOutput
from .Service import Service
from .ServiceError import ServiceError


def cmd_start() -> StageResult:
    """Start the installed service via the init control command.

    Not retried on failure; the control command's output is reported as the error.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = SvcinitConfig.load()

            yield (0.5, "Starting via init system...")
            with Service(config.service, config.description) as service:
                service.start_service()

            yield (1.0, "Complete")
            result_obj.result = f"Service {config.description.name!r} started"
            result_obj.output = ServiceStartOutput(
                errors=[],
                warnings=[],
                message=result_obj.result,
                running=True,
            ).model_dump(mode="python")
            result_obj.success = True
        except (ServiceError, ValueError, RuntimeError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error starting service: {e}"
            result_obj.output = ServiceStartOutput(
                errors=[str(e)],
                warnings=[],
                message=str(e),
                running=False,
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce="Starting service...",
        progress_callback=do_work,
    )
