"""Service status command - reports state and the capabilities an install would use."""

from collections.abc import Iterator

from ..config.SvcinitConfig import SvcinitConfig
from ..StageResult import StageResult
from . import ServiceStatusOutput
from .Service import Service
from .ServiceError import ServiceError
from .ServiceState import ServiceState


def cmd_status() -> StageResult:
    """Check service status.

    Status is reported even when the service is absent; only configuration or
    backend errors mark the command as failed.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        backend_type = ""
        try:
            config = SvcinitConfig.load()
            backend_type = config.service.type

            with Service(config.service, config.description) as service:
                # Unsupported descriptions fail here, before the host is probed
                service.config_path()

                yield (0.3, "Detecting init system...")
                host_backend = Service.detect_backend(config.service) or ""

                yield (0.6, "Querying init system...")
                status = service.get_service_status()
                capabilities = service.capabilities()

            state: ServiceState = status["state"]
            pid = status["pid"]
            yield (1.0, "Complete")
            result_obj.result = f"Service {config.description.name!r} is {state.value}"
            if pid is not None:
                result_obj.result += f" (pid {pid})"
            result_obj.output = ServiceStatusOutput(
                errors=[],
                warnings=[],
                message=result_obj.result,
                state=state.value,
                pid=pid if pid is not None else -1,
                backend=backend_type,
                host_backend=host_backend,
                config_path=status["config_path"],
                capabilities=capabilities.to_dict(),
            ).model_dump(mode="python")
            result_obj.success = True
        except (ServiceError, ValueError, RuntimeError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error checking service status: {e}"
            result_obj.output = ServiceStatusOutput(
                errors=[str(e)],
                warnings=[],
                message=str(e),
                state="",
                pid=-1,
                backend=backend_type,
                host_backend="",
                config_path="",
                capabilities={},
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce="Checking service status...",
        progress_callback=do_work,
    )
