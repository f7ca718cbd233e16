"""Service uninstall command - removes the init system job file."""

from collections.abc import Iterator

from ..config.SvcinitConfig import SvcinitConfig
from ..StageResult import StageResult
from . import ServiceUninstallOutput
from .Service import Service
from .ServiceError import ServiceError


def cmd_uninstall() -> StageResult:
    """Remove the service definition file. The running job is left to the init system."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config_path = ""
        try:
            config = SvcinitConfig.load()

            yield (0.5, "Removing service definition...")
            with Service(config.service, config.description) as service:
                config_path = str(service.config_path())
                service.uninstall_service()

            yield (1.0, "Complete")
            result_obj.result = f"Service {config.description.name!r} uninstalled"
            result_obj.output = ServiceUninstallOutput(
                errors=[],
                warnings=[],
                message=result_obj.result,
                uninstalled=True,
                config_path=config_path,
            ).model_dump(mode="python")
            result_obj.success = True
        except (ServiceError, ValueError, RuntimeError, OSError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error uninstalling service: {e}"
            result_obj.output = ServiceUninstallOutput(
                errors=[str(e)],
                warnings=[],
                message=str(e),
                uninstalled=False,
                config_path=config_path,
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce="Uninstalling service...",
        progress_callback=do_work,
    )
