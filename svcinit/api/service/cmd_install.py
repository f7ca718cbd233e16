"""Service install command - writes the init system job file."""

from collections.abc import Iterator

from ..config.SvcinitConfig import SvcinitConfig
from ..StageResult import StageResult
from . import ServiceInstallOutput
from .Service import Service
from .ServiceError import ServiceError


def cmd_install() -> StageResult:
    """Install the configured program as a service.

    Refuses to overwrite an existing job file; uninstall first to replace it.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        """
        yield (0.1, "Loading configuration...")
        warnings: list[str] = []
        config_path = ""
        try:
            config = SvcinitConfig.load()

            with Service(config.service, config.description) as service:
                # Unsupported descriptions fail here, before the host is probed
                config_path = str(service.config_path())

                yield (0.3, "Detecting init system...")
                backend_type = config.service.type
                host_backend = Service.detect_backend(config.service)
                if host_backend != backend_type:
                    warnings.append(
                        f"Configured backend {backend_type!r} does not match host init system "
                        f"({host_backend or 'not detected'})"
                    )

                yield (0.6, "Rendering and writing service definition...")
                result = service.install_service()

            yield (1.0, "Complete")
            result_obj.result = f"Service {config.description.name!r} installed at {result['config_path']}"
            result_obj.output = ServiceInstallOutput(
                errors=[],
                warnings=warnings,
                message=result_obj.result,
                installed=True,
                config_path=result["config_path"],
                capabilities=result["capabilities"],
            ).model_dump(mode="python")
            result_obj.success = True
        except (ServiceError, ValueError, RuntimeError, OSError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error installing service: {e}"
            result_obj.output = ServiceInstallOutput(
                errors=[str(e)],
                warnings=warnings,
                message=str(e),
                installed=False,
                config_path=config_path,
                capabilities={},
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce="Installing service...",
        progress_callback=do_work,
    )
