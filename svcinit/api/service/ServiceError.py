"""Exceptions raised by service backends."""


class ServiceError(Exception):
    """Base class for all service backend failures."""


class UnsupportedConfigurationError(ServiceError):
    """The service description asks for something this backend cannot do."""


class AlreadyExistsError(ServiceError):
    """A service definition file is already present for this name."""

    def __init__(self, path):
        super().__init__(f"Init already exists: {path}")
        self.path = path


class NotFoundError(ServiceError):
    """No service definition file is present for this name."""

    def __init__(self, path):
        super().__init__(f"Init not found: {path}")
        self.path = path


class RenderFailureError(ServiceError):
    """The service definition could not be rendered (e.g. executable missing)."""


class ControlCommandFailedError(ServiceError):
    """The init control command exited non-zero or could not be executed."""

    def __init__(self, command: list[str], returncode: int | None, output: str):
        self.command = command
        self.returncode = returncode
        self.output = output
        detail = output.strip() or "no output"
        if returncode is None:
            message = f"Failed to run {' '.join(command)}: {detail}"
        else:
            message = f"{' '.join(command)} exited with status {returncode}: {detail}"
        super().__init__(message)
