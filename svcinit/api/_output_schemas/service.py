"""Output schemas for service commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ServiceInstallOutput(BaseOutputSchema):
    """Output schema for service install command."""
    message: str = Field(..., description="Human-readable result")
    installed: bool = Field(..., description="Whether the service definition file was written")
    config_path: str = Field(..., description="Path of the service definition file, empty string if unknown")
    capabilities: dict[str, bool] = Field(..., description="Capability flags used to render, empty if not rendered")


class ServiceUninstallOutput(BaseOutputSchema):
    """Output schema for service uninstall command."""
    message: str = Field(..., description="Human-readable result")
    uninstalled: bool = Field(..., description="Whether the service definition file was removed")
    config_path: str = Field(..., description="Path of the service definition file, empty string if unknown")


class ServiceStartOutput(BaseOutputSchema):
    """Output schema for service start command."""
    message: str = Field(..., description="Human-readable result")
    running: bool = Field(..., description="Whether the init system accepted the start request")


class ServiceStopOutput(BaseOutputSchema):
    """Output schema for service stop command."""
    message: str = Field(..., description="Human-readable result")
    stopped: bool = Field(..., description="Whether the init system accepted the stop request")


class ServiceRestartOutput(BaseOutputSchema):
    """Output schema for service restart command."""
    message: str = Field(..., description="Human-readable result")
    restarted: bool = Field(..., description="Whether both stop and start succeeded")


class ServiceStatusOutput(BaseOutputSchema):
    """Output schema for service status command.

    All fields must always be present for consistency.
    """
    message: str = Field(..., description="Human-readable result")
    state: str = Field(..., description="absent, installed, running or stopped; empty string on error")
    pid: int = Field(..., description="Process ID if running, -1 otherwise")
    backend: str = Field(..., description="Configured backend type")
    host_backend: str = Field(..., description="Backend detected on this host, empty string if none")
    config_path: str = Field(..., description="Path of the service definition file, empty string if unknown")
    capabilities: dict[str, Any] = Field(..., description="Capability flags an install would use now")


register_output_schema("service", "install", ServiceInstallOutput)
register_output_schema("service", "uninstall", ServiceUninstallOutput)
register_output_schema("service", "start", ServiceStartOutput)
register_output_schema("service", "stop", ServiceStopOutput)
register_output_schema("service", "restart", ServiceRestartOutput)
register_output_schema("service", "status", ServiceStatusOutput)
