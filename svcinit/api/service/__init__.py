"""Service module - install and control a program under the host init system."""

from .._output_schemas.service import (
    ServiceInstallOutput,
    ServiceRestartOutput,
    ServiceStartOutput,
    ServiceStatusOutput,
    ServiceStopOutput,
    ServiceUninstallOutput,
)
from .ServiceConfig import ServiceConfig
from .ServiceDescription import ServiceDescription

__all__ = [
    "ServiceConfig",
    "ServiceDescription",
    "ServiceInstallOutput",
    "ServiceRestartOutput",
    "ServiceStartOutput",
    "ServiceStatusOutput",
    "ServiceStopOutput",
    "ServiceUninstallOutput",
]
