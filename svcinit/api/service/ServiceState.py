"""Lifecycle states of one installed service."""

from enum import Enum


class ServiceState(str, Enum):
    ABSENT = "absent"
    INSTALLED = "installed"
    RUNNING = "running"
    STOPPED = "stopped"
