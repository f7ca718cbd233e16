"""Capability flags describing which directives the host init system accepts."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Capabilities:
    """Feature flags resolved for one install.

    Never cached: a fresh instance is resolved for every install.
    """

    has_kill_stanza: bool
    has_setuid: bool
    has_start_stop_daemon: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
