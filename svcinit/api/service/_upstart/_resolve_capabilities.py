"""Turn an init version into the set of directives that are safe to emit."""

from pathlib import Path

from ..Capabilities import Capabilities
from ..InitVersion import InitVersion, VersionRelation

# Last release accepting `kill signal`, first release accepting `setuid`
KILL_STANZA_MAX_VERSION = "0.6.5"
SETUID_MIN_VERSION = "1.4"


def _resolve_capabilities(
    version: InitVersion | str | None,
    start_stop_daemon_path: str | Path = "/sbin/start-stop-daemon",
) -> Capabilities:
    """Resolve capability flags.

    An unknown version enables both version-gated directives. The daemon helper
    flag only reflects whether the helper binary exists right now.
    """
    if not isinstance(version, InitVersion):
        version = InitVersion.from_string(version)

    kill = version.relation_to(KILL_STANZA_MAX_VERSION)
    setuid = version.relation_to(SETUID_MIN_VERSION)

    return Capabilities(
        has_kill_stanza=kill in (VersionRelation.UNKNOWN, VersionRelation.BELOW, VersionRelation.EQUAL),
        has_setuid=setuid in (VersionRelation.UNKNOWN, VersionRelation.EQUAL, VersionRelation.ABOVE),
        has_start_stop_daemon=Path(start_stop_daemon_path).exists(),
    )
