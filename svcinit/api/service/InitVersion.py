"""Init system version as reported by the host, with an explicit unknown state."""

import re
from dataclasses import dataclass
from enum import Enum

# `init (upstart 1.12.1)` -> "1.12.1"
VERSION_PATTERN = re.compile(r"init\s+\(upstart\s+([^)]+)\)")


class VersionRelation(Enum):
    """How a detected version relates to a threshold."""

    UNKNOWN = "unknown"
    BELOW = "below"
    EQUAL = "equal"
    ABOVE = "above"


@dataclass(frozen=True)
class InitVersion:
    """Version string of the host init system.

    ``value`` is None when the version could not be determined. Comparisons are
    plain string comparisons, so "1.10" sorts before "1.9".
    """

    value: str | None = None

    @classmethod
    def unknown(cls) -> "InitVersion":
        return cls(None)

    @classmethod
    def from_string(cls, value: str | None) -> "InitVersion":
        """Build from a raw version string; empty means unknown."""
        return cls(value) if value else cls(None)

    @classmethod
    def parse(cls, output: str) -> "InitVersion":
        """Extract the version from `init --version` output."""
        match = VERSION_PATTERN.search(output)
        if match is None:
            return cls(None)
        return cls.from_string(match.group(1))

    @property
    def is_unknown(self) -> bool:
        return self.value is None

    def relation_to(self, threshold: str) -> VersionRelation:
        if self.value is None:
            return VersionRelation.UNKNOWN
        if self.value < threshold:
            return VersionRelation.BELOW
        if self.value == threshold:
            return VersionRelation.EQUAL
        return VersionRelation.ABOVE

    def __str__(self) -> str:
        return self.value if self.value is not None else ""
