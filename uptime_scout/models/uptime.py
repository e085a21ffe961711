"""Uptime result data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class HostStatus(str, Enum):
    """Outcome of an uptime query against a single host."""

    OK = "OK"
    ERROR = "ERROR"
    OFFLINE = "OFFLINE"


@dataclass(frozen=True)
class HostUptimeResult:
    """Uptime of one queried host.

    ``start_time`` and ``uptime_days`` are ``0`` unless ``status`` is OK.
    """

    computer_name: str
    status: HostStatus
    start_time: str | int = 0
    uptime_days: float | int = 0
    might_need_patched: bool = False

    @property
    def is_ok(self) -> bool:
        """Whether a boot time was retrieved."""
        return self.status is HostStatus.OK

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the external field names."""
        return {
            "computerName": self.computer_name,
            "startTime": self.start_time,
            "uptimeDays": self.uptime_days,
            "status": self.status.value,
            "mightNeedPatched": self.might_need_patched,
        }
