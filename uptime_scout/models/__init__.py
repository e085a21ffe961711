"""Data models for Uptime Scout."""

from uptime_scout.models.ssh import ConnectResult, Connected, SSHHost, Unreachable
from uptime_scout.models.uptime import HostStatus, HostUptimeResult

__all__ = [
    "ConnectResult",
    "Connected",
    "HostStatus",
    "HostUptimeResult",
    "SSHHost",
    "Unreachable",
]
