"""Services for Uptime Scout."""

from uptime_scout.services.connection import connect_host, open_host
from uptime_scout.services.executors import parse_boot_time, query_boot_time
from uptime_scout.services.state import get_config, reset_state, set_config
from uptime_scout.services.uptime import build_result, get_uptime, query_host

__all__ = [
    "build_result",
    "connect_host",
    "get_config",
    "get_uptime",
    "open_host",
    "parse_boot_time",
    "query_boot_time",
    "query_host",
    "reset_state",
    "set_config",
]
