"""Utilities for Uptime Scout."""

from uptime_scout.utils.console import ColorfulFormatter
from uptime_scout.utils.hostname import (
    get_local_computer_name,
    get_server_hostname,
    is_localhost_target,
)
from uptime_scout.utils.names import extract_name, iter_names
from uptime_scout.utils.validation import validate_host

__all__ = [
    "ColorfulFormatter",
    "extract_name",
    "get_local_computer_name",
    "get_server_hostname",
    "is_localhost_target",
    "iter_names",
    "validate_host",
]
