"""MCP resources for Uptime Scout."""

from uptime_scout.resources.hosts import list_hosts_resource
from uptime_scout.resources.uptime import uptime_resource

__all__ = ["list_hosts_resource", "uptime_resource"]
