"""MCP tools for Uptime Scout."""

from uptime_scout.tools.uptime import format_results, uptime

__all__ = ["format_results", "uptime"]
