"""Tests for server wiring."""

import logging

from fastmcp import FastMCP

from uptime_scout.config import Settings
from uptime_scout.server import configure_logging, create_server
from uptime_scout.utils.console import ColorfulFormatter


def test_create_server() -> None:
    server = create_server(Settings(log_colors=False))

    assert isinstance(server, FastMCP)
    assert server.name == "uptime_scout"


def test_configure_logging_installs_single_handler() -> None:
    settings = Settings(log_level="DEBUG", log_colors=False)

    configure_logging(settings)
    configure_logging(settings)

    package_logger = logging.getLogger("uptime_scout")
    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 1
    assert isinstance(package_logger.handlers[0].formatter, ColorfulFormatter)
    assert logging.getLogger("asyncssh").level == logging.WARNING
