"""Uptime Scout FastMCP server.

Thin wiring of the uptime tool and resources onto a FastMCP server.
Business logic lives in services/.
"""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from uptime_scout.config import Settings
from uptime_scout.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from uptime_scout.resources import list_hosts_resource, uptime_resource
from uptime_scout.services import get_config
from uptime_scout.tools import uptime
from uptime_scout.utils.console import ColorfulFormatter

NOISY_LOGGERS = [
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "asyncssh",
    "httpx",
    "httpcore",
    "fastmcp",
    "starlette",
    "anyio",
]


def configure_logging(settings: Settings) -> None:
    """Configure colorful stderr logging for the uptime_scout package."""
    use_colors = settings.log_colors and sys.stderr.isatty()

    package_logger = logging.getLogger("uptime_scout")
    package_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Load configuration and report configured hosts at startup."""
    logger.info("Uptime Scout server starting up")

    config = get_config()
    hosts = config.get_hosts()
    logger.info(
        "Loaded %d SSH host(s): %s",
        len(hosts),
        ", ".join(sorted(hosts)) if hosts else "(none)",
    )
    logger.info("Uptime Scout server ready to accept connections")

    try:
        yield {"hosts": list(hosts)}
    finally:
        logger.info("Uptime Scout server shutting down")


def configure_middleware(server: FastMCP, settings: Settings) -> None:
    """Add middleware in order: ErrorHandling -> Logging (with timing)."""
    server.add_middleware(
        ErrorHandlingMiddleware(include_traceback=settings.include_traceback)
    )
    server.add_middleware(
        LoggingMiddleware(
            include_payloads=settings.log_payloads,
            slow_threshold_ms=float(settings.slow_threshold_ms),
        )
    )


def create_server(settings: Settings | None = None) -> FastMCP:
    """Create and configure the MCP server.

    Returns:
        Configured FastMCP server instance
    """
    settings = settings or Settings.from_env()
    configure_logging(settings)

    server = FastMCP("uptime_scout", lifespan=app_lifespan)
    configure_middleware(server, settings)

    server.tool()(uptime)
    server.resource("uptime://{host}")(uptime_resource)
    server.resource("hosts://list")(list_hosts_resource)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    return server


# Default server instance
mcp = create_server()
