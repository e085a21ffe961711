"""SSH connection helpers returning a typed outcome instead of raising."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import asyncssh

from uptime_scout.models import ConnectResult, Connected, Unreachable

if TYPE_CHECKING:
    from uptime_scout.config import Config
    from uptime_scout.models import SSHHost

logger = logging.getLogger(__name__)

# Failures that leave no usable connection. KeyImportError (a malformed
# IdentityFile) is a ValueError subclass.
CONNECT_ERRORS = (OSError, asyncssh.Error, TimeoutError, ValueError)


async def _connect(
    host: "SSHHost",
    known_hosts: str | None,
    connect_timeout: float,
) -> asyncssh.SSHClientConnection:
    client_keys = [host.identity_file] if host.identity_file else None
    return await asyncssh.connect(
        host.connection_hostname,
        port=host.connection_port,
        username=host.user,
        known_hosts=known_hosts,
        client_keys=client_keys,
        connect_timeout=connect_timeout,
    )


async def connect_host(host: "SSHHost", config: "Config") -> ConnectResult:
    """Attempt an SSH connection to a host.

    Host key failures honour strict checking: in strict mode the host is
    reported unreachable, otherwise one reconnect is made with verification
    disabled.

    Args:
        host: Resolved connection target
        config: Application configuration (timeouts, known_hosts)

    Returns:
        Connected with the open connection, or Unreachable with a reason
    """
    logger.debug(
        "Opening SSH connection to %s (%s@%s:%d)",
        host.name,
        host.user,
        host.connection_hostname,
        host.connection_port,
    )

    try:
        try:
            conn = await _connect(host, config.known_hosts_path, config.connect_timeout)
        except asyncssh.HostKeyNotVerifiable as e:
            if config.strict_host_key_checking:
                logger.debug(
                    "Host key verification failed for %s: %s. Add the host key to %s "
                    "or set UPTIME_SCOUT_STRICT_HOST_KEY_CHECKING=false",
                    host.name,
                    e,
                    config.known_hosts_path,
                )
                return Unreachable(host.name, f"host key not verifiable: {e}")

            logger.warning(
                "Host key not verified for %s (strict mode disabled): %s",
                host.name,
                e,
            )
            conn = await _connect(host, None, config.connect_timeout)
    except CONNECT_ERRORS as e:
        logger.debug("Connection to %s failed: %s", host.name, e)
        return Unreachable(host.name, str(e) or type(e).__name__)

    logger.debug("SSH connection established to %s", host.name)
    return Connected(conn)


@asynccontextmanager
async def open_host(host: "SSHHost", config: "Config") -> AsyncIterator[ConnectResult]:
    """Scope a connection attempt to a block.

    The connection, when one was obtained, is closed on every exit path.

    Example:
        async with open_host(host, config) as outcome:
            ...
    """
    outcome = await connect_host(host, config)
    try:
        yield outcome
    finally:
        if isinstance(outcome, Connected):
            outcome.connection.close()
            await outcome.connection.wait_closed()
            logger.debug("Closed SSH connection to %s", host.name)
