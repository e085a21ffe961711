"""Uptime query across one or more hosts.

Hosts are handled strictly one after another. Every host yields exactly
one HostUptimeResult; connection and query failures are folded into the
result status and never abort the batch.
"""

import logging
from collections.abc import AsyncIterable, AsyncIterator, Iterable
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import asyncssh

from uptime_scout.models import Connected, HostStatus, HostUptimeResult, Unreachable
from uptime_scout.services.connection import open_host
from uptime_scout.services.executors import query_boot_time
from uptime_scout.services.state import get_config
from uptime_scout.utils.hostname import get_local_computer_name
from uptime_scout.utils.names import iter_names
from uptime_scout.utils.validation import validate_host

if TYPE_CHECKING:
    from uptime_scout.config import Config

logger = logging.getLogger(__name__)

START_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
PATCH_THRESHOLD_DAYS = 30.0
SECONDS_PER_DAY = 86400

# Failures of the boot time command after a successful connection
QUERY_ERRORS = (asyncssh.Error, OSError, TimeoutError, ValueError)


def format_start_time(boot_time: datetime) -> str:
    """Format a boot time in the local timezone."""
    return boot_time.astimezone().strftime(START_TIME_FORMAT)


def build_result(
    computer_name: str,
    status: HostStatus,
    boot_time: datetime | None = None,
    now: datetime | None = None,
    patch_threshold_days: float = PATCH_THRESHOLD_DAYS,
) -> HostUptimeResult:
    """Derive the output fields for one host.

    Args:
        computer_name: Host name as requested
        status: Classification of the query
        boot_time: Retrieved boot time, required when status is OK
        now: Reference time (defaults to the current UTC time)
        patch_threshold_days: Uptime above which patching is suggested

    Raises:
        ValueError: If status is OK without a boot time
    """
    if status is not HostStatus.OK:
        return HostUptimeResult(computer_name=computer_name, status=status)

    if boot_time is None:
        raise ValueError(f"{computer_name}: OK status requires a boot time")

    now = now or datetime.now(timezone.utc)
    uptime_days = round((now - boot_time).total_seconds() / SECONDS_PER_DAY, 1)

    return HostUptimeResult(
        computer_name=computer_name,
        status=HostStatus.OK,
        start_time=format_start_time(boot_time),
        uptime_days=uptime_days,
        might_need_patched=uptime_days > patch_threshold_days,
    )


async def _read_boot_time(
    conn: asyncssh.SSHClientConnection,
    computer_name: str,
    timeout: float,
) -> datetime | None:
    try:
        return await query_boot_time(conn, timeout=timeout)
    except QUERY_ERRORS as e:
        logger.debug("Boot time query failed on %s: %s", computer_name, e)
        return None


def _rejection_reason(computer_name: str, config: "Config") -> str | None:
    """Why a name must not be contacted, or None when it may be."""
    try:
        validate_host(computer_name)
    except ValueError as e:
        return str(e)
    if not config.is_host_allowed(computer_name):
        return "not allowed by host allowlist/blocklist"
    return None


async def query_host(computer_name: str, config: "Config") -> HostUptimeResult:
    """Query a single host and classify the outcome.

    Names that fail validation or are filtered out by the allowlist or
    blocklist are never contacted and are reported OFFLINE.

    Args:
        computer_name: Host name as requested
        config: Application configuration

    Returns:
        Fully populated result for this host
    """
    reason = _rejection_reason(computer_name, config)
    if reason is not None:
        logger.warning("%s is OFFLINE: %s", computer_name, reason)
        return build_result(computer_name, HostStatus.OFFLINE)

    host = config.resolve_host(computer_name)
    boot_time: datetime | None = None

    async with open_host(host, config) as outcome:
        match outcome:
            case Unreachable(reason=reason):
                logger.warning("%s is OFFLINE: %s", computer_name, reason)
                return build_result(computer_name, HostStatus.OFFLINE)
            case Connected(connection=conn):
                boot_time = await _read_boot_time(
                    conn, computer_name, config.command_timeout
                )

    if boot_time is None:
        logger.debug("%s is reachable but returned no boot time", computer_name)
        return build_result(computer_name, HostStatus.ERROR)

    return build_result(
        computer_name,
        HostStatus.OK,
        boot_time=boot_time,
        patch_threshold_days=config.patch_threshold_days,
    )


async def get_uptime(
    names: Iterable[Any] | AsyncIterable[Any] | str | None = None,
    config: "Config | None" = None,
) -> AsyncIterator[HostUptimeResult]:
    """Yield the uptime of each requested host, in order.

    Args:
        names: Host names, or records carrying one (see ``extract_name``).
            Sync and async sources are both consumed lazily.
            Defaults to the local computer when empty or omitted; blank
            entries in a non-empty input are reported OFFLINE.
        config: Application configuration (defaults to the global config)

    Yields:
        One HostUptimeResult per requested host

    Raises:
        ValueError: If an input element carries no usable host name
    """
    config = config or get_config()
    count = 0

    async for computer_name in iter_names(names):
        count += 1
        yield await query_host(computer_name, config)

    if count == 0:
        yield await query_host(get_local_computer_name(), config)
