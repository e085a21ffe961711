"""Single-host uptime resource."""

from fastmcp.exceptions import ResourceError

from uptime_scout.services import get_config, query_host
from uptime_scout.utils.validation import validate_host


async def uptime_resource(host: str) -> str:
    """Report the uptime of one host.

    Args:
        host: Host name from the URI (uptime://{host})

    Returns:
        Plain text report

    Raises:
        ResourceError: If the host name is invalid
    """
    try:
        validate_host(host)
    except ValueError as e:
        raise ResourceError(str(e)) from e

    result = await query_host(host, get_config())

    lines = [
        f"Host:               {result.computer_name}",
        f"Status:             {result.status.value}",
        f"Start time:         {result.start_time}",
        f"Uptime (days):      {result.uptime_days}",
        f"Might need patched: {result.might_need_patched}",
    ]
    return "\n".join(lines)
