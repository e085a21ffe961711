"""Uptime tool for querying host boot times via SSH."""

import json
import logging

from uptime_scout.models import HostUptimeResult
from uptime_scout.services import get_config, get_uptime

logger = logging.getLogger(__name__)

COLUMNS = ("ComputerName", "StartTime", "Uptime (Days)", "Status", "MightNeedPatched")


def format_results(results: list[HostUptimeResult]) -> str:
    """Render results as a fixed-width table with a summary line."""
    rows = [
        (
            r.computer_name,
            str(r.start_time),
            str(r.uptime_days),
            r.status.value,
            str(r.might_need_patched),
        )
        for r in results
    ]
    widths = [
        max([len(COLUMNS[i])] + [len(row[i]) for row in rows]) for i in range(len(COLUMNS))
    ]

    def _line(cells: tuple[str, ...]) -> str:
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    lines = [_line(COLUMNS), _line(tuple("-" * w for w in widths))]
    lines.extend(_line(row) for row in rows)

    ok_count = sum(1 for r in results if r.is_ok)
    patch_count = sum(1 for r in results if r.might_need_patched)
    lines.append("")
    lines.append(f"{ok_count}/{len(results)} hosts OK, {patch_count} might need patching")
    return "\n".join(lines)


async def uptime(hosts: list[str] | None = None, as_json: bool = False) -> str:
    """Report how long hosts have been up and whether they might need patching.

    Hosts are queried one after another over SSH. A host that cannot be
    reached is reported OFFLINE; a reachable host whose boot time cannot be
    read is reported ERROR.

    Args:
        hosts: Host names (SSH config aliases or resolvable names).
            Defaults to the machine running the server.
        as_json: Return a JSON list of records instead of a table.

    Examples:
        uptime() - Uptime of the local machine
        uptime(["web1", "db1"]) - Uptime of two hosts
        uptime(["web1"], as_json=True) - Machine-readable output

    Returns:
        Table or JSON text with one entry per requested host.
    """
    config = get_config()
    results = [result async for result in get_uptime(hosts, config)]

    if as_json:
        return json.dumps([r.to_dict() for r in results], indent=2)

    return format_results(results)
