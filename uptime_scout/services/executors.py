"""SSH command executors for boot time retrieval."""

import re
from datetime import datetime, timezone
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import asyncssh

# Linux exposes boot time as `btime <epoch>` in /proc/stat; BSD and macOS
# report `{ sec = <epoch>, usec = ... }` via sysctl.
BOOT_TIME_COMMAND = (
    "awk '/^btime/ {print $2}' /proc/stat 2>/dev/null"
    " || sysctl -n kern.boottime 2>/dev/null"
)

_EPOCH_RE = re.compile(r"^\d+$")
_SYSCTL_RE = re.compile(r"\bsec\s*=\s*(\d+)")


def parse_boot_time(output: str) -> datetime | None:
    """Parse boot time command output.

    Returns:
        UTC-aware boot time, or None if the output carries no timestamp.
    """
    text = output.strip()
    if not text:
        return None

    first_line = text.splitlines()[0].strip()
    if _EPOCH_RE.match(first_line):
        epoch = int(first_line)
    else:
        found = _SYSCTL_RE.search(text)
        if not found:
            return None
        epoch = int(found.group(1))

    if epoch <= 0:
        return None

    return datetime.fromtimestamp(epoch, tz=timezone.utc)


async def query_boot_time(
    conn: "asyncssh.SSHClientConnection",
    timeout: float | None = None,
) -> datetime | None:
    """Read the last boot time of the connected host.

    Args:
        conn: SSH connection to run the boot time command on.
        timeout: Seconds before the command is abandoned (None for no limit).

    Returns:
        UTC-aware boot time, or None if the command produced nothing usable.

    Raises:
        asyncssh.Error: If the remote channel fails or times out.
    """
    result = await conn.run(BOOT_TIME_COMMAND, check=False, timeout=timeout)

    if result.returncode != 0:
        return None

    stdout = result.stdout
    if stdout is None:
        return None

    if isinstance(stdout, bytes):
        stdout = stdout.decode("utf-8", errors="replace")

    return parse_boot_time(stdout)
