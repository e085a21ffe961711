"""known_hosts location and strictness for outgoing SSH connections."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DISABLED = "none"


class HostKeyVerifier:
    """Where host keys are checked, and what happens when they can't be.

    ``path`` is None when verification is off, either because it was
    disabled with ``none`` or because the file is missing in non-strict
    mode.

    Raises:
        FileNotFoundError: In strict mode when the known_hosts file is missing
    """

    def __init__(self, known_hosts_path: str | None = None, strict_checking: bool = True):
        self.strict_checking = strict_checking
        self.path = self._locate(known_hosts_path)

    def _locate(self, value: str | None) -> str | None:
        if value and value.lower() == DISABLED:
            logger.warning("SSH host key verification disabled")
            return None

        path = Path(value).expanduser() if value else Path.home() / ".ssh" / "known_hosts"
        if path.exists():
            return str(path)

        if self.strict_checking:
            raise FileNotFoundError(
                f"known_hosts not found at {path}. Add keys with "
                f"'ssh-keyscan <host> >> {path}', point UPTIME_SCOUT_KNOWN_HOSTS at "
                f"an existing file, or set UPTIME_SCOUT_STRICT_HOST_KEY_CHECKING=false"
            )

        logger.warning("known_hosts not found at %s, host keys will not be verified", path)
        return None
