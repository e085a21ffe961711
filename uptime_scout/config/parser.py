"""Host definitions from an OpenSSH client config file.

Only the options needed to reach a host are read: HostName, User, Port
and IdentityFile. Wildcard blocks (``Host *``) supply defaults for the
blocks that follow them.
"""

import logging
import re
from collections.abc import Iterator
from pathlib import Path

from uptime_scout.models import SSHHost
from uptime_scout.utils.hostname import is_localhost_target

logger = logging.getLogger(__name__)

HOST_LINE = re.compile(r"^host\s+(\S+)", re.IGNORECASE)
OPTION_LINE = re.compile(r"^(\w+)\s+(.+)$")
KNOWN_OPTIONS = frozenset({"hostname", "user", "port", "identityfile"})


def iter_host_blocks(text: str) -> Iterator[tuple[str, dict[str, str]]]:
    """Yield ``(pattern, options)`` for each Host block, in file order."""
    pattern: str | None = None
    options: dict[str, str] = {}

    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        host_match = HOST_LINE.match(line)
        if host_match:
            if pattern is not None:
                yield pattern, options
            pattern, options = host_match.group(1), {}
            continue

        option_match = OPTION_LINE.match(line)
        if pattern is not None and option_match:
            key = option_match.group(1).lower()
            if key in KNOWN_OPTIONS:
                options[key] = option_match.group(2).strip()

    if pattern is not None:
        yield pattern, options


class SSHConfigParser:
    """Reads SSH aliases, filtered by an optional allowlist or blocklist."""

    def __init__(
        self,
        config_path: Path | str | None = None,
        allowlist: list[str] | None = None,
        blocklist: list[str] | None = None,
        default_user: str = "root",
    ):
        self.config_path = Path(config_path) if config_path else Path.home() / ".ssh" / "config"
        self.allowlist = frozenset(allowlist or ())
        self.blocklist = frozenset(blocklist or ())
        self.default_user = default_user

    def is_host_allowed(self, name: str) -> bool:
        """An allowlist, when set, wins over the blocklist."""
        if self.allowlist:
            return name in self.allowlist
        return name not in self.blocklist

    def parse(self) -> dict[str, SSHHost]:
        """Return allowed aliases mapped to their connection targets."""
        try:
            text = self.config_path.read_text()
        except FileNotFoundError:
            logger.warning("SSH config not found: %s", self.config_path)
            return {}
        except OSError as e:
            logger.warning("Cannot read SSH config %s: %s", self.config_path, e)
            return {}

        defaults: dict[str, str] = {}
        hosts: dict[str, SSHHost] = {}

        for pattern, options in iter_host_blocks(text):
            if "*" in pattern or "?" in pattern:
                defaults.update(options)
                continue
            host = self._build_host(pattern, {**defaults, **options})
            if host is not None and self.is_host_allowed(pattern):
                hosts[pattern] = host

        logger.info("Parsed %d hosts from %s", len(hosts), self.config_path)
        return hosts

    def _build_host(self, alias: str, options: dict[str, str]) -> SSHHost | None:
        if "hostname" not in options:
            return None

        port = options.get("port", "22")
        identity_file = options.get("identityfile")

        return SSHHost(
            name=alias,
            hostname=options["hostname"],
            user=options.get("user", self.default_user),
            port=int(port) if port.isdigit() else 22,
            identity_file=str(Path(identity_file).expanduser()) if identity_file else None,
            is_localhost=is_localhost_target(alias),
        )
