"""Application configuration.

Delegates to specialized components:
- SSHConfigParser: Reads ~/.ssh/config
- HostKeyVerifier: Manages known_hosts
- Settings: Environment variables
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from uptime_scout.config.host_keys import HostKeyVerifier
from uptime_scout.config.parser import SSHConfigParser
from uptime_scout.config.settings import Settings
from uptime_scout.models import SSHHost
from uptime_scout.utils.hostname import is_localhost_target

logger = logging.getLogger(__name__)


def _split_env_list(key: str) -> list[str] | None:
    value = os.getenv(key, "").strip()
    if not value:
        return None
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Config:
    """Application configuration.

    Aggregates settings from SSH config, known_hosts, and environment.
    """

    settings: Settings
    parser: SSHConfigParser
    host_keys: HostKeyVerifier
    _hosts_cache: dict[str, SSHHost] | None = field(default=None, init=False, repr=False)

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment.

        Returns:
            Configured instance with all components initialized
        """
        settings = Settings.from_env()

        parser = SSHConfigParser(
            config_path=os.getenv("UPTIME_SCOUT_SSH_CONFIG") or None,
            allowlist=_split_env_list("UPTIME_SCOUT_ALLOWLIST"),
            blocklist=_split_env_list("UPTIME_SCOUT_BLOCKLIST"),
            default_user=settings.default_user,
        )

        host_keys = HostKeyVerifier(
            known_hosts_path=os.getenv("UPTIME_SCOUT_KNOWN_HOSTS"),
            strict_checking=os.getenv(
                "UPTIME_SCOUT_STRICT_HOST_KEY_CHECKING", "true"
            ).lower()
            != "false",
        )

        return cls(settings=settings, parser=parser, host_keys=host_keys)

    @classmethod
    def from_ssh_config(
        cls,
        ssh_config_path: Path | str | None = None,
        settings: Settings | None = None,
    ) -> "Config":
        """Create config from an explicit SSH config path.

        Host key verification is disabled; intended for tests and ad-hoc use.
        """
        settings = settings or Settings()
        parser = SSHConfigParser(
            config_path=ssh_config_path,
            default_user=settings.default_user,
        )
        host_keys = HostKeyVerifier(known_hosts_path="none", strict_checking=False)
        return cls(settings=settings, parser=parser, host_keys=host_keys)

    def get_hosts(self) -> dict[str, SSHHost]:
        """Get SSH hosts from config.

        Lazy loads and caches hosts on first call.
        """
        if self._hosts_cache is None:
            self._hosts_cache = self.parser.parse()
        return self._hosts_cache

    def get_host(self, name: str) -> SSHHost | None:
        """Get host by name.

        Args:
            name: Host name to look up

        Returns:
            SSHHost if found, None otherwise
        """
        return self.get_hosts().get(name)

    def is_host_allowed(self, name: str) -> bool:
        """Whether the allowlist/blocklist permits contacting ``name``."""
        return self.parser.is_host_allowed(name)

    def resolve_host(self, name: str) -> SSHHost:
        """Resolve a requested computer name to a connection target.

        Names absent from the SSH config are contacted directly.
        """
        host = self.get_host(name)
        if host is not None:
            return host

        logger.debug("%s not in SSH config, connecting by name", name)
        return SSHHost(
            name=name,
            hostname=name,
            user=self.settings.default_user,
            is_localhost=is_localhost_target(name),
        )

    @property
    def connect_timeout(self) -> int:
        """SSH connect timeout in seconds."""
        return self.settings.connect_timeout

    @property
    def command_timeout(self) -> int:
        """Boot time command timeout in seconds."""
        return self.settings.command_timeout

    @property
    def patch_threshold_days(self) -> float:
        """Uptime above which a host might need patching."""
        return self.settings.patch_threshold_days

    @property
    def transport(self) -> str:
        """Transport type (http or stdio)."""
        return self.settings.transport

    @property
    def http_host(self) -> str:
        """HTTP server bind address."""
        return self.settings.http_host

    @property
    def http_port(self) -> int:
        """HTTP server port."""
        return self.settings.http_port

    @property
    def known_hosts_path(self) -> str | None:
        """Path to known_hosts file or None if disabled."""
        return self.host_keys.path

    @property
    def strict_host_key_checking(self) -> bool:
        """Whether to reject unknown host keys."""
        return self.host_keys.strict_checking
