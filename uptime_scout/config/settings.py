"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

ENV_PREFIX = "UPTIME_SCOUT_"


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # SSH transport
    connect_timeout: int = field(default=10)
    command_timeout: int = field(default=30)
    default_user: str = field(default="root")

    # Uptime classification
    patch_threshold_days: float = field(default=30.0)

    # Server transport
    transport: str = field(default="http")
    http_host: str = field(default="0.0.0.0")
    http_port: int = field(default=8000)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)
    log_payloads: bool = field(default=False)
    slow_threshold_ms: int = field(default=1000)
    include_traceback: bool = field(default=False)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from UPTIME_SCOUT_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            connect_timeout=cls._get_int("CONNECT_TIMEOUT", 10),
            command_timeout=cls._get_int("COMMAND_TIMEOUT", 30),
            default_user=os.getenv(f"{ENV_PREFIX}DEFAULT_USER", "root"),
            patch_threshold_days=cls._get_float("PATCH_THRESHOLD_DAYS", 30.0),
            transport=cls._get_transport(),
            http_host=os.getenv(f"{ENV_PREFIX}HTTP_HOST", "0.0.0.0"),
            http_port=cls._get_int("HTTP_PORT", 8000),
            log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("LOG_COLORS", True),
            log_payloads=cls._get_bool("LOG_PAYLOADS", False),
            slow_threshold_ms=cls._get_int("SLOW_THRESHOLD_MS", 1000),
            include_traceback=cls._get_bool("INCLUDE_TRACEBACK", False),
        )

    @staticmethod
    def _get_int(name: str, default: int) -> int:
        """Get integer from environment.

        Args:
            name: Variable name without the UPTIME_SCOUT_ prefix
            default: Default value if not set

        Returns:
            Integer value from environment or default
        """
        key = f"{ENV_PREFIX}{name}"
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @staticmethod
    def _get_float(name: str, default: float) -> float:
        key = f"{ENV_PREFIX}{name}"
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return float(value)
        except ValueError:
            logger.warning("Invalid float for %s: %s, using default %s", key, value, default)
            return default

    @staticmethod
    def _get_bool(name: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            name: Variable name without the UPTIME_SCOUT_ prefix
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(f"{ENV_PREFIX}{name}")
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_transport() -> str:
        """Get transport from environment with validation.

        Returns:
            Transport type ("http" or "stdio")
        """
        transport = os.getenv(f"{ENV_PREFIX}TRANSPORT", "").lower()
        if transport in ("http", "stdio"):
            return transport
        return "http"
