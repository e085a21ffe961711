"""Global state management for Uptime Scout."""

from uptime_scout.config import Config

# Initialized on first access
_config: Config | None = None


def get_config() -> Config:
    """Get or create config from the environment."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Config) -> None:
    """Set the global config instance.

    Allows tests and the server lifespan to inject a config.

    Args:
        config: Config instance to use globally.
    """
    global _config
    _config = config


def reset_state() -> None:
    """Reset global state for testing."""
    global _config
    _config = None
