"""Configuration module for Uptime Scout.

- Config: Main configuration class (aggregates all components)
- SSHConfigParser: Parses ~/.ssh/config files
- HostKeyVerifier: Manages SSH host key verification
- Settings: Environment variable configuration
"""

from uptime_scout.config.host_keys import HostKeyVerifier
from uptime_scout.config.main import Config
from uptime_scout.config.parser import SSHConfigParser
from uptime_scout.config.settings import Settings

__all__ = ["Config", "SSHConfigParser", "HostKeyVerifier", "Settings"]
