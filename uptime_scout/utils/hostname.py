"""Hostname detection utilities for localhost identification."""

import socket


def get_local_computer_name() -> str:
    """Get the name of this machine as reported by the OS.

    Used as the default host when no names are requested.
    """
    return socket.gethostname()


def get_server_hostname() -> str:
    """Get the hostname of the machine running Uptime Scout.

    Returns:
        Hostname string (lowercase for consistent comparison)
    """
    return socket.gethostname().lower()


def is_localhost_target(target_host: str) -> bool:
    """Check if target host is the same as the server host.

    Args:
        target_host: Host name to check

    Returns:
        True if target matches server hostname (case-insensitive)
    """
    if not target_host:
        return False

    server_hostname = get_server_hostname()
    target_lower = target_host.lower()

    if target_lower in ("localhost", "127.0.0.1", "::1"):
        return True

    if target_lower == server_hostname:
        return True

    # Server hostname is FQDN and target is short name
    if "." in server_hostname:
        if target_lower == server_hostname.split(".")[0]:
            return True

    # Target is FQDN and server is short name
    if "." in target_lower:
        if target_lower.split(".")[0] == server_hostname:
            return True

    return False
