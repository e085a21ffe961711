"""Hosts resource for listing configured SSH hosts."""

from uptime_scout.services import get_config


async def list_hosts_resource() -> str:
    """List SSH hosts available for uptime queries.

    Returns:
        Formatted list of configured hosts with their SSH targets.
    """
    hosts = get_config().get_hosts()

    if not hosts:
        return "No SSH hosts configured. Hosts can still be queried by name."

    lines = ["Configured SSH Hosts", "=" * 40, ""]

    for name, host in sorted(hosts.items()):
        lines.append(f"{name}")
        lines.append(f"    SSH:    {host.user}@{host.hostname}:{host.port}")
        lines.append(f"    Uptime: uptime://{name}")
        lines.append("")

    return "\n".join(lines).rstrip()
