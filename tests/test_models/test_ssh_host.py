"""Tests for SSHHost and connection outcome models."""

from unittest.mock import MagicMock

from uptime_scout.models import Connected, SSHHost, Unreachable


def test_ssh_host_defaults() -> None:
    host = SSHHost(name="test", hostname="192.168.1.1")

    assert host.user == "root"
    assert host.port == 22
    assert host.identity_file is None
    assert host.is_localhost is False


def test_ssh_host_localhost_override() -> None:
    """SSHHost should use loopback when is_localhost=True."""
    host = SSHHost(
        name="buildbox",
        hostname="buildbox.example.com",
        port=29229,
        is_localhost=True,
    )
    assert host.connection_hostname == "127.0.0.1"
    assert host.connection_port == 22


def test_ssh_host_no_override_when_not_localhost() -> None:
    host = SSHHost(name="remote", hostname="remote.example.com", port=29229)

    assert host.connection_hostname == "remote.example.com"
    assert host.connection_port == 29229


def test_connect_outcomes_match_by_type() -> None:
    """Outcomes destructure in match statements."""
    conn = MagicMock()

    def describe(outcome: Connected | Unreachable) -> str:
        match outcome:
            case Connected(connection=c):
                return f"connected:{c is conn}"
            case Unreachable(host_name=name, reason=reason):
                return f"{name}:{reason}"

    assert describe(Connected(conn)) == "connected:True"
    assert describe(Unreachable("web1", "refused")) == "web1:refused"
