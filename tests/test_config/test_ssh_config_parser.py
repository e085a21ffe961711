"""Tests for SSHConfigParser."""

from pathlib import Path

import pytest

from uptime_scout.config.parser import SSHConfigParser


@pytest.fixture
def sample_ssh_config(tmp_path: Path) -> Path:
    """Create sample SSH config file."""
    config = tmp_path / "ssh_config"
    config.write_text("""
Host *
    User admin

Host test-host
    HostName 192.168.1.100
    Port 2222
    IdentityFile ~/.ssh/test_key

Host other
    HostName 192.168.1.101
    User root

# comment
Host no-hostname
    User nobody
""")
    return config


def test_parse_ssh_config(sample_ssh_config: Path) -> None:
    hosts = SSHConfigParser(sample_ssh_config).parse()

    assert set(hosts) == {"test-host", "other"}
    assert hosts["test-host"].hostname == "192.168.1.100"
    assert hosts["test-host"].port == 2222
    assert hosts["other"].user == "root"


def test_global_defaults_apply(sample_ssh_config: Path) -> None:
    """Host * values apply to later hosts."""
    hosts = SSHConfigParser(sample_ssh_config).parse()

    assert hosts["test-host"].user == "admin"


def test_identity_file_expanded(sample_ssh_config: Path) -> None:
    hosts = SSHConfigParser(sample_ssh_config).parse()

    identity = hosts["test-host"].identity_file
    assert identity is not None
    assert not identity.startswith("~")
    assert identity.endswith(".ssh/test_key")


def test_default_user_when_unset(tmp_path: Path) -> None:
    ssh_config = tmp_path / "ssh_config"
    ssh_config.write_text("Host plain\n    HostName 10.0.0.1\n")

    hosts = SSHConfigParser(ssh_config, default_user="ops").parse()

    assert hosts["plain"].user == "ops"


def test_invalid_port_falls_back(tmp_path: Path) -> None:
    ssh_config = tmp_path / "ssh_config"
    ssh_config.write_text("Host odd\n    HostName 10.0.0.1\n    Port abc\n")

    hosts = SSHConfigParser(ssh_config).parse()

    assert hosts["odd"].port == 22


def test_parse_respects_allowlist(sample_ssh_config: Path) -> None:
    hosts = SSHConfigParser(sample_ssh_config, allowlist=["other"]).parse()

    assert list(hosts) == ["other"]


def test_parse_respects_blocklist(sample_ssh_config: Path) -> None:
    hosts = SSHConfigParser(sample_ssh_config, blocklist=["other"]).parse()

    assert list(hosts) == ["test-host"]


def test_missing_file_returns_empty(tmp_path: Path) -> None:
    assert SSHConfigParser(tmp_path / "nope").parse() == {}


def test_allowlist_wins_over_blocklist(sample_ssh_config: Path) -> None:
    parser = SSHConfigParser(sample_ssh_config, allowlist=["other"], blocklist=["other"])

    assert parser.is_host_allowed("other") is True
    assert parser.is_host_allowed("test-host") is False


def test_unknown_options_ignored(tmp_path: Path) -> None:
    ssh_config = tmp_path / "ssh_config"
    ssh_config.write_text(
        "Host jump\n    HostName 10.0.0.9\n    ProxyJump bastion\n    ForwardAgent yes\n"
    )

    host = SSHConfigParser(ssh_config).parse()["jump"]

    assert host.hostname == "10.0.0.9"
    assert host.port == 22
