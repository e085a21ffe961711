"""Tests for uptime field derivation."""

from datetime import datetime, timedelta, timezone

import pytest

from uptime_scout.models import HostStatus
from uptime_scout.services.uptime import build_result, format_start_time

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_ok_result_derives_fields() -> None:
    boot = NOW - timedelta(days=45)

    result = build_result("SRV-UP", HostStatus.OK, boot_time=boot, now=NOW)

    assert result.status is HostStatus.OK
    assert result.start_time == format_start_time(boot)
    assert result.uptime_days == 45.0
    assert result.might_need_patched is True


def test_uptime_rounded_to_one_decimal() -> None:
    boot = NOW - timedelta(days=2, hours=7)  # 2.2916 days

    result = build_result("web1", HostStatus.OK, boot_time=boot, now=NOW)

    assert result.uptime_days == 2.3


@pytest.mark.parametrize(
    ("days", "expected"),
    [
        (30.0, False),
        (30.04, False),
        (30.1, True),
        (29.9, False),
        (120.0, True),
    ],
)
def test_patch_threshold_is_strictly_above_thirty_days(days: float, expected: bool) -> None:
    """Exactly 30.0 days does not need patching; 30.1 does."""
    boot = NOW - timedelta(days=days)

    result = build_result("web1", HostStatus.OK, boot_time=boot, now=NOW)

    assert result.might_need_patched is expected


def test_custom_patch_threshold() -> None:
    boot = NOW - timedelta(days=10)

    result = build_result(
        "web1", HostStatus.OK, boot_time=boot, now=NOW, patch_threshold_days=7.0
    )

    assert result.might_need_patched is True


@pytest.mark.parametrize("status", [HostStatus.ERROR, HostStatus.OFFLINE])
def test_non_ok_results_use_sentinels(status: HostStatus) -> None:
    result = build_result("web1", status)

    assert result.status is status
    assert result.start_time == 0
    assert result.uptime_days == 0
    assert result.might_need_patched is False


def test_non_ok_ignores_boot_time() -> None:
    """A boot time passed with a non-OK status is not reported."""
    result = build_result(
        "web1", HostStatus.ERROR, boot_time=NOW - timedelta(days=99), now=NOW
    )

    assert result.start_time == 0
    assert result.might_need_patched is False


def test_ok_without_boot_time_rejected() -> None:
    with pytest.raises(ValueError, match="web1"):
        build_result("web1", HostStatus.OK)


def test_start_time_format() -> None:
    boot = datetime(2024, 5, 1, 8, 30, 15, tzinfo=timezone.utc)

    formatted = format_start_time(boot)

    assert formatted == boot.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    assert len(formatted) == 19
