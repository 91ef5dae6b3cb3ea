from datetime import datetime, timedelta, timezone

import pytest

from dogewallet.status import StatusDescription, describe_status, format_time_diff

NOW = datetime(2018, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("seconds", [0, 1, 59])
def test_less_than_a_minute(seconds):
    assert format_time_diff(seconds) == "Less than 1 minute"


def test_single_minute():
    assert format_time_diff(60) == "1 minute"


def test_hours_and_minutes():
    assert format_time_diff(3600 + 120) == "1 hour 2 minutes"


def test_days_mention_hours():
    text = format_time_diff(3 * 86400 + 5 * 3600)
    assert "days" in text
    assert text.endswith("hours")


def test_years_mention_months():
    text = format_time_diff(400 * 86400)
    assert text.startswith("1 year ")
    assert "month" in text


def test_synchronized():
    result = describe_status(100, 100, NOW - timedelta(minutes=10), 5, "", NOW)
    assert isinstance(result, StatusDescription)
    assert result.synchronized is True
    assert result.text.startswith("Wallet synchronized.")
    assert "Top block height: 100" in result.text
    assert "Warning" not in result.text


def test_lagged_warning():
    result = describe_status(100, 100, NOW - timedelta(hours=2), 5, "", NOW)
    assert result.synchronized is True
    assert "Warning: the wallet is lagged." in result.text


def test_no_peers_warning():
    result = describe_status(100, 100, NOW - timedelta(minutes=1), 0, "", NOW)
    assert "No network connection." in result.text


def test_not_synchronized():
    result = describe_status(150, 100, NOW - timedelta(minutes=10), 5, "", NOW)
    assert result.synchronized is False
    assert result.text.startswith("Synchronization: 50 blocks left")
    assert result.text.endswith(" ago).")


def test_unknown_timestamp():
    result = describe_status(100, 100, None, 5, "", NOW)
    assert result.synchronized is False
    assert "(unknown)" in result.text


def test_lower_level_error_blocks_sync():
    result = describe_status(100, 100, NOW - timedelta(minutes=10), 5, "offline", NOW)
    assert result.synchronized is False
    assert result.text.startswith("Synchronization:")


def test_future_timestamp_is_clamped():
    result = describe_status(100, 100, NOW + timedelta(hours=1), 5, "", NOW)
    assert result.synchronized is True
    assert "Received: Less than 1 minute ago." in result.text


def test_naive_timestamps_treated_as_utc():
    naive_now = NOW.replace(tzinfo=None)
    aware = describe_status(10, 10, NOW - timedelta(hours=3), 1, "", NOW)
    naive = describe_status(10, 10, naive_now - timedelta(hours=3), 1, "", naive_now)
    assert naive == aware