"""Synchronisation status text shown in the wallet status bar."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

STATUS_UPDATE_INTERVAL_SECONDS = 30
_LAG_THRESHOLD = timedelta(hours=1)
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class StatusDescription:
    """Whether the wallet is in sync, and the sentence describing it."""

    synchronized: bool
    text: str


def _count(value: int, unit: str) -> str:
    return f"{value} {unit}" if value == 1 else f"{value} {unit}s"


def format_time_diff(seconds: int) -> str:
    """Describe a duration with its two most significant calendar parts."""
    moment = _EPOCH + timedelta(seconds=int(seconds))
    years = moment.year - _EPOCH.year
    months = moment.month - _EPOCH.month
    days = moment.day - _EPOCH.day

    if years > 0:
        first, second = _count(years, "year"), _count(months, "month")
    elif months > 0:
        first, second = _count(months, "month"), _count(days, "day")
    elif days > 0:
        first, second = _count(days, "day"), _count(moment.hour, "hour")
    elif moment.hour > 0:
        first, second = _count(moment.hour, "hour"), _count(moment.minute, "minute")
    elif moment.minute > 0:
        return _count(moment.minute, "minute")
    else:
        return "Less than 1 minute"
    return f"{first} {second}"


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def describe_status(
    known_height: int,
    last_height: int,
    last_block_timestamp: datetime | None,
    peer_count: int,
    lower_level_error: str,
    now: datetime | None = None,
) -> StatusDescription:
    """Build the status bar description of the wallet's synchronisation."""
    current = _as_utc(now) if now is not None else datetime.now(timezone.utc)

    if last_block_timestamp is None:
        any_block = False
        since_last = timedelta(0)
    else:
        last = min(_as_utc(last_block_timestamp), current)
        any_block = last > _EPOCH
        since_last = current - last

    formatted = format_time_diff(since_last // timedelta(seconds=1)) if any_block else "unknown"
    age = f"{formatted} ago" if any_block else formatted

    synchronized = not lower_level_error and any_block and last_height == known_height

    warning = ""
    if since_last > _LAG_THRESHOLD:
        warning += " Warning: the wallet is lagged."
    if peer_count == 0:
        warning += " No network connection."

    if synchronized:
        text = (
            f"Wallet synchronized. Top block height: {known_height}  /  "
            f"Received: {formatted} ago.{warning}"
        )
    else:
        blocks_left = known_height - last_height if known_height >= last_height else 0
        text = f"Synchronization: {blocks_left} blocks left ({age})."
    return StatusDescription(synchronized=bool(synchronized), text=text)