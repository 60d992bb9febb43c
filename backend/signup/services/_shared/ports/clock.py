from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol


def isoformat_utc(moment: datetime) -> str:
    """Format ``moment`` as ISO-8601 UTC with milliseconds and a ``Z`` suffix.

    Naive datetimes are taken to be UTC already.

    >>> isoformat_utc(datetime(2024, 1, 1, tzinfo=timezone.utc))
    '2024-01-01T00:00:00.000Z'
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


class Clock(Protocol):
    """Port returning the current instant as sortable ISO-8601 text."""

    def now(self) -> str: ...


class UTCClock(Clock):
    """Wall clock in UTC."""

    def now(self) -> str:
        return isoformat_utc(datetime.now(timezone.utc))


class FixedClock(Clock):
    """Clock frozen at a single instant, for deterministic tests."""

    def __init__(self, moment: datetime) -> None:
        self._value = isoformat_utc(moment)

    def now(self) -> str:
        return self._value
