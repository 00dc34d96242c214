"""
Time source for the wellness core.

Timestamps are integer epoch seconds. A calendar day is the fixed
86400-second interval obtained by flooring a timestamp; no timezone
is applied.
"""
from __future__ import annotations

import time
from datetime import date, datetime, timezone

SECONDS_PER_DAY = 86400


def floor_to_day(ts: int) -> int:
    return ts - ts % SECONDS_PER_DAY


def day_to_date(day: int) -> date:
    return datetime.fromtimestamp(day, tz=timezone.utc).date()


def date_to_day(d: date) -> int:
    return int(datetime(d.year, d.month, d.day, tzinfo=timezone.utc).timestamp())


class Clock:
    """Current-time oracle injected into every public operation."""

    def now(self) -> int:
        raise NotImplementedError


class SystemClock(Clock):
    def now(self) -> int:
        return int(time.time())


class FixedClock(Clock):
    """Settable clock for tests and replays."""

    def __init__(self, ts: int):
        self.ts = ts

    def now(self) -> int:
        return self.ts

    def advance(self, seconds: int = 0, days: int = 0) -> int:
        self.ts += seconds + days * SECONDS_PER_DAY
        return self.ts


system_clock = SystemClock()


def get_clock() -> Clock:
    """FastAPI dependency; overridden in tests."""
    return system_clock
