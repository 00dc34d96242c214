"""
Streak Engine — consecutive-day logging counter.

Continuity is anchored on yesterday's record, not today's: if the user
logged anything yesterday the streak grows by one, otherwise today
starts a new streak at 1. The counter advances at most once per
calendar day; later submissions on the same day leave it unchanged.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from wellness.core.clock import SECONDS_PER_DAY, floor_to_day
from wellness.store.base import WellnessStore
from wellness.store.records import UserRecord

logger = logging.getLogger(__name__)


@dataclass
class StreakUpdate:
    old_streak: int
    streak_days: int
    continued: bool          # yesterday's record was present
    already_counted: bool    # same-day resubmission, nothing changed


def yesterday_of(now: int) -> int:
    return floor_to_day(now - SECONDS_PER_DAY)


def update_streak(store: WellnessStore, user: UserRecord, now: int) -> StreakUpdate:
    """Apply the streak rule to `user` (in place) and persist it."""
    today = floor_to_day(now)
    old = user.streak_days

    if user.last_logged_day == today:
        return StreakUpdate(old_streak=old, streak_days=old, continued=False, already_counted=True)

    continued = store.get_daily_metrics(user.user_id, yesterday_of(now)) is not None
    user.streak_days = old + 1 if continued else 1
    store.put_user(user)

    if continued:
        logger.info("User %s streak continued: %d -> %d days", user.user_id, old, user.streak_days)
    else:
        logger.info("User %s streak reset (was %d days)", user.user_id, old)

    return StreakUpdate(
        old_streak=old,
        streak_days=user.streak_days,
        continued=continued,
        already_counted=False,
    )
