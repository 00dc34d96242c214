"""
Score Engine — smoothed 0–100 wellness score.

Definition
----------
Inputs are the user's goals and yesterday's metric record.

  percent(actual, goal) = min(100, 100 * actual // goal)   (0 when goal == 0)
  average              = (p_sleep + p_water + p_meditation) // 3

Yesterday logged:   new = old // 10 + (average // 100) * 90
Yesterday missing:  new = max(0, old - 5)

All arithmetic is integer floor division, exactly as written: the blend
term is 90 only at full attainment and 0 otherwise. A user without goals
gets 0 for every percentage. The score advances at most once per calendar
day, alongside the streak.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from wellness.core.clock import floor_to_day
from wellness.services.streak_engine import yesterday_of
from wellness.store.base import WellnessStore
from wellness.store.records import DailyMetrics, Goals, UserRecord

logger = logging.getLogger(__name__)

DECAY_POINTS = 5
HISTORY_DIVISOR = 10
ATTAINMENT_WEIGHT = 90
MAX_SCORE = 100


@dataclass
class ScoreUpdate:
    old_score: int
    wellness_score: int
    average_percent: Optional[int]   # None on the decay path
    already_counted: bool


def attainment_percent(actual: int, goal: int) -> int:
    if goal == 0:
        return 0
    return min(100, 100 * actual // goal)


def average_attainment(goals: Optional[Goals], metrics: DailyMetrics) -> int:
    if goals is None:
        return 0
    percents = (
        attainment_percent(metrics.sleep_hours, goals.sleep_hours_goal),
        attainment_percent(metrics.water_ml, goals.water_ml_goal),
        attainment_percent(metrics.meditation_minutes, goals.meditation_minutes_goal),
    )
    return sum(percents) // len(percents)


def blend_score(old_score: int, average_percent: int, clamp: bool = True) -> int:
    new = old_score // HISTORY_DIVISOR + (average_percent // 100) * ATTAINMENT_WEIGHT
    if clamp:
        new = max(0, min(MAX_SCORE, new))
    return new


def decay_score(old_score: int) -> int:
    return max(0, old_score - DECAY_POINTS)


def recalculate_score(
    store: WellnessStore,
    user: UserRecord,
    now: int,
    clamp: bool = True,
) -> ScoreUpdate:
    """Apply the score rule to `user` (in place), persist and return it."""
    old = user.wellness_score
    if user.last_logged_day == floor_to_day(now):
        return ScoreUpdate(old_score=old, wellness_score=old, average_percent=None, already_counted=True)

    yesterday = store.get_daily_metrics(user.user_id, yesterday_of(now))
    if yesterday is None:
        average = None
        user.wellness_score = decay_score(old)
    else:
        average = average_attainment(store.get_goals(user.user_id), yesterday)
        user.wellness_score = blend_score(old, average, clamp=clamp)
    store.put_user(user)

    logger.info(
        "User %s score %d -> %d (%s)",
        user.user_id, old, user.wellness_score,
        "decay" if average is None else f"attainment {average}%",
    )
    return ScoreUpdate(
        old_score=old,
        wellness_score=user.wellness_score,
        average_percent=average,
        already_counted=False,
    )
