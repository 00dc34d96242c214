"""
Wellness service: the public write operations.

Public API
----------
set_wellness_goals(store, clock, user_id, sleep, water, meditation)   -> Goals
record_daily_metrics(store, clock, user_id, sleep, water, meditation) -> SubmissionResult
update_single_metric(store, clock, user_id, metric, value)            -> SubmissionResult

Submission pipeline
-------------------
validate -> ensure_user -> write metrics -> streak -> score -> achievements

Achievements read the streak and score produced by the two steps before
them, so the order is fixed. Each operation runs inside one
store.transaction(): a failure at any step leaves no trace.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from wellness.core.clock import Clock, floor_to_day
from wellness.core.config import settings
from wellness.services import achievement_engine, score_engine, streak_engine
from wellness.services.metric_store import merge_single_metric, write_daily_record
from wellness.services.registry import ensure_user
from wellness.services.validation import MetricKind, check_metric, parse_metric_kind
from wellness.store.base import WellnessStore
from wellness.store.records import DailyMetrics, Goals

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result type
# ---------------------------------------------------------------------------

@dataclass
class SubmissionResult:
    user_id: str
    record: DailyMetrics
    streak_days: int
    wellness_score: int
    achievements_issued: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Goals
# ---------------------------------------------------------------------------

def set_wellness_goals(
    store: WellnessStore,
    clock: Clock,
    user_id: str,
    sleep_hours_goal: int,
    water_ml_goal: int,
    meditation_minutes_goal: int,
) -> Goals:
    """Replace the user's goals. Goals share the metric ranges."""
    check_metric(MetricKind.sleep, sleep_hours_goal, "sleep_hours_goal")
    check_metric(MetricKind.water, water_ml_goal, "water_ml_goal")
    check_metric(MetricKind.meditation, meditation_minutes_goal, "meditation_minutes_goal")

    now = clock.now()
    goals = Goals(
        user_id=user_id,
        sleep_hours_goal=sleep_hours_goal,
        water_ml_goal=water_ml_goal,
        meditation_minutes_goal=meditation_minutes_goal,
        last_updated=now,
    )
    with store.transaction():
        ensure_user(store, user_id, now)
        store.put_goals(goals)
    logger.info("User %s set goals %d/%d/%d", user_id,
                sleep_hours_goal, water_ml_goal, meditation_minutes_goal)
    return goals


# ---------------------------------------------------------------------------
# Submissions
# ---------------------------------------------------------------------------

def _after_write(
    store: WellnessStore,
    user_id: str,
    record: DailyMetrics,
    now: int,
) -> SubmissionResult:
    """Streak -> score -> achievements, in that order."""
    user = store.get_user(user_id)
    streak_engine.update_streak(store, user, now)
    score_engine.recalculate_score(store, user, now, clamp=settings.CLAMP_WELLNESS_SCORE)

    today = floor_to_day(now)
    if user.last_logged_day != today:
        user.last_logged_day = today
        store.put_user(user)

    engine = achievement_engine.evaluate_and_issue(store, user, now)
    return SubmissionResult(
        user_id=user_id,
        record=record,
        streak_days=user.streak_days,
        wellness_score=user.wellness_score,
        achievements_issued=engine.issued,
    )


def record_daily_metrics(
    store: WellnessStore,
    clock: Clock,
    user_id: str,
    sleep_hours: int,
    water_ml: int,
    meditation_minutes: int,
) -> SubmissionResult:
    """Write today's full record. Fails with DuplicateEntryError on resubmission."""
    check_metric(MetricKind.sleep, sleep_hours)
    check_metric(MetricKind.water, water_ml)
    check_metric(MetricKind.meditation, meditation_minutes)

    now = clock.now()
    with store.transaction():
        ensure_user(store, user_id, now)
        record = write_daily_record(store, user_id, sleep_hours, water_ml, meditation_minutes, now)
        return _after_write(store, user_id, record, now)


def update_single_metric(
    store: WellnessStore,
    clock: Clock,
    user_id: str,
    metric: Union[str, MetricKind],
    value: int,
) -> SubmissionResult:
    """Create or merge today's record with one metric. Repeatable within a day."""
    kind = parse_metric_kind(metric)
    check_metric(kind, value)

    now = clock.now()
    with store.transaction():
        ensure_user(store, user_id, now)
        record = merge_single_metric(store, user_id, kind, value, now)
        return _after_write(store, user_id, record, now)
