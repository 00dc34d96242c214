"""
Read accessors. No logic beyond lookup and not-found errors.
"""
from __future__ import annotations

from datetime import date

from wellness.core.clock import date_to_day
from wellness.core.errors import (
    AchievementNotFoundError,
    GoalNotFoundError,
    MetricRecordNotFoundError,
    UserNotFoundError,
)
from wellness.store.base import WellnessStore
from wellness.store.records import AchievementDef, DailyMetrics, EarnedBadge, Goals, UserRecord


def get_user_profile(store: WellnessStore, user_id: str) -> UserRecord:
    user = store.get_user(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


def get_daily_metrics(store: WellnessStore, user_id: str, day: date) -> DailyMetrics:
    record = store.get_daily_metrics(user_id, date_to_day(day))
    if record is None:
        raise MetricRecordNotFoundError(user_id, day)
    return record


def get_goals(store: WellnessStore, user_id: str) -> Goals:
    goals = store.get_goals(user_id)
    if goals is None:
        raise GoalNotFoundError(user_id)
    return goals


def get_earned_achievements(store: WellnessStore, user_id: str) -> list[EarnedBadge]:
    return store.list_earned(user_id)


def has_achievement(store: WellnessStore, user_id: str, achievement_id: str) -> bool:
    return store.get_earned(user_id, achievement_id) is not None


def get_achievement(store: WellnessStore, achievement_id: str) -> AchievementDef:
    achievement = store.get_achievement(achievement_id)
    if achievement is None:
        raise AchievementNotFoundError(achievement_id)
    return achievement


def list_achievements(store: WellnessStore) -> list[AchievementDef]:
    return store.list_achievements()
