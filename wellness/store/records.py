"""
Plain records exchanged with a WellnessStore.

Stores hand out copies: mutating a record has no effect until it is
written back with the matching put_* call.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class UserRecord:
    user_id: str
    joined_at: int
    wellness_score: int = 0
    streak_days: int = 0
    last_logged_day: Optional[int] = None


@dataclass
class DailyMetrics:
    user_id: str
    day: int                 # epoch seconds, multiple of 86400
    sleep_hours: int
    water_ml: int
    meditation_minutes: int
    recorded_at: int


@dataclass
class Goals:
    user_id: str
    sleep_hours_goal: int
    water_ml_goal: int
    meditation_minutes_goal: int
    last_updated: int


@dataclass(frozen=True)
class AchievementDef:
    id: str
    name: str
    description: str
    category: str            # "streak" | "score"
    threshold: int


@dataclass(frozen=True)
class EarnedBadge:
    user_id: str
    achievement_id: str
    achievement_name: str
    earned_at: int
