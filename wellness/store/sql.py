"""
SQLAlchemy-backed WellnessStore.

Wraps one Session per request. Writes are flushed immediately so later
reads in the same operation see them; the outermost transaction() is
the only place that commits or rolls back.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from wellness.db.base import get_db
from wellness.models.achievement import Achievement, EarnedAchievement
from wellness.models.daily_metric import DailyMetricRecord
from wellness.models.goals import WellnessGoals
from wellness.models.user import WellnessUser
from wellness.store.base import WellnessStore
from wellness.store.records import AchievementDef, DailyMetrics, EarnedBadge, Goals, UserRecord


# ---------------------------------------------------------------------------
# ORM -> record helpers
# ---------------------------------------------------------------------------

def _user(row: WellnessUser) -> UserRecord:
    return UserRecord(
        user_id=row.user_id,
        joined_at=row.joined_at,
        wellness_score=row.wellness_score,
        streak_days=row.streak_days,
        last_logged_day=row.last_logged_day,
    )


def _metrics(row: DailyMetricRecord) -> DailyMetrics:
    return DailyMetrics(
        user_id=row.user_id,
        day=row.day,
        sleep_hours=row.sleep_hours,
        water_ml=row.water_ml,
        meditation_minutes=row.meditation_minutes,
        recorded_at=row.recorded_at,
    )


def _goals(row: WellnessGoals) -> Goals:
    return Goals(
        user_id=row.user_id,
        sleep_hours_goal=row.sleep_hours_goal,
        water_ml_goal=row.water_ml_goal,
        meditation_minutes_goal=row.meditation_minutes_goal,
        last_updated=row.last_updated,
    )


def _achievement(row: Achievement) -> AchievementDef:
    return AchievementDef(
        id=row.id,
        name=row.name,
        description=row.description,
        category=row.category,
        threshold=row.threshold,
    )


def _earned(row: EarnedAchievement) -> EarnedBadge:
    return EarnedBadge(
        user_id=row.user_id,
        achievement_id=row.achievement_id,
        achievement_name=row.achievement_name,
        earned_at=row.earned_at,
    )


class SqlAlchemyStore(WellnessStore):

    def __init__(self, db: Session):
        self.db = db
        self._depth = 0

    @contextmanager
    def transaction(self) -> Iterator[None]:
        self._depth += 1
        try:
            yield
        except BaseException:
            self._depth -= 1
            if self._depth == 0:
                self.db.rollback()
            raise
        else:
            self._depth -= 1
            if self._depth == 0:
                self.db.commit()

    # --- users ---

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        row = self.db.get(WellnessUser, user_id)
        return _user(row) if row else None

    def put_user(self, user: UserRecord) -> None:
        row = self.db.get(WellnessUser, user.user_id)
        if row is None:
            row = WellnessUser(user_id=user.user_id, joined_at=user.joined_at)
            self.db.add(row)
        row.wellness_score = user.wellness_score
        row.streak_days = user.streak_days
        row.last_logged_day = user.last_logged_day
        self.db.flush()

    # --- daily metrics ---

    def _metrics_row(self, user_id: str, day: int) -> Optional[DailyMetricRecord]:
        return (
            self.db.query(DailyMetricRecord)
            .filter(DailyMetricRecord.user_id == user_id, DailyMetricRecord.day == day)
            .first()
        )

    def get_daily_metrics(self, user_id: str, day: int) -> Optional[DailyMetrics]:
        row = self._metrics_row(user_id, day)
        return _metrics(row) if row else None

    def put_daily_metrics(self, record: DailyMetrics) -> None:
        row = self._metrics_row(record.user_id, record.day)
        if row is None:
            row = DailyMetricRecord(user_id=record.user_id, day=record.day)
            self.db.add(row)
        row.sleep_hours = record.sleep_hours
        row.water_ml = record.water_ml
        row.meditation_minutes = record.meditation_minutes
        row.recorded_at = record.recorded_at
        self.db.flush()

    # --- goals ---

    def get_goals(self, user_id: str) -> Optional[Goals]:
        row = self.db.get(WellnessGoals, user_id)
        return _goals(row) if row else None

    def put_goals(self, goals: Goals) -> None:
        row = self.db.get(WellnessGoals, goals.user_id)
        if row is None:
            row = WellnessGoals(user_id=goals.user_id)
            self.db.add(row)
        row.sleep_hours_goal = goals.sleep_hours_goal
        row.water_ml_goal = goals.water_ml_goal
        row.meditation_minutes_goal = goals.meditation_minutes_goal
        row.last_updated = goals.last_updated
        self.db.flush()

    # --- achievement catalog ---

    def get_achievement(self, achievement_id: str) -> Optional[AchievementDef]:
        row = self.db.get(Achievement, achievement_id)
        return _achievement(row) if row else None

    def put_achievement(self, achievement: AchievementDef) -> None:
        row = self.db.get(Achievement, achievement.id)
        if row is None:
            row = Achievement(id=achievement.id)
            self.db.add(row)
        row.name = achievement.name
        row.description = achievement.description
        row.category = achievement.category
        row.threshold = achievement.threshold
        self.db.flush()

    def list_achievements(self) -> list[AchievementDef]:
        rows = (
            self.db.query(Achievement)
            .order_by(Achievement.category, Achievement.threshold)
            .all()
        )
        return [_achievement(r) for r in rows]

    # --- earned achievements ---

    def _earned_row(self, user_id: str, achievement_id: str) -> Optional[EarnedAchievement]:
        return (
            self.db.query(EarnedAchievement)
            .filter(
                EarnedAchievement.user_id == user_id,
                EarnedAchievement.achievement_id == achievement_id,
            )
            .first()
        )

    def get_earned(self, user_id: str, achievement_id: str) -> Optional[EarnedBadge]:
        row = self._earned_row(user_id, achievement_id)
        return _earned(row) if row else None

    def add_earned(self, badge: EarnedBadge) -> bool:
        if self._earned_row(badge.user_id, badge.achievement_id) is not None:
            return False
        self.db.add(EarnedAchievement(
            user_id=badge.user_id,
            achievement_id=badge.achievement_id,
            achievement_name=badge.achievement_name,
            earned_at=badge.earned_at,
        ))
        # A concurrent insert of the same key surfaces here as IntegrityError
        # and aborts the whole operation; the existing row is kept.
        self.db.flush()
        return True

    def list_earned(self, user_id: str) -> list[EarnedBadge]:
        rows = (
            self.db.query(EarnedAchievement)
            .filter(EarnedAchievement.user_id == user_id)
            .order_by(EarnedAchievement.earned_at, EarnedAchievement.achievement_id)
            .all()
        )
        return [_earned(r) for r in rows]


def get_store(db: Session = Depends(get_db)) -> SqlAlchemyStore:
    """FastAPI dependency: one store per request session."""
    return SqlAlchemyStore(db)
