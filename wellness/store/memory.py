"""
Dict-backed WellnessStore.

Used for embedding the core without a database and for unit tests.
The outermost transaction snapshots every table and restores the
snapshot if the block raises.
"""
from __future__ import annotations

import copy
from contextlib import contextmanager
from dataclasses import replace
from typing import Iterator, Optional

from wellness.store.base import WellnessStore
from wellness.store.records import AchievementDef, DailyMetrics, EarnedBadge, Goals, UserRecord


class InMemoryStore(WellnessStore):

    def __init__(self):
        self._users: dict[str, UserRecord] = {}
        self._metrics: dict[tuple[str, int], DailyMetrics] = {}
        self._goals: dict[str, Goals] = {}
        self._achievements: dict[str, AchievementDef] = {}
        self._earned: dict[tuple[str, str], EarnedBadge] = {}
        self._depth = 0

    def _tables(self) -> tuple:
        return (self._users, self._metrics, self._goals, self._achievements, self._earned)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        if self._depth:
            self._depth += 1
            try:
                yield
            finally:
                self._depth -= 1
            return

        snapshot = copy.deepcopy(self._tables())
        self._depth = 1
        try:
            yield
        except BaseException:
            (self._users, self._metrics, self._goals,
             self._achievements, self._earned) = snapshot
            raise
        finally:
            self._depth = 0

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        user = self._users.get(user_id)
        return replace(user) if user else None

    def put_user(self, user: UserRecord) -> None:
        self._users[user.user_id] = replace(user)

    def get_daily_metrics(self, user_id: str, day: int) -> Optional[DailyMetrics]:
        record = self._metrics.get((user_id, day))
        return replace(record) if record else None

    def put_daily_metrics(self, record: DailyMetrics) -> None:
        self._metrics[(record.user_id, record.day)] = replace(record)

    def get_goals(self, user_id: str) -> Optional[Goals]:
        goals = self._goals.get(user_id)
        return replace(goals) if goals else None

    def put_goals(self, goals: Goals) -> None:
        self._goals[goals.user_id] = replace(goals)

    def get_achievement(self, achievement_id: str) -> Optional[AchievementDef]:
        return self._achievements.get(achievement_id)

    def put_achievement(self, achievement: AchievementDef) -> None:
        self._achievements[achievement.id] = achievement

    def list_achievements(self) -> list[AchievementDef]:
        return sorted(self._achievements.values(), key=lambda a: (a.category, a.threshold))

    def get_earned(self, user_id: str, achievement_id: str) -> Optional[EarnedBadge]:
        return self._earned.get((user_id, achievement_id))

    def add_earned(self, badge: EarnedBadge) -> bool:
        key = (badge.user_id, badge.achievement_id)
        if key in self._earned:
            return False
        self._earned[key] = badge
        return True

    def list_earned(self, user_id: str) -> list[EarnedBadge]:
        return sorted(
            (b for (uid, _), b in self._earned.items() if uid == user_id),
            key=lambda b: (b.earned_at, b.achievement_id),
        )
