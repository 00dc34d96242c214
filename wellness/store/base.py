"""
Storage interface consumed by the wellness core.

The core never touches a database directly; it reads and writes typed
records keyed by user, (user, day), (user, achievement) or achievement
id. `transaction()` scopes one public operation: every write inside it
commits together or not at all.
"""
from __future__ import annotations

import abc
from contextlib import AbstractContextManager
from typing import Optional

from wellness.store.records import AchievementDef, DailyMetrics, EarnedBadge, Goals, UserRecord


class WellnessStore(abc.ABC):

    @abc.abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        ...

    # --- users ---

    @abc.abstractmethod
    def get_user(self, user_id: str) -> Optional[UserRecord]:
        ...

    @abc.abstractmethod
    def put_user(self, user: UserRecord) -> None:
        ...

    # --- daily metrics, keyed by (user_id, day) ---

    @abc.abstractmethod
    def get_daily_metrics(self, user_id: str, day: int) -> Optional[DailyMetrics]:
        ...

    @abc.abstractmethod
    def put_daily_metrics(self, record: DailyMetrics) -> None:
        ...

    # --- goals ---

    @abc.abstractmethod
    def get_goals(self, user_id: str) -> Optional[Goals]:
        ...

    @abc.abstractmethod
    def put_goals(self, goals: Goals) -> None:
        ...

    # --- achievement catalog ---

    @abc.abstractmethod
    def get_achievement(self, achievement_id: str) -> Optional[AchievementDef]:
        ...

    @abc.abstractmethod
    def put_achievement(self, achievement: AchievementDef) -> None:
        ...

    @abc.abstractmethod
    def list_achievements(self) -> list[AchievementDef]:
        ...

    # --- earned achievements, keyed by (user_id, achievement_id) ---

    @abc.abstractmethod
    def get_earned(self, user_id: str, achievement_id: str) -> Optional[EarnedBadge]:
        ...

    @abc.abstractmethod
    def add_earned(self, badge: EarnedBadge) -> bool:
        """Insert unless the key exists. Returns True if inserted."""

    @abc.abstractmethod
    def list_earned(self, user_id: str) -> list[EarnedBadge]:
        ...
