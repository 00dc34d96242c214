from wellness.store.base import WellnessStore
from wellness.store.memory import InMemoryStore
from wellness.store.records import (
    AchievementDef,
    DailyMetrics,
    EarnedBadge,
    Goals,
    UserRecord,
)
from wellness.store.sql import SqlAlchemyStore

__all__ = [
    "WellnessStore",
    "InMemoryStore",
    "SqlAlchemyStore",
    "AchievementDef",
    "DailyMetrics",
    "EarnedBadge",
    "Goals",
    "UserRecord",
]
