from .user import WellnessUser
from .daily_metric import DailyMetricRecord
from .goals import WellnessGoals
from .achievement import Achievement, EarnedAchievement

__all__ = [
    "WellnessUser",
    "DailyMetricRecord",
    "WellnessGoals",
    "Achievement",
    "EarnedAchievement",
]
