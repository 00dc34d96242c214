"""
Achievement Engine — threshold badges for streak and score.

Rules
-----
Every submission checks all six thresholds against the user's
post-update streak and score:

  streak_7    streak_days >= 7     "Week Warrior"
  streak_30   streak_days >= 30    "Monthly Devotee"
  streak_100  streak_days >= 100   "Century Champion"
  score_50    wellness_score >= 50 "Wellness Beginner"
  score_75    wellness_score >= 75 "Wellness Enthusiast"
  score_90    wellness_score >= 90 "Wellness Master"

Checks are independent and cumulative: a user who jumps straight to
score 90 receives all three score badges in the same call.

Idempotency
-----------
One EarnedAchievement per (user_id, achievement_id), ever. Issuing a
badge the user already holds is a silent no-op; the original
earned_at is never touched.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from wellness.store.base import WellnessStore
from wellness.store.records import AchievementDef, EarnedBadge, UserRecord

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class Category:
    STREAK = "streak"
    SCORE = "score"


ACHIEVEMENT_CATALOG: tuple[AchievementDef, ...] = (
    AchievementDef(
        id="streak_7",
        name="Week Warrior",
        description="Log your wellness metrics 7 days in a row.",
        category=Category.STREAK,
        threshold=7,
    ),
    AchievementDef(
        id="streak_30",
        name="Monthly Devotee",
        description="Log your wellness metrics 30 days in a row.",
        category=Category.STREAK,
        threshold=30,
    ),
    AchievementDef(
        id="streak_100",
        name="Century Champion",
        description="Log your wellness metrics 100 days in a row.",
        category=Category.STREAK,
        threshold=100,
    ),
    AchievementDef(
        id="score_50",
        name="Wellness Beginner",
        description="Reach a wellness score of 50.",
        category=Category.SCORE,
        threshold=50,
    ),
    AchievementDef(
        id="score_75",
        name="Wellness Enthusiast",
        description="Reach a wellness score of 75.",
        category=Category.SCORE,
        threshold=75,
    ),
    AchievementDef(
        id="score_90",
        name="Wellness Master",
        description="Reach a wellness score of 90.",
        category=Category.SCORE,
        threshold=90,
    ),
)

_SELECTORS: dict[str, Callable[[UserRecord], int]] = {
    Category.STREAK: lambda user: user.streak_days,
    Category.SCORE: lambda user: user.wellness_score,
}


# ---------------------------------------------------------------------------
# Result type
# ---------------------------------------------------------------------------

@dataclass
class EngineResult:
    """What a single evaluation run did."""
    user_id: str
    issued: list[str] = field(default_factory=list)    # newly earned ids
    skipped: list[str] = field(default_factory=list)   # qualified, already held


# ---------------------------------------------------------------------------
# Issuance
# ---------------------------------------------------------------------------

def issue_achievement(
    store: WellnessStore,
    user_id: str,
    achievement_id: str,
    name: str,
    timestamp: int,
) -> bool:
    """
    Record that `user_id` earned `achievement_id`.
    Returns True if a new record was created, False if it already existed.
    """
    if store.get_earned(user_id, achievement_id) is not None:
        logger.debug("User %s already holds %s", user_id, achievement_id)
        return False
    inserted = store.add_earned(EarnedBadge(
        user_id=user_id,
        achievement_id=achievement_id,
        achievement_name=name,
        earned_at=timestamp,
    ))
    if inserted:
        logger.info("User %s earned achievement %s (%s)", user_id, achievement_id, name)
    return inserted


def evaluate_and_issue(store: WellnessStore, user: UserRecord, now: int) -> EngineResult:
    """Check every threshold against the user's current streak and score."""
    result = EngineResult(user_id=user.user_id)
    for achievement in ACHIEVEMENT_CATALOG:
        if _SELECTORS[achievement.category](user) < achievement.threshold:
            continue
        if issue_achievement(store, user.user_id, achievement.id, achievement.name, now):
            result.issued.append(achievement.id)
        else:
            result.skipped.append(achievement.id)
    return result


# ---------------------------------------------------------------------------
# Catalog seeding
# ---------------------------------------------------------------------------

def initialize_achievement_catalog(store: WellnessStore) -> list[str]:
    """
    Write the static catalog into the store. Entries already present are
    left as they are. Returns the ids that were written.
    """
    written = []
    with store.transaction():
        for achievement in ACHIEVEMENT_CATALOG:
            if store.get_achievement(achievement.id) is not None:
                continue
            store.put_achievement(achievement)
            written.append(achievement.id)
    logger.info("Achievement catalog initialized: %d new entries", len(written))
    return written
