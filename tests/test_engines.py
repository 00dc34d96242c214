"""
Unit tests for the streak, score and achievement engines.

Engines are driven directly against a store; the public operations are
covered in test_wellness_service.py.
"""
from __future__ import annotations

from dataclasses import replace

import pytest

from wellness.core.clock import SECONDS_PER_DAY, floor_to_day
from wellness.services import achievement_engine, score_engine, streak_engine
from wellness.services.achievement_engine import (
    ACHIEVEMENT_CATALOG,
    evaluate_and_issue,
    initialize_achievement_catalog,
    issue_achievement,
)
from wellness.services.registry import ensure_user
from wellness.store.records import DailyMetrics, Goals, UserRecord

from tests.conftest import DAY_ONE

YESTERDAY = floor_to_day(DAY_ONE - SECONDS_PER_DAY)


def _seed_yesterday(store, user_id, sleep=8, water=2000, meditation=20):
    store.put_daily_metrics(DailyMetrics(
        user_id=user_id,
        day=YESTERDAY,
        sleep_hours=sleep,
        water_ml=water,
        meditation_minutes=meditation,
        recorded_at=YESTERDAY + 3600,
    ))


def _seed_goals(store, user_id, sleep=8, water=2000, meditation=20):
    store.put_goals(Goals(
        user_id=user_id,
        sleep_hours_goal=sleep,
        water_ml_goal=water,
        meditation_minutes_goal=meditation,
        last_updated=YESTERDAY,
    ))


def _user(store, user_id, score=0, streak=0) -> UserRecord:
    user = ensure_user(store, user_id, DAY_ONE)
    user.wellness_score = score
    user.streak_days = streak
    store.put_user(user)
    return store.get_user(user_id)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class TestEnsureUser:
    def test_creates_zeroed_user(self, store, user_id):
        user = ensure_user(store, user_id, DAY_ONE)
        assert user.joined_at == DAY_ONE
        assert user.wellness_score == 0
        assert user.streak_days == 0
        assert store.get_user(user_id) == user

    def test_existing_user_untouched(self, store, user_id):
        _user(store, user_id, score=40, streak=3)
        again = ensure_user(store, user_id, DAY_ONE + 5 * SECONDS_PER_DAY)
        assert again.joined_at == DAY_ONE
        assert again.wellness_score == 40
        assert again.streak_days == 3


# ---------------------------------------------------------------------------
# Streak Engine
# ---------------------------------------------------------------------------

class TestStreakEngine:
    def test_increments_when_yesterday_logged(self, store, user_id):
        user = _user(store, user_id, streak=4)
        _seed_yesterday(store, user_id)
        update = streak_engine.update_streak(store, user, DAY_ONE)
        assert update.continued is True
        assert update.streak_days == 5
        assert store.get_user(user_id).streak_days == 5

    def test_resets_to_one_without_yesterday(self, store, user_id):
        user = _user(store, user_id, streak=12)
        update = streak_engine.update_streak(store, user, DAY_ONE)
        assert update.continued is False
        assert update.old_streak == 12
        assert store.get_user(user_id).streak_days == 1

    def test_first_ever_submission_starts_at_one(self, store, user_id):
        user = _user(store, user_id)
        streak_engine.update_streak(store, user, DAY_ONE)
        assert store.get_user(user_id).streak_days == 1

    def test_record_two_days_ago_does_not_count(self, store, user_id):
        user = _user(store, user_id, streak=6)
        store.put_daily_metrics(DailyMetrics(
            user_id=user_id, day=YESTERDAY - SECONDS_PER_DAY,
            sleep_hours=8, water_ml=2000, meditation_minutes=20,
            recorded_at=YESTERDAY - SECONDS_PER_DAY,
        ))
        streak_engine.update_streak(store, user, DAY_ONE)
        assert store.get_user(user_id).streak_days == 1

    def test_same_day_is_counted_once(self, store, user_id):
        user = _user(store, user_id, streak=2)
        user.last_logged_day = floor_to_day(DAY_ONE)
        update = streak_engine.update_streak(store, user, DAY_ONE + 60)
        assert update.already_counted is True
        assert update.streak_days == 2

    def test_other_users_records_are_ignored(self, store, user_id):
        user = _user(store, user_id, streak=3)
        _seed_yesterday(store, user_id + "-other")
        streak_engine.update_streak(store, user, DAY_ONE)
        assert store.get_user(user_id).streak_days == 1


# ---------------------------------------------------------------------------
# Score Engine
# ---------------------------------------------------------------------------

class TestScoreArithmetic:
    @pytest.mark.parametrize("actual, goal, expected", [
        (8, 8, 100),
        (4, 8, 50),
        (16, 8, 100),     # capped
        (1, 3, 33),       # floor
        (5, 0, 0),        # zero goal
        (0, 2000, 0),
    ])
    def test_attainment_percent(self, actual, goal, expected):
        assert score_engine.attainment_percent(actual, goal) == expected

    def test_average_without_goals_is_zero(self):
        metrics = DailyMetrics("u", 0, 8, 2000, 20, 0)
        assert score_engine.average_attainment(None, metrics) == 0

    def test_average_floors(self):
        goals = Goals("u", 8, 2000, 20, 0)
        metrics = DailyMetrics("u", 0, 8, 2000, 0, 0)   # 100, 100, 0
        assert score_engine.average_attainment(goals, metrics) == 66

    @pytest.mark.parametrize("old, average, expected", [
        (0, 100, 90),
        (90, 100, 99),
        (99, 100, 99),
        (100, 100, 100),
        (50, 99, 5),      # partial attainment truncates to no credit
        (47, 0, 4),
    ])
    def test_blend(self, old, average, expected):
        assert score_engine.blend_score(old, average) == expected

    def test_blend_clamps_corrupted_history(self):
        assert score_engine.blend_score(500, 100, clamp=True) == 100
        assert score_engine.blend_score(500, 100, clamp=False) == 140

    @pytest.mark.parametrize("old, expected", [(0, 0), (3, 0), (5, 0), (6, 1), (90, 85)])
    def test_decay(self, old, expected):
        assert score_engine.decay_score(old) == expected


class TestScoreEngine:
    def test_decays_without_yesterday(self, store, user_id):
        user = _user(store, user_id, score=42)
        _seed_goals(store, user_id)
        update = score_engine.recalculate_score(store, user, DAY_ONE)
        assert update.average_percent is None
        assert update.wellness_score == 37
        assert store.get_user(user_id).wellness_score == 37

    def test_decay_floors_at_zero(self, store, user_id):
        user = _user(store, user_id, score=2)
        score_engine.recalculate_score(store, user, DAY_ONE)
        assert store.get_user(user_id).wellness_score == 0

    def test_full_attainment_blends_to_ninety(self, store, user_id):
        user = _user(store, user_id, score=0)
        _seed_goals(store, user_id)
        _seed_yesterday(store, user_id)
        update = score_engine.recalculate_score(store, user, DAY_ONE)
        assert update.average_percent == 100
        assert update.wellness_score == 90

    def test_missing_goals_gives_history_only(self, store, user_id):
        user = _user(store, user_id, score=80)
        _seed_yesterday(store, user_id)
        update = score_engine.recalculate_score(store, user, DAY_ONE)
        assert update.average_percent == 0
        assert update.wellness_score == 8

    def test_same_day_is_counted_once(self, store, user_id):
        user = _user(store, user_id, score=42)
        user.last_logged_day = floor_to_day(DAY_ONE)
        update = score_engine.recalculate_score(store, user, DAY_ONE)
        assert update.already_counted is True
        assert update.wellness_score == 42


# ---------------------------------------------------------------------------
# Achievement Engine
# ---------------------------------------------------------------------------

class TestAchievementCatalog:
    def test_six_fixed_entries(self):
        assert len(ACHIEVEMENT_CATALOG) == 6
        streak = sorted(a.threshold for a in ACHIEVEMENT_CATALOG if a.category == "streak")
        score = sorted(a.threshold for a in ACHIEVEMENT_CATALOG if a.category == "score")
        assert streak == [7, 30, 100]
        assert score == [50, 75, 90]

    def test_ids_are_unique(self):
        ids = [a.id for a in ACHIEVEMENT_CATALOG]
        assert len(ids) == len(set(ids))

    def test_initialize_is_idempotent(self, memory_store):
        first = initialize_achievement_catalog(memory_store)
        second = initialize_achievement_catalog(memory_store)
        assert sorted(first) == sorted(a.id for a in ACHIEVEMENT_CATALOG)
        assert second == []
        assert len(memory_store.list_achievements()) == 6

    def test_initialize_keeps_existing_entries(self, memory_store):
        custom = replace(ACHIEVEMENT_CATALOG[0], name="Renamed")
        memory_store.put_achievement(custom)
        created = initialize_achievement_catalog(memory_store)
        assert custom.id not in created
        assert memory_store.get_achievement(custom.id).name == "Renamed"


class TestAchievementEngine:
    def test_nothing_below_thresholds(self, store, user_id):
        user = _user(store, user_id, score=49, streak=6)
        result = evaluate_and_issue(store, user, DAY_ONE)
        assert result.issued == []
        assert result.skipped == []
        assert store.list_earned(user_id) == []

    def test_thresholds_are_cumulative(self, store, user_id):
        user = _user(store, user_id, score=90, streak=30)
        result = evaluate_and_issue(store, user, DAY_ONE)
        assert sorted(result.issued) == sorted(
            ["streak_7", "streak_30", "score_50", "score_75", "score_90"]
        )

    def test_meets_or_exceeds(self, store, user_id):
        user = _user(store, user_id, score=75, streak=7)
        result = evaluate_and_issue(store, user, DAY_ONE)
        assert sorted(result.issued) == ["score_50", "score_75", "streak_7"]

    def test_reissue_is_silent_noop(self, store, user_id):
        user = _user(store, user_id, score=60)
        r1 = evaluate_and_issue(store, user, DAY_ONE)
        r2 = evaluate_and_issue(store, user, DAY_ONE + SECONDS_PER_DAY)
        assert r1.issued == ["score_50"]
        assert r2.issued == []
        assert r2.skipped == ["score_50"]

    def test_earned_at_never_changes(self, store, user_id):
        user = _user(store, user_id, score=95, streak=100)
        evaluate_and_issue(store, user, DAY_ONE)
        before = {b.achievement_id: b.earned_at for b in store.list_earned(user_id)}
        for i in range(1, 4):
            evaluate_and_issue(store, user, DAY_ONE + i * SECONDS_PER_DAY)
        after = {b.achievement_id: b.earned_at for b in store.list_earned(user_id)}
        assert before == after
        assert len(after) == 6

    def test_issue_achievement_returns_flag(self, store, user_id):
        assert issue_achievement(store, user_id, "score_50", "Wellness Beginner", DAY_ONE) is True
        assert issue_achievement(store, user_id, "score_50", "Wellness Beginner", DAY_ONE + 1) is False
        badge = store.get_earned(user_id, "score_50")
        assert badge.earned_at == DAY_ONE
        assert badge.achievement_name == "Wellness Beginner"

    def test_earned_names_come_from_catalog(self, store, user_id):
        user = _user(store, user_id, score=90)
        evaluate_and_issue(store, user, DAY_ONE)
        names = {b.achievement_id: b.achievement_name for b in store.list_earned(user_id)}
        assert names["score_90"] == "Wellness Master"
        assert names["score_75"] == "Wellness Enthusiast"
        assert names["score_50"] == "Wellness Beginner"

    def test_engine_module_exposes_catalog_categories(self):
        assert achievement_engine.Category.STREAK == "streak"
        assert achievement_engine.Category.SCORE == "score"
