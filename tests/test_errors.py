"""
Tests for the custom exception classes and their error envelope.
"""
from datetime import date

from wellness.core.errors import (
    AchievementAlreadyEarnedError,
    AchievementNotFoundError,
    DuplicateEntryError,
    GoalNotFoundError,
    InvalidMetricKindError,
    InvalidValueError,
    MetricValueTooHighError,
    NotAuthorizedError,
    UserNotFoundError,
    WellnessException,
)


class TestExceptionClasses:
    def test_duplicate_entry_error(self):
        err = DuplicateEntryError(day=date(2026, 2, 20))
        assert err.http_status == 409
        assert err.code == "DUPLICATE_ENTRY"
        assert "2026-02-20" in err.message
        d = err.to_dict()
        assert d["details"]["day"] == "2026-02-20"

    def test_not_authorized_defaults_to_401(self):
        err = NotAuthorizedError()
        assert err.http_status == 401
        assert err.code == "NOT_AUTHORIZED"

    def test_not_authorized_forbidden_is_403(self):
        err = NotAuthorizedError("nope", forbidden=True)
        assert err.http_status == 403
        assert NotAuthorizedError.http_status == 401

    def test_invalid_metric_kind(self):
        err = InvalidMetricKindError("steps")
        assert err.http_status == 422
        assert err.details["allowed"] == ["sleep", "water", "meditation"]

    def test_too_high_is_invalid_value(self):
        err = MetricValueTooHighError(field="water_ml", value=20_000, maximum=10_000)
        assert isinstance(err, InvalidValueError)
        assert err.code == "METRIC_VALUE_TOO_HIGH"
        assert err.details == {"field": "water_ml", "value": 20_000, "maximum": 10_000}

    def test_not_found_errors(self):
        assert GoalNotFoundError("u1").http_status == 404
        assert UserNotFoundError("u1").code == "USER_NOT_FOUND"
        assert AchievementNotFoundError("x").details["achievement_id"] == "x"

    def test_reserved_already_earned(self):
        err = AchievementAlreadyEarnedError("score_50")
        assert err.http_status == 409
        assert err.code == "ACHIEVEMENT_ALREADY_EARNED"

    def test_to_dict_without_details(self):
        err = WellnessException("plain")
        d = err.to_dict()
        assert d == {"code": "INTERNAL_ERROR", "message": "plain"}
