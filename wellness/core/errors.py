"""
Exception hierarchy for the wellness service.

Rule: every error has a machine-readable `code` string so clients
can branch on it without parsing English messages. All of them are
raised before (or instead of) a commit, so a failed call never leaves
partial state behind.
"""
from __future__ import annotations

from datetime import date
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status


# ---------------------------------------------------------------------------
# Exception classes
# ---------------------------------------------------------------------------

class WellnessException(Exception):
    """Base class for all application-level errors."""
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class NotAuthorizedError(WellnessException):
    http_status = status.HTTP_401_UNAUTHORIZED
    code = "NOT_AUTHORIZED"

    def __init__(self, message: str = "Caller identity is missing.", forbidden: bool = False):
        super().__init__(message=message)
        if forbidden:
            self.http_status = status.HTTP_403_FORBIDDEN


class InvalidMetricKindError(WellnessException):
    http_status = status.HTTP_422_UNPROCESSABLE_ENTITY
    code = "INVALID_METRIC_KIND"

    def __init__(self, metric: str):
        super().__init__(
            message=f"Unknown metric kind {metric!r}.",
            details={"metric": metric, "allowed": ["sleep", "water", "meditation"]},
        )


class InvalidValueError(WellnessException):
    http_status = status.HTTP_422_UNPROCESSABLE_ENTITY
    code = "INVALID_VALUE"

    def __init__(self, field: str, value: Any, message: str | None = None):
        super().__init__(
            message=message or f"Value {value!r} is out of range for {field}.",
            details={"field": field, "value": value},
        )


class MetricValueTooHighError(InvalidValueError):
    code = "METRIC_VALUE_TOO_HIGH"

    def __init__(self, field: str, value: Any, maximum: int):
        super().__init__(
            field=field,
            value=value,
            message=f"Value {value!r} for {field} exceeds the maximum of {maximum}.",
        )
        self.details["maximum"] = maximum


class GoalNotFoundError(WellnessException):
    http_status = status.HTTP_404_NOT_FOUND
    code = "GOAL_NOT_FOUND"

    def __init__(self, user_id: str):
        super().__init__(
            message=f"No wellness goals set for user {user_id}.",
            details={"user_id": user_id},
        )


class UserNotFoundError(WellnessException):
    http_status = status.HTTP_404_NOT_FOUND
    code = "USER_NOT_FOUND"

    def __init__(self, user_id: str):
        super().__init__(
            message=f"User {user_id} has not logged any activity yet.",
            details={"user_id": user_id},
        )


class MetricRecordNotFoundError(WellnessException):
    http_status = status.HTTP_404_NOT_FOUND
    code = "METRIC_RECORD_NOT_FOUND"

    def __init__(self, user_id: str, day: date):
        super().__init__(
            message=f"No metrics recorded by {user_id} on {day}.",
            details={"user_id": user_id, "day": str(day)},
        )


class AchievementNotFoundError(WellnessException):
    http_status = status.HTTP_404_NOT_FOUND
    code = "ACHIEVEMENT_NOT_FOUND"

    def __init__(self, achievement_id: str):
        super().__init__(
            message=f"Achievement {achievement_id!r} is not in the catalog.",
            details={"achievement_id": achievement_id},
        )


class AchievementAlreadyEarnedError(WellnessException):
    """Reserved. Issuance is idempotent and never raises this."""
    http_status = status.HTTP_409_CONFLICT
    code = "ACHIEVEMENT_ALREADY_EARNED"

    def __init__(self, achievement_id: str):
        super().__init__(
            message=f"Achievement {achievement_id!r} was already earned.",
            details={"achievement_id": achievement_id},
        )


class DuplicateEntryError(WellnessException):
    http_status = status.HTTP_409_CONFLICT
    code = "DUPLICATE_ENTRY"

    def __init__(self, day: date):
        super().__init__(
            message=f"Daily metrics for {day} were already recorded.",
            details={"day": str(day)},
        )


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

async def wellness_exception_handler(request: Request, exc: WellnessException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_dict(),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return structured 422 with machine-readable field errors."""
    field_errors = []
    for error in exc.errors():
        field_errors.append({
            "field": ".".join(str(loc) for loc in error["loc"] if loc != "body"),
            "message": error["msg"],
            "type": error["type"],
        })
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "code": "VALIDATION_ERROR",
            "message": "Request validation failed.",
            "details": {"errors": field_errors},
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred.",
        },
    )
