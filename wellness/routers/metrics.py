"""
Metrics router.

POST /metrics/daily    — record all three metrics for today (once per day)
POST /metrics/single   — set one metric for today (repeatable)
GET  /metrics/daily    — record for a given day
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from wellness.core.clock import Clock, day_to_date, floor_to_day, get_clock
from wellness.core.identity import get_current_user_id
from wellness.schemas.metrics import (
    DailyMetricsRequest,
    DailyMetricsResponse,
    SingleMetricRequest,
    SubmissionResponse,
)
from wellness.services import queries
from wellness.services.wellness import SubmissionResult, record_daily_metrics, update_single_metric
from wellness.store.records import DailyMetrics
from wellness.store.sql import SqlAlchemyStore, get_store

router = APIRouter(prefix="/metrics", tags=["metrics"])


# ---------------------------------------------------------------------------
# Serialization helpers
# ---------------------------------------------------------------------------

def _record_to_response(r: DailyMetrics) -> DailyMetricsResponse:
    return DailyMetricsResponse(
        day=str(day_to_date(r.day)),
        sleep_hours=r.sleep_hours,
        water_ml=r.water_ml,
        meditation_minutes=r.meditation_minutes,
        recorded_at=r.recorded_at,
    )


def _submission_to_response(s: SubmissionResult) -> SubmissionResponse:
    return SubmissionResponse(
        user_id=s.user_id,
        metrics=_record_to_response(s.record),
        streak_days=s.streak_days,
        wellness_score=s.wellness_score,
        achievements_issued=s.achievements_issued,
    )


# ---------------------------------------------------------------------------
# POST /metrics/daily
# ---------------------------------------------------------------------------

@router.post(
    "/daily",
    response_model=SubmissionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record today's metrics",
    responses={
        409: {"description": "Today's metrics were already recorded."},
        422: {"description": "A value is outside its range."},
    },
)
def post_daily_metrics(
    payload: DailyMetricsRequest,
    user_id: str = Depends(get_current_user_id),
    store: SqlAlchemyStore = Depends(get_store),
    clock: Clock = Depends(get_clock),
):
    """
    Write sleep, water and meditation for the current day, then update the
    streak, the wellness score and any achievements they unlock.

    Daily records are write-once: a second submission on the same day
    returns **409 DUPLICATE_ENTRY** and changes nothing. Use
    `POST /metrics/single` to adjust a value later in the day.
    """
    result = record_daily_metrics(
        store, clock, user_id,
        payload.sleep_hours,
        payload.water_ml,
        payload.meditation_minutes,
    )
    return _submission_to_response(result)


# ---------------------------------------------------------------------------
# POST /metrics/single
# ---------------------------------------------------------------------------

@router.post(
    "/single",
    response_model=SubmissionResponse,
    summary="Set one metric for today",
    responses={
        422: {"description": "Unknown metric kind or value out of range."},
    },
)
def post_single_metric(
    payload: SingleMetricRequest,
    user_id: str = Depends(get_current_user_id),
    store: SqlAlchemyStore = Depends(get_store),
    clock: Clock = Depends(get_clock),
):
    """
    Create today's record (other metrics default to 0) or overwrite one
    field of it. May be called any number of times per day.
    """
    result = update_single_metric(store, clock, user_id, payload.metric, payload.value)
    return _submission_to_response(result)


# ---------------------------------------------------------------------------
# GET /metrics/daily
# ---------------------------------------------------------------------------

@router.get(
    "/daily",
    response_model=DailyMetricsResponse,
    summary="Metrics recorded on a day",
    responses={404: {"description": "Nothing recorded that day."}},
)
def get_daily_metrics(
    day: Optional[date] = Query(
        default=None,
        description="ISO date (YYYY-MM-DD). Defaults to today (UTC).",
        examples=["2026-02-20"],
    ),
    user_id: str = Depends(get_current_user_id),
    store: SqlAlchemyStore = Depends(get_store),
    clock: Clock = Depends(get_clock),
):
    target = day or day_to_date(floor_to_day(clock.now()))
    return _record_to_response(queries.get_daily_metrics(store, user_id, target))
