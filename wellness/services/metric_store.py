"""
Metric Store — per-user, per-day metric records.

Two write modes:
  write_daily_record   all three metrics at once; write-once per day
  merge_single_metric  one metric; creates or merges, repeatable
"""
from __future__ import annotations

import logging

from wellness.core.clock import day_to_date, floor_to_day
from wellness.core.errors import DuplicateEntryError
from wellness.services.validation import MetricKind
from wellness.store.base import WellnessStore
from wellness.store.records import DailyMetrics

logger = logging.getLogger(__name__)


def write_daily_record(
    store: WellnessStore,
    user_id: str,
    sleep_hours: int,
    water_ml: int,
    meditation_minutes: int,
    now: int,
) -> DailyMetrics:
    today = floor_to_day(now)
    if store.get_daily_metrics(user_id, today) is not None:
        raise DuplicateEntryError(day=day_to_date(today))

    record = DailyMetrics(
        user_id=user_id,
        day=today,
        sleep_hours=sleep_hours,
        water_ml=water_ml,
        meditation_minutes=meditation_minutes,
        recorded_at=now,
    )
    store.put_daily_metrics(record)
    logger.info("User %s recorded daily metrics for %s", user_id, day_to_date(today))
    return record


def merge_single_metric(
    store: WellnessStore,
    user_id: str,
    kind: MetricKind,
    value: int,
    now: int,
) -> DailyMetrics:
    today = floor_to_day(now)
    record = store.get_daily_metrics(user_id, today)
    if record is None:
        record = DailyMetrics(
            user_id=user_id,
            day=today,
            sleep_hours=0,
            water_ml=0,
            meditation_minutes=0,
            recorded_at=now,
        )
    setattr(record, kind.field, value)
    record.recorded_at = now
    store.put_daily_metrics(record)
    logger.info("User %s set %s=%d for %s", user_id, kind.field, value, day_to_date(today))
    return record
