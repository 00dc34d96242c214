"""
Metric submission schemas.

POST /metrics/daily   → DailyMetricsRequest  → SubmissionResponse
POST /metrics/single  → SingleMetricRequest  → SubmissionResponse
GET  /metrics/daily   → DailyMetricsResponse
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DailyMetricsRequest(BaseModel):
    """All three metrics for today. Accepted once per calendar day."""
    sleep_hours: int = Field(description="0–24", examples=[8])
    water_ml: int = Field(description="0–10000", examples=[2000])
    meditation_minutes: int = Field(description="0–1440", examples=[20])


class SingleMetricRequest(BaseModel):
    """One metric for today; may be repeated, last write wins."""
    metric: str = Field(
        description='"sleep" | "water" | "meditation"',
        examples=["water"],
    )
    value: int = Field(examples=[500])


class DailyMetricsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    day: str = Field(description="ISO date of the 86400-second day bucket.")
    sleep_hours: int
    water_ml: int
    meditation_minutes: int
    recorded_at: int = Field(description="Epoch seconds of the last write.")


class SubmissionResponse(BaseModel):
    """State after a metric submission."""
    user_id: str
    metrics: DailyMetricsResponse
    streak_days: int
    wellness_score: int
    achievements_issued: list[str] = Field(
        default_factory=list,
        description="Achievement ids newly earned by this submission.",
    )
