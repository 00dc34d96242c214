"""
Goal schemas.

PUT /goals  → GoalsRequest → GoalsResponse
GET /goals  → GoalsResponse
"""
from pydantic import BaseModel, ConfigDict, Field


class GoalsRequest(BaseModel):
    """Ranges are checked by the service so the error code is INVALID_VALUE."""
    sleep_hours_goal: int = Field(description="Hours of sleep per night (0–24).", examples=[8])
    water_ml_goal: int = Field(description="Water intake in ml (0–10000).", examples=[2000])
    meditation_minutes_goal: int = Field(
        description="Minutes of meditation (0–1440).", examples=[20]
    )


class GoalsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    sleep_hours_goal: int
    water_ml_goal: int
    meditation_minutes_goal: int
    last_updated: int = Field(description="Epoch seconds of the last change.")
