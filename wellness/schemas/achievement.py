"""
Achievement schemas.

GET  /achievements/catalog              → list[AchievementResponse]
GET  /achievements/catalog/{id}         → AchievementResponse
POST /achievements/catalog/initialize   → CatalogInitResponse
GET  /achievements/earned               → EarnedListResponse
GET  /achievements/earned/{id}          → PossessionResponse
"""
from pydantic import BaseModel, ConfigDict, Field


class AchievementResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    category: str = Field(description='"streak" | "score"')
    threshold: int


class CatalogInitResponse(BaseModel):
    created: list[str] = Field(description="Ids written by this call; empty if already seeded.")
    total: int


class EarnedAchievementResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    achievement_id: str
    achievement_name: str
    earned_at: int


class EarnedListResponse(BaseModel):
    total: int
    items: list[EarnedAchievementResponse]


class PossessionResponse(BaseModel):
    achievement_id: str
    earned: bool
