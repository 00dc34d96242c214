"""
Achievements router.

GET  /achievements/catalog               — all catalog entries
GET  /achievements/catalog/{id}          — one catalog entry
POST /achievements/catalog/initialize    — seed the catalog (admin)
GET  /achievements/earned                — caller's badges
GET  /achievements/earned/{id}           — does the caller hold a badge?
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from wellness.core.identity import get_current_user_id, require_admin
from wellness.schemas.achievement import (
    AchievementResponse,
    CatalogInitResponse,
    EarnedAchievementResponse,
    EarnedListResponse,
    PossessionResponse,
)
from wellness.services import queries
from wellness.services.achievement_engine import ACHIEVEMENT_CATALOG, initialize_achievement_catalog
from wellness.store.records import AchievementDef
from wellness.store.sql import SqlAlchemyStore, get_store

router = APIRouter(prefix="/achievements", tags=["achievements"])


def _achievement_to_response(a: AchievementDef) -> AchievementResponse:
    return AchievementResponse(
        id=a.id,
        name=a.name,
        description=a.description,
        category=a.category,
        threshold=a.threshold,
    )


@router.get(
    "/catalog",
    response_model=list[AchievementResponse],
    summary="Achievement catalog",
)
def read_catalog(store: SqlAlchemyStore = Depends(get_store)):
    return [_achievement_to_response(a) for a in queries.list_achievements(store)]


@router.get(
    "/catalog/{achievement_id}",
    response_model=AchievementResponse,
    summary="One catalog entry",
    responses={404: {"description": "Unknown achievement id."}},
)
def read_catalog_entry(achievement_id: str, store: SqlAlchemyStore = Depends(get_store)):
    return _achievement_to_response(queries.get_achievement(store, achievement_id))


@router.post(
    "/catalog/initialize",
    response_model=CatalogInitResponse,
    summary="Seed the static achievement catalog",
    dependencies=[Depends(require_admin)],
    responses={403: {"description": "Missing or wrong X-Admin-Token."}},
)
def post_initialize_catalog(store: SqlAlchemyStore = Depends(get_store)):
    """
    Write the six built-in achievements. Safe to call repeatedly: existing
    entries are left untouched and `created` lists only new ids.
    """
    created = initialize_achievement_catalog(store)
    return CatalogInitResponse(created=created, total=len(ACHIEVEMENT_CATALOG))


@router.get(
    "/earned",
    response_model=EarnedListResponse,
    summary="Caller's earned achievements, oldest first",
)
def read_earned(
    user_id: str = Depends(get_current_user_id),
    store: SqlAlchemyStore = Depends(get_store),
):
    items = queries.get_earned_achievements(store, user_id)
    return EarnedListResponse(
        total=len(items),
        items=[
            EarnedAchievementResponse(
                achievement_id=b.achievement_id,
                achievement_name=b.achievement_name,
                earned_at=b.earned_at,
            )
            for b in items
        ],
    )


@router.get(
    "/earned/{achievement_id}",
    response_model=PossessionResponse,
    summary="Whether the caller holds an achievement",
)
def read_possession(
    achievement_id: str,
    user_id: str = Depends(get_current_user_id),
    store: SqlAlchemyStore = Depends(get_store),
):
    return PossessionResponse(
        achievement_id=achievement_id,
        earned=queries.has_achievement(store, user_id, achievement_id),
    )
