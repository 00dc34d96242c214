"""
Users router.

GET /users/me   — the caller's profile (score, streak)
"""
from fastapi import APIRouter, Depends

from wellness.core.identity import get_current_user_id
from wellness.schemas.user import UserProfileResponse
from wellness.services import queries
from wellness.store.sql import SqlAlchemyStore, get_store

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/me",
    response_model=UserProfileResponse,
    summary="Caller's wellness profile",
    responses={404: {"description": "Caller has never interacted with the service."}},
)
def read_profile(
    user_id: str = Depends(get_current_user_id),
    store: SqlAlchemyStore = Depends(get_store),
):
    user = queries.get_user_profile(store, user_id)
    return UserProfileResponse(
        user_id=user.user_id,
        joined_at=user.joined_at,
        wellness_score=user.wellness_score,
        streak_days=user.streak_days,
    )
