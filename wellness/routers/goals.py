"""
Goals router.

PUT /goals   — replace the caller's wellness goals
GET /goals   — current goals
"""
from fastapi import APIRouter, Depends

from wellness.core.clock import Clock, get_clock
from wellness.core.identity import get_current_user_id
from wellness.schemas.goals import GoalsRequest, GoalsResponse
from wellness.services import queries
from wellness.services.wellness import set_wellness_goals
from wellness.store.records import Goals
from wellness.store.sql import SqlAlchemyStore, get_store

router = APIRouter(prefix="/goals", tags=["goals"])


def _goals_to_response(g: Goals) -> GoalsResponse:
    return GoalsResponse(
        user_id=g.user_id,
        sleep_hours_goal=g.sleep_hours_goal,
        water_ml_goal=g.water_ml_goal,
        meditation_minutes_goal=g.meditation_minutes_goal,
        last_updated=g.last_updated,
    )


@router.put(
    "",
    response_model=GoalsResponse,
    summary="Set wellness goals",
    responses={
        401: {"description": "Caller identity missing."},
        422: {"description": "A goal is outside its metric range."},
    },
)
def put_goals(
    payload: GoalsRequest,
    user_id: str = Depends(get_current_user_id),
    store: SqlAlchemyStore = Depends(get_store),
    clock: Clock = Depends(get_clock),
):
    """
    Overwrite all three goals at once. No history is kept.

    Goals use the same ranges as metrics: sleep 0–24 h, water 0–10000 ml,
    meditation 0–1440 min.
    """
    goals = set_wellness_goals(
        store, clock, user_id,
        payload.sleep_hours_goal,
        payload.water_ml_goal,
        payload.meditation_minutes_goal,
    )
    return _goals_to_response(goals)


@router.get(
    "",
    response_model=GoalsResponse,
    summary="Current wellness goals",
    responses={404: {"description": "No goals set yet."}},
)
def read_goals(
    user_id: str = Depends(get_current_user_id),
    store: SqlAlchemyStore = Depends(get_store),
):
    return _goals_to_response(queries.get_goals(store, user_id))
