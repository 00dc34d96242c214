"""
User registry: lazily materializes a user record on first contact.
"""
from __future__ import annotations

import logging

from wellness.store.base import WellnessStore
from wellness.store.records import UserRecord

logger = logging.getLogger(__name__)


def ensure_user(store: WellnessStore, user_id: str, now: int) -> UserRecord:
    """Return the user's record, creating it with zeroed counters if absent."""
    user = store.get_user(user_id)
    if user is not None:
        logger.debug("User %s already registered", user_id)
        return user

    user = UserRecord(user_id=user_id, joined_at=now, wellness_score=0, streak_days=0)
    store.put_user(user)
    logger.info("Registered new user %s at %d", user_id, now)
    return user
