"""
WellnessUser — one row per principal, created lazily on first contact.

Never deleted. Only the streak and score engines mutate it after
creation. `last_logged_day` is the epoch-day on which the streak and
score last advanced.
"""
from datetime import datetime
from sqlalchemy import Integer, BigInteger, String, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from wellness.db.base import Base


class WellnessUser(Base):
    __tablename__ = "wellness_users"

    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    joined_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    wellness_score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    streak_days: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_logged_day: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
