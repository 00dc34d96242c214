from sqlalchemy import Integer, BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from wellness.db.base import Base


class WellnessGoals(Base):
    """Current goals; overwritten wholesale, no history."""

    __tablename__ = "wellness_goals"

    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    sleep_hours_goal: Mapped[int] = mapped_column(Integer, nullable=False)
    water_ml_goal: Mapped[int] = mapped_column(Integer, nullable=False)
    meditation_minutes_goal: Mapped[int] = mapped_column(Integer, nullable=False)
    last_updated: Mapped[int] = mapped_column(BigInteger, nullable=False)
