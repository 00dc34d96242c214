from datetime import datetime
from sqlalchemy import Integer, BigInteger, String, DateTime, func, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from wellness.db.base import Base


class DailyMetricRecord(Base):
    """Sleep / water / meditation for one user on one epoch-day."""

    __tablename__ = "daily_metric_records"
    __table_args__ = (UniqueConstraint("user_id", "day", name="uq_daily_metric_user_day"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    day: Mapped[int] = mapped_column(
        BigInteger, nullable=False, index=True,
        comment="Epoch seconds floored to a multiple of 86400",
    )
    sleep_hours: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    water_ml: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    meditation_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    recorded_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
