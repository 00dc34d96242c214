"""
Achievement catalog and earned badges.

`achievements` is static configuration seeded by an administrator.
`earned_achievements` is append-only: one row per (user_id,
achievement_id), never updated or deleted. The unique constraint
backs the idempotent issuance check at the DB level.
"""
from datetime import datetime
from sqlalchemy import Integer, BigInteger, String, Text, DateTime, func, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from wellness.db.base import Base


class Achievement(Base):
    __tablename__ = "achievements"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
        comment='"streak" or "score"',
    )
    threshold: Mapped[int] = mapped_column(Integer, nullable=False)


class EarnedAchievement(Base):
    __tablename__ = "earned_achievements"
    __table_args__ = (
        UniqueConstraint("user_id", "achievement_id", name="uq_earned_user_achievement"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    achievement_id: Mapped[str] = mapped_column(String(64), nullable=False)
    achievement_name: Mapped[str] = mapped_column(String(128), nullable=False)
    earned_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
