"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-17

Tables: wellness_users, daily_metric_records, wellness_goals,
achievements, earned_achievements.
Unique (user_id, day) makes full daily records write-once;
unique (user_id, achievement_id) makes badge issuance idempotent.
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "wellness_users",
        sa.Column("user_id", sa.String(128), primary_key=True),
        sa.Column("joined_at", sa.BigInteger(), nullable=False),
        sa.Column("wellness_score", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("streak_days", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_logged_day", sa.BigInteger(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )

    op.create_table(
        "daily_metric_records",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("day", sa.BigInteger(), nullable=False),
        sa.Column("sleep_hours", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("water_ml", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("meditation_minutes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("recorded_at", sa.BigInteger(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_daily_metric_user_id", "daily_metric_records", ["user_id"])
    op.create_index("ix_daily_metric_day", "daily_metric_records", ["day"])
    op.create_unique_constraint(
        "uq_daily_metric_user_day", "daily_metric_records", ["user_id", "day"]
    )

    op.create_table(
        "wellness_goals",
        sa.Column("user_id", sa.String(128), primary_key=True),
        sa.Column("sleep_hours_goal", sa.Integer(), nullable=False),
        sa.Column("water_ml_goal", sa.Integer(), nullable=False),
        sa.Column("meditation_minutes_goal", sa.Integer(), nullable=False),
        sa.Column("last_updated", sa.BigInteger(), nullable=False),
    )

    op.create_table(
        "achievements",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category", sa.String(32), nullable=False),
        sa.Column("threshold", sa.Integer(), nullable=False),
    )
    op.create_index("ix_achievements_category", "achievements", ["category"])

    op.create_table(
        "earned_achievements",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("achievement_id", sa.String(64), nullable=False),
        sa.Column("achievement_name", sa.String(128), nullable=False),
        sa.Column("earned_at", sa.BigInteger(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_earned_user_id", "earned_achievements", ["user_id"])
    op.create_unique_constraint(
        "uq_earned_user_achievement",
        "earned_achievements",
        ["user_id", "achievement_id"],
    )


def downgrade() -> None:
    op.drop_table("earned_achievements")
    op.drop_table("achievements")
    op.drop_table("wellness_goals")
    op.drop_table("daily_metric_records")
    op.drop_table("wellness_users")
