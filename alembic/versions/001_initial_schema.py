"""Initial schema: profiles, workouts, goals.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "profiles",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(length=100), nullable=True),
        sa.Column("full_name", sa.String(length=255), nullable=True),
        sa.Column("avatar_id", sa.String(length=50), nullable=True),
        sa.Column("fitness_level", sa.String(length=20), nullable=False, server_default="not_specified"),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("gender", sa.String(length=20), nullable=False, server_default="not_specified"),
        sa.Column("height", sa.Float(), nullable=True),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("fitness_goals", sa.Text(), nullable=True),
        sa.Column("workout_duration", sa.Integer(), nullable=False, server_default="30"),
        sa.Column("exercises_per_workout", sa.Integer(), nullable=False, server_default="5"),
        sa.Column("workout_location", sa.String(length=20), nullable=False, server_default="home"),
        sa.Column("available_equipment", postgresql.JSONB(), nullable=False, server_default="[]"),
        sa.Column("health_limitations", sa.Text(), nullable=True),
        sa.Column("timezone", sa.String(length=64), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "workouts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("exercises", postgresql.JSONB(), nullable=False, server_default="[]"),
        sa.Column("duration", sa.Integer(), nullable=True),
        sa.Column("difficulty", sa.String(length=20), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_exercises", postgresql.JSONB(), nullable=False, server_default="[]"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workouts_user_created", "workouts", ["user_id", "created_at"], unique=False)
    op.create_index(
        "ix_workouts_user_completed_at", "workouts", ["user_id", "completed", "completed_at"], unique=False
    )

    op.create_table(
        "goals",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_goals_user_start", "goals", ["user_id", "start_date"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_goals_user_start", table_name="goals")
    op.drop_table("goals")
    op.drop_index("ix_workouts_user_completed_at", table_name="workouts")
    op.drop_index("ix_workouts_user_created", table_name="workouts")
    op.drop_table("workouts")
    op.drop_table("profiles")
