"""Workout model: a generated plan plus its completion state."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, JSONType


class Workout(Base):
    """A workout plan owned by one user.

    exercises: [{"name", "description", "sets", "reps", "duration"}, ...]
    completed_exercises: names of exercises ticked off so far.
    """

    __tablename__ = "workouts"
    __table_args__ = (
        Index("ix_workouts_user_created", "user_id", "created_at"),
        Index("ix_workouts_user_completed_at", "user_id", "completed", "completed_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    exercises: Mapped[list[dict]] = mapped_column(JSONType, default=list, nullable=False)
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)  # minutes
    difficulty: Mapped[str | None] = mapped_column(String(20), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_exercises: Mapped[list[str]] = mapped_column(JSONType, default=list, nullable=False)
