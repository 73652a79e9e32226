"""Profile model: one row per auth user, keyed by the Supabase user id."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.core.constants import DEFAULT_AVATAR_ID
from app.db.base import Base, JSONType


class Profile(Base):
    """User profile: display info, training context for plan generation, and timezone for streaks.

    id is the auth user id (no separate users table; auth lives at Supabase).
    """

    __tablename__ = "profiles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    username: Mapped[str | None] = mapped_column(String(100), nullable=True)
    full_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    avatar_id: Mapped[str | None] = mapped_column(String(50), nullable=True, default=DEFAULT_AVATAR_ID)

    fitness_level: Mapped[str] = mapped_column(String(20), default="not_specified", nullable=False)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    gender: Mapped[str] = mapped_column(String(20), default="not_specified", nullable=False)
    height: Mapped[float | None] = mapped_column(Float, nullable=True)  # cm
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)  # kg
    fitness_goals: Mapped[str | None] = mapped_column(Text, nullable=True)

    workout_duration: Mapped[int] = mapped_column(Integer, default=30, nullable=False)  # minutes
    exercises_per_workout: Mapped[int] = mapped_column(Integer, default=5, nullable=False)
    workout_location: Mapped[str] = mapped_column(String(20), default="home", nullable=False)
    available_equipment: Mapped[list[str]] = mapped_column(JSONType, default=list, nullable=False)
    health_limitations: Mapped[str | None] = mapped_column(Text, nullable=True)

    timezone: Mapped[str | None] = mapped_column(String(64), nullable=True)  # IANA, e.g. Europe/Berlin

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
