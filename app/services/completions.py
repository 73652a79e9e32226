"""Completion history reads and the timezone used to bucket them into days."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.models.profile import Profile
from app.models.workout import Workout

logger = logging.getLogger(__name__)


async def fetch_completion_times(db: AsyncSession, user_id: uuid.UUID) -> list[datetime]:
    """completed_at of the user's completed workouts, newest first."""
    result = await db.execute(
        select(Workout.completed_at)
        .where(
            Workout.user_id == user_id,
            Workout.completed.is_(True),
            Workout.completed_at.isnot(None),
        )
        .order_by(Workout.completed_at.desc())
    )
    return list(result.scalars().all())


def resolve_timezone(name: str | None) -> ZoneInfo:
    """Profile zone if valid, else the configured default (STREAK_TIMEZONE), else UTC."""
    default_name = get_settings().streak_timezone
    for candidate in (name, default_name):
        if not candidate:
            continue
        try:
            return ZoneInfo(candidate)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown timezone %r, falling back", candidate)
    return ZoneInfo("UTC")


async def get_user_timezone(db: AsyncSession, user_id: uuid.UUID) -> tzinfo:
    result = await db.execute(select(Profile.timezone).where(Profile.id == user_id))
    return resolve_timezone(result.scalar_one_or_none())
