"""Dashboard statistics: workout counts, monthly goal progress and streaks for one user."""

from __future__ import annotations

import calendar
import uuid
from datetime import date, datetime, timedelta, timezone, tzinfo

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import RECENT_WORKOUTS_LIMIT, WEEKLY_WINDOW_DAYS
from app.models.goal import Goal
from app.models.profile import Profile
from app.models.workout import Workout
from app.schemas.dashboard import DashboardRead
from app.schemas.workout import WorkoutRead
from app.services.completions import fetch_completion_times, resolve_timezone
from app.services.streak import calculate_streaks


def month_bounds(day: date) -> tuple[date, date]:
    """First and last calendar day of the month containing ``day``."""
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def current_month_bounds(tz: tzinfo, now: datetime | None = None) -> tuple[date, date]:
    """Bounds of the month that is current in the user's timezone."""
    now = now or datetime.now(timezone.utc)
    return month_bounds(now.astimezone(tz).date())


def percent(part: int, whole: int) -> int:
    return round(part / whole * 100) if whole > 0 else 0


def first_name(full_name: str | None) -> str:
    if full_name and full_name.strip():
        return full_name.split()[0]
    return "User"


def _as_utc(ts: datetime) -> datetime:
    # SQLite hands back naive datetimes; stored values are UTC
    return ts if ts.tzinfo is not None else ts.replace(tzinfo=timezone.utc)


async def build_dashboard(
    db: AsyncSession,
    user_id: uuid.UUID,
    now: datetime | None = None,
) -> DashboardRead:
    now = now or datetime.now(timezone.utc)

    profile_row = await db.execute(
        select(Profile.full_name, Profile.timezone).where(Profile.id == user_id)
    )
    profile = profile_row.one_or_none()
    full_name, tz_name = (profile.full_name, profile.timezone) if profile else (None, None)
    tz = resolve_timezone(tz_name)

    completed_at = await fetch_completion_times(db, user_id)
    week_start = now - timedelta(days=WEEKLY_WINDOW_DAYS)
    weekly = sum(1 for ts in completed_at if _as_utc(ts) >= week_start)

    first, last = current_month_bounds(tz, now)
    goals_result = await db.execute(
        select(Goal.completed).where(
            Goal.user_id == user_id,
            Goal.start_date >= first,
            Goal.end_date <= last,
        )
    )
    goal_flags = list(goals_result.scalars().all())
    goals_total = len(goal_flags)
    goals_completed = sum(1 for done in goal_flags if done)

    recent_result = await db.execute(
        select(Workout)
        .where(Workout.user_id == user_id)
        .order_by(Workout.created_at.desc())
        .limit(RECENT_WORKOUTS_LIMIT)
    )
    recent = [WorkoutRead.model_validate(w) for w in recent_result.scalars().all()]

    streaks = calculate_streaks(completed_at, now=now, tz=tz)
    rate = percent(goals_completed, goals_total)
    return DashboardRead(
        first_name=first_name(full_name),
        total_workouts=len(completed_at),
        weekly_workouts=weekly,
        goals_completed=goals_completed,
        goals_total=goals_total,
        goal_success_rate=rate,
        progress_percent=rate,
        active_streak=streaks.current_streak,
        personal_best=streaks.best_streak,
        recent_workouts=recent,
    )
