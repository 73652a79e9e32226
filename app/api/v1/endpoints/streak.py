"""Streak endpoint: current and best consecutive-day completion runs."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import CurrentUser, get_current_user
from app.db.session import get_db
from app.schemas.dashboard import StreakRead
from app.services.completions import fetch_completion_times, get_user_timezone
from app.services.streak import calculate_streaks, to_day_key

router = APIRouter()


@router.get("", response_model=StreakRead)
async def get_streak(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Current streak (consecutive days with a completed workout, ending today or yesterday),
    best streak ever, and the date of the last completion, all in the user's timezone.
    """
    tz = await get_user_timezone(db, user.id)
    completed_at = await fetch_completion_times(db, user.id)
    result = calculate_streaks(completed_at, now=datetime.now(timezone.utc), tz=tz)
    return StreakRead(
        current_streak=result.current_streak,
        best_streak=result.best_streak,
        last_completed_date=to_day_key(completed_at[0], tz) if completed_at else None,
        timezone=str(tz),
    )
