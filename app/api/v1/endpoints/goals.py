"""Goals CRUD - monthly targets counted on the dashboard."""

from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import CurrentUser, get_current_user
from app.db.session import get_db
from app.models.goal import Goal
from app.schemas.goal import GoalCreate, GoalRead, GoalUpdate
from app.services.completions import get_user_timezone
from app.services.dashboard import current_month_bounds, month_bounds

router = APIRouter()


async def _get_owned_goal(db: AsyncSession, goal_id: uuid.UUID, user: CurrentUser) -> Goal:
    result = await db.execute(select(Goal).where(Goal.id == goal_id))
    goal = result.scalar_one_or_none()
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")
    if goal.user_id != user.id:
        raise HTTPException(status_code=403, detail="You don't have permission to access this goal")
    return goal


@router.get("", response_model=list[GoalRead])
async def list_goals(
    month: str | None = Query(None, pattern=r"^\d{4}-(0[1-9]|1[0-2])$", description="YYYY-MM; default current month in the user's timezone"),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Goals whose window lies inside the month."""
    if month:
        year, mon = (int(p) for p in month.split("-"))
        first, last = month_bounds(date(year, mon, 1))
    else:
        first, last = current_month_bounds(await get_user_timezone(db, user.id))
    result = await db.execute(
        select(Goal)
        .where(Goal.user_id == user.id, Goal.start_date >= first, Goal.end_date <= last)
        .order_by(Goal.start_date, Goal.created_at)
    )
    return list(result.scalars().all())


@router.post("", response_model=GoalRead, status_code=201)
async def create_goal(
    payload: GoalCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    goal = Goal(user_id=user.id, **payload.model_dump())
    db.add(goal)
    await db.flush()
    await db.refresh(goal)
    return goal


@router.patch("/{goal_id}", response_model=GoalRead)
async def update_goal(
    goal_id: uuid.UUID,
    payload: GoalUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Update title, window or completion."""
    goal = await _get_owned_goal(db, goal_id, user)
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(goal, k, v)
    if goal.end_date < goal.start_date:
        raise HTTPException(status_code=400, detail="end_date must not be before start_date")
    await db.flush()
    await db.refresh(goal)
    return goal


@router.delete("/{goal_id}", status_code=204)
async def delete_goal(
    goal_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    goal = await _get_owned_goal(db, goal_id, user)
    await db.delete(goal)
    return None
