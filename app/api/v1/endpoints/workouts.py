"""Workout CRUD, progress tracking and completion endpoints."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import DEFAULT_WORKOUT_PAGE_SIZE
from app.core.security import CurrentUser, get_current_user
from app.db.session import get_db
from app.models.workout import Workout
from app.schemas.workout import (
    WorkoutComplete,
    WorkoutCreate,
    WorkoutProgressUpdate,
    WorkoutRead,
)

logger = logging.getLogger(__name__)
router = APIRouter()


async def get_owned_workout(db: AsyncSession, workout_id: uuid.UUID, user: CurrentUser) -> Workout:
    """Load a workout the caller owns: 404 if missing, 403 if it belongs to someone else."""
    result = await db.execute(select(Workout).where(Workout.id == workout_id))
    workout = result.scalar_one_or_none()
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    if workout.user_id != user.id:
        raise HTTPException(status_code=403, detail="You don't have permission to access this workout")
    return workout


def _checked_exercise_names(workout: Workout, names: list[str]) -> list[str]:
    """De-duplicate (first occurrence wins) and reject names not in the plan."""
    plan_names = {e.get("name") for e in workout.exercises or []}
    unknown = [n for n in names if n not in plan_names]
    if unknown:
        raise HTTPException(
            status_code=400,
            detail=f"Not in this workout: {', '.join(sorted(set(unknown)))}",
        )
    return list(dict.fromkeys(names))


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
    skip: int = Query(0, ge=0),
    limit: int = Query(DEFAULT_WORKOUT_PAGE_SIZE, ge=1, le=200),
    completed: bool | None = None,
):
    """List the caller's workouts, newest first; optionally only completed / in-progress."""
    stmt = select(Workout).where(Workout.user_id == user.id)
    if completed is not None:
        stmt = stmt.where(Workout.completed.is_(completed))
    stmt = stmt.order_by(Workout.created_at.desc()).offset(skip).limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())


@router.post("", response_model=WorkoutRead, status_code=201)
async def create_workout(
    payload: WorkoutCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Save a workout plan (usually one returned by /workouts/generate)."""
    data = payload.model_dump()
    workout = Workout(user_id=user.id, **data)
    db.add(workout)
    await db.flush()
    await db.refresh(workout)
    return workout


@router.get("/{workout_id}", response_model=WorkoutRead)
async def get_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    return await get_owned_workout(db, workout_id, user)


@router.patch("/{workout_id}/progress", response_model=WorkoutRead)
async def save_progress(
    workout_id: uuid.UUID,
    payload: WorkoutProgressUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Replace the list of ticked-off exercises. Does not complete the workout."""
    workout = await get_owned_workout(db, workout_id, user)
    workout.completed_exercises = _checked_exercise_names(workout, payload.completed_exercises)
    await db.flush()
    await db.refresh(workout)
    return workout


@router.post("/{workout_id}/complete", response_model=WorkoutRead)
async def complete_workout(
    workout_id: uuid.UUID,
    payload: WorkoutComplete | None = None,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Mark the workout completed now (UTC). Re-completing keeps the original completed_at."""
    workout = await get_owned_workout(db, workout_id, user)
    if payload is not None and payload.completed_exercises is not None:
        workout.completed_exercises = _checked_exercise_names(workout, payload.completed_exercises)
    if not workout.completed or workout.completed_at is None:
        workout.completed = True
        workout.completed_at = datetime.now(timezone.utc)
        logger.info("Workout %s completed by %s", workout.id, user.id)
    await db.flush()
    await db.refresh(workout)
    return workout


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Delete one of the caller's workouts."""
    workout = await get_owned_workout(db, workout_id, user)
    await db.delete(workout)
    return None
