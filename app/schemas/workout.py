"""Workout schemas: plan exercises, CRUD payloads, and progress updates."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class PlanExercise(BaseModel):
    """One exercise in a plan. sets/reps/duration are null when not applicable."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    sets: int | None = None
    reps: str | None = None  # rep range, e.g. "10-12"
    duration: str | None = None  # e.g. "30 seconds"


class WorkoutBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    exercises: list[PlanExercise] = []
    duration: int | None = Field(None, ge=1, le=600)
    difficulty: str | None = Field(None, max_length=20)


class WorkoutCreate(WorkoutBase):
    pass


class WorkoutRead(WorkoutBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID
    created_at: datetime
    completed: bool = False
    completed_at: datetime | None = None
    completed_exercises: list[str] = []


class WorkoutProgressUpdate(BaseModel):
    """Exercises ticked off so far (replaces the stored list)."""

    completed_exercises: list[str] = []


class WorkoutComplete(BaseModel):
    completed_exercises: list[str] | None = None
