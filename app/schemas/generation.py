"""Workout generation and chat schemas."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import PlanSource
from app.schemas.workout import PlanExercise


class ProfileContext(BaseModel):
    """Profile fields the client passes along to shape the plan."""

    fitness_level: Optional[str] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    fitness_goals: Optional[str] = None


class WorkoutPreferences(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    goals: Optional[str] = None
    duration: Optional[int] = Field(None, ge=5, le=240, description="Minutes")
    difficulty: Optional[str] = None
    equipment: Optional[str] = None
    focus_areas: list[str] = Field(default_factory=list, alias="focusAreas")


class GenerateWorkoutRequest(BaseModel):
    user_id: Optional[UUID] = None
    profile_context: ProfileContext = Field(default_factory=ProfileContext)
    preferences: WorkoutPreferences = Field(default_factory=WorkoutPreferences)


class GeneratedWorkout(BaseModel):
    name: str
    description: str
    exercises: list[PlanExercise] = []
    source: PlanSource


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=4000)


class ChatReply(BaseModel):
    role: str = "assistant"
    content: str
