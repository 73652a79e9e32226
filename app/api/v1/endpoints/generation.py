"""AI workout plan generation."""

from fastapi import APIRouter, Depends, HTTPException
from openai import AsyncOpenAI

from app.core.config import Settings, get_settings
from app.core.openai_client import get_openai_client
from app.core.security import CurrentUser, get_current_user
from app.schemas.generation import GeneratedWorkout, GenerateWorkoutRequest
from app.services.workout_generator import WorkoutGenerator

router = APIRouter()


@router.post("/generate", response_model=GeneratedWorkout)
async def generate_workout(
    payload: GenerateWorkoutRequest,
    user: CurrentUser = Depends(get_current_user),
    client: AsyncOpenAI | None = Depends(get_openai_client),
    settings: Settings = Depends(get_settings),
):
    """
    Build a plan from profile context + preferences. Never fails on LLM errors:
    falls back to a simplified prompt, then to a static plan (see `source`).
    The plan is not saved; POST it to /workouts to keep it.
    """
    if payload.user_id is not None and payload.user_id != user.id:
        raise HTTPException(
            status_code=403,
            detail="Unauthorized: You can only create workouts for your own account",
        )
    return await WorkoutGenerator(client, settings).generate(payload)
