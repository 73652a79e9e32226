"""AI workout plans: prompt construction around the OpenAI chat API with a fallback ladder.

Ladder: primary model + full JSON prompt -> fallback model + short prompt -> static plan.
Each rung that fails is logged and the next one runs; the static plan cannot fail.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field

from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError

from app.core.config import Settings
from app.core.enums import PlanSource
from app.schemas.generation import GeneratedWorkout, GenerateWorkoutRequest
from app.schemas.workout import PlanExercise

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a professional fitness trainer with expertise in creating personalized workout plans."
)


class PlanParseError(ValueError):
    """Model output was not a usable plan."""


@dataclass
class PlanContext:
    """Request fields with defaults filled in; what the prompts are rendered from."""

    fitness_level: str = "beginner"
    height: str = "not specified"
    weight: str = "not specified"
    fitness_goals: str = "general fitness"
    workout_goals: str = "general fitness improvement"
    duration: int = 30
    difficulty: str = "moderate"
    equipment: str = "minimal"
    focus_areas: list[str] = field(default_factory=lambda: ["Full Body"])


def build_context(request: GenerateWorkoutRequest) -> PlanContext:
    profile = request.profile_context
    prefs = request.preferences
    ctx = PlanContext()
    if profile.fitness_level:
        ctx.fitness_level = profile.fitness_level
    if profile.height:
        ctx.height = f"{profile.height:g} cm"
    if profile.weight:
        ctx.weight = f"{profile.weight:g} kg"
    if profile.fitness_goals:
        ctx.fitness_goals = profile.fitness_goals
    if prefs.goals:
        ctx.workout_goals = prefs.goals
    if prefs.duration:
        ctx.duration = prefs.duration
    if prefs.difficulty:
        ctx.difficulty = prefs.difficulty
    if prefs.equipment:
        ctx.equipment = prefs.equipment
    if prefs.focus_areas:
        ctx.focus_areas = list(prefs.focus_areas)
    return ctx


def workout_name(request: GenerateWorkoutRequest) -> str:
    """'Legs/Core Workout' from focus areas, else first three words of the goals."""
    prefs = request.preferences
    if prefs.focus_areas:
        return f"{'/'.join(prefs.focus_areas)} Workout"
    if prefs.goals and prefs.goals.strip():
        return f"{' '.join(prefs.goals.split()[:3])} Workout"
    return "Custom Workout"


def build_prompt(ctx: PlanContext) -> str:
    return f"""Create a personalized workout plan with the following details:

User Profile:
- Fitness Level: {ctx.fitness_level}
- Height: {ctx.height}
- Weight: {ctx.weight}
- Fitness Goals: {ctx.fitness_goals}

Workout Preferences:
- Specific Workout Goals: {ctx.workout_goals}
- Duration: {ctx.duration} minutes
- Difficulty: {ctx.difficulty}
- Available Equipment: {ctx.equipment}
- Focus Areas: {", ".join(ctx.focus_areas)}

Please format the response as a JSON object with the following structure:
{{
  "description": "A detailed description of the workout including its benefits and how it relates to the user's goals",
  "exercises": [
    {{
      "name": "Exercise Name",
      "description": "Detailed instructions on how to perform the exercise",
      "sets": number (null if not applicable),
      "reps": "rep range as string" (null if not applicable),
      "duration": "duration as string (e.g., '30 seconds')" (null if not applicable)
    }}
  ]
}}

Ensure the workout is appropriate for the user's fitness level and goals. Include warm-up and cool-down exercises for workouts 30 minutes or longer."""


def build_simplified_prompt(ctx: PlanContext) -> str:
    return (
        f"Give a {ctx.duration}-minute {ctx.difficulty} {ctx.fitness_level} workout for "
        f"{', '.join(ctx.focus_areas)} using {ctx.equipment} equipment. "
        'Reply with JSON only: {"description": str, "exercises": '
        '[{"name": str, "description": str, "sets": int|null, "reps": str|null, "duration": str|null}]}'
    )


def parse_plan(content: str | None) -> tuple[str, list[PlanExercise]]:
    """Decode model JSON into (description, exercises). Raises PlanParseError if unusable."""
    if not content:
        raise PlanParseError("empty completion")
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise PlanParseError(f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise PlanParseError("plan is not a JSON object")
    raw_exercises = data.get("exercises") or []
    if not isinstance(raw_exercises, list) or not raw_exercises:
        raise PlanParseError("plan has no exercises")
    try:
        exercises = [PlanExercise.model_validate(e) for e in raw_exercises]
    except ValidationError as e:
        raise PlanParseError(f"bad exercise entry: {e.error_count()} errors") from e
    description = data.get("description") or "Custom workout plan"
    return str(description), exercises


def static_workout(ctx: PlanContext) -> tuple[str, list[PlanExercise]]:
    """Built-in bodyweight plan used when every model call fails."""
    description = (
        f"A {ctx.duration}-minute {ctx.difficulty} workout focusing on {', '.join(ctx.focus_areas)} "
        f"designed for {ctx.fitness_level} fitness level. This workout is tailored to help you "
        f"achieve your goals: {ctx.workout_goals}."
    )
    exercises = [
        PlanExercise(
            name="Warm-up",
            description="5 minutes of light cardio and dynamic stretching",
            duration="5 minutes",
        ),
        PlanExercise(
            name="Push-ups",
            description="Standard push-ups with hands shoulder-width apart",
            sets=3,
            reps="10-12",
        ),
        PlanExercise(
            name="Bodyweight Squats",
            description="Standard squats with feet shoulder-width apart",
            sets=3,
            reps="15-20",
        ),
        PlanExercise(
            name="Plank",
            description="Hold a forearm plank position with core engaged",
            sets=3,
            duration="30 seconds",
        ),
        PlanExercise(
            name="Cool-down",
            description="5 minutes of static stretching for all major muscle groups",
            duration="5 minutes",
        ),
    ]
    return description, exercises


class WorkoutGenerator:
    """Runs the ladder. client=None (no API key) goes straight to the static plan."""

    def __init__(self, client: AsyncOpenAI | None, settings: Settings):
        self.client = client
        self.settings = settings

    async def _ask(self, model: str, prompt: str) -> tuple[str, list[PlanExercise]]:
        completion = await self.client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            response_format={"type": "json_object"},
        )
        if not completion.choices:
            raise PlanParseError("no choices in completion")
        return parse_plan(completion.choices[0].message.content)

    async def generate(self, request: GenerateWorkoutRequest) -> GeneratedWorkout:
        ctx = build_context(request)
        name = workout_name(request)

        if self.client is not None:
            rungs = (
                (PlanSource.PRIMARY, self.settings.openai_workout_model, build_prompt(ctx)),
                (PlanSource.SIMPLIFIED, self.settings.openai_fallback_model, build_simplified_prompt(ctx)),
            )
            for source, model, prompt in rungs:
                try:
                    description, exercises = await self._ask(model, prompt)
                except (OpenAIError, PlanParseError) as e:
                    logger.warning("Workout generation (%s, %s) failed: %s", source.value, model, e)
                    continue
                return GeneratedWorkout(name=name, description=description, exercises=exercises, source=source)
        else:
            logger.warning("OPENAI_API_KEY not set; using static workout")

        description, exercises = static_workout(ctx)
        return GeneratedWorkout(name=name, description=description, exercises=exercises, source=PlanSource.STATIC)
