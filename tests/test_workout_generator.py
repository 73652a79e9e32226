"""Workout generation: prompt context, naming, and the primary -> simplified -> static ladder."""

import json
from types import SimpleNamespace

import httpx
import openai
import pytest

from app.core.config import get_settings
from app.core.enums import PlanSource
from app.core.openai_client import get_openai_client
from app.main import app
from app.schemas.generation import GenerateWorkoutRequest
from app.services.workout_generator import (
    PlanParseError,
    WorkoutGenerator,
    build_context,
    build_prompt,
    parse_plan,
    workout_name,
)
from conftest import OTHER_USER_ID, USER_ID, FakeOpenAI, completion

GOOD_PLAN = json.dumps(
    {
        "description": "Strength focus",
        "exercises": [
            {"name": "Goblet Squat", "description": "Hold a dumbbell", "sets": 4, "reps": "8-10", "duration": None},
            {"name": "Dead Bug", "description": "Slow and controlled", "sets": 3, "reps": "12", "duration": None},
        ],
    }
)


def _request(**preferences) -> GenerateWorkoutRequest:
    return GenerateWorkoutRequest.model_validate(
        {"profile_context": {"fitness_level": "intermediate", "height": 180, "weight": 75.5}, "preferences": preferences}
    )


def _connection_error():
    return openai.APIConnectionError(request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions"))


def test_name_from_focus_areas():
    assert workout_name(_request(focusAreas=["Legs", "Core"])) == "Legs/Core Workout"


def test_name_from_goals():
    assert workout_name(_request(goals="build lean muscle mass fast")) == "build lean muscle Workout"


def test_default_name():
    assert workout_name(_request()) == "Custom Workout"


def test_context_defaults():
    ctx = build_context(GenerateWorkoutRequest())
    assert ctx.fitness_level == "beginner"
    assert ctx.height == "not specified"
    assert ctx.duration == 30
    assert ctx.difficulty == "moderate"
    assert ctx.equipment == "minimal"
    assert ctx.focus_areas == ["Full Body"]


def test_prompt_includes_profile_and_preferences():
    prompt = build_prompt(build_context(_request(duration=45, equipment="dumbbells", focusAreas=["Legs"])))
    assert "Fitness Level: intermediate" in prompt
    assert "Height: 180 cm" in prompt
    assert "Weight: 75.5 kg" in prompt
    assert "Duration: 45 minutes" in prompt
    assert "Available Equipment: dumbbells" in prompt
    assert "Focus Areas: Legs" in prompt


@pytest.mark.parametrize(
    "content",
    [None, "", "not json", "[]", json.dumps({"description": "x"}), json.dumps({"exercises": [{"sets": 3}]})],
)
def test_parse_plan_rejects_unusable_output(content):
    with pytest.raises(PlanParseError):
        parse_plan(content)


def test_parse_plan_defaults_description():
    description, exercises = parse_plan(json.dumps({"exercises": [{"name": "Plank"}]}))
    assert description == "Custom workout plan"
    assert exercises[0].name == "Plank"


async def test_primary_success():
    client = FakeOpenAI(completion(GOOD_PLAN))
    plan = await WorkoutGenerator(client, get_settings()).generate(_request(focusAreas=["Legs"]))
    assert plan.source == PlanSource.PRIMARY
    assert plan.name == "Legs Workout"
    assert [e.name for e in plan.exercises] == ["Goblet Squat", "Dead Bug"]
    call = client.completions.calls[0]
    assert call["model"] == get_settings().openai_workout_model
    assert call["response_format"] == {"type": "json_object"}


async def test_simplified_retry_after_api_error():
    client = FakeOpenAI(_connection_error(), completion(GOOD_PLAN))
    plan = await WorkoutGenerator(client, get_settings()).generate(_request())
    assert plan.source == PlanSource.SIMPLIFIED
    assert len(client.completions.calls) == 2
    assert client.completions.calls[1]["model"] == get_settings().openai_fallback_model


async def test_simplified_retry_after_bad_json():
    client = FakeOpenAI(completion("Sure! Here is your workout..."), completion(GOOD_PLAN))
    plan = await WorkoutGenerator(client, get_settings()).generate(_request())
    assert plan.source == PlanSource.SIMPLIFIED


async def test_static_after_both_rungs_fail():
    client = FakeOpenAI(_connection_error(), completion("{}"))
    plan = await WorkoutGenerator(client, get_settings()).generate(_request(duration=20, difficulty="easy"))
    assert plan.source == PlanSource.STATIC
    assert [e.name for e in plan.exercises] == ["Warm-up", "Push-ups", "Bodyweight Squats", "Plank", "Cool-down"]
    assert plan.description.startswith("A 20-minute easy workout focusing on Full Body")


async def test_static_when_completions_have_no_choices():
    client = FakeOpenAI(SimpleNamespace(choices=[]), SimpleNamespace(choices=[]))
    plan = await WorkoutGenerator(client, get_settings()).generate(_request())
    assert plan.source == PlanSource.STATIC
    assert len(client.completions.calls) == 2


async def test_no_client_goes_straight_to_static():
    plan = await WorkoutGenerator(None, get_settings()).generate(_request())
    assert plan.source == PlanSource.STATIC


async def test_generate_endpoint(client, headers):
    fake = FakeOpenAI(completion(GOOD_PLAN))
    app.dependency_overrides[get_openai_client] = lambda: fake
    response = await client.post(
        "/api/v1/workouts/generate",
        json={"user_id": str(USER_ID), "preferences": {"goals": "get stronger", "focusAreas": []}},
        headers=headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "get stronger Workout"
    assert data["source"] == "primary"
    assert len(data["exercises"]) == 2


async def test_generate_endpoint_without_api_key(client, headers):
    response = await client.post("/api/v1/workouts/generate", json={}, headers=headers)
    assert response.status_code == 200
    assert response.json()["source"] == "static"


async def test_generate_for_someone_else_is_403(client, headers):
    response = await client.post(
        "/api/v1/workouts/generate", json={"user_id": str(OTHER_USER_ID)}, headers=headers
    )
    assert response.status_code == 403
