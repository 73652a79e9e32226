"""GET /streak and GET /dashboard against an in-memory database."""

from datetime import date, datetime, timedelta, timezone

import pytest

from app.models.goal import Goal
from app.models.profile import Profile
from app.models.workout import Workout
from conftest import OTHER_USER_ID, USER_ID, auth_headers

PLAN = [{"name": "Push-ups", "description": "", "sets": 3, "reps": "10", "duration": None}]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


async def _seed_workouts(session_maker, user_id, completed_days_ago, pending=0):
    now = _utc_now()
    async with session_maker() as session:
        for n in completed_days_ago:
            when = now - timedelta(days=n)
            session.add(
                Workout(
                    user_id=user_id,
                    name=f"Workout {n}",
                    exercises=PLAN,
                    created_at=when - timedelta(minutes=45),
                    completed=True,
                    completed_at=when,
                    completed_exercises=["Push-ups"],
                )
            )
        for i in range(pending):
            session.add(Workout(user_id=user_id, name=f"Pending {i}", exercises=PLAN, created_at=now))
        await session.commit()


async def test_streak_requires_auth(client):
    response = await client.get("/api/v1/streak")
    assert response.status_code == 401


async def test_streak_no_completions(client, headers):
    response = await client.get("/api/v1/streak", headers=headers)
    assert response.status_code == 200
    data = response.json()
    assert data["current_streak"] == 0
    assert data["best_streak"] == 0
    assert data["last_completed_date"] is None
    assert data["timezone"] == "UTC"


async def test_streak_counts_consecutive_days(client, headers, session_maker):
    await _seed_workouts(session_maker, USER_ID, [0, 1, 2, 10, 11])
    response = await client.get("/api/v1/streak", headers=headers)
    data = response.json()
    assert data["current_streak"] == 3
    assert data["best_streak"] == 3
    assert data["last_completed_date"] == _utc_now().date().isoformat()


async def test_streak_ignores_pending_and_other_users(client, headers, session_maker):
    await _seed_workouts(session_maker, USER_ID, [5], pending=3)
    await _seed_workouts(session_maker, OTHER_USER_ID, [0, 1, 2, 3])
    data = (await client.get("/api/v1/streak", headers=headers)).json()
    assert data["current_streak"] == 0
    assert data["best_streak"] == 1


async def test_streak_uses_profile_timezone(client, headers, session_maker):
    async with session_maker() as session:
        session.add(Profile(id=USER_ID, username="alex", timezone="Asia/Tokyo", available_equipment=[]))
        await session.commit()
    data = (await client.get("/api/v1/streak", headers=headers)).json()
    assert data["timezone"] == "Asia/Tokyo"


async def test_dashboard_summary(client, headers, session_maker):
    await _seed_workouts(session_maker, USER_ID, [0, 1, 3, 20], pending=1)
    today = _utc_now().date()
    first = today.replace(day=1)
    async with session_maker() as session:
        session.add(Profile(id=USER_ID, full_name="Alex Morgan", available_equipment=[]))
        session.add(Goal(user_id=USER_ID, title="Run 20k", start_date=first, end_date=first, completed=True))
        session.add(Goal(user_id=USER_ID, title="Squat 100", start_date=first, end_date=first))
        session.add(Goal(user_id=USER_ID, title="Stretch", start_date=first, end_date=first))
        # outside this month: not counted
        session.add(
            Goal(user_id=USER_ID, title="Old", start_date=date(2000, 1, 1), end_date=date(2000, 1, 31), completed=True)
        )
        await session.commit()

    response = await client.get("/api/v1/dashboard", headers=headers)
    assert response.status_code == 200
    data = response.json()
    assert data["first_name"] == "Alex"
    assert data["total_workouts"] == 4
    assert data["weekly_workouts"] == 3
    assert data["goals_total"] == 3
    assert data["goals_completed"] == 1
    assert data["goal_success_rate"] == 33
    assert data["progress_percent"] == 33
    assert data["active_streak"] == 2
    assert data["personal_best"] == 2
    assert len(data["recent_workouts"]) == 5


async def test_dashboard_for_new_user(client, headers):
    data = (await client.get("/api/v1/dashboard", headers=headers)).json()
    assert data["first_name"] == "User"
    assert data["total_workouts"] == 0
    assert data["goal_success_rate"] == 0
    assert data["active_streak"] == 0
    assert data["personal_best"] == 0
    assert data["recent_workouts"] == []


@pytest.mark.parametrize("path", ["/api/v1/dashboard", "/api/v1/streak"])
async def test_rejects_token_for_wrong_audience(client, path):
    response = await client.get(path, headers=auth_headers(aud="anon"))
    assert response.status_code == 401
