"""Dashboard and streak response schemas."""

from datetime import date

from pydantic import BaseModel

from app.schemas.workout import WorkoutRead


class StreakRead(BaseModel):
    current_streak: int
    best_streak: int
    last_completed_date: date | None = None
    timezone: str


class DashboardRead(BaseModel):
    first_name: str
    total_workouts: int
    weekly_workouts: int
    goals_completed: int
    goals_total: int
    goal_success_rate: int  # percent
    progress_percent: int
    active_streak: int
    personal_best: int
    recent_workouts: list[WorkoutRead] = []
