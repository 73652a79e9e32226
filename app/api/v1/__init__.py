"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    chat,
    dashboard,
    generation,
    goals,
    health,
    profile,
    streak,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
api_router.include_router(generation.router, prefix="/workouts", tags=["generation"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(goals.router, prefix="/goals", tags=["goals"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(streak.router, prefix="/streak", tags=["streak"])
api_router.include_router(chat.router, prefix="/chat", tags=["chat"])
