"""Profile schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from app.core.enums import FitnessLevel
from app.services.avatars import get_avatar_emoji

Gender = Literal["male", "female", "other", "not_specified"]
WorkoutLocation = Literal["home", "gym", "outdoors"]


class ProfileUpdate(BaseModel):
    username: Optional[str] = Field(None, max_length=100)
    full_name: Optional[str] = Field(None, max_length=255)
    avatar_id: Optional[str] = Field(None, max_length=50)
    fitness_level: Optional[FitnessLevel] = None
    age: Optional[int] = Field(None, ge=10, le=120)
    gender: Optional[Gender] = None
    height: Optional[float] = Field(None, gt=50, lt=300, description="Height in centimetres")
    weight: Optional[float] = Field(None, gt=20, lt=400, description="Body weight in kg")
    fitness_goals: Optional[str] = None
    workout_duration: Optional[int] = Field(None, ge=5, le=240)
    exercises_per_workout: Optional[int] = Field(None, ge=1, le=30)
    workout_location: Optional[WorkoutLocation] = None
    available_equipment: Optional[list[str]] = None
    health_limitations: Optional[str] = None
    timezone: Optional[str] = Field(None, max_length=64, description="IANA zone, e.g. America/New_York")

    @field_validator(
        "fitness_level",
        "gender",
        "workout_duration",
        "exercises_per_workout",
        "workout_location",
        "available_equipment",
        mode="before",
    )
    @classmethod
    def _not_null(cls, v):
        # columns are NOT NULL; omit the field to leave it unchanged
        if v is None:
            raise ValueError("may be omitted but not null")
        return v

    @field_validator("timezone")
    @classmethod
    def _known_zone(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v


class ProfileRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: Optional[str] = None
    full_name: Optional[str] = None
    avatar_id: Optional[str] = None
    fitness_level: str
    age: Optional[int] = None
    gender: str
    height: Optional[float] = None
    weight: Optional[float] = None
    fitness_goals: Optional[str] = None
    workout_duration: int
    exercises_per_workout: int
    workout_location: str
    available_equipment: list[str] = []
    health_limitations: Optional[str] = None
    timezone: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def avatar_emoji(self) -> str:
        return get_avatar_emoji(self.avatar_id)


class AvatarRead(BaseModel):
    id: str
    emoji: str
    label: str
