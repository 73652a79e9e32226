"""Goal schemas."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class GoalBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    start_date: date
    end_date: date
    completed: bool = False


class GoalCreate(GoalBase):
    @model_validator(mode="after")
    def _window_order(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class GoalUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    start_date: date | None = None
    end_date: date | None = None
    completed: bool | None = None

    @field_validator("title", "start_date", "end_date", "completed", mode="before")
    @classmethod
    def _not_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class GoalRead(GoalBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID
    created_at: datetime
