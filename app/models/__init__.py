"""ORM models - import all so Base.metadata is complete for migrations."""

from app.models.goal import Goal
from app.models.profile import Profile
from app.models.workout import Workout

__all__ = [
    "Goal",
    "Profile",
    "Workout",
]
