"""Shared enums for models and API."""

from enum import Enum


class FitnessLevel(str, Enum):
    """Self-reported training experience."""

    NOT_SPECIFIED = "not_specified"
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class PlanSource(str, Enum):
    """Which rung of the generation ladder produced a plan."""

    PRIMARY = "primary"  # Full prompt, primary model
    SIMPLIFIED = "simplified"  # Short prompt, fallback model
    STATIC = "static"  # Built-in plan, no LLM
