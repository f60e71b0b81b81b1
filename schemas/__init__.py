"""Request and record schemas grouped by area."""

from schemas.enums import (
    ActivityLevel,
    Difficulty,
    FitnessGoal,
    Gender,
    MealCategory,
    SubscriptionPlan,
    WorkoutStatus,
)
from schemas.user import HealthAssessment, User, UserProfile, UserStats
from schemas.workout import Exercise, WorkoutSession, WorkoutTemplate
from schemas.diet_log import Meal, MealLogEntry, WaterLogEntry

__all__ = [
    "ActivityLevel",
    "Difficulty",
    "FitnessGoal",
    "Gender",
    "MealCategory",
    "SubscriptionPlan",
    "WorkoutStatus",
    "HealthAssessment",
    "User",
    "UserProfile",
    "UserStats",
    "Exercise",
    "WorkoutSession",
    "WorkoutTemplate",
    "Meal",
    "MealLogEntry",
    "WaterLogEntry",
]
