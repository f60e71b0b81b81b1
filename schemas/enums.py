"""Enums for record fields."""

from enum import Enum


class SubscriptionPlan(str, Enum):
    """User subscription tier."""
    FREE = "free"
    BASIC = "basic"
    STANDARD = "standard"
    PRO = "pro"
    PREMIUM = "premium"


class FitnessGoal(str, Enum):
    """Fitness goal chosen during the health assessment."""
    LOSE_WEIGHT = "lose_weight"
    GAIN_MUSCLE = "gain_muscle"
    BUILD_MUSCLE = "build_muscle"
    GET_FIT = "get_fit"
    MAINTAIN = "maintain"


class ActivityLevel(str, Enum):
    """Activity level used for the TDEE multiplier."""
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class WorkoutStatus(str, Enum):
    """Workout session state. Completed and cancelled are terminal."""
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class MealCategory(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
