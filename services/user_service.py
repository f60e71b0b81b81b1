"""Profile, health assessment and stats operations."""

from datetime import timedelta
from typing import Any, Dict, Optional

from models.store import InMemoryStore
from schemas.enums import ActivityLevel, FitnessGoal, Gender, WorkoutStatus
from schemas.user import (
    HealthAssessment,
    HealthAssessmentRequest,
    ProfileUpdateRequest,
    User,
)
from utils.exceptions import NotFoundError
from utils.helpers import utcnow
from utils.logger import setup_logger

logger = setup_logger(__name__)

ACTIVITY_MULTIPLIERS: Dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.55

# Daily calorie adjustment relative to TDEE
GOAL_CALORIE_ADJUSTMENTS: Dict[FitnessGoal, int] = {
    FitnessGoal.LOSE_WEIGHT: -500,
    FitnessGoal.GAIN_MUSCLE: 300,
    FitnessGoal.BUILD_MUSCLE: 300,
}


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    height_m = height_cm / 100
    return round(weight_kg / (height_m * height_m), 1)


def calculate_tdee(
    weight_kg: float,
    height_cm: float,
    age: int,
    gender: Gender,
    activity_level: Optional[ActivityLevel],
) -> int:
    """Total daily energy expenditure from the Mifflin-St Jeor BMR."""
    bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age
    bmr += 5 if gender == Gender.MALE else -161
    multiplier = ACTIVITY_MULTIPLIERS.get(activity_level, DEFAULT_ACTIVITY_MULTIPLIER)
    return round(bmr * multiplier)


def daily_calorie_goal(tdee: int, fitness_goal: Optional[FitnessGoal]) -> int:
    return tdee + GOAL_CALORIE_ADJUSTMENTS.get(fitness_goal, 0)


class UserService:
    """Reads and mutates user records held by the store."""

    def __init__(self, store: InMemoryStore):
        self.store = store

    def get_user(self, user_id: str) -> User:
        user = self.store.get_user(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def update_profile(self, user_id: str, update: ProfileUpdateRequest) -> User:
        user = self.get_user(user_id)
        if update.name is not None:
            user.name = update.name.strip()
        if update.profile is not None:
            changes = update.profile.model_dump(exclude_unset=True, exclude_none=True)
            user.profile = user.profile.model_copy(update=changes)
        user.updated_at = utcnow()
        self.store.save_user(user)
        logger.info(f"Updated profile for user {user_id}")
        return user

    def delete_user(self, user_id: str) -> None:
        if not self.store.delete_user(user_id):
            raise NotFoundError("User not found")

    def save_health_assessment(self, user_id: str, request: HealthAssessmentRequest) -> HealthAssessment:
        """Store the assessment, copy it onto the profile and derive calorie targets.

        A later save replaces the earlier one entirely.
        """
        user = self.get_user(user_id)
        data = request.model_dump(exclude={"user_id"})
        assessment = HealthAssessment(id=self.store.generate_id(), user_id=user_id, **data)
        self.store.save_health_assessment(assessment)

        profile = user.profile.model_copy(update=data)
        profile.bmi = None
        profile.tdee = None
        profile.daily_calorie_goal = None
        if request.height and request.weight:
            profile.bmi = calculate_bmi(request.weight, request.height)
        if request.age and request.gender and request.height and request.weight:
            profile.tdee = calculate_tdee(
                request.weight, request.height, request.age, request.gender, request.activity_level
            )
            profile.daily_calorie_goal = daily_calorie_goal(profile.tdee, request.fitness_goal)

        user.profile = profile
        user.is_onboarded = True
        user.updated_at = utcnow()
        self.store.save_user(user)
        logger.info(f"Saved health assessment for user {user_id}")
        return assessment

    def get_health_assessment(self, user_id: str) -> HealthAssessment:
        assessment = self.store.get_health_assessment(user_id)
        if assessment is None:
            raise NotFoundError("Health assessment not found")
        return assessment

    def get_stats(self, user_id: str) -> Dict[str, Any]:
        user = self.get_user(user_id)
        history = sorted(
            self.store.list_sessions(user_id, WorkoutStatus.COMPLETED),
            key=lambda s: s.completed_at,
            reverse=True,
        )
        week_ago = utcnow() - timedelta(days=7)
        weekly = [s for s in history if s.completed_at >= week_ago]

        return {
            "stats": user.stats.model_dump(mode="json"),
            "weekly_stats": {
                "workouts": len(weekly),
                "minutes": round(sum(s.total_duration for s in weekly) / 60),
                "calories": sum(s.calories_burned for s in weekly),
            },
            "recent_workouts": [s.model_dump(mode="json") for s in history[:5]],
        }
