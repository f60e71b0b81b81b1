"""User record and profile schemas."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.enums import ActivityLevel, FitnessGoal, Gender, SubscriptionPlan
from utils.helpers import utcnow


class UserProfile(BaseModel):
    """Profile fields, mostly filled in by the health assessment."""
    avatar: Optional[str] = Field(None, description="Avatar URL")
    age: Optional[int] = Field(None, description="Age in years")
    gender: Optional[Gender] = Field(None, description="Gender used for the BMR formula")
    height: Optional[float] = Field(None, description="Height in cm")
    weight: Optional[float] = Field(None, description="Weight in kg")
    activity_level: Optional[ActivityLevel] = Field(None, description="Activity level")
    fitness_goal: Optional[FitnessGoal] = Field(None, description="Fitness goal")
    target_weight: Optional[float] = Field(None, description="Goal weight in kg")
    medical_conditions: List[str] = Field(default_factory=list, description="Known medical conditions")
    allergies: List[str] = Field(default_factory=list, description="Food allergies")
    dietary_restrictions: List[str] = Field(default_factory=list, description="Dietary restrictions")
    bmi: Optional[float] = Field(None, description="Body Mass Index")
    tdee: Optional[int] = Field(None, description="Total daily energy expenditure in kcal")
    daily_calorie_goal: Optional[int] = Field(None, description="Daily calorie target in kcal")


class UserStats(BaseModel):
    """Lifetime workout statistics."""
    total_workouts: int = 0
    total_minutes: int = 0
    total_calories_burned: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    last_workout_date: Optional[datetime] = None


class User(BaseModel):
    """User record as held by the store."""
    id: str = Field(..., description="Unique user identifier")
    email: str = Field(..., description="Login email, stored lower-case")
    name: str = Field(..., description="Display name")
    password_hash: str = Field(..., description="bcrypt hash of the password")
    subscription_plan: SubscriptionPlan = Field(SubscriptionPlan.FREE, description="Subscription tier")
    is_onboarded: bool = Field(False, description="Whether the health assessment was completed")
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: Optional[datetime] = None
    profile: UserProfile = Field(default_factory=UserProfile)
    stats: UserStats = Field(default_factory=UserStats)

    def public(self) -> Dict[str, Any]:
        """JSON-ready representation without the password hash."""
        return self.model_dump(mode="json", exclude={"password_hash"})


class ProfileFieldsUpdate(BaseModel):
    """Partial profile update; only the fields sent are merged."""
    model_config = ConfigDict(extra="forbid")

    avatar: Optional[str] = None
    age: Optional[int] = Field(None, ge=1, le=120)
    gender: Optional[Gender] = None
    height: Optional[float] = Field(None, gt=0)
    weight: Optional[float] = Field(None, gt=0)
    activity_level: Optional[ActivityLevel] = None
    fitness_goal: Optional[FitnessGoal] = None
    target_weight: Optional[float] = Field(None, gt=0)
    medical_conditions: Optional[List[str]] = None
    allergies: Optional[List[str]] = None
    dietary_restrictions: Optional[List[str]] = None
    daily_calorie_goal: Optional[int] = Field(None, gt=0)


class ProfileUpdateRequest(BaseModel):
    """Body of ``PUT /api/users/{id}``."""
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1)
    profile: Optional[ProfileFieldsUpdate] = None


class HealthAssessmentRequest(BaseModel):
    """Health and fitness intake submitted during onboarding."""
    user_id: Optional[str] = Field(None, description="Must match the authenticated user when given")
    age: Optional[int] = Field(None, ge=1, le=120)
    gender: Optional[Gender] = None
    height: Optional[float] = Field(None, gt=0, description="Height in cm")
    weight: Optional[float] = Field(None, gt=0, description="Weight in kg")
    target_weight: Optional[float] = Field(None, gt=0, description="Goal weight in kg")
    activity_level: Optional[ActivityLevel] = None
    fitness_goal: Optional[FitnessGoal] = None
    medical_conditions: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    dietary_restrictions: List[str] = Field(default_factory=list)


class HealthAssessment(BaseModel):
    """Stored health assessment; one per user."""
    id: str
    user_id: str
    age: Optional[int] = None
    gender: Optional[Gender] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    target_weight: Optional[float] = None
    activity_level: Optional[ActivityLevel] = None
    fitness_goal: Optional[FitnessGoal] = None
    medical_conditions: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    dietary_restrictions: List[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
