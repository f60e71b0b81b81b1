"""Workout catalog and session schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from schemas.enums import Difficulty, WorkoutStatus
from utils.helpers import utcnow


class WorkoutCategory(BaseModel):
    id: str
    name: str
    icon: str
    color: str
    description: str


class Exercise(BaseModel):
    """Catalog exercise."""
    id: str = Field(..., description="Exercise identifier")
    name: str = Field(..., description="Exercise name")
    category: str = Field(..., description="Workout category id")
    muscle_group: str = Field(..., description="Primary muscle group")
    equipment: str = Field(..., description="Required equipment")
    difficulty: Difficulty = Field(..., description="Difficulty level")
    calories_per_min: float = Field(..., description="Estimated calories burned per minute")
    instructions: str = Field(..., description="How to perform the exercise")


class PlanItem(BaseModel):
    """One exercise slot of a workout: sets, reps and rest."""
    exercise_id: str = Field(..., description="Catalog exercise identifier")
    sets: int = Field(..., ge=1, description="Number of sets")
    reps: int = Field(..., ge=1, description="Repetitions (or seconds for timed holds)")
    rest_seconds: int = Field(0, ge=0, description="Rest between sets")


class ResolvedPlanItem(PlanItem):
    exercise: Optional[Exercise] = None


class WorkoutTemplate(BaseModel):
    """Catalog workout template."""
    id: str
    name: str
    category: str
    duration: int = Field(..., description="Expected duration in minutes")
    difficulty: Difficulty
    calories: int = Field(..., description="Estimated calories burned")
    exercises: List[PlanItem]


class PopulatedWorkoutTemplate(WorkoutTemplate):
    exercises: List[ResolvedPlanItem]


class SetData(BaseModel):
    """A set reported by the client."""
    reps: Optional[int] = Field(None, ge=0)
    weight: Optional[float] = Field(None, ge=0, description="Load in kg")
    duration: Optional[int] = Field(None, ge=0, description="Set duration in seconds")


class SetRecord(SetData):
    timestamp: datetime = Field(default_factory=utcnow)


class SessionExercise(ResolvedPlanItem):
    completed: bool = False
    sets_completed: List[SetRecord] = Field(default_factory=list)


class WorkoutSession(BaseModel):
    """A user's run through a workout template or a custom list of exercises."""
    id: str = Field(..., description="Session identifier")
    user_id: str = Field(..., description="Owning user")
    workout_id: Optional[str] = Field(None, description="Template identifier, None for custom workouts")
    workout_name: str = Field(..., description="Template name or 'Custom Workout'")
    exercises: List[SessionExercise] = Field(default_factory=list)
    status: WorkoutStatus = Field(WorkoutStatus.ACTIVE)
    current_exercise_index: int = 0
    total_duration: int = Field(0, description="Elapsed time in seconds")
    calories_burned: int = 0
    started_at: datetime = Field(default_factory=utcnow)
    updated_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    notes: Optional[str] = None
    rating: Optional[int] = None

    @property
    def is_terminal(self) -> bool:
        return self.status in (WorkoutStatus.COMPLETED, WorkoutStatus.CANCELLED)


class StartWorkoutRequest(BaseModel):
    """Body of ``POST /api/workouts/start``."""
    user_id: Optional[str] = Field(None, description="Must match the authenticated user when given")
    workout_id: Optional[str] = Field(None, description="Template to run")
    custom_exercises: Optional[List[PlanItem]] = Field(None, description="Exercises for a custom workout")


class SessionUpdateRequest(BaseModel):
    """Body of ``PUT /api/workouts/session/{session_id}``."""
    exercise_index: Optional[int] = Field(None, ge=0)
    set_data: Optional[SetData] = None
    completed: Optional[bool] = None
    duration: Optional[int] = Field(None, ge=0, description="Elapsed time in seconds")


class CompleteWorkoutRequest(BaseModel):
    duration: Optional[int] = Field(None, ge=0, description="Elapsed time in seconds")
    notes: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
