"""Workout catalog and session routes.

The catalog is public. Session routes require a session token and only act
on the caller's own sessions.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import ensure_owner, get_current_user, get_workout_service
from models import catalog
from schemas.enums import Difficulty
from schemas.user import User
from schemas.workout import CompleteWorkoutRequest, SessionUpdateRequest, StartWorkoutRequest
from services.workout_service import WorkoutService
from utils.exceptions import NotFoundError
from utils.helpers import format_response
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/workouts", tags=["workouts"])


# ---------------------------
# Catalog
# ---------------------------

@router.get("/categories")
def get_categories():
    return format_response(data={"categories": [c.model_dump() for c in catalog.WORKOUT_CATEGORIES]})


@router.get("/exercises")
def get_exercises(
    category: Optional[str] = Query(None, description="Category id, e.g. strength"),
    muscle_group: Optional[str] = Query(None, description="Muscle group, e.g. chest"),
    difficulty: Optional[Difficulty] = Query(None, description="Difficulty level"),
):
    exercises = catalog.filter_exercises(category, muscle_group, difficulty.value if difficulty else None)
    return format_response(data={"exercises": [e.model_dump(mode="json") for e in exercises]})


@router.get("/")
def get_workouts(
    category: Optional[str] = Query(None, description="Category id"),
    difficulty: Optional[Difficulty] = Query(None, description="Difficulty level"),
):
    """Workout templates with their exercises resolved."""
    templates = catalog.filter_templates(category, difficulty.value if difficulty else None)
    workouts = [catalog.populate_template(t).model_dump(mode="json") for t in templates]
    return format_response(data={"workouts": workouts})


@router.get("/category/{category}")
def get_workouts_by_category(category: str):
    """Templates of one category; an unknown category yields no workouts."""
    found = catalog.get_category(category)
    templates = catalog.filter_templates(category)
    workouts = [catalog.populate_template(t).model_dump(mode="json") for t in templates]
    return format_response(data={
        "category": found.model_dump() if found else None,
        "workouts": workouts,
    })


# ---------------------------
# Sessions
# ---------------------------

@router.post("/start")
def start_workout(
    request: StartWorkoutRequest,
    current_user: User = Depends(get_current_user),
    workout_service: WorkoutService = Depends(get_workout_service),
):
    """Open a session from a template or a custom exercise list."""
    ensure_owner(current_user, request.user_id)
    session = workout_service.start(current_user, request)
    return format_response(data={"session": session.model_dump(mode="json")}, message="Workout started")


@router.put("/session/{session_id}")
def update_session(
    session_id: str,
    request: SessionUpdateRequest,
    current_user: User = Depends(get_current_user),
    workout_service: WorkoutService = Depends(get_workout_service),
):
    session = workout_service.update(session_id, current_user, request)
    return format_response(data={"session": session.model_dump(mode="json")})


@router.get("/user/{user_id}/history")
def get_history(
    user_id: str,
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    current_user: User = Depends(get_current_user),
    workout_service: WorkoutService = Depends(get_workout_service),
):
    """Completed sessions, newest first."""
    ensure_owner(current_user, user_id)
    return format_response(data=workout_service.get_history(user_id, limit, offset))


@router.get("/user/{user_id}/active")
def get_active_session(
    user_id: str,
    current_user: User = Depends(get_current_user),
    workout_service: WorkoutService = Depends(get_workout_service),
):
    ensure_owner(current_user, user_id)
    session = workout_service.get_active_session(user_id)
    return format_response(data={"session": session.model_dump(mode="json") if session else None})


@router.post("/{session_id}/complete")
def complete_workout(
    session_id: str,
    request: Optional[CompleteWorkoutRequest] = None,
    current_user: User = Depends(get_current_user),
    workout_service: WorkoutService = Depends(get_workout_service),
):
    session = workout_service.complete(session_id, current_user, request or CompleteWorkoutRequest())
    return format_response(
        data={"session": session.model_dump(mode="json"), "stats": current_user.stats.model_dump(mode="json")},
        message="Workout completed",
    )


@router.delete("/{session_id}/cancel")
def cancel_workout(
    session_id: str,
    current_user: User = Depends(get_current_user),
    workout_service: WorkoutService = Depends(get_workout_service),
):
    session = workout_service.cancel(session_id, current_user)
    return format_response(data={"session": session.model_dump(mode="json")}, message="Workout cancelled")


@router.get("/{workout_id}")
def get_workout(workout_id: str):
    workout = catalog.get_workout_with_exercises(workout_id)
    if workout is None:
        raise NotFoundError("Workout not found")
    return format_response(data={"workout": workout.model_dump(mode="json")})
