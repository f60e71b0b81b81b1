"""Workout session lifecycle.

States: active -> completed | cancelled. Sessions are created active by
``start``; ``update`` only applies while active; completed and cancelled are
terminal and cannot be resumed.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from models import catalog
from models.store import InMemoryStore
from schemas.enums import WorkoutStatus
from schemas.user import User, UserStats
from schemas.workout import (
    CompleteWorkoutRequest,
    SessionExercise,
    SessionUpdateRequest,
    SetRecord,
    StartWorkoutRequest,
    WorkoutSession,
)
from utils.exceptions import ConflictError, ForbiddenError, NotFoundError, ValidationError
from utils.helpers import utcnow
from utils.logger import setup_logger

logger = setup_logger(__name__)

CUSTOM_WORKOUT_NAME = "Custom Workout"
MINUTES_PER_SET = 2
DEFAULT_CALORIES_PER_MIN = 5
FALLBACK_CALORIES_PER_MIN = 8


def estimate_calories(exercises: List[SessionExercise]) -> int:
    """Calories from logged sets, assuming two minutes per set."""
    total = 0.0
    for item in exercises:
        per_minute = item.exercise.calories_per_min if item.exercise else DEFAULT_CALORIES_PER_MIN
        total += per_minute * len(item.sets_completed) * MINUTES_PER_SET
    return round(total)


def update_streak(stats: UserStats, completed_at: datetime) -> None:
    """Advance the daily streak for a workout finished at ``completed_at``."""
    day = completed_at.date()
    last = stats.last_workout_date.date() if stats.last_workout_date else None

    if last == day:
        stats.current_streak = max(stats.current_streak, 1)
    elif last == day - timedelta(days=1):
        stats.current_streak += 1
    else:
        stats.current_streak = 1

    stats.longest_streak = max(stats.longest_streak, stats.current_streak)
    stats.last_workout_date = completed_at


class WorkoutService:
    """Starts, updates and finishes workout sessions."""

    def __init__(self, store: InMemoryStore):
        self.store = store

    def _get_session(self, session_id: str, user: User) -> WorkoutSession:
        session = self.store.get_session(session_id)
        if session is None:
            raise NotFoundError("Workout session not found")
        if session.user_id != user.id:
            raise ForbiddenError()
        return session

    def _require_active(self, session: WorkoutSession, action: str) -> None:
        if session.is_terminal:
            raise ConflictError(f"Cannot {action} a {session.status.value} workout session")

    def get_active_session(self, user_id: str) -> Optional[WorkoutSession]:
        return next(iter(self.store.list_sessions(user_id, WorkoutStatus.ACTIVE)), None)

    def start(self, user: User, request: StartWorkoutRequest) -> WorkoutSession:
        if self.get_active_session(user.id):
            raise ConflictError("Finish or cancel the active workout session first")

        if request.workout_id:
            template = catalog.get_workout_with_exercises(request.workout_id)
            if template is None:
                raise NotFoundError("Workout not found")
            name = template.name
            items = template.exercises
        elif request.custom_exercises:
            name = CUSTOM_WORKOUT_NAME
            items = catalog.resolve_plan(request.custom_exercises)
        else:
            raise ValidationError("Provide workout_id or custom_exercises")

        session = WorkoutSession(
            id=self.store.generate_id(),
            user_id=user.id,
            workout_id=request.workout_id,
            workout_name=name,
            exercises=[SessionExercise(**item.model_dump()) for item in items],
        )
        self.store.save_session(session)
        logger.info(f"User {user.id} started workout session {session.id} ({name})")
        return session

    def update(self, session_id: str, user: User, request: SessionUpdateRequest) -> WorkoutSession:
        session = self._get_session(session_id, user)
        self._require_active(session, "update")

        if request.exercise_index is not None:
            if request.exercise_index >= len(session.exercises):
                raise ValidationError("exercise_index is out of range")
            item = session.exercises[request.exercise_index]
            if request.set_data is not None:
                item.sets_completed.append(SetRecord(**request.set_data.model_dump()))
            if request.completed:
                item.completed = True
                session.current_exercise_index = request.exercise_index + 1

        if request.duration is not None:
            session.total_duration = request.duration

        session.calories_burned = estimate_calories(session.exercises)
        session.updated_at = utcnow()
        self.store.save_session(session)
        return session

    def complete(self, session_id: str, user: User, request: CompleteWorkoutRequest) -> WorkoutSession:
        session = self._get_session(session_id, user)
        self._require_active(session, "complete")

        for item in session.exercises:
            if item.sets_completed:
                item.completed = True

        now = utcnow()
        session.status = WorkoutStatus.COMPLETED
        session.completed_at = now
        session.updated_at = now
        if request.duration is not None:
            session.total_duration = request.duration
        session.notes = request.notes
        session.rating = request.rating

        minutes = session.total_duration / 60
        if not session.calories_burned:
            session.calories_burned = round(minutes * FALLBACK_CALORIES_PER_MIN)
        self.store.save_session(session)

        stats = user.stats
        stats.total_workouts += 1
        stats.total_minutes += round(minutes)
        stats.total_calories_burned += session.calories_burned
        update_streak(stats, now)
        self.store.save_user(user)

        logger.info(f"User {user.id} completed workout session {session.id}")
        return session

    def cancel(self, session_id: str, user: User) -> WorkoutSession:
        session = self._get_session(session_id, user)
        self._require_active(session, "cancel")

        now = utcnow()
        session.status = WorkoutStatus.CANCELLED
        session.cancelled_at = now
        session.updated_at = now
        self.store.save_session(session)
        logger.info(f"User {user.id} cancelled workout session {session.id}")
        return session

    def get_history(self, user_id: str, limit: int = 20, offset: int = 0) -> Dict[str, Any]:
        completed = sorted(
            self.store.list_sessions(user_id, WorkoutStatus.COMPLETED),
            key=lambda s: s.completed_at,
            reverse=True,
        )
        page = completed[offset:offset + limit]
        return {
            "history": [s.model_dump(mode="json") for s in page],
            "total": len(completed),
            "has_more": offset + len(page) < len(completed),
        }
