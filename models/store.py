"""In-memory record store.

Stands in for a database until a persistent backend is chosen. One store is
created per application instance (see ``api.main.create_app``) and handed to
request handlers through the ``get_store`` dependency. There is no locking:
concurrent writers on the same record race and the last write wins. Readers
iterate over a snapshot of a collection so inserts from other requests never
break an in-progress scan.
"""

from datetime import date
from typing import Dict, List, Optional

from schemas.diet_log import MealLogEntry, WaterLogEntry
from schemas.enums import WorkoutStatus
from schemas.user import HealthAssessment, User
from schemas.workout import WorkoutSession
from utils.helpers import generate_id
from utils.logger import setup_logger

logger = setup_logger(__name__)


class InMemoryStore:
    """Volatile key-value collections keyed by synthetic identifiers."""

    def __init__(self):
        self.users: Dict[str, User] = {}
        self.health_assessments: Dict[str, HealthAssessment] = {}
        self.workout_sessions: Dict[str, WorkoutSession] = {}
        self.meal_logs: Dict[str, MealLogEntry] = {}
        self.water_logs: Dict[str, WaterLogEntry] = {}

    @staticmethod
    def generate_id() -> str:
        return generate_id()

    # Users

    def save_user(self, user: User) -> User:
        self.users[user.id] = user
        return user

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def find_user_by_email(self, email: str) -> Optional[User]:
        email = email.lower()
        return next((user for user in list(self.users.values()) if user.email == email), None)

    def delete_user(self, user_id: str) -> bool:
        """Delete a user together with every record that references it."""
        if self.users.pop(user_id, None) is None:
            return False

        self.health_assessments.pop(user_id, None)
        for collection in (self.workout_sessions, self.meal_logs, self.water_logs):
            for record_id in [key for key, record in list(collection.items()) if record.user_id == user_id]:
                collection.pop(record_id, None)

        logger.info(f"Deleted user {user_id} and dependent records")
        return True

    # Health assessments

    def save_health_assessment(self, assessment: HealthAssessment) -> HealthAssessment:
        self.health_assessments[assessment.user_id] = assessment
        return assessment

    def get_health_assessment(self, user_id: str) -> Optional[HealthAssessment]:
        return self.health_assessments.get(user_id)

    # Workout sessions

    def save_session(self, session: WorkoutSession) -> WorkoutSession:
        self.workout_sessions[session.id] = session
        return session

    def get_session(self, session_id: str) -> Optional[WorkoutSession]:
        return self.workout_sessions.get(session_id)

    def list_sessions(self, user_id: str, status: Optional[WorkoutStatus] = None) -> List[WorkoutSession]:
        return [
            session for session in list(self.workout_sessions.values())
            if session.user_id == user_id and (status is None or session.status == status)
        ]

    # Meal log

    def add_meal_entry(self, entry: MealLogEntry) -> MealLogEntry:
        self.meal_logs[entry.id] = entry
        return entry

    def get_meal_entry(self, entry_id: str) -> Optional[MealLogEntry]:
        return self.meal_logs.get(entry_id)

    def list_meal_entries(self, user_id: str, day: date) -> List[MealLogEntry]:
        entries = [e for e in list(self.meal_logs.values()) if e.user_id == user_id and e.date == day]
        return sorted(entries, key=lambda e: e.logged_at)

    def delete_meal_entry(self, entry_id: str) -> bool:
        return self.meal_logs.pop(entry_id, None) is not None

    # Water log

    def add_water_entry(self, entry: WaterLogEntry) -> WaterLogEntry:
        self.water_logs[entry.id] = entry
        return entry

    def list_water_entries(self, user_id: str, day: date) -> List[WaterLogEntry]:
        entries = [e for e in list(self.water_logs.values()) if e.user_id == user_id and e.date == day]
        return sorted(entries, key=lambda e: e.logged_at)
