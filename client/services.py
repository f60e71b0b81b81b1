"""One wrapper per API area, one method per route."""

from datetime import date
from typing import Any, Dict, List, Optional

from client.api_client import ApiClient, ApiResponse


def _iso(day: Optional[date]) -> Optional[str]:
    return day.isoformat() if day else None


class UserApi:
    def __init__(self, api: ApiClient):
        self.api = api

    def get_user(self, user_id: str) -> ApiResponse:
        return self.api.get(f"/api/users/{user_id}")

    def update_user(self, user_id: str, name: Optional[str] = None,
                    profile: Optional[Dict[str, Any]] = None) -> ApiResponse:
        body: Dict[str, Any] = {}
        if name is not None:
            body["name"] = name
        if profile is not None:
            body["profile"] = profile
        return self.api.put(f"/api/users/{user_id}", body)

    def delete_user(self, user_id: str) -> ApiResponse:
        return self.api.delete(f"/api/users/{user_id}")

    def save_health_assessment(self, assessment: Dict[str, Any]) -> ApiResponse:
        return self.api.post("/api/users/health-assessment", assessment)

    def get_health_assessment(self, user_id: str) -> ApiResponse:
        return self.api.get(f"/api/users/{user_id}/health-assessment")

    def get_stats(self, user_id: str) -> ApiResponse:
        return self.api.get(f"/api/users/{user_id}/stats")


class WorkoutApi:
    def __init__(self, api: ApiClient):
        self.api = api

    def get_categories(self) -> ApiResponse:
        return self.api.get("/api/workouts/categories")

    def get_exercises(self, category: Optional[str] = None, muscle_group: Optional[str] = None,
                      difficulty: Optional[str] = None) -> ApiResponse:
        return self.api.get(
            "/api/workouts/exercises",
            {"category": category, "muscle_group": muscle_group, "difficulty": difficulty},
        )

    def get_workouts(self, category: Optional[str] = None, difficulty: Optional[str] = None) -> ApiResponse:
        return self.api.get("/api/workouts/", {"category": category, "difficulty": difficulty})

    def get_workouts_by_category(self, category: str) -> ApiResponse:
        return self.api.get(f"/api/workouts/category/{category}")

    def get_workout(self, workout_id: str) -> ApiResponse:
        return self.api.get(f"/api/workouts/{workout_id}")

    def start(self, workout_id: Optional[str] = None,
              custom_exercises: Optional[List[Dict[str, Any]]] = None) -> ApiResponse:
        body: Dict[str, Any] = {}
        if workout_id:
            body["workout_id"] = workout_id
        if custom_exercises:
            body["custom_exercises"] = custom_exercises
        return self.api.post("/api/workouts/start", body)

    def update_session(self, session_id: str, **changes: Any) -> ApiResponse:
        return self.api.put(f"/api/workouts/session/{session_id}", changes)

    def complete(self, session_id: str, duration: Optional[int] = None, notes: Optional[str] = None,
                 rating: Optional[int] = None) -> ApiResponse:
        body = {"duration": duration, "notes": notes, "rating": rating}
        return self.api.post(
            f"/api/workouts/{session_id}/complete",
            {key: value for key, value in body.items() if value is not None},
        )

    def cancel(self, session_id: str) -> ApiResponse:
        return self.api.delete(f"/api/workouts/{session_id}/cancel")

    def get_history(self, user_id: str, limit: int = 20, offset: int = 0) -> ApiResponse:
        return self.api.get(f"/api/workouts/user/{user_id}/history", {"limit": limit, "offset": offset})

    def get_active(self, user_id: str) -> ApiResponse:
        return self.api.get(f"/api/workouts/user/{user_id}/active")


class DietApi:
    def __init__(self, api: ApiClient):
        self.api = api

    def get_meals(self, category: Optional[str] = None) -> ApiResponse:
        return self.api.get("/api/diet/meals", {"category": category})

    def get_diet_plan(self, user_id: str) -> ApiResponse:
        return self.api.get(f"/api/diet/{user_id}")

    def log_meal(self, user_id: str, meal_id: Optional[str] = None,
                 custom_meal: Optional[Dict[str, Any]] = None, meal_type: Optional[str] = None,
                 servings: float = 1, day: Optional[date] = None) -> ApiResponse:
        body = {
            "meal_id": meal_id,
            "custom_meal": custom_meal,
            "meal_type": meal_type,
            "servings": servings,
            "date": _iso(day),
        }
        return self.api.post(
            f"/api/diet/{user_id}/log-meal",
            {key: value for key, value in body.items() if value is not None},
        )

    def get_daily_log(self, user_id: str, day: Optional[date] = None) -> ApiResponse:
        return self.api.get(f"/api/diet/{user_id}/log", {"date": _iso(day)})

    def delete_entry(self, user_id: str, entry_id: str) -> ApiResponse:
        return self.api.delete(f"/api/diet/{user_id}/log/{entry_id}")

    def log_water(self, user_id: str, glasses: int = 1, day: Optional[date] = None) -> ApiResponse:
        body: Dict[str, Any] = {"glasses": glasses}
        if day:
            body["date"] = day.isoformat()
        return self.api.post(f"/api/diet/{user_id}/log-water", body)

    def get_water(self, user_id: str, day: Optional[date] = None) -> ApiResponse:
        return self.api.get(f"/api/diet/{user_id}/water", {"date": _iso(day)})

    def get_progress(self, user_id: str, days: int = 7) -> ApiResponse:
        return self.api.get(f"/api/diet/{user_id}/progress", {"days": days})

    def generate_plan(self, user_id: str) -> ApiResponse:
        return self.api.post(f"/api/diet/{user_id}/generate-plan")


class PaymentApi:
    def __init__(self, api: ApiClient):
        self.api = api

    def get_plans(self) -> ApiResponse:
        return self.api.get("/api/payments/plans")

    def subscribe(self, plan_id: str, payment_method: Optional[str] = None) -> ApiResponse:
        body = {"plan_id": plan_id}
        if payment_method:
            body["payment_method"] = payment_method
        return self.api.post("/api/payments/create-subscription", body)

    def get_subscription(self, user_id: str) -> ApiResponse:
        return self.api.get(f"/api/payments/subscription/{user_id}")

    def upgrade(self, plan_id: str) -> ApiResponse:
        return self.api.post("/api/payments/upgrade-plan", {"plan_id": plan_id})

    def cancel(self) -> ApiResponse:
        return self.api.post("/api/payments/cancel-subscription")

    def billing_history(self, user_id: str) -> ApiResponse:
        return self.api.get(f"/api/payments/billing-history/{user_id}")
