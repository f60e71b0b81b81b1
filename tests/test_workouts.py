"""
Tests for the Workout API routes.

Tests cover:
- Public catalog endpoints
- Session start, update, complete and cancel
- History and active session lookups
- Streak bookkeeping
"""

from datetime import datetime, timedelta, timezone

import pytest

from schemas.user import UserStats
from services.workout_service import update_streak


# ============================================================================
# Helpers
# ============================================================================

@pytest.fixture
def session(client, registered):
    """An active session started from the Full Body Strength template."""
    response = client.post("/api/workouts/start", json={"workout_id": "wt1"}, headers=registered["headers"])
    assert response.status_code == 200, response.text
    return response.json()["data"]["session"]


# ============================================================================
# Catalog
# ============================================================================

class TestCatalog:
    """Tests for the public workout catalog."""

    def test_categories(self, client):
        response = client.get("/api/workouts/categories")

        assert response.status_code == 200
        ids = [c["id"] for c in response.json()["data"]["categories"]]
        assert ids == ["strength", "cardio", "yoga", "hiit", "core", "stretching"]

    def test_exercises_filtered(self, client):
        response = client.get("/api/workouts/exercises", params={"category": "strength", "muscle_group": "back"})

        exercises = response.json()["data"]["exercises"]
        assert exercises
        assert all(e["category"] == "strength" and e["muscle_group"] == "back" for e in exercises)

    def test_invalid_difficulty(self, client):
        response = client.get("/api/workouts/exercises", params={"difficulty": "impossible"})

        assert response.status_code == 400

    def test_templates_have_resolved_exercises(self, client):
        response = client.get("/api/workouts/")

        workouts = response.json()["data"]["workouts"]
        assert len(workouts) == 8
        assert workouts[0]["exercises"][0]["exercise"]["name"] == "Barbell Squat"

    def test_by_category(self, client):
        response = client.get("/api/workouts/category/strength")

        workouts = response.json()["data"]["workouts"]
        assert workouts
        assert response.json()["data"]["category"]["id"] == "strength"
        assert {w["category"] for w in workouts} == {"strength"}

    def test_unknown_category_is_empty(self, client):
        response = client.get("/api/workouts/category/juggling")

        assert response.status_code == 200
        assert response.json()["data"]["workouts"] == []
        assert response.json()["data"]["category"] is None

    def test_get_workout(self, client):
        response = client.get("/api/workouts/wt1")

        assert response.status_code == 200
        assert response.json()["data"]["workout"]["name"] == "Full Body Strength"

    def test_unknown_workout(self, client):
        response = client.get("/api/workouts/nope")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Workout not found"}


# ============================================================================
# Session lifecycle
# ============================================================================

class TestStartWorkout:
    """Tests for POST /api/workouts/start."""

    def test_start_from_template(self, session, registered):
        assert session["status"] == "active"
        assert session["user_id"] == registered["user"]["id"]
        assert session["workout_name"] == "Full Body Strength"
        assert len(session["exercises"]) == 5
        assert session["current_exercise_index"] == 0

    def test_start_custom_workout(self, client, registered):
        response = client.post(
            "/api/workouts/start",
            json={"custom_exercises": [{"exercise_id": "ex1", "sets": 3, "reps": 5}]},
            headers=registered["headers"],
        )

        assert response.status_code == 200
        session = response.json()["data"]["session"]
        assert session["workout_id"] is None
        assert session["exercises"][0]["exercise"]["id"] == "ex1"

    def test_start_unknown_template(self, client, registered):
        response = client.post("/api/workouts/start", json={"workout_id": "wt99"}, headers=registered["headers"])

        assert response.status_code == 404

    def test_start_without_source(self, client, registered):
        response = client.post("/api/workouts/start", json={}, headers=registered["headers"])

        assert response.status_code == 400

    def test_second_active_session_conflicts(self, client, registered, session):
        response = client.post("/api/workouts/start", json={"workout_id": "wt2"}, headers=registered["headers"])

        assert response.status_code == 409

    def test_start_requires_token(self, client):
        response = client.post("/api/workouts/start", json={"workout_id": "wt1"})

        assert response.status_code == 401

    def test_start_for_other_user_forbidden(self, client, registered, other_user):
        response = client.post(
            "/api/workouts/start",
            json={"workout_id": "wt1", "user_id": other_user["user"]["id"]},
            headers=registered["headers"],
        )

        assert response.status_code == 403


class TestUpdateSession:
    """Tests for PUT /api/workouts/session/{id}."""

    def test_log_sets_and_complete_exercise(self, client, registered, session):
        url = f"/api/workouts/session/{session['id']}"
        headers = registered["headers"]
        client.put(url, json={"exercise_index": 0, "set_data": {"reps": 10, "weight": 60}}, headers=headers)

        response = client.put(
            url,
            json={"exercise_index": 0, "set_data": {"reps": 8, "weight": 60}, "completed": True, "duration": 300},
            headers=headers,
        )

        assert response.status_code == 200
        updated = response.json()["data"]["session"]
        assert len(updated["exercises"][0]["sets_completed"]) == 2
        assert updated["exercises"][0]["completed"] is True
        assert updated["current_exercise_index"] == 1
        assert updated["total_duration"] == 300
        # Barbell Squat burns 8 kcal/min, two sets at two minutes each
        assert updated["calories_burned"] == 32

    def test_exercise_index_out_of_range(self, client, registered, session):
        response = client.put(
            f"/api/workouts/session/{session['id']}", json={"exercise_index": 42}, headers=registered["headers"]
        )

        assert response.status_code == 400

    def test_update_other_users_session(self, client, other_user, session):
        response = client.put(f"/api/workouts/session/{session['id']}", json={"duration": 10},
                              headers=other_user["headers"])

        assert response.status_code == 403

    def test_update_unknown_session(self, client, registered):
        response = client.put("/api/workouts/session/missing", json={"duration": 10}, headers=registered["headers"])

        assert response.status_code == 404


class TestCompleteAndCancel:
    """Tests for the terminal transitions."""

    def test_complete_then_cancel_conflicts(self, client, registered, session):
        headers = registered["headers"]

        completed = client.post(f"/api/workouts/{session['id']}/complete",
                                json={"duration": 1200, "rating": 4, "notes": "Good"}, headers=headers)
        cancelled = client.delete(f"/api/workouts/{session['id']}/cancel", headers=headers)

        assert completed.status_code == 200
        data = completed.json()["data"]
        assert data["session"]["status"] == "completed"
        assert data["session"]["rating"] == 4
        assert data["session"]["calories_burned"] == 160
        assert data["stats"]["total_workouts"] == 1
        assert cancelled.status_code == 409

    def test_cancel_then_complete_conflicts(self, client, registered, session):
        headers = registered["headers"]

        cancelled = client.delete(f"/api/workouts/{session['id']}/cancel", headers=headers)
        completed = client.post(f"/api/workouts/{session['id']}/complete", json={}, headers=headers)

        assert cancelled.status_code == 200
        assert cancelled.json()["data"]["session"]["status"] == "cancelled"
        assert completed.status_code == 409

    def test_complete_twice_conflicts(self, client, registered, session):
        headers = registered["headers"]
        client.post(f"/api/workouts/{session['id']}/complete", json={}, headers=headers)

        response = client.post(f"/api/workouts/{session['id']}/complete", json={}, headers=headers)

        assert response.status_code == 409

    def test_update_after_complete_conflicts(self, client, registered, session):
        headers = registered["headers"]
        client.post(f"/api/workouts/{session['id']}/complete", json={}, headers=headers)

        response = client.put(f"/api/workouts/session/{session['id']}", json={"duration": 5}, headers=headers)

        assert response.status_code == 409

    def test_invalid_rating(self, client, registered, session):
        response = client.post(f"/api/workouts/{session['id']}/complete", json={"rating": 9},
                               headers=registered["headers"])

        assert response.status_code == 400

    def test_new_session_after_cancel(self, client, registered, session):
        headers = registered["headers"]
        client.delete(f"/api/workouts/{session['id']}/cancel", headers=headers)

        response = client.post("/api/workouts/start", json={"workout_id": "wt2"}, headers=headers)

        assert response.status_code == 200


class TestHistory:
    """Tests for history and active session lookups."""

    def test_history_newest_first(self, client, registered):
        user_id = registered["user"]["id"]
        headers = registered["headers"]
        ids = []
        for workout_id in ("wt1", "wt2", "wt3"):
            started = client.post("/api/workouts/start", json={"workout_id": workout_id}, headers=headers)
            session_id = started.json()["data"]["session"]["id"]
            client.post(f"/api/workouts/{session_id}/complete", json={}, headers=headers)
            ids.append(session_id)

        response = client.get(f"/api/workouts/user/{user_id}/history", params={"limit": 2}, headers=headers)

        data = response.json()["data"]
        assert data["total"] == 3
        assert data["has_more"] is True
        assert [s["id"] for s in data["history"]] == ids[::-1][:2]

    def test_active_session(self, client, registered, session):
        user_id = registered["user"]["id"]

        response = client.get(f"/api/workouts/user/{user_id}/active", headers=registered["headers"])

        assert response.json()["data"]["session"]["id"] == session["id"]

    def test_no_active_session(self, client, registered):
        user_id = registered["user"]["id"]

        response = client.get(f"/api/workouts/user/{user_id}/active", headers=registered["headers"])

        assert response.status_code == 200
        assert response.json()["data"]["session"] is None

    def test_history_of_other_user_forbidden(self, client, registered, other_user):
        response = client.get(f"/api/workouts/user/{other_user['user']['id']}/history",
                              headers=registered["headers"])

        assert response.status_code == 403


class TestUpdateStreak:
    """Unit tests for update_streak."""

    def test_first_workout(self):
        stats = UserStats()

        update_streak(stats, datetime(2026, 3, 1, 8, tzinfo=timezone.utc))

        assert stats.current_streak == 1
        assert stats.longest_streak == 1

    def test_same_day_keeps_streak(self):
        first = datetime(2026, 3, 1, 8, tzinfo=timezone.utc)
        stats = UserStats(current_streak=3, longest_streak=3, last_workout_date=first)

        update_streak(stats, first + timedelta(hours=6))

        assert stats.current_streak == 3

    def test_consecutive_day_increments(self):
        first = datetime(2026, 3, 1, 8, tzinfo=timezone.utc)
        stats = UserStats(current_streak=3, longest_streak=3, last_workout_date=first)

        update_streak(stats, first + timedelta(days=1))

        assert stats.current_streak == 4
        assert stats.longest_streak == 4

    def test_gap_resets(self):
        first = datetime(2026, 3, 1, 8, tzinfo=timezone.utc)
        stats = UserStats(current_streak=5, longest_streak=5, last_workout_date=first)

        update_streak(stats, first + timedelta(days=3))

        assert stats.current_streak == 1
        assert stats.longest_streak == 5
