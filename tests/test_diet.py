"""Tests for the diet routes: catalog, meal and water logs, progress and plans."""

from datetime import date, timedelta

import pytest

from services.diet_service import DietService, macro_goals
from utils.helpers import today


@pytest.fixture
def diet_url(registered):
    return f"/api/diet/{registered['user']['id']}"


class TestMealCatalog:
    """Tests for GET /api/diet/meals."""

    def test_all_meals(self, client):
        response = client.get("/api/diet/meals")

        assert response.status_code == 200
        assert len(response.json()["data"]["meals"]) == 20

    def test_filter_by_category(self, client):
        response = client.get("/api/diet/meals", params={"category": "snack"})

        meals = response.json()["data"]["meals"]
        assert len(meals) == 5
        assert {m["category"] for m in meals} == {"snack"}


class TestDietPlan:
    """Tests for GET /api/diet/{user_id}."""

    def test_default_plan(self, client, registered, diet_url):
        response = client.get(diet_url, headers=registered["headers"])

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["macro_goals"]["calories"] == 2000
        assert len(data["week_plan"]) == 7
        assert data["today_plan"] == data["week_plan"][0]
        assert data["today_plan"]["meals"]["breakfast"]["id"] == "meal1"
        assert data["week_plan"][1]["meals"]["lunch"]["id"] == "meal7"

    def test_plan_follows_fitness_goal(self, client, registered, diet_url):
        client.post(
            "/api/users/health-assessment",
            json={"age": 30, "gender": "male", "height": 180, "weight": 80, "activity_level": "moderate",
                  "fitness_goal": "lose_weight"},
            headers=registered["headers"],
        )

        response = client.get(diet_url, headers=registered["headers"])

        goals = response.json()["data"]["macro_goals"]
        assert goals["calories"] == 2259
        assert goals == {**macro_goals(2259, (0.35, 0.35, 0.30)), "fiber": 30, "water": 8}

    def test_requires_token(self, client, diet_url):
        response = client.get(diet_url)

        assert response.status_code == 401


class TestMealLog:
    """Tests for logging, reading and deleting meals."""

    def test_log_catalog_meal(self, client, registered, diet_url):
        response = client.post(f"{diet_url}/log-meal", json={"meal_id": "meal1", "servings": 2},
                               headers=registered["headers"])

        assert response.status_code == 200
        entry = response.json()["data"]["entry"]
        assert entry["calories"] == 700
        assert entry["protein"] == 24
        assert entry["meal_type"] == "breakfast"
        assert entry["date"] == today().isoformat()

    def test_log_custom_meal(self, client, registered, diet_url):
        response = client.post(
            f"{diet_url}/log-meal",
            json={"custom_meal": {"name": "Banana", "calories": 105, "carbs": 27}, "meal_type": "snack"},
            headers=registered["headers"],
        )

        assert response.status_code == 200
        entry = response.json()["data"]["entry"]
        assert entry["meal"]["is_custom"] is True
        assert entry["calories"] == 105

    def test_unknown_meal(self, client, registered, diet_url):
        response = client.post(f"{diet_url}/log-meal", json={"meal_id": "meal999"}, headers=registered["headers"])

        assert response.status_code == 404
        assert response.json()["message"] == "Meal not found"

    def test_neither_meal_source(self, client, registered, diet_url):
        response = client.post(f"{diet_url}/log-meal", json={"servings": 1}, headers=registered["headers"])

        assert response.status_code == 400

    def test_both_meal_sources(self, client, registered, diet_url):
        response = client.post(
            f"{diet_url}/log-meal",
            json={"meal_id": "meal1", "custom_meal": {"name": "Toast", "calories": 100}},
            headers=registered["headers"],
        )

        assert response.status_code == 400

    def test_daily_log_totals(self, client, registered, diet_url):
        headers = registered["headers"]
        client.post(f"{diet_url}/log-meal", json={"meal_id": "meal1"}, headers=headers)
        client.post(f"{diet_url}/log-meal", json={"meal_id": "meal6"}, headers=headers)

        response = client.get(f"{diet_url}/log", headers=headers)

        data = response.json()["data"]
        assert len(data["log"]["meals"]) == 2
        assert data["log"]["totals"] == {"calories": 800, "protein": 54, "carbs": 78, "fat": 30, "fiber": 14}
        assert data["remaining"]["calories"] == 1200

    def test_log_meal_returns_day_totals(self, client, registered, diet_url):
        headers = registered["headers"]
        client.post(f"{diet_url}/log-meal", json={"meal_id": "meal1"}, headers=headers)

        response = client.post(f"{diet_url}/log-meal", json={"meal_id": "meal6"}, headers=headers)

        assert response.status_code == 200
        assert response.json()["data"]["totals"]["calories"] == 800

    def test_daily_log_for_other_date(self, client, registered, diet_url):
        headers = registered["headers"]
        yesterday = (today() - timedelta(days=1)).isoformat()
        client.post(f"{diet_url}/log-meal", json={"meal_id": "meal1", "date": yesterday}, headers=headers)

        today_log = client.get(f"{diet_url}/log", headers=headers).json()["data"]
        yesterday_log = client.get(f"{diet_url}/log", params={"date": yesterday}, headers=headers).json()["data"]

        assert today_log["log"]["meals"] == []
        assert len(yesterday_log["log"]["meals"]) == 1

    def test_delete_entry_removes_it_from_log(self, client, registered, diet_url):
        headers = registered["headers"]
        first = client.post(f"{diet_url}/log-meal", json={"meal_id": "meal1"}, headers=headers)
        client.post(f"{diet_url}/log-meal", json={"meal_id": "meal6"}, headers=headers)
        entry_id = first.json()["data"]["entry"]["id"]

        deleted = client.delete(f"{diet_url}/log/{entry_id}", headers=headers)
        log = client.get(f"{diet_url}/log", headers=headers).json()["data"]["log"]

        assert deleted.status_code == 200
        assert deleted.json()["data"]["totals"]["calories"] == 450
        assert entry_id not in [m["id"] for m in log["meals"]]
        assert log["totals"]["calories"] == 450

    def test_delete_missing_entry(self, client, registered, diet_url):
        response = client.delete(f"{diet_url}/log/missing", headers=registered["headers"])

        assert response.status_code == 404
        assert response.json()["message"] == "Entry not found"

    def test_log_meal_for_other_user_forbidden(self, client, registered, other_user):
        response = client.post(f"/api/diet/{other_user['user']['id']}/log-meal", json={"meal_id": "meal1"},
                               headers=registered["headers"])

        assert response.status_code == 403


class TestWaterLog:
    """Tests for the water routes."""

    def test_log_water(self, client, registered, diet_url):
        headers = registered["headers"]
        client.post(f"{diet_url}/log-water", json={"glasses": 2}, headers=headers)

        response = client.post(f"{diet_url}/log-water", json={}, headers=headers)

        water = response.json()["data"]["water"]
        assert water["glasses"] == 3
        assert water["goal"] == 8
        assert len(water["logs"]) == 2

    def test_get_water(self, client, registered, diet_url):
        headers = registered["headers"]
        client.post(f"{diet_url}/log-water", json={"glasses": 4}, headers=headers)

        response = client.get(f"{diet_url}/water", headers=headers)

        assert response.json()["data"]["water"]["glasses"] == 4

    def test_too_many_glasses(self, client, registered, diet_url):
        response = client.post(f"{diet_url}/log-water", json={"glasses": 50}, headers=registered["headers"])

        assert response.status_code == 400


class TestProgress:
    """Tests for GET /api/diet/{user_id}/progress."""

    def test_progress_sums_meals_of_a_day(self, client, registered, diet_url):
        headers = registered["headers"]
        client.post(f"{diet_url}/log-meal", json={"meal_id": "meal1"}, headers=headers)
        client.post(f"{diet_url}/log-meal", json={"meal_id": "meal6"}, headers=headers)
        client.post(f"{diet_url}/log-water", json={"glasses": 3}, headers=headers)

        response = client.get(f"{diet_url}/progress", headers=headers)

        data = response.json()["data"]
        assert len(data["progress"]) == 7
        latest = data["progress"][-1]
        assert latest["date"] == today().isoformat()
        assert latest["calories"] == 350 + 450
        assert latest["protein"] == 12 + 42
        assert latest["carbs"] == 58 + 20
        assert latest["fat"] == 8 + 22
        assert latest["fiber"] == 8 + 6
        assert latest["water"] == 3
        assert latest["meals_logged"] == 2
        assert data["progress"][0]["meals_logged"] == 0
        assert data["averages"]["calories"] == round(800 / 7)

    @pytest.mark.parametrize("days", [0, 91])
    def test_days_out_of_range(self, client, registered, diet_url, days):
        response = client.get(f"{diet_url}/progress", params={"days": days}, headers=registered["headers"])

        assert response.status_code == 400

    def test_service_progress_window(self, store, registered):
        service = DietService(store)
        end = date(2026, 5, 10)

        progress = service.get_progress(registered["user"]["id"], days=3, end=end)["progress"]

        assert [p["date"] for p in progress] == ["2026-05-08", "2026-05-09", "2026-05-10"]


class TestGeneratePlan:
    """Tests for POST /api/diet/{user_id}/generate-plan."""

    def test_prompt_uses_assessment(self, client, registered, diet_url):
        headers = registered["headers"]
        client.post(
            "/api/users/health-assessment",
            json={"age": 41, "height": 170, "weight": 90, "target_weight": 80, "allergies": ["shellfish"]},
            headers=headers,
        )

        response = client.post(f"{diet_url}/generate-plan", headers=headers)

        assert response.status_code == 200
        plan = response.json()["data"]["plan"]
        assert plan["status"] == "pending"
        assert "41" in plan["prompt"]
        assert "shellfish" in plan["prompt"]

    def test_prompt_without_assessment(self, client, registered, diet_url):
        response = client.post(f"{diet_url}/generate-plan", headers=registered["headers"])

        assert response.status_code == 200
        assert "not provided" in response.json()["data"]["plan"]["prompt"]
