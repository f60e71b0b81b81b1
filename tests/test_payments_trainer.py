"""Tests for the subscription and trainer placeholder routes."""


class TestPlans:
    """Tests for GET /api/payments/plans."""

    def test_plans_are_public(self, client):
        response = client.get("/api/payments/plans")

        assert response.status_code == 200
        plans = response.json()["data"]["plans"]
        assert [(p["id"], p["price"]) for p in plans] == [
            ("basic", 9.99), ("standard", 19.99), ("pro", 29.99), ("premium", 49.99),
        ]
        assert plans[-1]["features"]["has_priority_support"] is True


class TestSubscriptions:
    """Tests for the subscription lifecycle."""

    def test_create_subscription_records_plan(self, client, registered):
        headers = registered["headers"]
        user_id = registered["user"]["id"]

        response = client.post("/api/payments/create-subscription",
                               json={"plan_id": "standard", "payment_method": "card"}, headers=headers)
        user = client.get(f"/api/users/{user_id}", headers=headers).json()["data"]["user"]

        assert response.status_code == 200
        subscription = response.json()["data"]["subscription"]
        assert subscription["status"] == "active"
        assert subscription["subscription_id"].startswith("sub_")
        assert user["subscription_plan"] == "standard"

    def test_create_free_subscription_rejected(self, client, registered):
        response = client.post("/api/payments/create-subscription", json={"plan_id": "free"},
                               headers=registered["headers"])

        assert response.status_code == 400

    def test_unknown_plan_rejected(self, client, registered):
        response = client.post("/api/payments/create-subscription", json={"plan_id": "gold"},
                               headers=registered["headers"])

        assert response.status_code == 400
        assert response.json()["message"].startswith("plan_id")

    def test_requires_token(self, client):
        response = client.post("/api/payments/create-subscription", json={"plan_id": "pro"})

        assert response.status_code == 401

    def test_get_subscription_for_free_user(self, client, registered):
        response = client.get(f"/api/payments/subscription/{registered['user']['id']}",
                              headers=registered["headers"])

        subscription = response.json()["data"]["subscription"]
        assert subscription["plan_id"] == "free"
        assert subscription["status"] == "inactive"
        assert subscription["features"]["can_watch_videos"] is True

    def test_upgrade(self, client, registered):
        headers = registered["headers"]
        client.post("/api/payments/create-subscription", json={"plan_id": "basic"}, headers=headers)

        response = client.post("/api/payments/upgrade-plan", json={"plan_id": "pro"}, headers=headers)

        assert response.status_code == 200
        assert response.json()["data"] == {"previous_plan": "basic", "plan_id": "pro"}

    def test_downgrade_via_upgrade_rejected(self, client, registered):
        headers = registered["headers"]
        client.post("/api/payments/create-subscription", json={"plan_id": "premium"}, headers=headers)

        response = client.post("/api/payments/upgrade-plan", json={"plan_id": "standard"}, headers=headers)

        assert response.status_code == 400

    def test_cancel_reverts_to_free(self, client, registered):
        headers = registered["headers"]
        user_id = registered["user"]["id"]
        client.post("/api/payments/create-subscription", json={"plan_id": "pro"}, headers=headers)

        response = client.post("/api/payments/cancel-subscription", headers=headers)
        subscription = client.get(f"/api/payments/subscription/{user_id}", headers=headers).json()["data"]

        assert response.json()["data"]["previous_plan"] == "pro"
        assert subscription["subscription"]["plan_id"] == "free"

    def test_billing_history_is_empty(self, client, registered):
        user_id = registered["user"]["id"]

        response = client.get(f"/api/payments/billing-history/{user_id}", headers=registered["headers"])

        assert response.json()["data"] == {"user_id": user_id, "invoices": []}

    def test_billing_history_of_other_user_forbidden(self, client, registered, other_user):
        response = client.get(f"/api/payments/billing-history/{other_user['user']['id']}",
                              headers=registered["headers"])

        assert response.status_code == 403


class TestTrainer:
    """Tests for the trainer placeholder routes."""

    def test_assignments(self, client, registered):
        response = client.get("/api/trainer/assignments/t1", headers=registered["headers"])

        assert response.status_code == 200
        assert response.json()["data"]["clients"] == []

    def test_message(self, client, registered):
        response = client.post("/api/trainer/message", json={"trainer_id": "t1", "content": "Hi coach"},
                               headers=registered["headers"])

        assert response.status_code == 200
        assert response.json()["message"] == "Send message to trainer"

    def test_message_requires_content(self, client, registered):
        response = client.post("/api/trainer/message", json={"trainer_id": "t1"}, headers=registered["headers"])

        assert response.status_code == 400

    def test_update_plan(self, client, registered):
        user_id = registered["user"]["id"]

        response = client.post(f"/api/trainer/t1/update-plan/{user_id}", json={"notes": "More cardio"},
                               headers=registered["headers"])

        assert response.status_code == 200

    def test_messages(self, client, registered):
        user_id = registered["user"]["id"]

        response = client.get(f"/api/trainer/messages/{user_id}", headers=registered["headers"])

        assert response.json()["data"]["messages"] == []

    def test_requires_token(self, client):
        response = client.get("/api/trainer/assignments/t1")

        assert response.status_code == 401
