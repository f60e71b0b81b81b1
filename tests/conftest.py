"""Shared fixtures: a fresh app and store per test."""

import os

os.environ.setdefault("NODE_ENV", "test")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SEED_DEMO_USER", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from config.settings import Settings
from models.store import InMemoryStore
from services.auth_service import AuthService

TEST_SECRET = "test-secret-key-for-unit-testing-only"


@pytest.fixture
def test_settings():
    return Settings(
        node_env="test",
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
        seed_demo_user=False,
        _env_file=None,
    )


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def app(test_settings, store):
    return create_app(test_settings, store)


@pytest.fixture
def client(app):
    """Test client; entering it runs the lifespan hooks."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_service(store, test_settings):
    return AuthService(store, test_settings)


@pytest.fixture
def make_user(client):
    """Sign up a user and return ``{"user", "token", "headers"}``."""

    def _make_user(email="jane@example.com", password="secret123", name="Jane Doe"):
        response = client.post("/api/auth/signup", json={"email": email, "password": password, "name": name})
        assert response.status_code == 201, response.text
        data = response.json()["data"]
        data["headers"] = {"Authorization": f"Bearer {data['token']}"}
        return data

    return _make_user


@pytest.fixture
def registered(make_user):
    return make_user()


@pytest.fixture
def other_user(make_user):
    return make_user(email="john@example.com", name="John Roe")
