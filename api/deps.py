"""Request dependencies: store injection and the auth gate."""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from config.settings import Settings
from models.store import InMemoryStore
from schemas.user import User
from services.auth_service import AuthService
from services.diet_service import DietService
from services.payment_service import PaymentService
from services.user_service import UserService
from services.workout_service import WorkoutService
from utils.exceptions import ForbiddenError, UnauthenticatedError

bearer_scheme = HTTPBearer(auto_error=False, description="Session token from /api/auth/login")


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> InMemoryStore:
    return request.app.state.store


def get_auth_service(
    store: InMemoryStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(store, settings)


def get_user_service(store: InMemoryStore = Depends(get_store)) -> UserService:
    return UserService(store)


def get_workout_service(store: InMemoryStore = Depends(get_store)) -> WorkoutService:
    return WorkoutService(store)


def get_diet_service(store: InMemoryStore = Depends(get_store)) -> DietService:
    return DietService(store)


def get_payment_service(store: InMemoryStore = Depends(get_store)) -> PaymentService:
    return PaymentService(store)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """Auth gate for protected routes.

    Missing bearer token -> UnauthenticatedError; bad signature, expired token
    or a token for a deleted user -> UnauthorizedError. The resolved user is
    also attached to ``request.state.user``.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError()

    user = auth_service.authenticate(credentials.credentials)
    request.state.user = user
    return user


def ensure_owner(current_user: User, user_id: Optional[str]) -> None:
    """Reject access to another user's records."""
    if user_id is not None and user_id != current_user.id:
        raise ForbiddenError()
