"""Python client for the FitPulse API."""

from client.api_client import ApiClient, ApiResponse
from client.services import DietApi, PaymentApi, UserApi, WorkoutApi
from client.session import AuthSession

__all__ = [
    "ApiClient",
    "ApiResponse",
    "AuthSession",
    "DietApi",
    "PaymentApi",
    "UserApi",
    "WorkoutApi",
]
