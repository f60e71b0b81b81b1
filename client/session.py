"""Client-side auth state."""

from typing import Any, Dict, Optional

from client.api_client import ApiClient, ApiResponse
from utils.logger import setup_logger

logger = setup_logger(__name__)


class AuthSession:
    """Keeps the current token and user for an ``ApiClient``."""

    def __init__(self, api: ApiClient):
        self.api = api
        self.user: Optional[Dict[str, Any]] = None

    @property
    def token(self) -> Optional[str]:
        return self.api.token

    @property
    def is_authenticated(self) -> bool:
        return self.api.token is not None and self.user is not None

    def _store(self, response: ApiResponse) -> ApiResponse:
        if response.success and response.data:
            self.api.set_token(response.data["token"])
            self.user = response.data["user"]
        return response

    def signup(self, email: str, password: str, name: str) -> ApiResponse:
        return self._store(self.api.post("/api/auth/signup", {"email": email, "password": password, "name": name}))

    def login(self, email: str, password: str) -> ApiResponse:
        return self._store(self.api.post("/api/auth/login", {"email": email, "password": password}))

    def logout(self) -> ApiResponse:
        """Tell the server, then forget the token whatever it answered."""
        try:
            return self.api.post("/api/auth/logout")
        finally:
            self.clear()

    def verify(self) -> ApiResponse:
        response = self.api.get("/api/auth/verify")
        if response.success:
            self.user = response.data["user"]
        else:
            self.clear()
        return response

    def restore(self, token: str) -> bool:
        """Adopt a previously saved token if the server still accepts it."""
        self.api.set_token(token)
        return self.verify().success

    def refresh_user(self) -> ApiResponse:
        if self.user is None:
            return ApiResponse(success=False, error="Not logged in")
        response = self.api.get(f"/api/users/{self.user['id']}")
        if response.success:
            self.user = response.data["user"]
        return response

    def clear(self) -> None:
        self.api.set_token(None)
        self.user = None
