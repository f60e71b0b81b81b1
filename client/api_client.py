"""HTTP client that turns every outcome into an ``ApiResponse``."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_TIMEOUT = 30.0


@dataclass
class ApiResponse:
    """Result of one API call; never raised, always returned."""
    success: bool
    data: Any = None
    error: Optional[str] = None
    status_code: Optional[int] = None


class ApiClient:
    """Thin wrapper around ``httpx.Client``.

    Holds the session token and sends it as a bearer header. Transport
    failures and non-2xx responses come back as ``ApiResponse(success=False)``
    with a readable ``error``.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = http_client or httpx.Client(timeout=timeout)
        self._owns_client = http_client is None
        self.token: Optional[str] = None

    def set_token(self, token: Optional[str]) -> None:
        self.token = token

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> ApiResponse:
        url = f"{self.base_url}{path}"
        if params:
            params = {key: value for key, value in params.items() if value is not None}

        try:
            response = self._client.request(
                method, url, json=json, params=params or None, headers=self._headers(), timeout=self.timeout
            )
        except httpx.TimeoutException:
            logger.warning(f"{method} {path} timed out after {self.timeout}s")
            return ApiResponse(success=False, error="Request timeout")
        except httpx.RequestError as e:
            logger.warning(f"{method} {path} failed: {e}")
            return ApiResponse(success=False, error="Network error")

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {"data": body}

        if response.is_success:
            return ApiResponse(success=True, data=body.get("data"), status_code=response.status_code)

        return ApiResponse(
            success=False,
            data=body.get("data"),
            error=body.get("message") or f"Request failed with status {response.status_code}",
            status_code=response.status_code,
        )

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> ApiResponse:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Optional[Dict[str, Any]] = None) -> ApiResponse:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: Optional[Dict[str, Any]] = None) -> ApiResponse:
        return self.request("PUT", path, json=json)

    def delete(self, path: str) -> ApiResponse:
        return self.request("DELETE", path)
