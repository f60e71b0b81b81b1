"""Application exceptions.

Services raise these; the handlers in ``api.error_handlers`` turn them into
``{"success": false, "message": ...}`` responses with the matching status.
"""

from typing import Any, Dict, Optional


class FitPulseError(Exception):
    """Base exception for all API errors."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {"success": False, "message": self.message}
        if self.details:
            content["details"] = self.details
        return content

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status_code={self.status_code}, message={self.message!r})"


class ValidationError(FitPulseError):
    """Missing or malformed input."""

    status_code = 400


class UnauthenticatedError(FitPulseError):
    """No credentials were supplied."""

    status_code = 401

    def __init__(self, message: str = "No token provided"):
        super().__init__(message)


class UnauthorizedError(FitPulseError):
    """Credentials were supplied but are invalid or expired."""

    status_code = 401

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class ForbiddenError(FitPulseError):
    status_code = 403

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class NotFoundError(FitPulseError):
    status_code = 404


class ConflictError(FitPulseError):
    """The record is in a state that does not allow the operation."""

    status_code = 409
