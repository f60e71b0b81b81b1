"""Helper utility functions."""

import secrets
import time
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def format_response(data: Any = None, message: Optional[str] = None, success: bool = True) -> Dict[str, Any]:
    """Wrap a payload in the ``{success, message?, data?}`` envelope."""
    response: Dict[str, Any] = {"success": success}
    if message is not None:
        response["message"] = message
    if data is not None:
        response["data"] = data
    return response


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def generate_id() -> str:
    """Generate a short, time-ordered identifier."""
    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_BASE36) for _ in range(10))
    return _to_base36(millis) + suffix


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def today() -> date:
    return utcnow().date()
