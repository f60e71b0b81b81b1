"""Application settings using Pydantic Settings."""

import re
from datetime import timedelta
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings


_DURATION_PATTERN = re.compile(r"^\s*(\d+)\s*([smhdw]?)\s*$")
_DURATION_UNITS = {
    "": "seconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}


def parse_duration(value: str) -> timedelta:
    """Parse a duration such as ``7d``, ``12h``, ``30m`` or ``3600``."""
    match = _DURATION_PATTERN.match(str(value).lower())
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return timedelta(**{_DURATION_UNITS[unit]: int(amount)})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Configuration
    app_name: str = "FitPulse API"
    app_version: str = "1.0.0"
    node_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS Configuration
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:8081", "http://localhost:19006"]

    # Database Configuration (placeholder, the in-memory store is used)
    mongodb_uri: str = "mongodb://localhost:27017/fitpulse"

    # Auth Configuration
    jwt_secret: str = "fitpulse-secret-key-change-in-production"
    jwt_expire: str = "7d"
    jwt_algorithm: str = "HS256"
    bcrypt_rounds: int = 12

    # Seed data
    seed_demo_user: bool = True

    # Third-party keys (unused placeholders)
    openai_api_key: str = ""
    stripe_secret_key: str = ""
    razorpay_key_id: str = ""
    razorpay_key_secret: str = ""

    class Config:
        env_file = ".env"
        case_sensitive = False

    @field_validator("jwt_expire")
    @classmethod
    def validate_jwt_expire(cls, value: str) -> str:
        parse_duration(value)
        return value

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, value: int) -> int:
        if not 4 <= value <= 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return value

    @property
    def is_development(self) -> bool:
        return self.node_env.lower() == "development"

    @property
    def token_lifetime(self) -> timedelta:
        return parse_duration(self.jwt_expire)


# Global settings instance
settings = Settings()
