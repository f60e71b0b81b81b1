"""Auth request schemas."""

import re

from pydantic import BaseModel, Field, field_validator

MIN_PASSWORD_LENGTH = 6
# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def normalize_email(value: str) -> str:
    return value.strip().lower()


class SignupRequest(BaseModel):
    email: str = Field(..., description="Login email")
    password: str = Field(..., description="Plaintext password")
    name: str = Field(..., min_length=1, description="Display name")

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        value = normalize_email(value)
        if not _EMAIL_PATTERN.match(value):
            raise ValueError("Please provide a valid email")
        return value


class LoginRequest(BaseModel):
    email: str = Field(..., description="Login email")
    password: str = Field(..., description="Plaintext password")

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return normalize_email(value)


class ForgotPasswordRequest(BaseModel):
    email: str = Field(..., min_length=1)


class ResetPasswordRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Reset token from the email link")
    new_password: str = Field(..., description="New plaintext password")
