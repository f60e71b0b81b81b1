"""Authentication service: JWT session tokens and bcrypt password hashing."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

import bcrypt
import jwt

from config.settings import Settings
from models.store import InMemoryStore
from schemas.auth import MAX_PASSWORD_BYTES, MIN_PASSWORD_LENGTH, LoginRequest, ResetPasswordRequest, SignupRequest
from schemas.enums import SubscriptionPlan
from schemas.user import User, UserStats
from utils.exceptions import UnauthorizedError, ValidationError
from utils.logger import setup_logger

logger = setup_logger(__name__)

DEMO_EMAIL = "demo@fitpulse.ai"
DEMO_PASSWORD = "demo123"
DEMO_USER_ID = "demo-user-001"

FORGOT_PASSWORD_MESSAGE = "If an account exists with this email, you will receive a password reset link"


class AuthService:
    """Signs and verifies session tokens and manages credentials.

    Tokens are stateless: they carry the user id (``sub``) and an expiry and
    there is no server-side revocation list.
    """

    def __init__(self, store: InMemoryStore, settings: Settings):
        self.store = store
        self._secret_key = settings.jwt_secret
        self._algorithm = settings.jwt_algorithm
        self._token_lifetime = settings.token_lifetime
        self._bcrypt_rounds = settings.bcrypt_rounds

    # Tokens

    def create_token(self, user_id: str, now: Optional[datetime] = None) -> str:
        """Create a signed session token for ``user_id``."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "iat": issued_at,
            "exp": issued_at + self._token_lifetime,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """Verify signature and expiry and return the payload.

        Raises:
            UnauthorizedError: If the token is expired, malformed or signed
                with another key.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise UnauthorizedError("Token has expired")
        except jwt.InvalidTokenError as e:
            logger.debug(f"Rejected token: {e}")
            raise UnauthorizedError("Invalid token")
        return payload

    def authenticate(self, token: str) -> User:
        """Resolve a token to the live user it was issued for."""
        payload = self.decode_token(token)
        user = self.store.get_user(payload["sub"])
        if user is None:
            raise UnauthorizedError("User not found")
        return user

    # Passwords

    def hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._bcrypt_rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def verify_password(password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            return False

    # Operations

    @staticmethod
    def check_password(password: str) -> None:
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

    def signup(self, request: SignupRequest) -> Tuple[User, str]:
        self.check_password(request.password)
        if self.store.find_user_by_email(request.email):
            raise ValidationError("Email already registered")

        user = User(
            id=self.store.generate_id(),
            email=request.email,
            name=request.name.strip(),
            password_hash=self.hash_password(request.password),
        )
        self.store.save_user(user)
        logger.info(f"Created user {user.id}")
        return user, self.create_token(user.id)

    def login(self, request: LoginRequest) -> Tuple[User, str]:
        user = self.store.find_user_by_email(request.email)
        if user is None or not self.verify_password(request.password, user.password_hash):
            logger.info("Failed login attempt")
            raise UnauthorizedError("Invalid email or password")

        logger.info(f"User {user.id} logged in")
        return user, self.create_token(user.id)

    def forgot_password(self, email: str) -> str:
        # Same answer whether or not the account exists.
        if self.store.find_user_by_email(email.strip()):
            logger.info("Password reset requested for a known account")
        return FORGOT_PASSWORD_MESSAGE

    def reset_password(self, request: ResetPasswordRequest) -> str:
        self.check_password(request.new_password)
        # No reset-token flow exists; the token is accepted as is.
        return "Password reset successful"

    def seed_demo_user(self) -> User:
        existing = self.store.get_user(DEMO_USER_ID)
        if existing:
            return existing

        user = User(
            id=DEMO_USER_ID,
            email=DEMO_EMAIL,
            name="Demo User",
            password_hash=self.hash_password(DEMO_PASSWORD),
            subscription_plan=SubscriptionPlan.PREMIUM,
            is_onboarded=True,
            stats=UserStats(total_workouts=47, total_minutes=1250, total_calories_burned=12450, current_streak=5,
                            longest_streak=5),
        )
        self.store.save_user(user)
        logger.info("Seeded demo user")
        return user
