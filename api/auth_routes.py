"""Auth API routes."""

from fastapi import APIRouter, Depends, status

from api.deps import get_auth_service, get_current_user
from schemas.auth import ForgotPasswordRequest, LoginRequest, ResetPasswordRequest, SignupRequest
from schemas.user import User
from services.auth_service import AuthService
from utils.helpers import format_response
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(request: SignupRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Register a new account and return it together with a session token."""
    user, token = auth_service.signup(request)
    return format_response(
        data={"user": user.public(), "token": token},
        message="Account created successfully",
    )


@router.post("/login")
def login(request: LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    user, token = auth_service.login(request)
    return format_response(data={"user": user.public(), "token": token}, message="Login successful")


@router.get("/verify")
def verify(current_user: User = Depends(get_current_user)):
    """Check a stored token and return the user it belongs to."""
    return format_response(data={"user": current_user.public()})


@router.post("/logout")
def logout():
    # Tokens are stateless; the client drops its copy.
    return format_response(message="Logged out successfully")


@router.post("/forgot-password")
def forgot_password(request: ForgotPasswordRequest, auth_service: AuthService = Depends(get_auth_service)):
    return format_response(message=auth_service.forgot_password(request.email))


@router.post("/reset-password")
def reset_password(request: ResetPasswordRequest, auth_service: AuthService = Depends(get_auth_service)):
    return format_response(message=auth_service.reset_password(request))
