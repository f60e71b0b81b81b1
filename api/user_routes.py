"""User profile and health assessment routes. All require a session token."""

from fastapi import APIRouter, Depends

from api.deps import ensure_owner, get_current_user, get_user_service
from schemas.user import HealthAssessmentRequest, ProfileUpdateRequest, User
from services.user_service import UserService
from utils.helpers import format_response
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("/health-assessment")
def save_health_assessment(
    request: HealthAssessmentRequest,
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    """Save the onboarding assessment and derive BMI, TDEE and the calorie goal."""
    ensure_owner(current_user, request.user_id)
    assessment = user_service.save_health_assessment(current_user.id, request)
    user = user_service.get_user(current_user.id)
    return format_response(
        data={"assessment": assessment.model_dump(mode="json"), "user": user.public()},
        message="Health assessment saved",
    )


@router.get("/{user_id}")
def get_user(
    user_id: str,
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    ensure_owner(current_user, user_id)
    return format_response(data={"user": user_service.get_user(user_id).public()})


@router.put("/{user_id}")
def update_user(
    user_id: str,
    request: ProfileUpdateRequest,
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    """Merge the given name and profile fields into the user record."""
    ensure_owner(current_user, user_id)
    user = user_service.update_profile(user_id, request)
    return format_response(data={"user": user.public()}, message="Profile updated")


@router.delete("/{user_id}")
def delete_user(
    user_id: str,
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    ensure_owner(current_user, user_id)
    user_service.delete_user(user_id)
    return format_response(message="Account deleted")


@router.get("/{user_id}/health-assessment")
def get_health_assessment(
    user_id: str,
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    ensure_owner(current_user, user_id)
    assessment = user_service.get_health_assessment(user_id)
    return format_response(data={"assessment": assessment.model_dump(mode="json")})


@router.get("/{user_id}/stats")
def get_user_stats(
    user_id: str,
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    ensure_owner(current_user, user_id)
    return format_response(data=user_service.get_stats(user_id))
