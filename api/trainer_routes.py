"""Trainer routes.

Placeholders for the trainer marketplace: each returns a canned envelope and
nothing is stored.
"""

from fastapi import APIRouter, Depends

from api.deps import ensure_owner, get_current_user
from schemas.trainer import TrainerMessageRequest, TrainerPlanUpdateRequest
from schemas.user import User
from utils.helpers import format_response

router = APIRouter(prefix="/api/trainer", tags=["trainer"])


@router.get("/assignments/{trainer_id}")
def get_assignments(trainer_id: str, current_user: User = Depends(get_current_user)):
    return format_response(data={"trainer_id": trainer_id, "clients": []}, message="Get assigned clients")


@router.post("/message")
def send_message(request: TrainerMessageRequest, current_user: User = Depends(get_current_user)):
    return format_response(
        data={"trainer_id": request.trainer_id, "user_id": current_user.id, "delivered": False},
        message="Send message to trainer",
    )


@router.post("/{trainer_id}/update-plan/{user_id}")
def update_plan(
    trainer_id: str,
    user_id: str,
    request: TrainerPlanUpdateRequest,
    current_user: User = Depends(get_current_user),
):
    return format_response(
        data={"trainer_id": trainer_id, "user_id": user_id, "applied": False},
        message="Trainer updates user plan",
    )


@router.get("/messages/{user_id}")
def get_messages(user_id: str, current_user: User = Depends(get_current_user)):
    ensure_owner(current_user, user_id)
    return format_response(data={"user_id": user_id, "messages": []}, message="Get trainer messages")
