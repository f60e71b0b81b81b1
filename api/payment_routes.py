"""Subscription routes. Nothing here talks to a payment gateway."""

from fastapi import APIRouter, Depends

from api.deps import ensure_owner, get_current_user, get_payment_service
from schemas.payment import CreateSubscriptionRequest, UpgradePlanRequest
from schemas.user import User
from services.payment_service import PaymentService, list_plans
from utils.helpers import format_response
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/payments", tags=["payments"])


@router.get("/plans")
def get_plans():
    return format_response(data={"plans": list_plans()})


@router.post("/create-subscription")
def create_subscription(
    request: CreateSubscriptionRequest,
    current_user: User = Depends(get_current_user),
    payment_service: PaymentService = Depends(get_payment_service),
):
    subscription = payment_service.create_subscription(current_user, request.plan_id, request.payment_method)
    return format_response(data={"subscription": subscription}, message="Subscription created")


@router.get("/subscription/{user_id}")
def get_subscription(
    user_id: str,
    current_user: User = Depends(get_current_user),
    payment_service: PaymentService = Depends(get_payment_service),
):
    ensure_owner(current_user, user_id)
    return format_response(data={"subscription": payment_service.get_subscription(current_user)})


@router.post("/upgrade-plan")
def upgrade_plan(
    request: UpgradePlanRequest,
    current_user: User = Depends(get_current_user),
    payment_service: PaymentService = Depends(get_payment_service),
):
    result = payment_service.upgrade(current_user, request.plan_id)
    return format_response(data=result, message="Plan upgraded")


@router.post("/cancel-subscription")
def cancel_subscription(
    current_user: User = Depends(get_current_user),
    payment_service: PaymentService = Depends(get_payment_service),
):
    return format_response(data=payment_service.cancel(current_user), message="Subscription cancelled")


@router.get("/billing-history/{user_id}")
def get_billing_history(
    user_id: str,
    current_user: User = Depends(get_current_user),
    payment_service: PaymentService = Depends(get_payment_service),
):
    ensure_owner(current_user, user_id)
    return format_response(data=payment_service.billing_history(current_user))
