"""Subscription service.

No payment gateway is contacted: every operation returns a canned result and
only the user's ``subscription_plan`` is updated.
"""

from datetime import timedelta
from typing import Any, Dict, List, Optional

from config.plans import PLAN_HIERARCHY, PLAN_PRICES
from models.store import InMemoryStore
from schemas.enums import SubscriptionPlan
from schemas.user import User
from services.plan_access import get_plan_features, get_plan_name, is_plan_higher_than
from utils.exceptions import ValidationError
from utils.helpers import utcnow
from utils.logger import setup_logger

logger = setup_logger(__name__)

BILLING_PERIOD = timedelta(days=30)


def list_plans() -> List[Dict[str, Any]]:
    return [
        {
            "id": plan_id,
            "name": get_plan_name(plan_id),
            "price": PLAN_PRICES[plan_id],
            "currency": "USD",
            "period": "month",
            "features": get_plan_features(plan_id),
        }
        for plan_id in PLAN_HIERARCHY
    ]


class PaymentService:
    """Canned subscription operations."""

    def __init__(self, store: InMemoryStore):
        self.store = store

    def _set_plan(self, user: User, plan: SubscriptionPlan) -> None:
        user.subscription_plan = plan
        user.updated_at = utcnow()
        self.store.save_user(user)

    def create_subscription(
        self, user: User, plan: SubscriptionPlan, payment_method: Optional[str] = None
    ) -> Dict[str, Any]:
        if plan == SubscriptionPlan.FREE:
            raise ValidationError("Choose a paid plan")

        self._set_plan(user, plan)
        now = utcnow()
        logger.info(f"User {user.id} subscribed to {plan.value}")
        return {
            "subscription_id": f"sub_{self.store.generate_id()}",
            "user_id": user.id,
            "plan_id": plan.value,
            "payment_method": payment_method,
            "status": "active",
            "created_at": now.isoformat(),
            "expires_at": (now + BILLING_PERIOD).isoformat(),
        }

    def get_subscription(self, user: User) -> Dict[str, Any]:
        plan = user.subscription_plan.value
        return {
            "plan_id": plan,
            "plan_name": get_plan_name(plan),
            "status": "inactive" if user.subscription_plan == SubscriptionPlan.FREE else "active",
            "features": get_plan_features(plan),
        }

    def upgrade(self, user: User, plan: SubscriptionPlan) -> Dict[str, Any]:
        if not is_plan_higher_than(plan.value, user.subscription_plan.value):
            raise ValidationError(f"{get_plan_name(plan.value)} is not an upgrade from the current plan")

        previous = user.subscription_plan.value
        self._set_plan(user, plan)
        logger.info(f"User {user.id} upgraded from {previous} to {plan.value}")
        return {"previous_plan": previous, "plan_id": plan.value}

    def cancel(self, user: User) -> Dict[str, Any]:
        previous = user.subscription_plan.value
        self._set_plan(user, SubscriptionPlan.FREE)
        logger.info(f"User {user.id} cancelled the {previous} subscription")
        return {"previous_plan": previous, "plan_id": SubscriptionPlan.FREE.value}

    def billing_history(self, user: User) -> Dict[str, Any]:
        return {"user_id": user.id, "invoices": []}
