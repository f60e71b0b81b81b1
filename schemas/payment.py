"""Payment request schemas."""

from typing import Optional

from pydantic import BaseModel, Field

from schemas.enums import SubscriptionPlan


class CreateSubscriptionRequest(BaseModel):
    plan_id: SubscriptionPlan = Field(..., description="Plan to subscribe to")
    payment_method: Optional[str] = Field(None, description="Payment method token from the gateway")


class UpgradePlanRequest(BaseModel):
    plan_id: SubscriptionPlan = Field(..., description="Plan to move to")
