"""Trainer messaging request schemas."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class TrainerMessageRequest(BaseModel):
    trainer_id: Optional[str] = Field(None, description="Recipient trainer")
    content: str = Field(..., min_length=1, description="Message text")


class TrainerPlanUpdateRequest(BaseModel):
    notes: Optional[str] = None
    plan: Dict[str, Any] = Field(default_factory=dict, description="Plan changes proposed by the trainer")
