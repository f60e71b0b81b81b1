"""Prompt templates."""

from prompts.diet_plan_prompt import DIET_PLAN_PROMPT

__all__ = [
    "DIET_PLAN_PROMPT",
]
