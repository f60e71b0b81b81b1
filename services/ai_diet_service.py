"""AI diet plan generation.

Only the prompt is built; no model is called yet, so the plan comes back with
``status: "pending"`` and the prompt that would be sent.
"""

from typing import Any, Dict, List, Optional

from prompts.diet_plan_prompt import DIET_PLAN_PROMPT
from schemas.user import HealthAssessment, User
from services.diet_service import DEFAULT_CALORIE_GOAL
from utils.logger import setup_logger

logger = setup_logger(__name__)

NOT_PROVIDED = "not provided"


def _fmt(value: Any) -> str:
    if value is None:
        return NOT_PROVIDED
    if hasattr(value, "value"):
        return str(value.value)
    return str(value)


def _fmt_list(values: List[str]) -> str:
    return ", ".join(values) if values else "none"


def build_diet_plan_prompt(user: User, assessment: Optional[HealthAssessment] = None) -> str:
    """Render the diet plan prompt from the assessment, falling back to the profile."""
    source = assessment or user.profile
    return DIET_PLAN_PROMPT.format(
        age=_fmt(source.age),
        height=_fmt(source.height),
        weight=_fmt(source.weight),
        goal_weight=_fmt(source.target_weight),
        conditions=_fmt_list(source.medical_conditions),
        allergies=_fmt_list(source.allergies),
        dietary_restrictions=_fmt_list(source.dietary_restrictions),
        fitness_goal=_fmt(source.fitness_goal),
        calorie_goal=user.profile.daily_calorie_goal or DEFAULT_CALORIE_GOAL,
    )


def generate_diet_plan(user: User, assessment: Optional[HealthAssessment] = None) -> Dict[str, Any]:
    prompt = build_diet_plan_prompt(user, assessment)
    logger.info(f"Built diet plan prompt for user {user.id} ({len(prompt)} chars)")
    return {
        "user_id": user.id,
        "status": "pending",
        "prompt": prompt,
    }
