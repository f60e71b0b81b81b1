"""Diet API routes."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import ensure_owner, get_current_user, get_diet_service, get_store
from models import catalog
from models.store import InMemoryStore
from schemas.diet_log import LogMealRequest, LogWaterRequest
from schemas.enums import MealCategory
from schemas.user import User
from services.ai_diet_service import generate_diet_plan
from services.diet_service import MAX_PROGRESS_DAYS, DietService
from utils.helpers import format_response
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/diet", tags=["diet"])


@router.get("/meals")
def get_meals(category: Optional[MealCategory] = Query(None, description="Meal slot")):
    """Public meal catalog."""
    meals = catalog.filter_meals(category.value if category else None)
    return format_response(data={"meals": [m.model_dump(mode="json") for m in meals]})


@router.get("/{user_id}")
def get_diet_plan(
    user_id: str,
    current_user: User = Depends(get_current_user),
    diet_service: DietService = Depends(get_diet_service),
):
    """Macro goals and a rotating seven day meal plan for the user."""
    ensure_owner(current_user, user_id)
    return format_response(data=diet_service.get_diet_plan(current_user))


@router.post("/{user_id}/log-meal")
def log_meal(
    user_id: str,
    request: LogMealRequest,
    current_user: User = Depends(get_current_user),
    diet_service: DietService = Depends(get_diet_service),
):
    ensure_owner(current_user, user_id)
    entry = diet_service.log_meal(user_id, request)
    totals = diet_service.daily_totals(user_id, entry.date)
    return format_response(
        data={"entry": entry.model_dump(mode="json"), "totals": totals.model_dump()},
        message="Meal logged",
    )


@router.get("/{user_id}/log")
def get_daily_log(
    user_id: str,
    day: Optional[date] = Query(None, alias="date", description="Day to read, defaults to today"),
    current_user: User = Depends(get_current_user),
    diet_service: DietService = Depends(get_diet_service),
):
    ensure_owner(current_user, user_id)
    return format_response(data=diet_service.get_daily_log(user_id, day))


@router.delete("/{user_id}/log/{entry_id}")
def delete_meal_entry(
    user_id: str,
    entry_id: str,
    current_user: User = Depends(get_current_user),
    diet_service: DietService = Depends(get_diet_service),
):
    ensure_owner(current_user, user_id)
    totals = diet_service.delete_meal_entry(user_id, entry_id)
    return format_response(data={"totals": totals.model_dump()}, message="Entry deleted")


@router.post("/{user_id}/log-water")
def log_water(
    user_id: str,
    request: Optional[LogWaterRequest] = None,
    current_user: User = Depends(get_current_user),
    diet_service: DietService = Depends(get_diet_service),
):
    ensure_owner(current_user, user_id)
    water = diet_service.log_water(user_id, request or LogWaterRequest())
    return format_response(data={"water": water}, message="Water logged")


@router.get("/{user_id}/water")
def get_water_log(
    user_id: str,
    day: Optional[date] = Query(None, alias="date"),
    current_user: User = Depends(get_current_user),
    diet_service: DietService = Depends(get_diet_service),
):
    ensure_owner(current_user, user_id)
    return format_response(data={"water": diet_service.get_water_log(user_id, day)})


@router.get("/{user_id}/progress")
def get_progress(
    user_id: str,
    days: int = Query(7, ge=1, le=MAX_PROGRESS_DAYS, description="Number of days, oldest first"),
    current_user: User = Depends(get_current_user),
    diet_service: DietService = Depends(get_diet_service),
):
    ensure_owner(current_user, user_id)
    return format_response(data=diet_service.get_progress(user_id, days))


@router.post("/{user_id}/generate-plan")
def generate_plan(
    user_id: str,
    current_user: User = Depends(get_current_user),
    store: InMemoryStore = Depends(get_store),
):
    """Build the AI diet plan prompt from the latest health assessment."""
    ensure_owner(current_user, user_id)
    plan = generate_diet_plan(current_user, store.get_health_assessment(user_id))
    return format_response(data={"plan": plan}, message="Diet plan generation queued")
