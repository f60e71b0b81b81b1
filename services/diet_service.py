"""Meal and water logging, nutrition progress and diet plans."""

from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Tuple

from models import catalog
from models.store import InMemoryStore
from schemas.diet_log import (
    LogMealRequest,
    LogWaterRequest,
    Meal,
    MealLogEntry,
    NutritionTotals,
    WaterLogEntry,
)
from schemas.enums import FitnessGoal, MealCategory
from schemas.user import User
from utils.exceptions import NotFoundError, ValidationError
from utils.helpers import today
from utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_CALORIE_GOAL = 2000
WATER_GOAL_GLASSES = 8
FIBER_GOAL_GRAMS = 30
CALORIES_PER_GRAM = {"protein": 4, "carbs": 4, "fat": 9}
MAX_PROGRESS_DAYS = 90

# protein / carbs / fat share of daily calories
DEFAULT_MACRO_SPLIT = (0.25, 0.50, 0.25)
GOAL_MACRO_SPLITS: Dict[FitnessGoal, Tuple[float, float, float]] = {
    FitnessGoal.LOSE_WEIGHT: (0.35, 0.35, 0.30),
    FitnessGoal.GAIN_MUSCLE: (0.30, 0.45, 0.25),
    FitnessGoal.BUILD_MUSCLE: (0.30, 0.45, 0.25),
}

# Share of daily calories per meal slot, used to describe the plan
MEAL_BUDGET_SHARES = {
    MealCategory.BREAKFAST: 0.25,
    MealCategory.LUNCH: 0.35,
    MealCategory.DINNER: 0.30,
    MealCategory.SNACK: 0.10,
}


def macro_goals(calories: int, split: Tuple[float, float, float] = DEFAULT_MACRO_SPLIT) -> Dict[str, int]:
    protein, carbs, fat = split
    return {
        "calories": calories,
        "protein": round(calories * protein / CALORIES_PER_GRAM["protein"]),
        "carbs": round(calories * carbs / CALORIES_PER_GRAM["carbs"]),
        "fat": round(calories * fat / CALORIES_PER_GRAM["fat"]),
    }


def sum_entries(entries: List[MealLogEntry]) -> NutritionTotals:
    return NutritionTotals(
        calories=sum(e.calories for e in entries),
        protein=sum(e.protein for e in entries),
        carbs=sum(e.carbs for e in entries),
        fat=sum(e.fat for e in entries),
        fiber=sum(e.fiber for e in entries),
    )


class DietService:
    """Append-only meal and water logs per user per day."""

    def __init__(self, store: InMemoryStore):
        self.store = store

    def _calorie_goal(self, user_id: str) -> int:
        user = self.store.get_user(user_id)
        if user and user.profile.daily_calorie_goal:
            return user.profile.daily_calorie_goal
        return DEFAULT_CALORIE_GOAL

    def get_diet_plan(self, user: User, start: Optional[date] = None) -> Dict[str, Any]:
        """Macro goals plus a seven day plan rotating through the meal catalog."""
        calories = user.profile.daily_calorie_goal or DEFAULT_CALORIE_GOAL
        split = GOAL_MACRO_SPLITS.get(user.profile.fitness_goal, DEFAULT_MACRO_SPLIT)
        goals = macro_goals(calories, split)
        goals["fiber"] = FIBER_GOAL_GRAMS
        goals["water"] = WATER_GOAL_GLASSES

        by_category = {category: catalog.filter_meals(category.value) for category in MealCategory}
        start = start or today()
        week_plan = []
        for day in range(7):
            meals = {
                category.value: by_category[category][day % len(by_category[category])].model_dump(mode="json")
                for category in (MealCategory.BREAKFAST, MealCategory.LUNCH, MealCategory.DINNER)
            }
            snacks = by_category[MealCategory.SNACK]
            meals["snacks"] = [snacks[day % len(snacks)].model_dump(mode="json")]
            week_plan.append({
                "day": day,
                "date": (start + timedelta(days=day)).isoformat(),
                "meals": meals,
            })

        return {
            "macro_goals": goals,
            "meal_budgets": {
                category.value: round(calories * share) for category, share in MEAL_BUDGET_SHARES.items()
            },
            "week_plan": week_plan,
            "today_plan": week_plan[0],
        }

    def log_meal(self, user_id: str, request: LogMealRequest) -> MealLogEntry:
        if request.meal_id:
            meal = catalog.get_meal(request.meal_id)
            if meal is None:
                raise NotFoundError("Meal not found")
        elif request.custom_meal:
            meal = Meal(id=self.store.generate_id(), is_custom=True, **request.custom_meal.model_dump())
        else:
            raise ValidationError("Provide meal_id or custom_meal")

        servings = request.servings
        entry = MealLogEntry(
            id=self.store.generate_id(),
            user_id=user_id,
            date=request.date or today(),
            meal=meal,
            meal_type=request.meal_type or meal.category,
            servings=servings,
            calories=round(meal.calories * servings),
            protein=round(meal.protein * servings),
            carbs=round(meal.carbs * servings),
            fat=round(meal.fat * servings),
            fiber=round(meal.fiber * servings),
        )
        self.store.add_meal_entry(entry)
        logger.info(f"User {user_id} logged meal {meal.id} for {entry.date}")
        return entry

    def get_daily_log(self, user_id: str, day: Optional[date] = None) -> Dict[str, Any]:
        day = day or today()
        entries = self.store.list_meal_entries(user_id, day)
        totals = sum_entries(entries)
        calorie_goal = self._calorie_goal(user_id)

        return {
            "log": {
                "user_id": user_id,
                "date": day.isoformat(),
                "meals": [e.model_dump(mode="json") for e in entries],
                "totals": totals.model_dump(),
            },
            "goals": macro_goals(calorie_goal),
            "remaining": {"calories": calorie_goal - totals.calories},
        }

    def delete_meal_entry(self, user_id: str, entry_id: str) -> NutritionTotals:
        entry = self.store.get_meal_entry(entry_id)
        if entry is None or entry.user_id != user_id:
            raise NotFoundError("Entry not found")

        self.store.delete_meal_entry(entry_id)
        logger.info(f"User {user_id} deleted meal entry {entry_id}")
        return self.daily_totals(user_id, entry.date)

    def daily_totals(self, user_id: str, day: date) -> NutritionTotals:
        return sum_entries(self.store.list_meal_entries(user_id, day))

    def log_water(self, user_id: str, request: LogWaterRequest) -> Dict[str, Any]:
        entry = WaterLogEntry(
            id=self.store.generate_id(),
            user_id=user_id,
            date=request.date or today(),
            glasses=request.glasses,
        )
        self.store.add_water_entry(entry)
        return self.get_water_log(user_id, entry.date)

    def get_water_log(self, user_id: str, day: Optional[date] = None) -> Dict[str, Any]:
        day = day or today()
        entries = self.store.list_water_entries(user_id, day)
        return {
            "user_id": user_id,
            "date": day.isoformat(),
            "glasses": sum(e.glasses for e in entries),
            "goal": WATER_GOAL_GLASSES,
            "logs": [e.model_dump(mode="json") for e in entries],
        }

    def get_progress(self, user_id: str, days: int = 7, end: Optional[date] = None) -> Dict[str, Any]:
        """Per-day totals for the last ``days`` days, oldest first."""
        if not 1 <= days <= MAX_PROGRESS_DAYS:
            raise ValidationError(f"days must be between 1 and {MAX_PROGRESS_DAYS}")

        end = end or today()
        progress = []
        for offset in range(days - 1, -1, -1):
            day = end - timedelta(days=offset)
            entries = self.store.list_meal_entries(user_id, day)
            totals = sum_entries(entries)
            progress.append({
                "date": day.isoformat(),
                **totals.model_dump(),
                "water": sum(e.glasses for e in self.store.list_water_entries(user_id, day)),
                "meals_logged": len(entries),
            })

        return {
            "progress": progress,
            "averages": {
                "calories": round(sum(p["calories"] for p in progress) / days),
                "protein": round(sum(p["protein"] for p in progress) / days),
                "water": round(sum(p["water"] for p in progress) / days, 1),
            },
            "goals": {
                **macro_goals(self._calorie_goal(user_id)),
                "fiber": FIBER_GOAL_GRAMS,
                "water": WATER_GOAL_GLASSES,
            },
        }
