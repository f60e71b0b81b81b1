"""Diet catalog and log schemas."""

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from schemas.enums import MealCategory
from utils.helpers import utcnow


class Meal(BaseModel):
    """Catalog meal; macros are per serving."""
    id: str = Field(..., description="Meal identifier")
    name: str = Field(..., description="Name of the meal")
    category: MealCategory = Field(..., description="Meal slot")
    calories: float = Field(..., ge=0)
    protein: float = Field(..., ge=0, description="Protein in grams")
    carbs: float = Field(..., ge=0, description="Carbohydrates in grams")
    fat: float = Field(..., ge=0, description="Fat in grams")
    fiber: float = Field(0, ge=0, description="Fiber in grams")
    ingredients: List[str] = Field(default_factory=list)
    is_custom: bool = False


class CustomMeal(BaseModel):
    """A meal that is not in the catalog."""
    name: str = Field(..., min_length=1)
    category: MealCategory = MealCategory.SNACK
    calories: float = Field(..., ge=0)
    protein: float = Field(0, ge=0)
    carbs: float = Field(0, ge=0)
    fat: float = Field(0, ge=0)
    fiber: float = Field(0, ge=0)
    ingredients: List[str] = Field(default_factory=list)


class LogMealRequest(BaseModel):
    """Body of ``POST /api/diet/{user_id}/log-meal``."""
    meal_id: Optional[str] = Field(None, description="Catalog meal identifier")
    custom_meal: Optional[CustomMeal] = Field(None, description="Meal not found in the catalog")
    meal_type: Optional[MealCategory] = Field(None, description="Defaults to the meal's category")
    servings: float = Field(1, gt=0)
    date: Optional[dt.date] = Field(None, description="Day to log against, defaults to today")

    @model_validator(mode="after")
    def check_meal_source(self) -> "LogMealRequest":
        if self.meal_id and self.custom_meal:
            raise ValueError("Provide either meal_id or custom_meal, not both")
        return self


class MealLogEntry(BaseModel):
    """One logged meal; macros already multiplied by servings."""
    id: str
    user_id: str
    date: dt.date
    meal: Meal
    meal_type: MealCategory
    servings: float
    logged_at: dt.datetime = Field(default_factory=utcnow)
    calories: int
    protein: int
    carbs: int
    fat: int
    fiber: int


class LogWaterRequest(BaseModel):
    glasses: int = Field(1, ge=1, le=20)
    date: Optional[dt.date] = None


class WaterLogEntry(BaseModel):
    id: str
    user_id: str
    date: dt.date
    glasses: int
    logged_at: dt.datetime = Field(default_factory=utcnow)


class NutritionTotals(BaseModel):
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fat: int = 0
    fiber: int = 0
