"""Subscription plan configuration."""

from typing import Any, Dict, List

FREE_PLAN = "free"

# Plan hierarchy (higher index = better plan)
PLAN_HIERARCHY: List[str] = ["basic", "standard", "pro", "premium"]

PLAN_NAMES: Dict[str, str] = {
    "free": "Free",
    "basic": "Basic",
    "standard": "Standard",
    "pro": "Pro",
    "premium": "Premium",
}

# Feature matrix per plan. max_workout_categories of -1 means unlimited.
PLAN_FEATURES: Dict[str, Dict[str, Any]] = {
    "basic": {
        "can_watch_videos": True,
        "can_use_guided_workouts": False,
        "can_use_exercise_timers": False,
        "can_use_rest_timers": False,
        "can_use_auto_next": False,
        "can_track_sets": False,
        "max_workout_categories": 3,
        "can_access_premium_workouts": False,
        "can_view_basic_progress": True,
        "can_view_detailed_analytics": False,
        "can_view_streaks": True,
        "can_customize_plan": False,
        "has_ad_free": False,
        "has_priority_support": False,
    },
    "standard": {
        "can_watch_videos": True,
        "can_use_guided_workouts": True,
        "can_use_exercise_timers": True,
        "can_use_rest_timers": False,
        "can_use_auto_next": False,
        "can_track_sets": True,
        "max_workout_categories": -1,
        "can_access_premium_workouts": False,
        "can_view_basic_progress": True,
        "can_view_detailed_analytics": True,
        "can_view_streaks": True,
        "can_customize_plan": False,
        "has_ad_free": True,
        "has_priority_support": False,
    },
    "pro": {
        "can_watch_videos": True,
        "can_use_guided_workouts": True,
        "can_use_exercise_timers": True,
        "can_use_rest_timers": True,
        "can_use_auto_next": True,
        "can_track_sets": True,
        "max_workout_categories": -1,
        "can_access_premium_workouts": True,
        "can_view_basic_progress": True,
        "can_view_detailed_analytics": True,
        "can_view_streaks": True,
        "can_customize_plan": True,
        "has_ad_free": True,
        "has_priority_support": False,
    },
    "premium": {
        "can_watch_videos": True,
        "can_use_guided_workouts": True,
        "can_use_exercise_timers": True,
        "can_use_rest_timers": True,
        "can_use_auto_next": True,
        "can_track_sets": True,
        "max_workout_categories": -1,
        "can_access_premium_workouts": True,
        "can_view_basic_progress": True,
        "can_view_detailed_analytics": True,
        "can_view_streaks": True,
        "can_customize_plan": True,
        "has_ad_free": True,
        "has_priority_support": True,
    },
}

# Monthly prices in USD
PLAN_PRICES: Dict[str, float] = {
    "basic": 9.99,
    "standard": 19.99,
    "pro": 29.99,
    "premium": 49.99,
}
