"""Plan-based feature access."""

from typing import Any, Dict

from config.plans import FREE_PLAN, PLAN_FEATURES, PLAN_HIERARCHY, PLAN_NAMES


def _normalize(plan_id: str) -> str:
    # Free accounts get the basic feature set.
    return "basic" if plan_id == FREE_PLAN else plan_id


def get_plan_features(plan_id: str) -> Dict[str, Any]:
    """Feature set for ``plan_id``; unknown plans fall back to basic."""
    return dict(PLAN_FEATURES.get(_normalize(plan_id), PLAN_FEATURES["basic"]))


def has_plan_feature(plan_id: str, feature: str) -> bool:
    return bool(get_plan_features(plan_id).get(feature))


def get_plan_tier(plan_id: str) -> int:
    """0 for basic up to 3 for premium; -1 for free or unknown plans."""
    try:
        return PLAN_HIERARCHY.index(plan_id)
    except ValueError:
        return -1


def is_plan_higher_than(plan_a: str, plan_b: str) -> bool:
    return get_plan_tier(plan_a) > get_plan_tier(plan_b)


def get_min_plan_for_feature(feature: str) -> str:
    if not any(feature in features for features in PLAN_FEATURES.values()):
        raise KeyError(f"Unknown feature: {feature}")
    for plan_id in PLAN_HIERARCHY:
        if PLAN_FEATURES[plan_id].get(feature):
            return plan_id
    return PLAN_HIERARCHY[-1]


def get_plan_name(plan_id: str) -> str:
    return PLAN_NAMES.get(plan_id, PLAN_NAMES["basic"])
