"""Tests for plan feature access helpers."""

import pytest

from services.plan_access import (
    get_min_plan_for_feature,
    get_plan_features,
    get_plan_name,
    get_plan_tier,
    has_plan_feature,
    is_plan_higher_than,
)


class TestPlanFeatures:
    def test_free_maps_to_basic(self):
        assert get_plan_features("free") == get_plan_features("basic")

    def test_unknown_plan_falls_back_to_basic(self):
        assert get_plan_features("platinum") == get_plan_features("basic")

    def test_returns_a_copy(self):
        features = get_plan_features("pro")
        features["has_priority_support"] = True

        assert has_plan_feature("pro", "has_priority_support") is False

    @pytest.mark.parametrize("plan,expected", [
        ("basic", False),
        ("standard", True),
        ("premium", True),
    ])
    def test_has_plan_feature(self, plan, expected):
        assert has_plan_feature(plan, "can_track_sets") is expected


class TestPlanTiers:
    def test_tiers(self):
        assert [get_plan_tier(p) for p in ("free", "basic", "standard", "pro", "premium")] == [-1, 0, 1, 2, 3]

    def test_is_plan_higher_than(self):
        assert is_plan_higher_than("pro", "standard")
        assert is_plan_higher_than("basic", "free")
        assert not is_plan_higher_than("basic", "basic")
        assert not is_plan_higher_than("standard", "premium")

    @pytest.mark.parametrize("feature,plan", [
        ("can_watch_videos", "basic"),
        ("can_track_sets", "standard"),
        ("can_use_rest_timers", "pro"),
        ("has_priority_support", "premium"),
    ])
    def test_min_plan_for_feature(self, feature, plan):
        assert get_min_plan_for_feature(feature) == plan

    def test_min_plan_for_unknown_feature(self):
        with pytest.raises(KeyError):
            get_min_plan_for_feature("can_fly")

    def test_plan_name(self):
        assert get_plan_name("pro") == "Pro"
        assert get_plan_name("free") == "Free"
        assert get_plan_name("mystery") == "Basic"
