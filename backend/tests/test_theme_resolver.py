import json

import pytest

from tripwise.data.theme_profiles import THEME_PROFILES
from tripwise.errors import (
    CatalogError,
    InvalidSubThemeError,
    InvalidThemeError,
    ProfileNotFoundError,
)
from tripwise.services.recommendation.profiles import ComfortLevel, ProfileCatalog
from tripwise.services.recommendation.theme_resolver import ThemeResolver
from tripwise.services.recommendation.themes import SubTheme, Theme


def test_catalog_covers_every_combination(resolver):
    assert len(resolver.catalog) == len(Theme) * len(SubTheme) == 15
    assert resolver.catalog.missing_combinations() == []
    for theme in Theme:
        for sub in SubTheme:
            assert resolver.is_valid_combination(theme.value, sub.value)


def test_profiles_hold_their_invariants(resolver):
    for theme, sub in resolver.catalog:
        profile = resolver.catalog.get(theme, sub)
        assert profile.name
        assert 0 <= profile.budget_range.min <= profile.budget_range.max
        stars = profile.hotel_preferences.star_rating
        assert 1 <= stars.min <= stars.max <= 5
        levels = profile.restaurant_preferences.price_level
        assert 1 <= levels.min <= levels.max <= 4
        weights = profile.ranking_weights
        assert min(weights.price, weights.rating, weights.distance) >= 0
        assert isinstance(profile.transport_preferences.comfort_level, ComfortLevel)


def test_resolve_budget_beach(resolver):
    profile = resolver.resolve_profile("beach", "budget")

    assert profile.name == "Budget Beach Vacation"
    assert profile.theme is Theme.BEACH
    assert profile.sub_theme is SubTheme.BUDGET
    assert profile.budget_range.to_dict() == {"min": 50, "max": 150}
    assert profile.ranking_weights.to_dict() == {"price": 0.5, "rating": 0.3, "distance": 0.2}
    assert profile.resolved_at is not None


def test_resolve_normalizes_case_and_whitespace(resolver):
    profile = resolver.resolve_profile("  Beach ", "LUXURIOUS")
    assert profile.theme is Theme.BEACH
    assert profile.sub_theme is SubTheme.LUXURIOUS


def test_resolved_profile_is_a_copy(resolver):
    first = resolver.resolve_profile("business", "deluxe")
    second = resolver.resolve_profile("business", "deluxe")
    assert first is not second
    assert first.name == second.name
    assert resolver.catalog.get(Theme.BUSINESS, SubTheme.DELUXE) is not first


def test_invalid_theme_is_distinct_error(resolver):
    with pytest.raises(InvalidThemeError) as exc:
        resolver.resolve_profile("space", "budget")
    assert exc.value.code == "INVALID_THEME"
    assert "space" in exc.value.message


def test_invalid_sub_theme_is_distinct_error(resolver):
    with pytest.raises(InvalidSubThemeError) as exc:
        resolver.resolve_profile("beach", "cheap")
    assert exc.value.code == "INVALID_SUB_THEME"


def test_missing_combination_is_profile_not_found():
    records = {"beach_budget": THEME_PROFILES["beach_budget"]}
    partial = ThemeResolver(ProfileCatalog.from_records(records))

    with pytest.raises(ProfileNotFoundError) as exc:
        partial.resolve_profile("beach", "deluxe")
    assert exc.value.code == "PROFILE_NOT_FOUND"
    assert not partial.is_valid_combination("beach", "deluxe")


def test_budget_override_narrows_only(resolver):
    capped = resolver.resolve_profile_with_overrides("beach", "budget", {"budget_max": 100})
    assert capped.budget_range.max == 100
    assert capped.budget_range.min == 50

    widened = resolver.resolve_profile_with_overrides("beach", "budget", {"budget_max": 10_000})
    assert widened.budget_range.max == 150


def test_budget_override_below_minimum_collapses_range(resolver):
    capped = resolver.resolve_profile_with_overrides("beach", "budget", {"budget_max": 20})
    assert capped.budget_range.min == capped.budget_range.max == 20


def test_unknown_overrides_are_ignored(resolver):
    profile = resolver.resolve_profile_with_overrides("family", "budget", {"favourite_colour": "blue"})
    assert profile.budget_range == resolver.resolve_profile("family", "budget").budget_range


def test_list_combinations(resolver):
    combos = resolver.list_combinations()
    assert len(combos) == 15
    assert {"theme": "beach", "sub_theme": "budget", "name": "Budget Beach Vacation"} in combos


def test_catalog_from_json(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps(THEME_PROFILES), encoding="utf-8")

    catalog = ProfileCatalog.from_json(path)

    assert len(catalog) == 15
    assert catalog.get(Theme.FAMILY, SubTheme.LUXURIOUS).name == THEME_PROFILES["family_luxurious"]["name"]


def test_catalog_rejects_inverted_bounds():
    record = json.loads(json.dumps(THEME_PROFILES["beach_budget"]))
    record["budget_range"] = {"min": 200, "max": 100}

    with pytest.raises(CatalogError):
        ProfileCatalog.from_records({"beach_budget": record})


def test_catalog_rejects_unknown_key():
    with pytest.raises(CatalogError):
        ProfileCatalog.from_records({"moon_budget": THEME_PROFILES["beach_budget"]})
