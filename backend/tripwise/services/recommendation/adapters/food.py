"""Food adapter: profile to restaurant search params, restaurants to a ranking."""

from tripwise.services.recommendation.adapters.scoring import (
    CFG,
    inverse_score,
    pick_sort_field,
    rank,
    rating_score,
    require_weights,
    within,
)
from tripwise.services.recommendation.profiles import RankingWeights, RecommendationProfile
from tripwise.services.recommendation.results import RankedResult, Restaurant
from tripwise.services.recommendation.search_context import SearchContext

# Generic cuisine names → Yelp category aliases; unknown cuisines pass through
YELP_CATEGORIES = {
    "seafood": "seafood",
    "local": "local_flavor",
    "casual": "restaurants",
    "fine_dining": "fine_dining",
    "international": "international",
    "vegan": "vegan",
    "organic": "organic",
    "healthy": "healthyeating",
    "fast_casual": "fast_food",
    "cafe": "cafes",
    "michelin_star": "fine_dining",
    "business_lunch": "restaurants",
    "kids_menu": "family_friendly",
    "family_friendly": "family_friendly",
}

# Yelp cannot sort by price
YELP_SORT = {"price": "best_match", "rating": "rating", "distance": "distance"}


def yelp_categories(cuisine_types) -> list[str]:
    if not cuisine_types:
        return ["restaurants"]
    return [YELP_CATEGORIES.get(c, c) for c in cuisine_types if c]


def yelp_price(profile: RecommendationProfile) -> str:
    levels = profile.restaurant_preferences.price_level
    return ",".join(str(i) for i in range(int(levels.min), int(levels.max) + 1))


def _radius(profile: RecommendationProfile) -> int:
    return profile.restaurant_preferences.distance_max or CFG.defaults.restaurant_radius_meters


def to_yelp_params(profile: RecommendationProfile, ctx: SearchContext) -> dict:
    weights = require_weights(profile)
    return {
        "latitude": ctx.location.latitude,
        "longitude": ctx.location.longitude,
        "location": ctx.location.display_name,
        "radius": _radius(profile),
        "categories": ",".join(yelp_categories(profile.restaurant_preferences.cuisine_types)),
        "price": yelp_price(profile),
        "sort_by": YELP_SORT[pick_sort_field(weights)],
        "open_now": True,
        "limit": CFG.limits.provider_max,
    }


def to_google_places_params(profile: RecommendationProfile, ctx: SearchContext) -> dict:
    prefs = profile.restaurant_preferences
    loc = ctx.location
    return {
        "location": f"{loc.latitude},{loc.longitude}" if loc.has_coordinates else None,
        "radius": _radius(profile),
        "type": "restaurant",
        "keyword": " OR ".join(prefs.cuisine_types),
        "minprice": int(prefs.price_level.min),
        "maxprice": int(prefs.price_level.max),
        "opennow": True,
    }


def score_restaurant(restaurant: Restaurant, weights: RankingWeights) -> float:
    adjustments = CFG.restaurants
    levels = CFG.ceilings.restaurant_price_levels

    if restaurant.price_level is None:
        price_score = adjustments.missing_price_score
    else:
        price_score = (levels + 1 - restaurant.price_level) / levels

    review_bonus = min((restaurant.review_count or 0) / adjustments.review_count_scale, adjustments.review_bonus_cap)

    return (
        price_score * weights.price
        + rating_score(restaurant.rating) * weights.rating
        + inverse_score(restaurant.distance, CFG.ceilings.distance_meters) * weights.distance
        + review_bonus
    )


def rank_restaurants(
    restaurants: list[Restaurant], profile: RecommendationProfile
) -> list[RankedResult[Restaurant]]:
    """Keep restaurants inside the price-level range, best composite first."""
    weights = require_weights(profile)
    levels = profile.restaurant_preferences.price_level

    return rank(
        restaurants,
        lambda r: within(r.price_level, levels),
        lambda r: score_restaurant(r, weights),
    )
