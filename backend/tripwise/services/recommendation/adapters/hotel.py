"""Hotel adapter: profile to hotel search params, hotel offers to a ranking."""

import math

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
from tripwise.services.recommendation.results import HotelOffer, RankedResult
from tripwise.services.recommendation.search_context import SearchContext

# Generic amenity names → Amadeus amenity codes
AMADEUS_AMENITIES = {
    "wifi": "WIFI",
    "pool": "SWIMMING_POOL",
    "spa": "SPA",
    "gym": "FITNESS_CENTER",
    "restaurant": "RESTAURANT",
    "beach_access": "BEACH",
    "business_center": "BUSINESS_CENTER",
    "meeting_rooms": "MEETING_ROOMS",
    "kids_club": "KIDS_CLUB",
    "parking": "PARKING",
}

# Generic amenity names → Booking.com filter codes
BOOKING_AMENITIES = {
    "wifi": "free_wifi",
    "pool": "swimming_pool",
    "spa": "spa",
    "gym": "fitness_center",
    "restaurant": "restaurant",
    "beach_access": "beach_front",
    "parking": "free_parking",
}

AMADEUS_SORT = {"price": "PRICE", "rating": "RATING", "distance": "DISTANCE"}
BOOKING_SORT = {"price": "price", "rating": "review_score", "distance": "distance"}


def _star_ratings(profile: RecommendationProfile) -> list[int]:
    stars = profile.hotel_preferences.star_rating
    return list(range(math.floor(stars.min), math.ceil(stars.max) + 1))


def _map_amenities(amenities, mapping: dict) -> list[str]:
    return [mapping[a] for a in amenities if a in mapping]


def _radius(profile: RecommendationProfile) -> int:
    return profile.hotel_preferences.distance_max or CFG.defaults.hotel_radius_meters


def _iso(value) -> str | None:
    return value.isoformat() if value else None


def _fmt(value: float) -> str:
    return f"{value:g}"


def to_amadeus_params(profile: RecommendationProfile, ctx: SearchContext) -> dict:
    weights = require_weights(profile)
    budget = profile.budget_range
    loc = ctx.location
    return {
        "cityCode": loc.city_code,
        "latitude": loc.latitude,
        "longitude": loc.longitude,
        "radius": _radius(profile),
        "radiusUnit": "M",
        "checkInDate": _iso(ctx.check_in),
        "checkOutDate": _iso(ctx.check_out),
        "adults": ctx.guests.adults,
        "children": ctx.guests.children,
        "rooms": ctx.guests.rooms,
        "ratings": _star_ratings(profile),
        "amenities": _map_amenities(profile.hotel_preferences.amenities, AMADEUS_AMENITIES),
        "priceRange": f"{_fmt(budget.min)}-{_fmt(budget.max)}",
        "currency": CFG.defaults.currency,
        "sortBy": AMADEUS_SORT[pick_sort_field(weights)],
        "limit": CFG.limits.provider_max,
    }


def to_booking_params(profile: RecommendationProfile, ctx: SearchContext) -> dict:
    weights = require_weights(profile)
    budget = profile.budget_range
    stars = profile.hotel_preferences.star_rating
    return {
        "dest_id": ctx.location.dest_id,
        "dest_type": "city",
        "checkin_date": _iso(ctx.check_in),
        "checkout_date": _iso(ctx.check_out),
        "adults_number": ctx.guests.adults,
        "children_number": ctx.guests.children,
        "room_number": ctx.guests.rooms,
        "nflt": f"class={_fmt(stars.min)}-{_fmt(stars.max)}",
        "price_min": budget.min,
        "price_max": budget.max,
        "order_by": BOOKING_SORT[pick_sort_field(weights)],
        "filter_by_amenities": _map_amenities(profile.hotel_preferences.amenities, BOOKING_AMENITIES),
    }


def score_hotel(hotel: HotelOffer, weights: RankingWeights) -> float:
    ceilings = CFG.ceilings
    return (
        inverse_score(hotel.price_total, ceilings.hotel_price) * weights.price
        + rating_score(hotel.rating if hotel.rating is not None else hotel.star_rating) * weights.rating
        + inverse_score(hotel.distance, ceilings.distance_meters) * weights.distance
    )


def rank_hotels(hotels: list[HotelOffer], profile: RecommendationProfile) -> list[RankedResult[HotelOffer]]:
    """Keep offers inside the budget and star range, best composite first."""
    weights = require_weights(profile)
    budget = profile.budget_range
    stars = profile.hotel_preferences.star_rating

    def keep(h: HotelOffer) -> bool:
        return (
            within(h.price_total, budget)
            and within(h.star_rating, stars)
        )

    return rank(hotels, keep, lambda h: score_hotel(h, weights))
