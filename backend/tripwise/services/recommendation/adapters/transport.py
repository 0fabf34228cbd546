"""Transport adapter: profile to local transport params, options to a ranking."""

import re

from tripwise.services.recommendation.adapters.scoring import (
    CFG,
    inverse_score,
    quality_weight,
    rank,
    require_weights,
)
from tripwise.services.recommendation.profiles import (
    ComfortLevel,
    RankingWeights,
    RecommendationProfile,
    TransportPreferences,
)
from tripwise.services.recommendation.results import RankedResult, TransportOption
from tripwise.services.recommendation.search_context import SearchContext

# Rome2Rio search flags; several generic modes share a flag
ROME2RIO_FLAGS = {
    "public_transport": 1,
    "walk": 2,
    "taxi": 4,
    "private_car": 8,
    "shared_rides": 1,
    "rental_car": 8,
    "bicycle": 2,
    "limousine": 4,
    "helicopter": 16,
}

VEHICLE_CATEGORY = {
    ComfortLevel.ECONOMY: "ECONOMY",
    ComfortLevel.COMFORT: "STANDARD",
    ComfortLevel.LUXURY: "LUXURY",
}

# Provider and profile mode names that count as each generic mode
MODE_ALIASES = {
    "public_transport": ("bus", "train", "metro", "subway", "tram", "transit"),
    "walk": ("walk", "walking", "hiking"),
    "taxi": ("taxi", "taxis", "cab", "uber", "lyft", "family_taxi", "family_taxis", "premium_taxi"),
    "private_car": ("car", "private_car", "rental", "rental_car", "private_transfers", "premium_rides"),
    "shared_rides": ("carpool", "rideshare", "ride_sharing", "uber_pool", "shuttle", "airport_shuttle"),
    "bicycle": ("bike", "bicycle", "cycle"),
    "limousine": ("limo", "limousine", "luxury_car"),
    "helicopter": ("helicopter", "heli"),
    "cable_car": ("cable_car", "gondola", "funicular"),
}

_NON_WORD = re.compile(r"[^a-z0-9]+")

COMFORT_BONUS = {
    "walk": {ComfortLevel.ECONOMY: 0.1, ComfortLevel.COMFORT: 0.0, ComfortLevel.LUXURY: -0.2},
    "public_transport": {ComfortLevel.ECONOMY: 0.2, ComfortLevel.COMFORT: 0.1, ComfortLevel.LUXURY: -0.1},
    "taxi": {ComfortLevel.ECONOMY: 0.0, ComfortLevel.COMFORT: 0.2, ComfortLevel.LUXURY: 0.1},
    "private_car": {ComfortLevel.ECONOMY: 0.0, ComfortLevel.COMFORT: 0.3, ComfortLevel.LUXURY: 0.2},
    "limousine": {ComfortLevel.ECONOMY: -0.2, ComfortLevel.COMFORT: 0.2, ComfortLevel.LUXURY: 0.4},
}

ECO_BONUS = {
    "walk": 0.3,
    "bicycle": 0.3,
    "public_transport": 0.2,
    "taxi": 0.0,
    "private_car": -0.1,
    "limousine": -0.2,
}


def mode_flags(preferred_modes) -> int:
    flags = 0
    for mode in preferred_modes:
        flags |= ROME2RIO_FLAGS.get(mode, ROME2RIO_FLAGS.get(canonical_mode(mode), 0))
    return flags


def canonical_mode(option_mode: str | None) -> str | None:
    """Map a mode name ("metro", "Uber", "Bike Share") to its generic mode.

    The whole name is tried against the generic modes and their aliases
    first, then each word of it. Unknown names come back normalised.
    """
    if not option_mode:
        return None
    key = _NON_WORD.sub("_", option_mode.strip().lower()).strip("_")
    if key in MODE_ALIASES:
        return key
    for mode, aliases in MODE_ALIASES.items():
        if key in aliases:
            return mode
    words = set(key.split("_"))
    for mode, aliases in MODE_ALIASES.items():
        if words.intersection(aliases):
            return mode
    return key


def matches_mode(option_mode: str, preferred_mode: str) -> bool:
    return canonical_mode(option_mode) == canonical_mode(preferred_mode)


def to_rome2rio_params(profile: RecommendationProfile, ctx: SearchContext) -> dict:
    require_weights(profile)
    loc = ctx.location
    position = f"{loc.latitude},{loc.longitude}" if loc.has_coordinates else None
    # Local transport starts and ends in the destination area
    return {
        "oName": loc.destination or loc.city_code or loc.display_name,
        "dName": loc.display_name,
        "oPos": position,
        "dPos": position,
        "flags": mode_flags(profile.transport_preferences.preferred_modes),
        "currencyCode": CFG.defaults.currency,
        "languageCode": CFG.defaults.language,
    }


def to_rental_cars_params(profile: RecommendationProfile, ctx: SearchContext) -> dict:
    comfort = profile.transport_preferences.comfort_level
    pickup = ctx.location.destination or ctx.location.city_code
    pickup_date = ctx.check_in or ctx.departure_date
    dropoff_date = ctx.check_out or ctx.return_date
    return {
        "pickupLocation": pickup,
        "dropoffLocation": pickup,
        "pickupDate": pickup_date.isoformat() if pickup_date else None,
        "dropoffDate": dropoff_date.isoformat() if dropoff_date else None,
        "vehicleCategory": VEHICLE_CATEGORY.get(comfort, "ECONOMY"),
        "maxPrice": profile.budget_range.max / 10,
        "currency": CFG.defaults.currency,
        "airConditioned": True,
        "automaticTransmission": comfort != ComfortLevel.ECONOMY,
        "limit": CFG.limits.provider_max,
    }


def score_transport(option: TransportOption, weights: RankingWeights, prefs: TransportPreferences) -> float:
    ceilings = CFG.ceilings
    mode = canonical_mode(option.mode)

    comfort_bonus = COMFORT_BONUS.get(mode, {}).get(prefs.comfort_level, 0.0)
    eco_bonus = ECO_BONUS.get(mode, 0.0) if prefs.prioritize == "eco_friendly" else 0.0

    return (
        inverse_score(option.price, ceilings.transport_price) * weights.price
        + inverse_score(option.duration, ceilings.transport_duration_minutes) * quality_weight(weights)
        + comfort_bonus
        + eco_bonus
    )


def rank_transport(
    options: list[TransportOption], profile: RecommendationProfile
) -> list[RankedResult[TransportOption]]:
    """Keep options matching a preferred mode, best composite first."""
    weights = require_weights(profile)
    prefs = profile.transport_preferences

    def keep(o: TransportOption) -> bool:
        if not o.mode or not prefs.preferred_modes:
            return True
        return any(matches_mode(o.mode, preferred) for preferred in prefs.preferred_modes)

    return rank(options, keep, lambda o: score_transport(o, weights, prefs))
