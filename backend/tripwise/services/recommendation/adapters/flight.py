"""Flight adapter: profile to flight search params, flight offers to a ranking.

Cabin and non-stop choices come from the profile's transport preferences:
budget profiles accept layovers, luxury profiles fly direct in business.
"""

from tripwise.services.recommendation.adapters.scoring import (
    CFG,
    inverse_score,
    quality_weight,
    rank,
    require_weights,
)
from tripwise.services.recommendation.profiles import ComfortLevel, RankingWeights, RecommendationProfile
from tripwise.services.recommendation.results import FlightOffer, RankedResult
from tripwise.services.recommendation.search_context import SearchContext
from tripwise.services.recommendation.themes import SubTheme

COMFORT_CABIN = {
    ComfortLevel.LUXURY: "BUSINESS",
    ComfortLevel.COMFORT: "PREMIUM_ECONOMY",
    ComfortLevel.ECONOMY: "ECONOMY",
}

SUB_THEME_CABIN = {
    SubTheme.LUXURIOUS: "BUSINESS",
    SubTheme.DELUXE: "PREMIUM_ECONOMY",
}

NON_STOP_PRIORITIES = {"time", "exclusivity"}


def cabin_class(profile: RecommendationProfile) -> str:
    """Comfort level decides; the sub-theme is consulted only when it is unset."""
    comfort = profile.transport_preferences.comfort_level
    if comfort in COMFORT_CABIN:
        return COMFORT_CABIN[comfort]
    sub_theme = getattr(profile, "sub_theme", None)
    return SUB_THEME_CABIN.get(sub_theme, "ECONOMY")


def non_stop(profile: RecommendationProfile) -> bool:
    return profile.transport_preferences.prioritize in NON_STOP_PRIORITIES


def to_amadeus_params(profile: RecommendationProfile, ctx: SearchContext) -> dict:
    require_weights(profile)
    return {
        "originLocationCode": ctx.flight_origin,
        "destinationLocationCode": ctx.flight_destination,
        "departureDate": ctx.departure_date.isoformat() if ctx.departure_date else None,
        "returnDate": ctx.return_date.isoformat() if ctx.return_date else None,
        "adults": ctx.passengers.adults,
        "children": ctx.passengers.children,
        "infants": ctx.passengers.infants,
        "travelClass": cabin_class(profile),
        "nonStop": non_stop(profile),
        "maxPrice": profile.budget_range.max,
        "currencyCode": CFG.defaults.currency,
        "max": CFG.limits.provider_max,
    }


def score_flight(flight: FlightOffer, weights: RankingWeights) -> float:
    ceilings = CFG.ceilings
    adjustments = CFG.flights

    price_score = inverse_score(flight.price_total, ceilings.flight_price)
    duration_score = inverse_score(flight.duration_minutes, ceilings.flight_duration_minutes)
    layover_penalty = adjustments.layover_penalty if (flight.segments or 0) > 1 else 0.0
    cabin_bonus = adjustments.cabin_bonus.get(flight.travel_class or "", 0.0)

    base = price_score * weights.price + duration_score * quality_weight(weights)
    return base + cabin_bonus - layover_penalty


def rank_flights(flights: list[FlightOffer], profile: RecommendationProfile) -> list[RankedResult[FlightOffer]]:
    """Keep offers at or under the budget ceiling, best composite first."""
    weights = require_weights(profile)
    budget_max = profile.budget_range.max

    def keep(f: FlightOffer) -> bool:
        return f.price_total is None or f.price_total <= budget_max

    return rank(flights, keep, lambda f: score_flight(f, weights))
