"""Recommendation pipeline configuration: scoring constants and result limits."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ScoringCeilings:
    """Fixed reference maxima used to normalize sub-scores.

    Prices are scored against a domain ceiling rather than the profile's own
    budget so that scores stay comparable across profiles.
    """
    hotel_price: float = 1000.0        # USD per night
    flight_price: float = 2000.0       # USD total
    transport_price: float = 200.0     # USD per trip
    distance_meters: float = 10000.0   # 10 km
    flight_duration_minutes: float = 1440.0   # 24 h
    transport_duration_minutes: float = 180.0  # 3 h
    restaurant_price_levels: int = 4


@dataclass(frozen=True)
class FlightAdjustments:
    layover_penalty: float = 0.2
    cabin_bonus: dict = field(default_factory=lambda: {
        "ECONOMY": 0.0,
        "PREMIUM_ECONOMY": 0.1,
        "BUSINESS": 0.2,
        "FIRST": 0.3,
    })


@dataclass(frozen=True)
class RestaurantAdjustments:
    review_count_scale: float = 500.0
    review_bonus_cap: float = 0.2
    missing_price_score: float = 0.5


@dataclass(frozen=True)
class ResultLimits:
    """How many results each stage keeps."""
    ranked_max: int = 10            # adapter truncation
    provider_max: int = 20          # results requested from providers
    hotels_shown: int = 5           # presentation caps in the aggregate
    flights_shown: int = 3
    restaurants_shown: int = 8
    transport_shown: int = 4


@dataclass(frozen=True)
class SearchDefaults:
    hotel_radius_meters: int = 5000
    restaurant_radius_meters: int = 5000
    fallback_duration_weight: float = 0.3
    currency: str = "USD"
    language: str = "en"


@dataclass(frozen=True)
class RecommendationConfig:
    """Top-level config aggregating all sub-configs."""
    ceilings: ScoringCeilings = field(default_factory=ScoringCeilings)
    flights: FlightAdjustments = field(default_factory=FlightAdjustments)
    restaurants: RestaurantAdjustments = field(default_factory=RestaurantAdjustments)
    limits: ResultLimits = field(default_factory=ResultLimits)
    defaults: SearchDefaults = field(default_factory=SearchDefaults)


# Singleton, import this everywhere
recommendation_config = RecommendationConfig()
