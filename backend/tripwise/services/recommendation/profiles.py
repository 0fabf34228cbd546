"""Recommendation profiles and the read-only profile catalog."""

import json
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from tripwise.data.theme_profiles import THEME_PROFILES
from tripwise.errors import CatalogError
from tripwise.services.recommendation.themes import SubTheme, Theme, parse_sub_theme, parse_theme

logger = logging.getLogger(__name__)


class ComfortLevel(str, Enum):
    ECONOMY = "economy"
    COMFORT = "comfort"
    LUXURY = "luxury"


# ---------- Data structures ----------


@dataclass(frozen=True)
class Bounds:
    """Inclusive numeric range."""
    min: float
    max: float

    def __post_init__(self):
        if self.min > self.max:
            raise CatalogError(f"Invalid bounds: min {self.min} > max {self.max}")

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def to_dict(self) -> dict:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class HotelPreferences:
    star_rating: Bounds
    amenities: tuple[str, ...] = ()
    distance_max: int | None = None     # meters
    distance_anchor: str | None = None  # beach | center | nature | attractions
    room_types: tuple[str, ...] = ()


@dataclass(frozen=True)
class RestaurantPreferences:
    price_level: Bounds                 # 1-4 scale
    cuisine_types: tuple[str, ...] = ()
    distance_max: int | None = None     # meters


@dataclass(frozen=True)
class TransportPreferences:
    comfort_level: ComfortLevel
    preferred_modes: tuple[str, ...] = ()
    prioritize: str = "cost"


@dataclass(frozen=True)
class RankingWeights:
    """Relative weights; they need not sum to 1."""
    price: float
    rating: float
    distance: float

    def __post_init__(self):
        for name in ("price", "rating", "distance"):
            if getattr(self, name) < 0:
                raise CatalogError(f"Ranking weight '{name}' must be non-negative")

    def to_dict(self) -> dict:
        return {"price": self.price, "rating": self.rating, "distance": self.distance}


@dataclass(frozen=True)
class RecommendationProfile:
    name: str
    budget_range: Bounds                 # daily USD
    hotel_preferences: HotelPreferences
    restaurant_preferences: RestaurantPreferences
    transport_preferences: TransportPreferences
    ranking_weights: RankingWeights
    activity_categories: tuple[str, ...] = ()
    ui_hints: Mapping = field(default_factory=lambda: MappingProxyType({}))
    llm_bias: str = ""

    @classmethod
    def from_dict(cls, data: Mapping) -> "RecommendationProfile":
        """Build a profile from its table/JSON form."""
        try:
            hotel = data["hotel_preferences"]
            food = data["restaurant_preferences"]
            transport = data["transport_preferences"]
            return cls(
                name=data["name"],
                budget_range=Bounds(**data["budget_range"]),
                hotel_preferences=HotelPreferences(
                    star_rating=Bounds(**hotel["star_rating"]),
                    amenities=tuple(hotel.get("amenities", ())),
                    distance_max=hotel.get("distance_max"),
                    distance_anchor=hotel.get("distance_anchor"),
                    room_types=tuple(hotel.get("room_types", ())),
                ),
                restaurant_preferences=RestaurantPreferences(
                    price_level=Bounds(**food["price_level"]),
                    cuisine_types=tuple(food.get("cuisine_types", ())),
                    distance_max=food.get("distance_max"),
                ),
                transport_preferences=TransportPreferences(
                    comfort_level=ComfortLevel(transport["comfort_level"]),
                    preferred_modes=tuple(transport.get("preferred_modes", ())),
                    prioritize=transport.get("prioritize", "cost"),
                ),
                ranking_weights=RankingWeights(**data["ranking_weights"]),
                activity_categories=tuple(data.get("activity_categories", ())),
                ui_hints=MappingProxyType(dict(data.get("ui_hints", {}))),
                llm_bias=data.get("llm_bias", ""),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogError(f"Malformed profile '{data.get('name', '?')}': {e}") from e


# ---------- Catalog ----------


def _parse_key(key: str) -> tuple[Theme, SubTheme]:
    theme_part, _, sub_part = key.rpartition("_")
    theme = parse_theme(theme_part)
    sub_theme = parse_sub_theme(sub_part)
    if theme is None or sub_theme is None:
        raise CatalogError(f"Unknown catalog key: {key}")
    return theme, sub_theme


class ProfileCatalog:
    """Immutable (theme, sub-theme) → profile lookup, shared across requests."""

    def __init__(self, profiles: Mapping[tuple[Theme, SubTheme], RecommendationProfile]):
        self._profiles = MappingProxyType(dict(profiles))

    @classmethod
    def from_records(cls, records: Mapping[str, Mapping]) -> "ProfileCatalog":
        return cls({_parse_key(key): RecommendationProfile.from_dict(data) for key, data in records.items()})

    @classmethod
    def from_json(cls, path: str | Path) -> "ProfileCatalog":
        with Path(path).open(encoding="utf-8") as fh:
            records = json.load(fh)
        return cls.from_records(records)

    def get(self, theme: Theme, sub_theme: SubTheme) -> RecommendationProfile | None:
        return self._profiles.get((theme, sub_theme))

    def combinations(self) -> list[tuple[Theme, SubTheme, str]]:
        return [(theme, sub, profile.name) for (theme, sub), profile in self._profiles.items()]

    def missing_combinations(self) -> list[tuple[Theme, SubTheme]]:
        return [(t, s) for t in Theme for s in SubTheme if (t, s) not in self._profiles]

    def __contains__(self, key: object) -> bool:
        return key in self._profiles

    def __iter__(self) -> Iterator[tuple[Theme, SubTheme]]:
        return iter(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)


def load_catalog(path: str | None = None) -> ProfileCatalog:
    """Load the catalog from a JSON file, or the built-in table when no path is given."""
    if path:
        catalog = ProfileCatalog.from_json(path)
        logger.info(f"Loaded {len(catalog)} theme profiles from {path}")
    else:
        catalog = ProfileCatalog.from_records(THEME_PROFILES)

    missing = catalog.missing_combinations()
    if missing:
        logger.warning(
            "Profile catalog is missing combinations: "
            + ", ".join(f"{t.value}/{s.value}" for t, s in missing)
        )
    return catalog
