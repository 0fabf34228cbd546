"""Typed provider records and ranked results.

Every numeric field a provider may omit is a true optional (None), never a
zero sentinel, so ranking can tell "missing" apart from "free" or "next door".
"""

import re
from dataclasses import asdict, dataclass, field
from typing import Generic, TypeVar


@dataclass
class HotelOffer:
    id: str
    name: str
    price_total: float | None = None      # per night
    currency: str = "USD"
    star_rating: float | None = None
    rating: float | None = None           # guest rating, 0-5
    distance: float | None = None         # meters from the search anchor
    latitude: float | None = None
    longitude: float | None = None
    address: str | None = None
    chain: str | None = None
    room_type: str | None = None
    amenities: list[str] = field(default_factory=list)
    source: str = "amadeus"

    def to_dict(self) -> dict:
        return asdict(self)


_ISO_DURATION = re.compile(r"^P(?:(\d+)D)?(?:T(?:(\d+)H)?(?:(\d+)M)?(?:\d+(?:\.\d+)?S)?)?$")


def parse_iso_duration(duration: str | None) -> int | None:
    """Parse an ISO 8601 duration (PT5H30M, P1DT2H) to minutes; None if unparseable."""
    if not duration:
        return None
    match = _ISO_DURATION.match(duration)
    if not match or not any(match.groups()):
        return None
    days, hours, minutes = (int(g) if g else 0 for g in match.groups())
    return days * 1440 + hours * 60 + minutes


@dataclass
class FlightOffer:
    id: str
    price_total: float | None = None
    currency: str = "USD"
    airline_code: str | None = None
    airline_name: str | None = None
    flight_numbers: str | None = None
    travel_class: str | None = None       # ECONOMY | PREMIUM_ECONOMY | BUSINESS | FIRST
    segments: int | None = None           # number of legs in the outbound itinerary
    duration: str | None = None           # ISO 8601, e.g. PT5H30M
    origin: str | None = None
    destination: str | None = None
    departure_time: str | None = None
    arrival_time: str | None = None
    seats_remaining: int | None = None

    @property
    def duration_minutes(self) -> int | None:
        return parse_iso_duration(self.duration)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["duration_minutes"] = self.duration_minutes
        return data


@dataclass
class Restaurant:
    id: str
    name: str
    rating: float | None = None
    price_level: int | None = None        # 1-4
    distance: float | None = None         # meters
    review_count: int | None = None
    categories: list[str] = field(default_factory=list)
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    is_open_now: bool | None = None
    phone: str | None = None
    url: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class TransportOption:
    id: str
    mode: str | None = None
    name: str | None = None
    price: float | None = None            # per trip
    duration: float | None = None         # minutes
    distance_km: float | None = None
    provider: str | None = None
    transfers: int | None = None
    currency: str = "USD"

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class WeatherReport:
    location: str
    temperature: float | None = None      # Celsius
    feels_like: float | None = None
    humidity: int | None = None
    condition: str | None = None
    description: str | None = None
    wind_speed: float | None = None
    forecast: list[dict] = field(default_factory=list)
    source: str = "openweathermap"

    def to_dict(self) -> dict:
        return asdict(self)


T = TypeVar("T", HotelOffer, FlightOffer, Restaurant, TransportOption)


@dataclass
class RankedResult(Generic[T]):
    item: T
    score: float

    def to_dict(self) -> dict:
        data = self.item.to_dict()
        data["score"] = round(self.score, 4)
        return data
