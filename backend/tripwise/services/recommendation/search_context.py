"""Per-request search context shared by every adapter."""

from dataclasses import dataclass, field, replace
from datetime import date

from tripwise.schemas.recommendation import RecommendationRequest


@dataclass(frozen=True)
class Location:
    city_code: str | None = None
    city_name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    origin: str | None = None
    destination: str | None = None
    dest_id: str | None = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def display_name(self) -> str | None:
        return self.city_name or self.city_code


@dataclass(frozen=True)
class GuestCounts:
    adults: int = 1
    children: int = 0
    rooms: int = 1


@dataclass(frozen=True)
class PassengerCounts:
    adults: int = 1
    children: int = 0
    infants: int = 0


@dataclass(frozen=True)
class SearchContext:
    location: Location
    check_in: date | None = None
    check_out: date | None = None
    departure_date: date | None = None
    return_date: date | None = None
    guests: GuestCounts = field(default_factory=GuestCounts)
    passengers: PassengerCounts = field(default_factory=PassengerCounts)
    currency: str = "USD"

    @property
    def flight_origin(self) -> str | None:
        return self.location.origin

    @property
    def flight_destination(self) -> str | None:
        return self.location.destination or self.location.city_code

    def with_coordinates(self, latitude: float, longitude: float) -> "SearchContext":
        return replace(self, location=replace(self.location, latitude=latitude, longitude=longitude))


def build_search_context(req: RecommendationRequest) -> SearchContext:
    """Build the context from a validated request; party sizes default to 1 adult."""
    loc = req.location
    location = Location(
        city_code=loc.city_code.upper() if loc.city_code else None,
        city_name=loc.city_name,
        latitude=loc.latitude,
        longitude=loc.longitude,
        origin=loc.origin.upper() if loc.origin else None,
        destination=loc.destination.upper() if loc.destination else None,
        dest_id=loc.dest_id,
    )

    dates = req.dates
    guests = (
        GuestCounts(adults=req.guests.adults, children=req.guests.children, rooms=req.guests.rooms)
        if req.guests else GuestCounts()
    )
    passengers = (
        PassengerCounts(
            adults=req.passengers.adults,
            children=req.passengers.children,
            infants=req.passengers.infants,
        )
        if req.passengers else PassengerCounts()
    )

    return SearchContext(
        location=location,
        check_in=dates.check_in if dates else None,
        check_out=dates.check_out if dates else None,
        departure_date=dates.departure_date if dates else None,
        return_date=dates.return_date if dates else None,
        guests=guests,
        passengers=passengers,
        currency=(req.currency or "USD").upper(),
    )
