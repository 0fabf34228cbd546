from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Accepts both snake_case and camelCase field names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LocationIn(_CamelModel):
    city_code: str | None = None
    city_name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    origin: str | None = None          # departure airport (IATA)
    destination: str | None = None     # arrival airport (IATA)
    dest_id: str | None = None         # Booking.com destination id


class DatesIn(_CamelModel):
    check_in: date | None = None
    check_out: date | None = None
    departure_date: date | None = None
    return_date: date | None = None


class GuestsIn(_CamelModel):
    adults: int = Field(1, ge=1)
    children: int = Field(0, ge=0)
    rooms: int = Field(1, ge=1)


class PassengersIn(_CamelModel):
    adults: int = Field(1, ge=1)
    children: int = Field(0, ge=0)
    infants: int = Field(0, ge=0)


class ProfileOverrides(_CamelModel):
    budget_max: float | None = Field(None, ge=0)


class RecommendationRequest(_CamelModel):
    """Body of the recommendation endpoints.

    theme, sub_theme and location are required but validated by the
    orchestrator so that missing values produce a 400 rather than a 422.
    """
    theme: str | None = None
    sub_theme: str | None = None
    location: LocationIn | None = None
    dates: DatesIn | None = None
    guests: GuestsIn | None = None
    passengers: PassengersIn | None = None
    currency: str | None = None
    overrides: ProfileOverrides | None = None
