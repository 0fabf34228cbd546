import asyncio
from datetime import date
from types import SimpleNamespace

import pytest

from tripwise.schemas.recommendation import RecommendationRequest
from tripwise.services.geocoding_client import GeocodeResult
from tripwise.services.recommendation.orchestrator import RecommendationOrchestrator
from tripwise.services.recommendation.profiles import load_catalog
from tripwise.services.recommendation.results import (
    FlightOffer,
    HotelOffer,
    Restaurant,
    TransportOption,
    WeatherReport,
)
from tripwise.services.recommendation.search_context import Location, SearchContext
from tripwise.services.recommendation.theme_resolver import ThemeResolver


class FakeCall:
    """Async stand-in for a provider method.

    ``result`` is returned, or raised when it is an exception. ``delay``
    sleeps first so timeouts can be exercised, and ``gate`` (an
    ``asyncio.Barrier``) holds the call until every sibling call arrives.
    ``cancelled`` counts calls that were cancelled while waiting.
    """

    def __init__(self, result=None, delay: float = 0.0):
        self.result = result
        self.delay = delay
        self.gate: asyncio.Barrier | None = None
        self.calls: list[tuple] = []
        self.cancelled = 0

    async def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        try:
            if self.gate is not None:
                await self.gate.wait()
            if self.delay:
                await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled += 1
            raise
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def resolver():
    return ThemeResolver(load_catalog())


@pytest.fixture
def beach_budget(resolver):
    return resolver.resolve_profile("beach", "budget")


@pytest.fixture
def beach_luxurious(resolver):
    return resolver.resolve_profile("beach", "luxurious")


@pytest.fixture
def search_ctx():
    return SearchContext(
        location=Location(city_code="GOI", city_name="Goa", latitude=15.2993, longitude=74.124, origin="BOM"),
        check_in=date(2026, 12, 1),
        check_out=date(2026, 12, 5),
        departure_date=date(2026, 12, 1),
        return_date=date(2026, 12, 5),
    )


@pytest.fixture
def sample_hotels():
    return [
        HotelOffer(id="H1", name="Sea Breeze", price_total=80, rating=4.0),
        HotelOffer(id="H2", name="Palm Court", price_total=90, rating=3.0),
        HotelOffer(id="H3", name="Grand Palace", price_total=900, rating=4.5),
    ]


@pytest.fixture
def sample_flights():
    return [
        FlightOffer(id="F1", price_total=120, travel_class="ECONOMY", segments=1, duration="PT2H"),
        FlightOffer(id="F2", price_total=95, travel_class="ECONOMY", segments=2, duration="PT4H30M"),
    ]


@pytest.fixture
def sample_restaurants():
    return [
        Restaurant(id="R1", name="Fisherman's Wharf", rating=4.5, price_level=2, distance=800, review_count=320),
        Restaurant(id="R2", name="Shack 9", rating=4.0, price_level=1, distance=300, review_count=90),
    ]


@pytest.fixture
def sample_transport():
    return [
        TransportOption(id="T1", mode="bus", price=2, duration=40),
        TransportOption(id="T2", mode="walk", price=0, duration=90),
        TransportOption(id="T3", mode="taxi", price=25, duration=15),
    ]


@pytest.fixture
def providers(sample_hotels, sample_flights, sample_restaurants, sample_transport):
    """Fake provider clients with healthy default responses."""
    return SimpleNamespace(
        amadeus=SimpleNamespace(
            search_hotels=FakeCall(sample_hotels),
            search_flights=FakeCall(sample_flights),
        ),
        yelp=SimpleNamespace(search_restaurants=FakeCall(sample_restaurants)),
        transport=SimpleNamespace(search_transport=FakeCall(sample_transport)),
        weather=SimpleNamespace(get_weather=FakeCall(WeatherReport(location="Goa", temperature=31.0))),
        exchange=SimpleNamespace(get_rate=FakeCall(83.0)),
        geocoder=SimpleNamespace(
            geocode_city=FakeCall(GeocodeResult(name="Goa", latitude=15.2993, longitude=74.124))
        ),
    )


@pytest.fixture
def orchestrator(resolver, providers):
    return RecommendationOrchestrator(
        resolver=resolver,
        amadeus=providers.amadeus,
        yelp=providers.yelp,
        transport_provider=providers.transport,
        weather=providers.weather,
        exchange=providers.exchange,
        geocoder=providers.geocoder,
        timeout=1.0,
    )


def make_request(**overrides) -> RecommendationRequest:
    body = {
        "theme": "beach",
        "subTheme": "budget",
        "location": {"cityCode": "goi", "origin": "bom", "latitude": 15.2993, "longitude": 74.124},
        "dates": {
            "checkIn": "2026-12-01",
            "checkOut": "2026-12-05",
            "departureDate": "2026-12-01",
            "returnDate": "2026-12-05",
        },
    }
    body.update(overrides)
    return RecommendationRequest.model_validate(body)


@pytest.fixture
def build_request():
    return make_request
