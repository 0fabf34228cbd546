import asyncio

import pytest

from tripwise.errors import InvalidSubThemeError, InvalidThemeError, ProviderError, RequestValidationError
from tripwise.services.recommendation.orchestrator import (
    RecommendationOrchestrator,
    RecommendationRun,
    RequestState,
)
from tripwise.services.recommendation.results import HotelOffer, Restaurant
from tripwise.services.transport_client import TransportClient


def _fan_out_calls(providers):
    return (
        providers.amadeus.search_hotels,
        providers.amadeus.search_flights,
        providers.yelp.search_restaurants,
        providers.transport.search_transport,
        providers.weather.get_weather,
    )


def _all_calls(providers) -> int:
    return sum(call.call_count for call in (*_fan_out_calls(providers), providers.geocoder.geocode_city))


async def test_full_recommendation(orchestrator, providers, build_request):
    data = await orchestrator.recommend(build_request())

    assert data["profile"]["name"] == "Budget Beach Vacation"
    assert data["profile"]["theme"] == "beach"
    assert data["ui_hints"]["density"] == "compact"
    assert data["llm_bias"]

    assert [h["id"] for h in data["hotels"]] == ["H1", "H2"]
    assert data["hotels"][0]["score"] == pytest.approx(0.70)
    assert [f["id"] for f in data["flights"]] == ["F1", "F2"]
    assert [r["id"] for r in data["restaurants"]] == ["R2", "R1"]
    assert [t["id"] for t in data["transport"]] == ["T1", "T2"]
    assert data["weather"]["location"] == "Goa"

    assert data["stats"] == {
        "total_hotels": 3,
        "total_flights": 2,
        "total_restaurants": 2,
        "total_transport": 3,
        "recommended_hotels": 2,
        "recommended_flights": 2,
        "recommended_restaurants": 2,
        "recommended_transport": 2,
    }
    assert "errors" not in data
    assert data["meta"]["request_id"]
    assert data["meta"]["elapsed_ms"] >= 0


async def test_adapters_receive_provider_params(orchestrator, providers, build_request):
    await orchestrator.recommend(build_request())

    (hotel_params,), _ = providers.amadeus.search_hotels.calls[0]
    assert hotel_params["cityCode"] == "GOI"
    assert hotel_params["ratings"] == [2, 3]

    (flight_params,), _ = providers.amadeus.search_flights.calls[0]
    assert flight_params["originLocationCode"] == "BOM"
    assert flight_params["travelClass"] == "ECONOMY"

    (food_params,), _ = providers.yelp.search_restaurants.calls[0]
    assert food_params["price"] == "1,2"

    _, weather_kwargs = providers.weather.get_weather.calls[0]
    assert weather_kwargs["city"] == "GOI"
    assert providers.geocoder.geocode_city.call_count == 0
    assert providers.exchange.get_rate.call_count == 0


async def test_presentation_caps(orchestrator, providers, build_request):
    providers.amadeus.search_hotels.result = [
        HotelOffer(id=f"H{i}", name=f"Hotel {i}", price_total=60 + i, rating=4) for i in range(12)
    ]
    providers.yelp.search_restaurants.result = [
        Restaurant(id=f"R{i}", name=f"Place {i}", price_level=1, rating=4) for i in range(12)
    ]

    data = await orchestrator.recommend(build_request())

    assert len(data["hotels"]) == 5
    assert len(data["restaurants"]) == 8
    assert data["stats"]["recommended_hotels"] == 10
    assert data["stats"]["total_hotels"] == 12


async def test_provider_failure_is_partial(orchestrator, providers, build_request):
    providers.yelp.search_restaurants.result = ProviderError("Yelp", "search returned 500")

    data = await orchestrator.recommend(build_request())

    assert data["restaurants"] == []
    assert data["stats"]["total_restaurants"] == 0
    assert data["errors"] == [{"domain": "restaurants", "error": "Yelp API error: search returned 500"}]
    assert len(data["hotels"]) == 2


async def test_every_provider_failing_still_responds(orchestrator, providers, build_request):
    boom = ProviderError("Amadeus", "down")
    providers.amadeus.search_hotels.result = boom
    providers.amadeus.search_flights.result = boom
    providers.yelp.search_restaurants.result = boom
    providers.transport.search_transport.result = boom
    providers.weather.get_weather.result = boom

    data = await orchestrator.recommend(build_request())

    assert {e["domain"] for e in data["errors"]} == {"hotels", "flights", "restaurants", "transport", "weather"}
    assert data["weather"] is None
    assert data["hotels"] == data["flights"] == data["restaurants"] == data["transport"] == []


async def test_slow_provider_times_out(orchestrator, providers, build_request):
    providers.transport.search_transport.delay = 1.0

    data = await orchestrator.recommend(build_request(), timeout=0.05)

    assert data["transport"] == []
    assert data["errors"] == [{"domain": "transport", "error": "transport timed out after 0.05s"}]
    assert len(data["hotels"]) == 2
    assert providers.transport.search_transport.cancelled == 1


async def test_providers_are_called_concurrently(orchestrator, providers, build_request):
    gate = asyncio.Barrier(5)
    for call in _fan_out_calls(providers):
        call.gate = gate

    data = await orchestrator.recommend(build_request())

    assert "errors" not in data
    assert len(data["hotels"]) == 2


async def test_cancelled_request_cancels_provider_calls(orchestrator, providers, build_request):
    for call in _fan_out_calls(providers):
        call.delay = 5.0

    with pytest.raises(asyncio.TimeoutError):
        await asyncio.wait_for(orchestrator.recommend(build_request()), timeout=0.05)

    assert [call.cancelled for call in _fan_out_calls(providers)] == [1, 1, 1, 1, 1]


async def test_missing_fields_fail_before_any_call(orchestrator, providers, build_request):
    with pytest.raises(RequestValidationError) as exc:
        await orchestrator.recommend(build_request(location=None, subTheme=None))

    assert exc.value.missing == ["sub_theme", "location"]
    assert exc.value.to_dict()["code"] == "VALIDATION_ERROR"
    assert _all_calls(providers) == 0


async def test_empty_location_counts_as_missing(orchestrator, providers, build_request):
    with pytest.raises(RequestValidationError):
        await orchestrator.recommend(build_request(location={}))
    assert _all_calls(providers) == 0


async def test_invalid_theme_fails_before_any_call(orchestrator, providers, build_request):
    with pytest.raises(InvalidThemeError):
        await orchestrator.recommend(build_request(theme="moon"))
    with pytest.raises(InvalidSubThemeError):
        await orchestrator.recommend(build_request(subTheme="free"))
    assert _all_calls(providers) == 0


async def test_city_name_is_geocoded(orchestrator, providers, build_request):
    data = await orchestrator.recommend(build_request(location={"cityName": "Goa", "origin": "BOM"}))

    assert providers.geocoder.geocode_city.calls[0][0] == ("Goa",)
    (hotel_params,), _ = providers.amadeus.search_hotels.calls[0]
    assert hotel_params["latitude"] == 15.2993
    assert hotel_params["longitude"] == 74.124
    assert "errors" not in data


async def test_city_name_only_request_gets_transport(resolver, providers, build_request):
    routes = TransportClient()
    routes._use_mock = True
    orchestrator = RecommendationOrchestrator(
        resolver=resolver,
        amadeus=providers.amadeus,
        yelp=providers.yelp,
        transport_provider=routes,
        weather=providers.weather,
        exchange=providers.exchange,
        geocoder=providers.geocoder,
        timeout=1.0,
    )

    data = await orchestrator.recommend(build_request(location={"cityName": "Goa"}))

    assert "errors" not in data
    assert data["transport"]
    assert {t["mode"] for t in data["transport"]} <= {"public_transport", "shared_rides", "walk"}


async def test_geocoding_failure_is_partial(orchestrator, providers, build_request):
    providers.geocoder.geocode_city.result = ProviderError("Nominatim", "no coordinates for 'Atlantis'")

    data = await orchestrator.recommend(build_request(location={"cityName": "Atlantis", "cityCode": "ATL"}))

    assert data["errors"][0]["domain"] == "geocoding"
    assert providers.amadeus.search_hotels.call_count == 1


async def test_local_currency_budget(orchestrator, providers, build_request):
    data = await orchestrator.recommend(build_request(currency="inr"))

    assert providers.exchange.get_rate.calls[0][0] == ("INR",)
    assert data["profile"]["budget_range_local"] == {
        "min": 4150.0,
        "max": 12450.0,
        "currency": "INR",
        "display": "₹4,150 - ₹12,450",
    }


async def test_exchange_failure_is_partial(orchestrator, providers, build_request):
    providers.exchange.get_rate.result = ProviderError("ExchangeRate", "rates returned 503")

    data = await orchestrator.recommend(build_request(currency="EUR"))

    assert "budget_range_local" not in data["profile"]
    assert data["errors"] == [{"domain": "exchange", "error": "ExchangeRate API error: rates returned 503"}]


async def test_unsupported_currency_fails_before_any_call(orchestrator, providers, build_request):
    with pytest.raises(RequestValidationError) as exc:
        await orchestrator.recommend(build_request(currency="XYZ"))

    assert exc.value.message == "Unsupported currency: XYZ"
    assert _all_calls(providers) == 0
    assert providers.exchange.get_rate.call_count == 0


async def test_budget_override_narrows_ranking(orchestrator, build_request):
    data = await orchestrator.recommend(build_request(overrides={"budgetMax": 85}))

    assert data["profile"]["budget_range"] == {"min": 50, "max": 85.0}
    assert [h["id"] for h in data["hotels"]] == ["H1"]


async def test_recommend_hotels_only_calls_hotels(orchestrator, providers, build_request):
    data = await orchestrator.recommend_hotels(build_request())

    assert set(data) == {"profile", "ui_hints", "hotels", "meta"}
    assert [h["id"] for h in data["hotels"]] == ["H1", "H2"]
    assert providers.amadeus.search_flights.call_count == 0
    assert providers.weather.get_weather.call_count == 0


async def test_recommend_flights_skips_geocoding(orchestrator, providers, build_request):
    data = await orchestrator.recommend_flights(build_request(location={"cityName": "Goa", "origin": "BOM", "destination": "GOI"}))

    assert [f["id"] for f in data["flights"]] == ["F1", "F2"]
    assert providers.geocoder.geocode_city.call_count == 0


async def test_focused_failure_reports_errors(orchestrator, providers, build_request):
    providers.transport.search_transport.result = ProviderError("Rome2Rio", "search returned 503")

    data = await orchestrator.recommend_transport(build_request())

    assert data["transport"] == []
    assert data["errors"][0]["domain"] == "transport"


async def test_recommend_restaurants(orchestrator, build_request):
    data = await orchestrator.recommend_restaurants(build_request())
    assert [r["id"] for r in data["restaurants"]] == ["R2", "R1"]


def test_list_themes(orchestrator):
    themes = orchestrator.list_themes()
    assert len(themes) == 15


def test_run_records_lifecycle():
    run = RecommendationRun()
    run.advance(RequestState.VALIDATED)
    run.fail("hotels", ProviderError("Amadeus", "down"))

    assert run.history == [RequestState.RECEIVED, RequestState.VALIDATED]
    assert run.errors == [{"domain": "hotels", "error": "Amadeus API error: down"}]
    assert set(run.meta()) == {"request_id", "elapsed_ms"}
