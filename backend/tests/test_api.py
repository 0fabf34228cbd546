import pytest
from fastapi.testclient import TestClient

from tripwise.errors import ProviderError
from tripwise.main import app
from tripwise.routers.recommendations import get_orchestrator

BODY = {
    "theme": "beach",
    "subTheme": "budget",
    "location": {"cityCode": "GOI", "origin": "BOM", "latitude": 15.2993, "longitude": 74.124},
    "dates": {"checkIn": "2026-12-01", "checkOut": "2026-12-05", "departureDate": "2026-12-01"},
    "guests": {"adults": 2, "rooms": 1},
}


@pytest.fixture
def client(orchestrator):
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "service": "tripwise"}


def test_recommendation_envelope(client, providers):
    resp = client.post("/api/recommendations", json=BODY)

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["timestamp"]
    assert body["data"]["profile"]["name"] == "Budget Beach Vacation"
    assert [h["id"] for h in body["data"]["hotels"]] == ["H1", "H2"]

    (hotel_params,), _ = providers.amadeus.search_hotels.calls[0]
    assert hotel_params["adults"] == 2


def test_snake_case_body_is_accepted(client):
    body = {**BODY, "sub_theme": "budget"}
    del body["subTheme"]
    assert client.post("/api/recommendations", json=body).status_code == 200


def test_missing_fields_return_400(client, providers):
    resp = client.post("/api/recommendations", json={"theme": "beach"})

    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert detail["code"] == "VALIDATION_ERROR"
    assert detail["missing"] == ["sub_theme", "location"]
    assert providers.amadeus.search_hotels.call_count == 0


@pytest.mark.parametrize(
    "field, value, code",
    [("theme", "moon", "INVALID_THEME"), ("subTheme", "free", "INVALID_SUB_THEME")],
)
def test_invalid_theme_returns_400(client, field, value, code):
    resp = client.post("/api/recommendations", json={**BODY, field: value})

    assert resp.status_code == 400
    assert resp.json()["detail"]["code"] == code


def test_unsupported_currency_returns_400(client, providers):
    resp = client.post("/api/recommendations", json={**BODY, "currency": "XYZ"})

    assert resp.status_code == 400
    assert resp.json()["detail"] == {"code": "VALIDATION_ERROR", "message": "Unsupported currency: XYZ"}
    assert providers.exchange.get_rate.call_count == 0


def test_malformed_party_size_is_rejected(client):
    resp = client.post("/api/recommendations", json={**BODY, "guests": {"adults": 0}})
    assert resp.status_code == 422


def test_partial_failure_still_returns_200(client, providers):
    providers.amadeus.search_flights.result = ProviderError("Amadeus", "down")

    resp = client.post("/api/recommendations", json=BODY)

    assert resp.status_code == 200
    assert resp.json()["data"]["errors"] == [{"domain": "flights", "error": "Amadeus API error: down"}]


@pytest.mark.parametrize("domain", ["hotels", "flights", "restaurants", "transport"])
def test_focused_endpoints(client, domain):
    resp = client.post(f"/api/recommendations/{domain}", json=BODY)

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert domain in data
    assert data["profile"]["theme"] == "beach"


def test_list_themes(client):
    resp = client.get("/api/recommendations/themes")

    assert resp.status_code == 200
    themes = resp.json()["data"]
    assert len(themes) == 15
    assert (themes[-1]["theme"], themes[-1]["sub_theme"]) == ("family", "luxurious")
