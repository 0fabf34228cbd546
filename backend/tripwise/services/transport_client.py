"""Rome2Rio client: local transport routes with mock fallback."""

import logging

import httpx

from tripwise.config import settings
from tripwise.errors import ProviderError
from tripwise.services.provider_utils import clean_params, seeded_rng
from tripwise.services.recommendation.results import TransportOption

logger = logging.getLogger(__name__)

# (mode, name, base price USD, base duration min, provider, transfers)
MOCK_ROUTES = [
    ("taxi", "Taxi", 45, 25, "Local Taxi Service", 0),
    ("public_transport", "Bus + Metro", 5, 45, "City Transit", 1),
    ("private_car", "Private Car", 75, 25, "Premium Rides", 0),
    ("walk", "Walking", 0, 180, "On foot", 0),
    ("shared_rides", "Shared Shuttle", 18, 40, "Airport Shuttle Co", 0),
    ("bicycle", "Bike Share", 8, 70, "City Bikes", 0),
    ("limousine", "Chauffeured Limousine", 160, 25, "Elite Limo", 0),
]


class TransportClient:
    """Adapter for the Rome2Rio search API."""

    def __init__(self):
        self._client: httpx.AsyncClient | None = None
        self._use_mock = settings.use_mock_providers or not settings.rome2rio_api_key

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=settings.rome2rio_base_url,
                timeout=settings.provider_timeout_seconds,
            )
        return self._client

    async def search_transport(self, params: dict) -> list[TransportOption]:
        """Search routes using params built by the transport adapter."""
        has_origin = params.get("oName") or params.get("oPos")
        has_destination = params.get("dName") or params.get("dPos")
        if not has_origin or not has_destination:
            raise ProviderError("Rome2Rio", "transport search needs an origin and a destination")

        if self._use_mock:
            return self._generate_mock_routes(params)

        try:
            client = await self._get_client()
            resp = await client.get(
                "/Search",
                params={"key": settings.rome2rio_api_key, **clean_params(params)},
            )
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Rome2Rio search error: {e.response.status_code}")
            raise ProviderError("Rome2Rio", f"search returned {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"Rome2Rio request error: {e}")
            raise ProviderError("Rome2Rio", str(e)) from e

        vehicles = data.get("vehicles", [])
        return [self._parse_route(i, r, vehicles) for i, r in enumerate(data.get("routes", []))]

    @staticmethod
    def _parse_route(index: int, route: dict, vehicles: list[dict]) -> TransportOption:
        segments = route.get("segments", [])
        mode = None
        for seg in segments:
            vehicle_idx = seg.get("vehicle")
            if vehicle_idx is not None and vehicle_idx < len(vehicles):
                mode = vehicles[vehicle_idx].get("kind") or vehicles[vehicle_idx].get("name")
                break
        prices = route.get("indicativePrices", [])
        return TransportOption(
            id=f"ROUTE_{index + 1}",
            mode=mode.lower() if mode else None,
            name=route.get("name"),
            price=prices[0].get("price") if prices else None,
            duration=route.get("totalDuration"),
            distance_km=route.get("distance"),
            provider="Rome2Rio",
            transfers=max(0, len(segments) - 1) if segments else None,
            currency=prices[0].get("currency", "USD") if prices else "USD",
        )

    def _generate_mock_routes(self, params: dict) -> list[TransportOption]:
        """Generate transport options for demo/development."""
        rng = seeded_rng("transport", params.get("oName"), params.get("dName"), params.get("dPos"))
        distance_factor = rng.uniform(0.8, 1.3)
        distance_km = round(15 * distance_factor, 1)

        return [
            TransportOption(
                id=f"TRANSPORT_{i + 1}",
                mode=mode,
                name=name,
                price=round(price * distance_factor, 2),
                duration=round(duration * distance_factor),
                distance_km=distance_km,
                provider=provider,
                transfers=transfers,
            )
            for i, (mode, name, price, duration, provider, transfers) in enumerate(MOCK_ROUTES)
        ]

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


transport_client = TransportClient()
