"""Nominatim (OpenStreetMap) geocoding client with a static city table for demo mode."""

import asyncio
import logging
from dataclasses import dataclass

import httpx

from tripwise.config import settings
from tripwise.errors import ProviderError
from tripwise.services.cache_service import cache_service

logger = logging.getLogger(__name__)

# Well-known destinations, used when geocoding runs without network access
CITY_COORDINATES: dict[str, tuple[float, float]] = {
    "goa": (15.2993, 74.1240),
    "miami": (25.7617, -80.1918),
    "bali": (-8.3405, 115.0920),
    "phuket": (7.8804, 98.3923),
    "cancun": (21.1619, -86.8515),
    "honolulu": (21.3069, -157.8583),
    "shimla": (31.1048, 77.1734),
    "manali": (32.2432, 77.1892),
    "darjeeling": (27.0410, 88.2663),
    "aspen": (39.1911, -106.8175),
    "new york": (40.7128, -74.0060),
    "london": (51.5072, -0.1276),
    "paris": (48.8566, 2.3522),
    "singapore": (1.3521, 103.8198),
    "dubai": (25.2048, 55.2708),
    "tokyo": (35.6762, 139.6503),
    "mumbai": (19.0760, 72.8777),
    "bangalore": (12.9716, 77.5946),
    "rishikesh": (30.0869, 78.2676),
    "kerala": (10.8505, 76.2711),
    "orlando": (28.5384, -81.3789),
    "san diego": (32.7157, -117.1611),
    "sydney": (-33.8688, 151.2093),
    "barcelona": (41.3874, 2.1686),
}


@dataclass
class GeocodeResult:
    name: str
    latitude: float
    longitude: float
    country: str | None = None


class GeocodingClient:
    """Adapter for the Nominatim search API."""

    def __init__(self):
        self._client: httpx.AsyncClient | None = None
        self._use_mock = settings.use_mock_providers
        self._lock = asyncio.Lock()  # Nominatim policy: one request at a time

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=settings.nominatim_base_url,
                timeout=settings.provider_timeout_seconds,
                headers={"User-Agent": settings.nominatim_user_agent},
            )
        return self._client

    async def geocode_city(self, name: str) -> GeocodeResult:
        """Resolve a city name to coordinates."""
        key = name.strip().lower()
        if self._use_mock:
            if key not in CITY_COORDINATES:
                raise ProviderError("Nominatim", f"no coordinates for '{name}'")
            lat, lon = CITY_COORDINATES[key]
            return GeocodeResult(name=name.strip().title(), latitude=lat, longitude=lon)

        cached = await cache_service.get_geocode(key)
        if cached:
            return GeocodeResult(**cached)

        try:
            async with self._lock:
                client = await self._get_client()
                resp = await client.get(
                    "/search",
                    params={"q": name, "format": "json", "limit": 1, "addressdetails": 1},
                )
                resp.raise_for_status()
                results = resp.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Nominatim search error: {e.response.status_code}")
            raise ProviderError("Nominatim", f"search returned {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"Nominatim request error: {e}")
            raise ProviderError("Nominatim", str(e)) from e

        if not results:
            raise ProviderError("Nominatim", f"no coordinates for '{name}'")

        top = results[0]
        result = GeocodeResult(
            name=top.get("display_name", name).split(",")[0],
            latitude=float(top["lat"]),
            longitude=float(top["lon"]),
            country=(top.get("address") or {}).get("country_code"),
        )
        await cache_service.set_geocode(key, result.__dict__)
        return result

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


geocoding_client = GeocodingClient()
