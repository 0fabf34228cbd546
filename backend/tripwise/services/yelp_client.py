"""Yelp Fusion client: restaurant search with mock fallback."""

import logging

import httpx

from tripwise.config import settings
from tripwise.errors import ProviderError
from tripwise.services.provider_utils import clean_params, seeded_rng
from tripwise.services.recommendation.results import Restaurant

logger = logging.getLogger(__name__)

NAME_PREFIXES = ["The", "Casa", "Blue", "Golden", "Ocean", "Garden", "Royal", "Little"]
NAME_TYPES = ["Grill", "Bistro", "Kitchen", "House", "Table", "Cafe", "Eatery", "Brasserie"]


class YelpClient:
    """Adapter for the Yelp Fusion business search API."""

    def __init__(self):
        self._client: httpx.AsyncClient | None = None
        self._use_mock = settings.use_mock_providers or not settings.yelp_api_key

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=settings.yelp_base_url,
                timeout=settings.provider_timeout_seconds,
                headers={"Authorization": f"Bearer {settings.yelp_api_key}"},
            )
        return self._client

    async def search_restaurants(self, params: dict) -> list[Restaurant]:
        """Search restaurants using params built by the food adapter."""
        has_coords = params.get("latitude") is not None and params.get("longitude") is not None
        if not has_coords and not params.get("location"):
            raise ProviderError("Yelp", "restaurant search needs coordinates or a location name")

        if self._use_mock:
            return self._generate_mock_restaurants(params)

        query = dict(params)
        if has_coords:
            query.pop("location", None)
        # Yelp caps the search radius at 40 km
        query["radius"] = min(int(query.get("radius") or 5000), 40000)

        try:
            client = await self._get_client()
            resp = await client.get("/businesses/search", params=clean_params(query))
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Yelp search error: {e.response.status_code}")
            raise ProviderError("Yelp", f"search returned {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"Yelp request error: {e}")
            raise ProviderError("Yelp", str(e)) from e

        return [self._parse_business(b) for b in data.get("businesses", [])]

    @staticmethod
    def _parse_business(b: dict) -> Restaurant:
        coords = b.get("coordinates") or {}
        location = b.get("location") or {}
        price = b.get("price")
        return Restaurant(
            id=b["id"],
            name=b.get("name", b["id"]),
            rating=b.get("rating"),
            price_level=len(price) if price else None,
            distance=round(b["distance"], 1) if b.get("distance") is not None else None,
            review_count=b.get("review_count"),
            categories=[c.get("alias") for c in b.get("categories", []) if c.get("alias")],
            address=", ".join(location.get("display_address", [])) or None,
            latitude=coords.get("latitude"),
            longitude=coords.get("longitude"),
            is_open_now=(not b["is_closed"]) if "is_closed" in b else None,
            phone=b.get("display_phone") or None,
            url=b.get("url"),
        )

    def _generate_mock_restaurants(self, params: dict) -> list[Restaurant]:
        """Generate realistic mock restaurants for demo/development."""
        anchor = params.get("location") or f"{params.get('latitude')},{params.get('longitude')}"
        rng = seeded_rng("food", anchor, params.get("categories"), params.get("price"))

        levels = [int(p) for p in str(params.get("price") or "1,2,3,4").split(",") if p.strip().isdigit()]
        categories = str(params.get("categories") or "restaurants").split(",")
        radius = params.get("radius") or 5000
        lat, lon = params.get("latitude"), params.get("longitude")

        restaurants = []
        for i in range(min(params.get("limit") or 20, 15)):
            restaurants.append(Restaurant(
                id=f"RESTAURANT_{i + 1}",
                name=f"{rng.choice(NAME_PREFIXES)} {rng.choice(NAME_TYPES)}",
                rating=round(rng.uniform(3.5, 5.0), 1),
                price_level=rng.choice(levels) if levels else None,
                distance=float(rng.randint(50, radius)),
                review_count=rng.randint(50, 550),
                categories=rng.sample(categories, min(len(categories), 2)),
                address=f"{i + 100} Main Street",
                latitude=round(lat + rng.uniform(-0.025, 0.025), 6) if lat is not None else None,
                longitude=round(lon + rng.uniform(-0.025, 0.025), 6) if lon is not None else None,
                is_open_now=True,
            ))
        return restaurants

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


yelp_client = YelpClient()
