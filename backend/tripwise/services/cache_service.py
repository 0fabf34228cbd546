"""Redis cache service for exchange rates, weather and geocoding lookups."""

import json
import logging
from typing import Any

import redis.asyncio as redis

from tripwise.config import settings

logger = logging.getLogger(__name__)

# TTLs in seconds
TTL_GEOCODE = 7 * 24 * 60 * 60    # 7 days
TTL_DEFAULT = 15 * 60             # 15 minutes


class CacheService:
    """Redis-backed cache with typed TTLs. Every call is best-effort."""

    def __init__(self):
        self._redis: redis.Redis | None = None

    async def _get_redis(self) -> redis.Redis | None:
        if self._redis is None:
            try:
                self._redis = redis.from_url(
                    settings.redis_url,
                    encoding="utf-8",
                    decode_responses=True,
                )
                await self._redis.ping()
            except Exception as e:
                logger.warning(f"Redis unavailable, cache disabled: {e}")
                self._redis = None
                return None
        return self._redis

    async def get(self, key: str) -> Any | None:
        """Get a value from cache. Returns None on miss or error."""
        try:
            r = await self._get_redis()
            if r is None:
                return None
            raw = await r.get(key)
            if raw is None:
                return None
            return json.loads(raw)
        except Exception:
            return None

    async def set(self, key: str, value: Any, ttl: int = TTL_DEFAULT) -> bool:
        """Set a value in cache with TTL. Returns False on error."""
        try:
            r = await self._get_redis()
            if r is None:
                return False
            await r.set(key, json.dumps(value, default=str), ex=ttl)
            return True
        except Exception:
            return False

    # Typed helpers

    def rates_key(self, base: str) -> str:
        return f"rates:{base.upper()}"

    def weather_key(self, location: str) -> str:
        return f"weather:{location.lower()}"

    def geocode_key(self, query: str) -> str:
        return f"geocode:{query.strip().lower()}"

    async def get_rates(self, base: str) -> dict | None:
        return await self.get(self.rates_key(base))

    async def set_rates(self, base: str, data: dict):
        await self.set(self.rates_key(base), data, settings.exchange_cache_ttl)

    async def get_weather(self, location: str) -> dict | None:
        return await self.get(self.weather_key(location))

    async def set_weather(self, location: str, data: dict):
        await self.set(self.weather_key(location), data, settings.weather_cache_ttl)

    async def get_geocode(self, query: str) -> dict | None:
        return await self.get(self.geocode_key(query))

    async def set_geocode(self, query: str, data: dict):
        await self.set(self.geocode_key(query), data, TTL_GEOCODE)

    async def close(self):
        if self._redis:
            await self._redis.aclose()
            self._redis = None


cache_service = CacheService()
