"""Exchange rates from ExchangeRate-API, cached in Redis, static table without a key."""

import logging

import httpx

from tripwise.config import settings
from tripwise.data.currency import EXCHANGE_RATES_TO_USD, static_rate_from_usd
from tripwise.errors import ProviderError
from tripwise.services.cache_service import cache_service

logger = logging.getLogger(__name__)


class ExchangeService:
    """Converts USD amounts into the caller's display currency."""

    def __init__(self):
        self._client: httpx.AsyncClient | None = None
        self._use_static = settings.use_mock_providers or not settings.exchange_api_key

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=f"{settings.exchange_base_url}/{settings.exchange_api_key}",
                timeout=settings.provider_timeout_seconds,
            )
        return self._client

    async def get_rates(self, base: str = "USD") -> dict[str, float]:
        """Units of each currency per 1 unit of base."""
        base = base.upper()
        if self._use_static:
            if base != "USD":
                raise ProviderError("ExchangeRate", "static rates are USD-based only")
            return {code: static_rate_from_usd(code) for code in EXCHANGE_RATES_TO_USD}

        cached = await cache_service.get_rates(base)
        if cached:
            return cached

        try:
            client = await self._get_client()
            resp = await client.get(f"/latest/{base}")
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"ExchangeRate API error: {e.response.status_code}")
            raise ProviderError("ExchangeRate", f"returned {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"ExchangeRate request error: {e}")
            raise ProviderError("ExchangeRate", str(e)) from e

        if data.get("result") != "success":
            raise ProviderError("ExchangeRate", data.get("error-type", "unknown error"))

        rates = data.get("conversion_rates", {})
        await cache_service.set_rates(base, rates)
        return rates

    async def get_rate(self, to_currency: str, base: str = "USD") -> float:
        to_currency = to_currency.upper()
        if to_currency == base.upper():
            return 1.0
        rates = await self.get_rates(base)
        rate = rates.get(to_currency)
        if not rate:
            raise ProviderError("ExchangeRate", f"unsupported currency: {to_currency}")
        return rate

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


exchange_service = ExchangeService()
