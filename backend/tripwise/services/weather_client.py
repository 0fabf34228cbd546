"""OpenWeatherMap client: current conditions plus a short forecast."""

import logging
from datetime import date, timedelta

import httpx

from tripwise.config import settings
from tripwise.errors import ProviderError
from tripwise.services.cache_service import cache_service
from tripwise.services.provider_utils import seeded_rng
from tripwise.services.recommendation.results import WeatherReport

logger = logging.getLogger(__name__)

MOCK_CONDITIONS = [
    ("Clear", "clear sky"),
    ("Clouds", "scattered clouds"),
    ("Clouds", "overcast clouds"),
    ("Rain", "light rain"),
]


class WeatherClient:
    """Adapter for the OpenWeatherMap current weather and forecast APIs."""

    def __init__(self):
        self._client: httpx.AsyncClient | None = None
        self._use_mock = settings.use_mock_providers or not settings.openweather_api_key

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=settings.openweather_base_url,
                timeout=settings.provider_timeout_seconds,
            )
        return self._client

    async def get_weather(
        self,
        city: str | None = None,
        latitude: float | None = None,
        longitude: float | None = None,
    ) -> WeatherReport:
        """Current weather and a 5-day daily forecast for a city or coordinates."""
        has_coords = latitude is not None and longitude is not None
        if not city and not has_coords:
            raise ProviderError("OpenWeatherMap", "weather lookup needs a city or coordinates")

        label = city or f"{latitude},{longitude}"
        if self._use_mock:
            return self._generate_mock_weather(label)

        cached = await cache_service.get_weather(label)
        if cached:
            return WeatherReport(**cached)

        query = {"lat": latitude, "lon": longitude} if has_coords else {"q": city}
        query.update(appid=settings.openweather_api_key, units="metric")

        try:
            client = await self._get_client()
            current_resp = await client.get("/weather", params=query)
            current_resp.raise_for_status()
            forecast_resp = await client.get("/forecast", params=query)
            forecast_resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"OpenWeatherMap error: {e.response.status_code}")
            if e.response.status_code == 404:
                raise ProviderError("OpenWeatherMap", f"city not found: {label}") from e
            raise ProviderError("OpenWeatherMap", f"returned {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"OpenWeatherMap request error: {e}")
            raise ProviderError("OpenWeatherMap", str(e)) from e

        report = self._parse(label, current_resp.json(), forecast_resp.json())
        await cache_service.set_weather(label, report.to_dict())
        return report

    @staticmethod
    def _parse(label: str, current: dict, forecast: dict) -> WeatherReport:
        main = current.get("main", {})
        weather = (current.get("weather") or [{}])[0]

        # Group 3-hourly forecast entries by day
        days: dict[str, list[dict]] = {}
        for item in forecast.get("list", []):
            day = item.get("dt_txt", "").split(" ")[0]
            if day:
                days.setdefault(day, []).append(item)

        daily = []
        for day, items in list(days.items())[:5]:
            temps = [i["main"]["temp"] for i in items if "main" in i]
            conditions = [i["weather"][0]["main"] for i in items if i.get("weather")]
            daily.append({
                "date": day,
                "temp_min": min(temps) if temps else None,
                "temp_max": max(temps) if temps else None,
                "condition": max(set(conditions), key=conditions.count) if conditions else None,
            })

        return WeatherReport(
            location=current.get("name") or label,
            temperature=main.get("temp"),
            feels_like=main.get("feels_like"),
            humidity=main.get("humidity"),
            condition=weather.get("main"),
            description=weather.get("description"),
            wind_speed=current.get("wind", {}).get("speed"),
            forecast=daily,
        )

    def _generate_mock_weather(self, label: str) -> WeatherReport:
        """Generate plausible weather for demo/development."""
        today = date.today()
        rng = seeded_rng("weather", label.lower(), today.isoformat())
        base = rng.uniform(8, 32)
        condition, description = rng.choice(MOCK_CONDITIONS)

        forecast = []
        for offset in range(5):
            day_base = base + rng.uniform(-3, 3)
            forecast.append({
                "date": (today + timedelta(days=offset)).isoformat(),
                "temp_min": round(day_base - rng.uniform(2, 6), 1),
                "temp_max": round(day_base + rng.uniform(2, 6), 1),
                "condition": rng.choice(MOCK_CONDITIONS)[0],
            })

        return WeatherReport(
            location=label,
            temperature=round(base, 1),
            feels_like=round(base + rng.uniform(-2, 2), 1),
            humidity=rng.randint(35, 90),
            condition=condition,
            description=description,
            wind_speed=round(rng.uniform(0.5, 9), 1),
            forecast=forecast,
            source="mock",
        )

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


weather_client = WeatherClient()
