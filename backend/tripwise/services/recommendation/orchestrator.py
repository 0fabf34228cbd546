"""Recommendation orchestrator: one themed request across every domain.

Validation and profile resolution are fatal. Everything after them is
partial: each provider call runs as its own task and a failure or timeout
becomes an entry in the response's ``errors`` list instead of aborting the
request.
"""

import asyncio
import logging
import time
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from tripwise.config import settings
from tripwise.data.currency import format_price, is_supported
from tripwise.errors import RequestValidationError, ThemeResolutionError
from tripwise.schemas.recommendation import LocationIn, RecommendationRequest
from tripwise.services.amadeus_client import amadeus_client
from tripwise.services.exchange_service import exchange_service
from tripwise.services.geocoding_client import geocoding_client
from tripwise.services.recommendation.adapters import flight, food, hotel, transport
from tripwise.services.recommendation.config import recommendation_config
from tripwise.services.recommendation.search_context import SearchContext, build_search_context
from tripwise.services.recommendation.theme_resolver import (
    ResolvedProfile,
    ThemeResolver,
    build_theme_resolver,
)
from tripwise.services.transport_client import transport_client
from tripwise.services.weather_client import weather_client
from tripwise.services.yelp_client import yelp_client

logger = logging.getLogger(__name__)

LIMITS = recommendation_config.limits


class RequestState(str, Enum):
    RECEIVED = "received"
    VALIDATED = "validated"
    PROFILE_RESOLVED = "profile_resolved"
    PARAMS_BUILT = "params_built"
    FETCHING = "fetching"
    RANKING = "ranking"
    AGGREGATED = "aggregated"
    RESPONDED = "responded"
    ERROR = "error"


@dataclass
class RecommendationRun:
    """Per-request bookkeeping: lifecycle state, failures and timing."""
    request_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    state: RequestState = RequestState.RECEIVED
    history: list[RequestState] = field(default_factory=lambda: [RequestState.RECEIVED])
    errors: list[dict] = field(default_factory=list)
    started: float = field(default_factory=time.monotonic)

    def advance(self, state: RequestState):
        logger.debug(f"[{self.request_id}] {self.state.value} -> {state.value}")
        self.state = state
        self.history.append(state)

    def fail(self, domain: str, error: Exception | str):
        self.errors.append({"domain": domain, "error": str(error)})

    @property
    def elapsed_ms(self) -> int:
        return int((time.monotonic() - self.started) * 1000)

    def meta(self) -> dict:
        return {"request_id": self.request_id, "elapsed_ms": self.elapsed_ms}


@dataclass
class AggregatedRecommendation:
    profile: dict
    ui_hints: dict
    llm_bias: str
    hotels: list[dict]
    flights: list[dict]
    restaurants: list[dict]
    transport: list[dict]
    weather: dict | None
    stats: dict
    meta: dict
    errors: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = {
            "profile": self.profile,
            "ui_hints": self.ui_hints,
            "llm_bias": self.llm_bias,
            "hotels": self.hotels,
            "flights": self.flights,
            "restaurants": self.restaurants,
            "transport": self.transport,
            "weather": self.weather,
            "stats": self.stats,
            "meta": self.meta,
        }
        if self.errors:
            data["errors"] = self.errors
        return data


def _location_given(location: LocationIn | None) -> bool:
    if location is None:
        return False
    return bool(
        location.city_code
        or location.city_name
        or location.destination
        or (location.latitude is not None and location.longitude is not None)
    )


class RecommendationOrchestrator:
    """Coordinates profile resolution, provider fan-out, ranking and aggregation."""

    def __init__(
        self,
        resolver: ThemeResolver | None = None,
        amadeus=None,
        yelp=None,
        transport_provider=None,
        weather=None,
        exchange=None,
        geocoder=None,
        timeout: float | None = None,
    ):
        self.resolver = resolver or build_theme_resolver(settings.profile_catalog_path or None)
        self.amadeus = amadeus or amadeus_client
        self.yelp = yelp or yelp_client
        self.transport = transport_provider or transport_client
        self.weather = weather or weather_client
        self.exchange = exchange or exchange_service
        self.geocoder = geocoder or geocoding_client
        self.timeout = timeout if timeout is not None else settings.recommendation_timeout_seconds

    # --- Full recommendation ---

    async def recommend(self, request: RecommendationRequest, timeout: float | None = None) -> dict:
        """Build the aggregated recommendation for a themed trip request."""
        run = RecommendationRun()
        profile, ctx = await self._prepare(request, run)

        hotel_params = hotel.to_amadeus_params(profile, ctx)
        flight_params = flight.to_amadeus_params(profile, ctx)
        food_params = food.to_yelp_params(profile, ctx)
        transport_params = transport.to_rome2rio_params(profile, ctx)
        run.advance(RequestState.PARAMS_BUILT)

        run.advance(RequestState.FETCHING)
        raw = await self._fan_out(
            {
                "hotels": self.amadeus.search_hotels(hotel_params),
                "flights": self.amadeus.search_flights(flight_params),
                "restaurants": self.yelp.search_restaurants(food_params),
                "transport": self.transport.search_transport(transport_params),
                "weather": self.weather.get_weather(
                    city=ctx.location.display_name,
                    latitude=ctx.location.latitude,
                    longitude=ctx.location.longitude,
                ),
            },
            run,
            self.timeout if timeout is None else timeout,
        )

        run.advance(RequestState.RANKING)
        raw_hotels = raw["hotels"] or []
        raw_flights = raw["flights"] or []
        raw_restaurants = raw["restaurants"] or []
        raw_transport = raw["transport"] or []

        ranked_hotels = hotel.rank_hotels(raw_hotels, profile)
        ranked_flights = flight.rank_flights(raw_flights, profile)
        ranked_restaurants = food.rank_restaurants(raw_restaurants, profile)
        ranked_transport = transport.rank_transport(raw_transport, profile)

        profile_summary = await self._profile_summary(profile, ctx, run)
        weather = raw["weather"]

        result = AggregatedRecommendation(
            profile=profile_summary,
            ui_hints=dict(profile.ui_hints),
            llm_bias=profile.llm_bias,
            hotels=[r.to_dict() for r in ranked_hotels[: LIMITS.hotels_shown]],
            flights=[r.to_dict() for r in ranked_flights[: LIMITS.flights_shown]],
            restaurants=[r.to_dict() for r in ranked_restaurants[: LIMITS.restaurants_shown]],
            transport=[r.to_dict() for r in ranked_transport[: LIMITS.transport_shown]],
            weather=weather.to_dict() if weather is not None else None,
            stats={
                "total_hotels": len(raw_hotels),
                "total_flights": len(raw_flights),
                "total_restaurants": len(raw_restaurants),
                "total_transport": len(raw_transport),
                "recommended_hotels": len(ranked_hotels),
                "recommended_flights": len(ranked_flights),
                "recommended_restaurants": len(ranked_restaurants),
                "recommended_transport": len(ranked_transport),
            },
            meta=run.meta(),
            errors=run.errors,
        )
        run.advance(RequestState.AGGREGATED)

        logger.info(
            f"[{run.request_id}] {profile.name}: "
            f"{len(ranked_hotels)}/{len(raw_hotels)} hotels, "
            f"{len(ranked_flights)}/{len(raw_flights)} flights, "
            f"{len(ranked_restaurants)}/{len(raw_restaurants)} restaurants, "
            f"{len(ranked_transport)}/{len(raw_transport)} transport, "
            f"{len(run.errors)} errors in {run.elapsed_ms}ms"
        )
        data = result.to_dict()
        run.advance(RequestState.RESPONDED)
        return data

    # --- Focused operations ---

    async def recommend_hotels(self, request: RecommendationRequest) -> dict:
        run = RecommendationRun()
        profile, ctx = await self._prepare(request, run)
        params = hotel.to_amadeus_params(profile, ctx)
        raw = await self._single(run, "hotels", self.amadeus.search_hotels(params))
        return self._focused(run, profile, "hotels", hotel.rank_hotels(raw or [], profile))

    async def recommend_flights(self, request: RecommendationRequest) -> dict:
        run = RecommendationRun()
        profile, ctx = await self._prepare(request, run, geocode=False)
        params = flight.to_amadeus_params(profile, ctx)
        raw = await self._single(run, "flights", self.amadeus.search_flights(params))
        return self._focused(run, profile, "flights", flight.rank_flights(raw or [], profile))

    async def recommend_restaurants(self, request: RecommendationRequest) -> dict:
        run = RecommendationRun()
        profile, ctx = await self._prepare(request, run)
        params = food.to_yelp_params(profile, ctx)
        raw = await self._single(run, "restaurants", self.yelp.search_restaurants(params))
        return self._focused(run, profile, "restaurants", food.rank_restaurants(raw or [], profile))

    async def recommend_transport(self, request: RecommendationRequest) -> dict:
        run = RecommendationRun()
        profile, ctx = await self._prepare(request, run)
        params = transport.to_rome2rio_params(profile, ctx)
        raw = await self._single(run, "transport", self.transport.search_transport(params))
        return self._focused(run, profile, "transport", transport.rank_transport(raw or [], profile))

    def list_themes(self) -> list[dict]:
        return self.resolver.list_combinations()

    # --- Steps ---

    async def _prepare(
        self, request: RecommendationRequest, run: RecommendationRun, geocode: bool = True
    ) -> tuple[ResolvedProfile, SearchContext]:
        """Validate, resolve the profile and build the search context."""
        missing = [
            name for name, present in (
                ("theme", bool(request.theme)),
                ("sub_theme", bool(request.sub_theme)),
                ("location", _location_given(request.location)),
            )
            if not present
        ]
        if missing:
            run.advance(RequestState.ERROR)
            raise RequestValidationError(f"Missing required fields: {', '.join(missing)}", missing=missing)
        if request.currency and not is_supported(request.currency):
            run.advance(RequestState.ERROR)
            raise RequestValidationError(f"Unsupported currency: {request.currency}")
        run.advance(RequestState.VALIDATED)

        overrides = request.overrides.model_dump(exclude_none=True) if request.overrides else None
        try:
            profile = self.resolver.resolve_profile_with_overrides(request.theme, request.sub_theme, overrides)
        except ThemeResolutionError as e:
            run.advance(RequestState.ERROR)
            logger.info(f"[{run.request_id}] Profile resolution failed: {e.message}")
            raise
        run.advance(RequestState.PROFILE_RESOLVED)
        logger.info(f"[{run.request_id}] Resolved profile: {profile.name}")

        ctx = build_search_context(request)
        if geocode and ctx.location.city_name and not ctx.location.has_coordinates:
            ctx = await self._geocode(ctx, run)
        return profile, ctx

    async def _geocode(self, ctx: SearchContext, run: RecommendationRun) -> SearchContext:
        try:
            found = await self.geocoder.geocode_city(ctx.location.city_name)
        except Exception as e:
            logger.warning(f"[{run.request_id}] Geocoding failed for {ctx.location.city_name}: {e}")
            run.fail("geocoding", e)
            return ctx
        return ctx.with_coordinates(found.latitude, found.longitude)

    async def _fan_out(self, calls: dict, run: RecommendationRun, timeout: float) -> dict[str, Any]:
        """Run provider calls concurrently; failures and timeouts yield None."""
        tasks = {
            domain: asyncio.create_task(coro, name=f"{run.request_id}:{domain}")
            for domain, coro in calls.items()
        }
        try:
            _, pending = await asyncio.wait(tasks.values(), timeout=timeout)
        finally:
            # Also runs when the request itself is cancelled mid-wait
            unfinished = [task for task in tasks.values() if not task.done()]
            for task in unfinished:
                task.cancel()
            if unfinished:
                await asyncio.gather(*unfinished, return_exceptions=True)

        results: dict[str, Any] = {}
        for domain, task in tasks.items():
            if task in pending:
                logger.warning(f"[{run.request_id}] {domain} timed out after {timeout:g}s")
                run.fail(domain, f"{domain} timed out after {timeout:g}s")
                results[domain] = None
            elif task.exception() is not None:
                logger.warning(f"[{run.request_id}] {domain} failed: {task.exception()}")
                run.fail(domain, task.exception())
                results[domain] = None
            else:
                results[domain] = task.result()
        return results

    async def _single(self, run: RecommendationRun, domain: str, coro) -> Any:
        run.advance(RequestState.PARAMS_BUILT)
        run.advance(RequestState.FETCHING)
        results = await self._fan_out({domain: coro}, run, self.timeout)
        run.advance(RequestState.RANKING)
        return results[domain]

    async def _profile_summary(self, profile: ResolvedProfile, ctx: SearchContext, run: RecommendationRun) -> dict:
        summary = profile.summary()
        if ctx.currency == recommendation_config.defaults.currency:
            return summary
        try:
            rate = await self.exchange.get_rate(ctx.currency)
        except Exception as e:
            logger.warning(f"[{run.request_id}] Currency conversion to {ctx.currency} failed: {e}")
            run.fail("exchange", e)
            return summary
        low = round(profile.budget_range.min * rate, 2)
        high = round(profile.budget_range.max * rate, 2)
        summary["budget_range_local"] = {
            "min": low,
            "max": high,
            "currency": ctx.currency,
            "display": f"{format_price(low, ctx.currency)} - {format_price(high, ctx.currency)}",
        }
        return summary

    def _focused(self, run: RecommendationRun, profile: ResolvedProfile, domain: str, ranked: list) -> dict:
        data = {
            "profile": profile.summary(),
            "ui_hints": dict(profile.ui_hints),
            domain: [r.to_dict() for r in ranked],
            "meta": run.meta(),
        }
        if run.errors:
            data["errors"] = run.errors
        run.advance(RequestState.AGGREGATED)
        run.advance(RequestState.RESPONDED)
        return data


recommendation_orchestrator = RecommendationOrchestrator()
