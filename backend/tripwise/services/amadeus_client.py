"""Amadeus API client: hotel and flight search with OAuth2 and rate limiting."""

import asyncio
import logging
import math
from datetime import date, datetime, timedelta, timezone

import httpx

from tripwise.config import settings
from tripwise.errors import ProviderError
from tripwise.services.provider_utils import clean_params, parse_date, seeded_rng
from tripwise.services.recommendation.results import FlightOffer, HotelOffer

logger = logging.getLogger(__name__)

# Airline name lookup (common ones)
AIRLINE_NAMES = {
    "AA": "American Airlines", "DL": "Delta Air Lines", "UA": "United Airlines",
    "B6": "JetBlue Airways", "AS": "Alaska Airlines", "WN": "Southwest Airlines",
    "AC": "Air Canada", "BA": "British Airways", "LH": "Lufthansa",
    "AF": "Air France", "KL": "KLM", "IB": "Iberia", "EK": "Emirates",
    "QR": "Qatar Airways", "SQ": "Singapore Airlines", "CX": "Cathay Pacific",
    "AI": "Air India", "6E": "IndiGo", "TG": "Thai Airways", "NH": "ANA",
}

HOTEL_NAMES = {
    2: ["Budget Inn", "Traveler's Lodge", "Hostel Central", "Econo Stay"],
    3: ["Comfort Suites", "Holiday Inn Express", "Courtyard", "Park View Hotel"],
    4: ["Hilton Garden Inn", "Marriott", "Crowne Plaza", "Hyatt Regency"],
    5: ["Four Seasons", "Ritz-Carlton", "Taj Palace", "Mandarin Oriental"],
}

HOTEL_BASE_RATES = {1: 45, 2: 70, 3: 110, 4: 190, 5: 380}

MOCK_AMENITIES = [
    "wifi", "pool", "spa", "gym", "restaurant", "beach_access",
    "business_center", "parking", "kids_club", "meeting_rooms",
]


class AmadeusClient:
    """Adapter for Amadeus Self-Service API."""

    def __init__(self):
        self._token: str | None = None
        self._token_expires: datetime | None = None
        self._semaphore = asyncio.Semaphore(10)  # 10 req/s rate limit
        self._client: httpx.AsyncClient | None = None
        self._use_mock = settings.use_mock_providers or not settings.amadeus_client_id

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=settings.amadeus_base_url,
                timeout=settings.provider_timeout_seconds,
            )
        return self._client

    async def _ensure_token(self):
        """Get or refresh OAuth2 token."""
        if self._token and self._token_expires and datetime.now(timezone.utc) < self._token_expires:
            return

        client = await self._get_client()
        for attempt in range(3):
            try:
                resp = await client.post(
                    "/v1/security/oauth2/token",
                    data={
                        "grant_type": "client_credentials",
                        "client_id": settings.amadeus_client_id,
                        "client_secret": settings.amadeus_client_secret,
                    },
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
                resp.raise_for_status()
                data = resp.json()
                self._token = data["access_token"]
                self._token_expires = datetime.now(timezone.utc) + timedelta(
                    seconds=data.get("expires_in", 1799) - 60
                )
                logger.info("Amadeus token refreshed")
                return
            except httpx.HTTPStatusError as e:
                if e.response.status_code == 429 and attempt < 2:
                    await asyncio.sleep(2 ** attempt)
                    continue
                raise ProviderError("Amadeus", f"authentication failed ({e.response.status_code})") from e
            except httpx.RequestError as e:
                if attempt < 2:
                    await asyncio.sleep(2 ** attempt)
                    continue
                raise ProviderError("Amadeus", f"authentication failed: {e}") from e

    async def _get(self, path: str, params: dict) -> dict:
        """Authenticated GET with backoff on 429 and transport errors."""
        async with self._semaphore:
            await self._ensure_token()
            client = await self._get_client()

            for attempt in range(3):
                try:
                    resp = await client.get(
                        path,
                        params=clean_params(params),
                        headers={"Authorization": f"Bearer {self._token}"},
                    )
                    if resp.status_code == 429 and attempt < 2:
                        await asyncio.sleep(2 ** attempt)
                        continue
                    resp.raise_for_status()
                    return resp.json()
                except httpx.HTTPStatusError as e:
                    logger.error(f"Amadeus {path} error: {e.response.status_code}")
                    raise ProviderError("Amadeus", f"{path} returned {e.response.status_code}") from e
                except httpx.RequestError as e:
                    logger.error(f"Amadeus request error: {e}")
                    if attempt == 2:
                        raise ProviderError("Amadeus", str(e)) from e
                    await asyncio.sleep(2 ** attempt)

        raise ProviderError("Amadeus", f"{path} rate limited")

    # --- Hotels ---

    async def search_hotels(self, params: dict) -> list[HotelOffer]:
        """Search hotel offers using params built by the hotel adapter."""
        check_in = parse_date(params.get("checkInDate"), 7)
        check_out = parse_date(params.get("checkOutDate"), 0) if params.get("checkOutDate") else check_in + timedelta(days=1)
        nights = max(1, (check_out - check_in).days)

        if self._use_mock:
            return self._generate_mock_hotels(params, check_in, nights)

        radius_km = max(1, math.ceil((params.get("radius") or 5000) / 1000))
        list_params = {
            "radius": radius_km,
            "radiusUnit": "KM",
            "ratings": params.get("ratings"),
            "amenities": params.get("amenities"),
            "hotelSource": "ALL",
        }
        if params.get("cityCode"):
            listing = await self._get(
                "/v1/reference-data/locations/hotels/by-city",
                {"cityCode": params["cityCode"], **list_params},
            )
        elif params.get("latitude") is not None and params.get("longitude") is not None:
            listing = await self._get(
                "/v1/reference-data/locations/hotels/by-geocode",
                {"latitude": params["latitude"], "longitude": params["longitude"], **list_params},
            )
        else:
            raise ProviderError("Amadeus", "hotel search needs a city code or coordinates")

        limit = params.get("limit") or 20
        listed = listing.get("data", [])[:limit]
        if not listed:
            return []

        distances = {h["hotelId"]: self._distance_meters(h.get("distance")) for h in listed}
        offers = await self._get(
            "/v3/shopping/hotel-offers",
            {
                "hotelIds": [h["hotelId"] for h in listed],
                "checkInDate": check_in.isoformat(),
                "checkOutDate": check_out.isoformat(),
                "adults": params.get("adults", 1),
                "roomQuantity": params.get("rooms", 1),
                "priceRange": params.get("priceRange"),
                "currency": params.get("currency", "USD"),
            },
        )
        hotels = [self._parse_hotel_offer(item, nights, distances) for item in offers.get("data", [])]
        return [h for h in hotels if h is not None]

    def _parse_hotel_offer(self, item: dict, nights: int, distances: dict) -> HotelOffer | None:
        """Parse an Amadeus hotel-offers entry into a HotelOffer."""
        hotel = item.get("hotel", {})
        offers = item.get("offers", [])
        if not hotel.get("hotelId") or not offers:
            return None

        offer = offers[0]
        total = offer.get("price", {}).get("total")
        rating = hotel.get("rating")
        address = hotel.get("address", {})
        return HotelOffer(
            id=hotel["hotelId"],
            name=hotel.get("name", hotel["hotelId"]).title(),
            price_total=round(float(total) / nights, 2) if total else None,
            currency=offer.get("price", {}).get("currency", "USD"),
            star_rating=float(rating) if rating else None,
            distance=distances.get(hotel["hotelId"]),
            latitude=hotel.get("latitude"),
            longitude=hotel.get("longitude"),
            address=", ".join(address.get("lines", [])) or None,
            chain=hotel.get("chainCode"),
            room_type=offer.get("room", {}).get("typeEstimated", {}).get("category"),
            amenities=[a.lower() for a in hotel.get("amenities", [])],
        )

    @staticmethod
    def _distance_meters(distance: dict | None) -> float | None:
        if not distance or distance.get("value") is None:
            return None
        factor = {"KM": 1000, "MILE": 1609.34, "M": 1}.get(distance.get("unit", "KM"), 1000)
        return round(float(distance["value"]) * factor, 1)

    # --- Flights ---

    async def search_flights(self, params: dict) -> list[FlightOffer]:
        """Search flight offers using params built by the flight adapter."""
        origin = params.get("originLocationCode")
        destination = params.get("destinationLocationCode")
        if not origin or not destination:
            raise ProviderError("Amadeus", "flight search needs origin and destination airport codes")

        departure = parse_date(params.get("departureDate"), 7)
        if self._use_mock:
            return self._generate_mock_flights(params, origin, destination, departure)

        query = {
            **params,
            "departureDate": departure.isoformat(),
            "maxPrice": int(params["maxPrice"]) if params.get("maxPrice") else None,
            "children": params.get("children") or None,
            "infants": params.get("infants") or None,
        }
        data = await self._get("/v2/shopping/flight-offers", query)
        return [f for f in (self._parse_flight_offer(o) for o in data.get("data", [])) if f is not None]

    def _parse_flight_offer(self, offer: dict) -> FlightOffer | None:
        """Parse an Amadeus flight offer into a FlightOffer."""
        itineraries = offer.get("itineraries", [])
        itin = itineraries[0] if itineraries else {}
        segments = itin.get("segments", [])
        if not segments:
            return None

        first_seg = segments[0]
        last_seg = segments[-1]
        airline_code = (offer.get("validatingAirlineCodes") or [first_seg.get("carrierCode")])[0]

        travel_class = None
        traveler_pricings = offer.get("travelerPricings", [])
        if traveler_pricings:
            fare_details = traveler_pricings[0].get("fareDetailsBySegment", [])
            if fare_details:
                travel_class = fare_details[0].get("cabin")

        grand_total = offer.get("price", {}).get("grandTotal")
        return FlightOffer(
            id=str(offer.get("id")),
            price_total=float(grand_total) if grand_total else None,
            currency=offer.get("price", {}).get("currency", "USD"),
            airline_code=airline_code,
            airline_name=AIRLINE_NAMES.get(airline_code, airline_code),
            flight_numbers=", ".join(f"{s.get('carrierCode', '')}{s.get('number', '')}" for s in segments),
            travel_class=travel_class,
            segments=len(segments),
            duration=itin.get("duration"),
            origin=first_seg.get("departure", {}).get("iataCode"),
            destination=last_seg.get("arrival", {}).get("iataCode"),
            departure_time=first_seg.get("departure", {}).get("at"),
            arrival_time=last_seg.get("arrival", {}).get("at"),
            seats_remaining=offer.get("numberOfBookableSeats"),
        )

    # --- Mock data generation for demo mode ---

    def _generate_mock_hotels(self, params: dict, check_in: date, nights: int) -> list[HotelOffer]:
        """Generate realistic mock hotel offers for demo/development."""
        anchor = params.get("cityCode") or f"{params.get('latitude')},{params.get('longitude')}"
        rng = seeded_rng("hotel", anchor, check_in.isoformat(), nights, params.get("ratings"))

        stars_pool = params.get("ratings") or [2, 3, 4, 5]
        radius = params.get("radius") or 5000
        hotels = []
        for i in range(rng.randint(8, 15)):
            stars = min(5, max(1, rng.choice(stars_pool)))
            name = rng.choice(HOTEL_NAMES.get(stars, HOTEL_NAMES[3]))
            nightly = round(HOTEL_BASE_RATES[stars] * rng.uniform(0.75, 1.3), 2)
            hotels.append(HotelOffer(
                id=f"MOCK{anchor[:3].upper()}{i + 1:03d}",
                name=f"{name} {anchor}" if params.get("cityCode") else name,
                price_total=nightly,
                currency="USD",
                star_rating=float(stars),
                rating=round(rng.uniform(3.2, 4.9), 1),
                distance=round(rng.uniform(150, radius * 1.2), 1),
                address=f"{rng.randint(1, 999)} Main Street",
                room_type=rng.choice(["STANDARD_ROOM", "SUPERIOR_ROOM", "DELUXE_ROOM", "SUITE"]),
                amenities=rng.sample(MOCK_AMENITIES, rng.randint(3, 6)),
                source="mock",
            ))
        return hotels[: params.get("limit") or 20]

    def _generate_mock_flights(
        self, params: dict, origin: str, destination: str, departure: date
    ) -> list[FlightOffer]:
        """Generate realistic mock flight offers for demo/development."""
        cabin = params.get("travelClass") or "ECONOMY"
        rng = seeded_rng(origin, destination, departure.isoformat(), cabin)

        base_price = self._estimate_base_price(origin, destination, cabin)
        base_duration = self._estimate_duration(origin, destination)
        airlines = list(AIRLINE_NAMES)
        flights = []

        for i in range(rng.randint(5, 12)):
            airline = rng.choice(airlines)
            stops = 0 if params.get("nonStop") else rng.choices([0, 1, 2], weights=[60, 30, 10])[0]
            duration = base_duration + stops * rng.randint(45, 90)

            dep_time = datetime(
                departure.year, departure.month, departure.day,
                rng.randint(6, 21), rng.choice([0, 15, 30, 45]),
            )
            arr_time = dep_time + timedelta(minutes=duration)
            price = round(base_price * rng.uniform(0.8, 1.8) * max(1, params.get("adults", 1)), 2)

            flights.append(FlightOffer(
                id=f"MOCK{i + 1}",
                price_total=price,
                currency="USD",
                airline_code=airline,
                airline_name=AIRLINE_NAMES[airline],
                flight_numbers=f"{airline}{rng.randint(100, 9999)}",
                travel_class=cabin,
                segments=stops + 1,
                duration=f"PT{duration // 60}H{duration % 60}M",
                origin=origin,
                destination=destination,
                departure_time=dep_time.isoformat(),
                arrival_time=arr_time.isoformat(),
                seats_remaining=rng.randint(1, 9) if rng.random() < 0.3 else None,
            ))

        flights.sort(key=lambda f: f.price_total)
        return flights[: params.get("max") or 20]

    @staticmethod
    def _estimate_base_price(origin: str, destination: str, cabin: str) -> float:
        """Rough base price estimate by route characteristics."""
        route_key = f"{origin}-{destination}"
        long_haul_hubs = ["LHR", "CDG", "FRA", "DXB", "SIN", "NRT", "HND", "SYD"]
        if origin == destination:
            base = 90
        elif any(a in route_key for a in long_haul_hubs):
            base = 850
        else:
            base = 320

        cabin_multiplier = {
            "ECONOMY": 1.0, "PREMIUM_ECONOMY": 1.8,
            "BUSINESS": 3.5, "FIRST": 6.0,
        }.get(cabin, 1.0)

        return base * cabin_multiplier

    @staticmethod
    def _estimate_duration(origin: str, destination: str) -> int:
        """Rough flight duration in minutes."""
        route_key = f"{origin}-{destination}"
        if any(a in route_key for a in ["LHR", "CDG", "FRA", "DXB"]):
            return 420
        if any(a in route_key for a in ["SIN", "NRT", "HND", "SYD"]):
            return 780
        return 180

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


amadeus_client = AmadeusClient()
