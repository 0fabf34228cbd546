import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tripwise.config import settings

# ─── Logging setup (file + console) ───
_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_LOG_DIR.mkdir(exist_ok=True)

_log_level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logging.StreamHandler(),
        RotatingFileHandler(
            _LOG_DIR / "tripwise.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        ),
    ],
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from tripwise.routers import recommendations
from tripwise.services.amadeus_client import amadeus_client
from tripwise.services.cache_service import cache_service
from tripwise.services.exchange_service import exchange_service
from tripwise.services.geocoding_client import geocoding_client
from tripwise.services.transport_client import transport_client
from tripwise.services.weather_client import weather_client
from tripwise.services.yelp_client import yelp_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        f"TripWise starting (mock providers: {settings.use_mock_providers}, "
        f"timeout: {settings.recommendation_timeout_seconds}s)"
    )
    yield
    for client in (
        amadeus_client, yelp_client, transport_client, weather_client,
        exchange_service, geocoding_client, cache_service,
    ):
        await client.close()
    logger.info("Provider clients closed")


app = FastAPI(
    title="TripWise",
    description="Theme-based travel recommendation service",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recommendations.router, prefix="/api/recommendations", tags=["recommendations"])


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "service": "tripwise"}
