"""Recommendations router: themed hotel, flight, restaurant and transport picks."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException

from tripwise.errors import ValidationError
from tripwise.schemas.recommendation import RecommendationRequest
from tripwise.services.recommendation.orchestrator import (
    RecommendationOrchestrator,
    recommendation_orchestrator,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_orchestrator() -> RecommendationOrchestrator:
    return recommendation_orchestrator


def _envelope(data) -> dict:
    return {
        "success": True,
        "data": data,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


async def _run(call, req: RecommendationRequest) -> dict:
    try:
        data = await call(req)
    except ValidationError as e:
        logger.info(f"Rejected recommendation request: {e.message}")
        raise HTTPException(status_code=400, detail=e.to_dict())
    return _envelope(data)


@router.post("")
async def recommend(
    req: RecommendationRequest,
    orchestrator: RecommendationOrchestrator = Depends(get_orchestrator),
):
    """Full themed recommendation across every domain."""
    return await _run(orchestrator.recommend, req)


@router.post("/hotels")
async def recommend_hotels(
    req: RecommendationRequest,
    orchestrator: RecommendationOrchestrator = Depends(get_orchestrator),
):
    return await _run(orchestrator.recommend_hotels, req)


@router.post("/flights")
async def recommend_flights(
    req: RecommendationRequest,
    orchestrator: RecommendationOrchestrator = Depends(get_orchestrator),
):
    return await _run(orchestrator.recommend_flights, req)


@router.post("/restaurants")
async def recommend_restaurants(
    req: RecommendationRequest,
    orchestrator: RecommendationOrchestrator = Depends(get_orchestrator),
):
    return await _run(orchestrator.recommend_restaurants, req)


@router.post("/transport")
async def recommend_transport(
    req: RecommendationRequest,
    orchestrator: RecommendationOrchestrator = Depends(get_orchestrator),
):
    return await _run(orchestrator.recommend_transport, req)


@router.get("/themes")
async def list_themes(
    orchestrator: RecommendationOrchestrator = Depends(get_orchestrator),
):
    """Every configured theme / sub-theme combination."""
    return _envelope(orchestrator.list_themes())
