"""Shared scoring helpers for the domain adapters."""

from collections.abc import Callable, Iterable
from typing import TypeVar

from tripwise.errors import ProfileConfigurationError
from tripwise.services.recommendation.config import recommendation_config
from tripwise.services.recommendation.profiles import Bounds, RankingWeights, RecommendationProfile
from tripwise.services.recommendation.results import RankedResult

CFG = recommendation_config

T = TypeVar("T")


def require_weights(profile: RecommendationProfile) -> RankingWeights:
    """Return the profile's weights or fail loudly if the profile is malformed."""
    weights = getattr(profile, "ranking_weights", None)
    if weights is None:
        raise ProfileConfigurationError(
            f"Profile '{getattr(profile, 'name', '?')}' has no ranking weights"
        )
    return weights


def inverse_score(value: float | None, ceiling: float) -> float:
    """(ceiling - value) / ceiling, lower is better. Missing values score 0."""
    if value is None:
        return 0.0
    return (ceiling - value) / ceiling


def rating_score(rating: float | None) -> float:
    """Rating on a 0-5 scale normalized to 0-1. Missing ratings score 0."""
    if rating is None:
        return 0.0
    return rating / 5


def quality_weight(weights: RankingWeights) -> float:
    """Weight applied to duration for domains without a distance axis."""
    return weights.rating or CFG.defaults.fallback_duration_weight


def pick_sort_field(weights: RankingWeights) -> str:
    """Field with the highest weight. Ties go to price, then rating, then distance."""
    candidates = [
        ("price", weights.price),
        ("rating", weights.rating),
        ("distance", weights.distance),
    ]
    return max(candidates, key=lambda c: c[1])[0]


def within(value: float | None, bounds: Bounds) -> bool:
    """Inclusive range check. A missing value carries no evidence and passes."""
    return value is None or bounds.contains(value)


def rank(
    items: Iterable[T],
    keep: Callable[[T], bool],
    score: Callable[[T], float],
    limit: int | None = None,
) -> list[RankedResult[T]]:
    """Filter, score and order items descending by score.

    The sort is stable, so equal scores keep provider order.
    """
    if limit is None:
        limit = CFG.limits.ranked_max
    ranked = [RankedResult(item=item, score=score(item)) for item in items if keep(item)]
    ranked.sort(key=lambda r: r.score, reverse=True)
    return ranked[:limit]
