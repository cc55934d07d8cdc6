"""Recommendation endpoints for the ShopFeed API.

This module provides the feed endpoint the storefront app calls. Query
parameters are defaulted rather than rejected, and the work is delegated to
the provider selected when the app was created.
"""

import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends, Request

from src.api.exceptions import RecommendationError, ShopFeedException
from src.api.metrics import metrics_service
from src.config import Settings
from src.marketplace.models import RecommendationResponse
from src.marketplace.providers import MockProvider, RecommendationProvider

# Configure module logger
logger = logging.getLogger(__name__)

# Create API router
router = APIRouter(tags=["recommendations"])


def get_settings(request: Request) -> Settings:
    """Settings the app was created with."""
    return request.app.state.settings


def get_provider(request: Request) -> RecommendationProvider:
    """Provider selected when the app was created."""
    return request.app.state.provider


def resolve_keyword(keyword: Optional[str], settings: Settings) -> str:
    """Use the configured default for a missing or blank keyword.

    Other keywords are passed through unchanged.
    """
    if keyword is None or not keyword.strip():
        return settings.default_keyword
    return keyword


def resolve_limit(limit: Optional[str], settings: Settings) -> int:
    """Parse limit, falling back to the default and clamping to max_limit.

    Missing, non-integer and non-positive values all yield the default.
    """
    if limit is None:
        return settings.default_limit

    try:
        value = int(limit.strip())
    except ValueError:
        logger.debug("Ignoring malformed limit", extra={"limit": limit})
        return settings.default_limit

    if value < 1:
        return settings.default_limit
    return min(value, settings.max_limit)


@router.get("/getRecommendations", response_model=RecommendationResponse)
@router.get("/recommendations", response_model=RecommendationResponse)
async def get_recommendations(
    keyword: Optional[str] = None,
    limit: Optional[str] = None,
    settings: Settings = Depends(get_settings),
    provider: RecommendationProvider = Depends(get_provider),
) -> RecommendationResponse:
    """Get product recommendations for a keyword.

    Args:
        keyword: Search keyword (default: settings.default_keyword).
        limit: Number of items to return (default: settings.default_limit).

    Returns:
        RecommendationResponse with the items and the provider source.

    Raises:
        ShopFeedException: If the provider fails. Rendered as
            {"success": false, "error": ...} by the exception handler.

    Example:
        GET /getRecommendations?keyword=女裝&limit=5
        Returns 5 recommended items.
    """
    resolved_keyword = resolve_keyword(keyword, settings)
    resolved_limit = resolve_limit(limit, settings)

    logger.info(
        "Generating recommendations",
        extra={
            "keyword": resolved_keyword,
            "limit": resolved_limit,
            "mode": "mock" if isinstance(provider, MockProvider) else "live",
        },
    )

    start_time = time.time()
    try:
        items = await provider.fetch(resolved_keyword, resolved_limit)
    except ShopFeedException:
        metrics_service.record_failure()
        raise
    except Exception as e:
        metrics_service.record_failure()
        logger.error(
            f"Error fetching recommendations for '{resolved_keyword}': {e}",
            exc_info=True,
        )
        raise RecommendationError(resolved_keyword, e) from e

    metrics_service.record_fetch(
        provider.source, round((time.time() - start_time) * 1000, 2)
    )

    return RecommendationResponse(data=items, source=provider.source)
