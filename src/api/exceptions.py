"""Custom exceptions for the ShopFeed API.

Defines specific exception types for better error handling and reporting,
and the handler that renders them as the feed's error envelope.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from src.marketplace.models import ErrorResponse

logger = logging.getLogger(__name__)


class ShopFeedException(Exception):
    """Base exception for ShopFeed errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code for API responses
            details: Additional error details for debugging
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}


class UpstreamFetchError(ShopFeedException):
    """Raised when the signed call to the marketplace API fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"Upstream fetch failed: {message}",
            status_code=500,
            details=details,
        )


class UpstreamNotImplementedError(UpstreamFetchError):
    """Raised when the live marketplace request is not enabled yet."""

    def __init__(self, path: str):
        super().__init__(
            f"request to '{path}' is signed but not sent; the upstream "
            "transport contract has not been confirmed",
            details={"path": path, "reason": "not_implemented"},
        )


class RecommendationError(ShopFeedException):
    """Raised when a provider fails in an unexpected way."""

    def __init__(self, keyword: str, error: Exception):
        message = f"Failed to fetch recommendations for '{keyword}': {str(error)}"
        super().__init__(
            message=message,
            status_code=500,
            details={
                "keyword": keyword,
                "error": str(error),
                "error_type": type(error).__name__,
            },
        )


async def shopfeed_exception_handler(
    request: Request, exc: ShopFeedException
) -> JSONResponse:
    """Render a ShopFeedException as {success: false, error}."""
    logger.error(
        exc.message,
        extra={
            "path": str(request.url.path),
            "status_code": exc.status_code,
            "error_type": type(exc).__name__,
            "details": exc.details,
        },
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
    )
