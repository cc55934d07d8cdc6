"""FastAPI application main module.

This module builds the FastAPI application for the ShopFeed recommendation
service. Settings are read once, the provider is selected once, and both are
stored on ``app.state`` for the route handlers.
"""

import logging
from typing import Dict, Optional

from fastapi import FastAPI

from src.api.cors import PermissiveCORSMiddleware
from src.api.exceptions import ShopFeedException, shopfeed_exception_handler
from src.api.logging_config import RequestLoggingMiddleware, setup_logging
from src.api.metrics import metrics_service
from src.api.routes import recommend
from src.config import Settings, get_settings
from src.marketplace.providers import RecommendationProvider, select_provider

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    provider: Optional[RecommendationProvider] = None,
    configure_logging: bool = False,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Service settings. Read from the environment if omitted.
        provider: Recommendation provider. Selected from settings if omitted.
        configure_logging: Install the JSON log handler on the root logger.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = get_settings()
    if configure_logging:
        setup_logging(settings.log_level)
    if provider is None:
        provider = select_provider(settings)

    app = FastAPI(
        title="ShopFeed API",
        description="Product recommendation feed backed by the Shopee partner API",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.provider = provider

    app.add_exception_handler(ShopFeedException, shopfeed_exception_handler)

    # Added last runs first: CORS wraps the request logger
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(PermissiveCORSMiddleware)

    app.include_router(recommend.router)

    @app.get("/ping")
    def ping() -> Dict[str, str]:
        """Health check endpoint.

        Returns:
            Dictionary with status key set to "ok".
        """
        return {"status": "ok"}

    @app.get("/metrics")
    def metrics() -> Dict:
        """Fetch counters and latency statistics."""
        return metrics_service.get_metrics()

    logger.info(
        "ShopFeed app created",
        extra={"source": provider.source, "mock_mode": settings.mock_mode},
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        create_app(configure_logging=True),
        host="0.0.0.0",
        port=8000,
    )
