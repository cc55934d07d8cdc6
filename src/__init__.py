"""ShopFeed: product recommendation feed for the storefront app.

This package provides a backend service that returns product recommendations
either from a synthetic generator or from the Shopee partner API using
HMAC-SHA256 signed requests.

Modules:
    api: FastAPI application and REST API endpoints
    marketplace: Item models, request signing and recommendation providers
"""

__version__ = "0.1.0"
