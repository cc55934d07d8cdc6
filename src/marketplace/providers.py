"""Recommendation providers.

A provider turns a keyword and a result limit into recommendation items. The
service picks one provider at startup with select_provider(): MockProvider
for development, ShopeeProvider once partner credentials are configured.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

import httpx

from src.api.exceptions import UpstreamFetchError, UpstreamNotImplementedError
from src.config import Settings
from src.marketplace.mock import generate_mock_items
from src.marketplace.models import SOURCE_MOCK, SOURCE_SHOPEE, RecommendationItem
from src.marketplace.parsing import parse_search_response
from src.marketplace.signing import SignedRequest, sign_request

# Configure module logger
logger = logging.getLogger(__name__)


class RecommendationProvider(ABC):
    """Fetches recommendation items for a keyword."""

    #: Value reported in the response envelope's ``source`` field
    source: str

    @abstractmethod
    async def fetch(self, keyword: str, limit: int) -> List[RecommendationItem]:
        """Return up to limit items for keyword."""


class MockProvider(RecommendationProvider):
    """Serves synthetic items; the keyword is ignored."""

    source = SOURCE_MOCK

    async def fetch(self, keyword: str, limit: int) -> List[RecommendationItem]:
        logger.info(
            "Serving mock recommendations",
            extra={"keyword": keyword, "limit": limit},
        )
        return generate_mock_items(limit)


class ShopeeProvider(RecommendationProvider):
    """Fetches items from the Shopee partner search API with signed requests.

    Each call signs the search path with its own timestamp. Until the upstream
    transport contract is confirmed (``settings.shopee_request_enabled``),
    fetch() signs the request and then raises UpstreamNotImplementedError.
    """

    source = SOURCE_SHOPEE

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize provider.

        Args:
            settings: Service settings holding credentials and upstream options.
            transport: Optional httpx transport, used by tests to stub upstream.
            clock: Source of the current Unix time.
        """
        self.settings = settings
        self.transport = transport
        self.clock = clock

    def sign(self) -> SignedRequest:
        """Sign the configured search path with the current timestamp."""
        return sign_request(
            partner_id=self.settings.shopee_partner_id,
            secret_key=self.settings.shopee_key,
            path=self.settings.shopee_search_path,
            timestamp=int(self.clock()),
        )

    def build_request_options(
        self, signed: SignedRequest, keyword: str, limit: int
    ) -> Dict[str, Dict[str, str]]:
        """Query parameters and headers for the signed search call."""
        params = {"keyword": keyword, "page_size": str(limit)}
        headers: Dict[str, str] = {}

        if self.settings.signature_placement == "header":
            headers.update(signed.as_headers())
        else:
            params.update(signed.as_query_params())

        return {"params": params, "headers": headers}

    async def fetch(self, keyword: str, limit: int) -> List[RecommendationItem]:
        signed = self.sign()
        logger.info(
            "Signed Shopee search request",
            extra={
                "keyword": keyword,
                "limit": limit,
                "path": signed.path,
                "timestamp": signed.timestamp,
            },
        )
        logger.debug("Shopee signature", extra={"sign": signed.sign})

        if not self.settings.shopee_request_enabled:
            raise UpstreamNotImplementedError(signed.path)

        url = f"{self.settings.shopee_host.rstrip('/')}{signed.path}"
        options = self.build_request_options(signed, keyword, limit)

        start_time = time.time()
        try:
            async with httpx.AsyncClient(
                transport=self.transport,
                timeout=self.settings.upstream_timeout,
            ) as client:
                response = await client.get(url, **options)
                response.raise_for_status()
                payload = response.json()
        except httpx.TimeoutException as e:
            raise UpstreamFetchError(
                f"timed out after {self.settings.upstream_timeout}s",
                details={"url": url, "error_type": type(e).__name__},
            ) from e
        except httpx.HTTPStatusError as e:
            raise UpstreamFetchError(
                f"HTTP {e.response.status_code} from {signed.path}",
                details={"url": url, "status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamFetchError(
                str(e) or type(e).__name__,
                details={"url": url, "error_type": type(e).__name__},
            ) from e
        except ValueError as e:
            raise UpstreamFetchError(
                "response body is not valid JSON",
                details={"url": url},
            ) from e

        items = parse_search_response(
            payload, limit=limit, shop_base_url=self.settings.shopee_shop_url
        )
        logger.info(
            "Fetched Shopee recommendations",
            extra={
                "keyword": keyword,
                "num_items": len(items),
                "duration_ms": round((time.time() - start_time) * 1000, 2),
            },
        )
        return items


def select_provider(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> RecommendationProvider:
    """Pick the provider for this process.

    Mock mode, or missing/placeholder credentials, select MockProvider.
    """
    if settings.mock_mode:
        logger.info("Mock mode enabled, serving synthetic recommendations")
        return MockProvider()

    if not settings.has_credentials:
        logger.warning(
            "Shopee credentials missing, falling back to mock mode",
            extra={"partner_id_set": bool(settings.shopee_partner_id.strip())},
        )
        return MockProvider()

    logger.info(
        "Live mode enabled, serving Shopee recommendations",
        extra={
            "host": settings.shopee_host,
            "path": settings.shopee_search_path,
            "request_enabled": settings.shopee_request_enabled,
        },
    )
    return ShopeeProvider(settings, transport=transport)
