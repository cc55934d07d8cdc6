"""Map Shopee search payloads onto RecommendationItem.

Shopee v2 responses wrap results as ``{"error": "", "message": "",
"response": {...}}``. The item list key and per-item field names differ
between endpoints, so the mapping below accepts the common variants.
"""

import logging
from typing import Any, Dict, List, Optional

from src.api.exceptions import UpstreamFetchError
from src.marketplace.models import RecommendationItem

logger = logging.getLogger(__name__)

ITEM_LIST_KEYS = ("item", "item_list", "items")
ABSOLUTE_URL_PREFIXES = ("https://", "http://")


def parse_search_response(
    payload: Any, limit: int, shop_base_url: str
) -> List[RecommendationItem]:
    """Convert an upstream search payload into at most limit items.

    Args:
        payload: Decoded JSON body of the upstream response.
        limit: Maximum number of items to return.
        shop_base_url: Storefront base URL used to build item links.

    Returns:
        Parsed items in upstream order. Entries without an id, a name or an
        absolute image URL are skipped.

    Raises:
        UpstreamFetchError: If the payload, its ``response`` field or an item
            entry is not an object, or the payload carries a non-empty
            ``error`` field.
    """
    if not isinstance(payload, dict):
        raise UpstreamFetchError(
            "unexpected response body",
            details={"body_type": type(payload).__name__},
        )

    if payload.get("error"):
        message = str(payload["error"])
        if payload.get("message"):
            message = f"{message}: {payload['message']}"
        raise UpstreamFetchError(
            message,
            details={
                "error": payload["error"],
                "request_id": payload.get("request_id"),
            },
        )

    body = payload.get("response") or {}
    if not isinstance(body, dict):
        raise UpstreamFetchError(
            "unexpected 'response' field",
            details={"response_type": type(body).__name__},
        )

    raw_items: List[Any] = []
    for key in ITEM_LIST_KEYS:
        if isinstance(body.get(key), list):
            raw_items = body[key]
            break

    items = []
    for raw in raw_items:
        if len(items) >= limit:
            break
        if not isinstance(raw, dict):
            raise UpstreamFetchError(
                "unexpected item entry",
                details={"item_type": type(raw).__name__},
            )
        item = _parse_item(raw, shop_base_url)
        if item is None:
            logger.debug("Skipping incomplete upstream item", extra={"raw": raw})
            continue
        items.append(item)

    return items


def _parse_item(raw: Dict[str, Any], shop_base_url: str) -> Optional[RecommendationItem]:
    item_id = raw.get("item_id")
    name = raw.get("item_name") or raw.get("name")
    image_url = _parse_image(raw)
    if item_id is None or not name or not image_url.startswith(ABSOLUTE_URL_PREFIXES):
        return None

    shop_id = raw.get("shop_id")
    base = shop_base_url.rstrip("/")
    if shop_id is not None:
        shop_url = f"{base}/product/{shop_id}/{item_id}"
    else:
        shop_url = base

    return RecommendationItem(
        id=str(item_id),
        name=str(name),
        price=_parse_price(raw),
        image_url=image_url,
        shop_url=shop_url,
    )


def _parse_price(raw: Dict[str, Any]) -> int:
    price = raw.get("price")
    if price is None:
        price_info = raw.get("price_info")
        if isinstance(price_info, list) and price_info and isinstance(price_info[0], dict):
            price = price_info[0].get("current_price")
    try:
        return max(int(float(price)), 0)
    except (TypeError, ValueError, OverflowError):
        return 0


def _parse_image(raw: Dict[str, Any]) -> str:
    image = raw.get("image")
    if isinstance(image, dict):
        urls = image.get("image_url_list")
        if isinstance(urls, list) and urls:
            return str(urls[0])
    if isinstance(image, str):
        return image
    return str(raw.get("image_url") or "")
