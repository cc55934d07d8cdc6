"""Synthetic recommendation items for mock mode.

Used while no Shopee credentials are available so the storefront app can be
developed against a realistic-looking feed.
"""

import random
import time
from typing import List, Optional

from src.marketplace.models import RecommendationItem

MOCK_IMAGE_URLS = (
    "https://images.pexels.com/photos/1036623/pexels-photo-1036623.jpeg?auto=compress&cs=tinysrgb&w=600",
    "https://images.pexels.com/photos/157675/fashion-men-s-individuality-black-and-white-157675.jpeg?auto=compress&cs=tinysrgb&w=600",
    "https://images.pexels.com/photos/1639729/pexels-photo-1639729.jpeg?auto=compress&cs=tinysrgb&w=600",
    "https://images.pexels.com/photos/1454171/pexels-photo-1454171.jpeg?auto=compress&cs=tinysrgb&w=600",
    "https://images.pexels.com/photos/1031955/pexels-photo-1031955.jpeg?auto=compress&cs=tinysrgb&w=600",
)
MOCK_SHOP_URL = "https://shopee.tw"
MIN_MOCK_PRICE = 100
MAX_MOCK_PRICE = 1099


def generate_mock_items(
    count: int,
    rng: Optional[random.Random] = None,
    now_ms: Optional[int] = None,
) -> List[RecommendationItem]:
    """Generate count synthetic recommendation items.

    Args:
        count: Number of items to generate. Non-positive values yield [].
        rng: Random source, mainly for tests. Defaults to the module RNG.
        now_ms: Generation time in epoch milliseconds. Defaults to now.

    Returns:
        List of exactly max(count, 0) items. Ids combine the index with the
        generation time, so they are unique within one call.
    """
    if rng is None:
        rng = random
    if now_ms is None:
        now_ms = int(time.time() * 1000)

    items = []
    for i in range(max(count, 0)):
        items.append(
            RecommendationItem(
                id=f"mock_{i}_{now_ms}",
                name=f"[Server推薦] 2025 春季新款 #{i + 1}",
                price=rng.randint(MIN_MOCK_PRICE, MAX_MOCK_PRICE),
                image_url=rng.choice(MOCK_IMAGE_URLS),
                shop_url=MOCK_SHOP_URL,
            )
        )

    return items
