"""CLI script for fetching product recommendations.

Useful for checking credentials and the signing procedure against the Shopee
partner documentation. Fetches recommendations for a keyword, or prints the
signed request parameters, and writes them to the console.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.api.exceptions import ShopFeedException
from src.config import Settings, get_settings
from src.marketplace.providers import select_provider
from src.marketplace.signing import sign_request

# Setup logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s"
)
logger = logging.getLogger(__name__)


def print_signature(settings: Settings, timestamp: Optional[int] = None) -> None:
    """Print the signed request material for the configured search path."""
    signed = sign_request(
        partner_id=settings.shopee_partner_id,
        secret_key=settings.shopee_key,
        path=settings.shopee_search_path,
        timestamp=timestamp,
    )
    print(f"\nSigned request for {settings.shopee_host}{signed.path}:")
    print(f"  Base string: {signed.base_string}")
    print(f"  Timestamp:   {signed.timestamp}")
    print(f"  Sign:        {signed.sign}")
    print(f"  Placement:   {settings.signature_placement}")
    print()


def fetch(settings: Settings, keyword: str, limit: int) -> int:
    """Fetch recommendations and print them as JSON. Returns an exit code."""
    provider = select_provider(settings)
    try:
        items = asyncio.run(provider.fetch(keyword, limit))
    except ShopFeedException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    payload = {
        "success": True,
        "data": [item.model_dump(by_alias=True) for item in items],
        "source": provider.source,
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


def main() -> None:
    """Main CLI function."""
    parser = argparse.ArgumentParser(
        description="Fetch product recommendations or inspect request signing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/recommend_cli.py
  python scripts/recommend_cli.py 女裝 --limit 5
  python scripts/recommend_cli.py --live 女裝
  python scripts/recommend_cli.py --sign-only --timestamp 1700000000
        """
    )

    parser.add_argument(
        "keyword",
        nargs="?",
        default=None,
        help="Search keyword (default: DEFAULT_KEYWORD setting)"
    )

    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Number of items to return (default: DEFAULT_LIMIT setting)"
    )

    parser.add_argument(
        "--live",
        action="store_true",
        help="Disable mock mode for this run (needs Shopee credentials)"
    )

    parser.add_argument(
        "--sign-only",
        action="store_true",
        help="Print the signed request parameters instead of fetching"
    )

    parser.add_argument(
        "--timestamp",
        type=int,
        default=None,
        help="Unix timestamp to sign with (default: now)"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)

    settings = get_settings()
    if args.live:
        settings = settings.model_copy(update={"mock_mode": False})

    if args.sign_only:
        if not settings.has_credentials:
            print(
                "Error: SHOPEE_PARTNER_ID and SHOPEE_KEY must be set",
                file=sys.stderr,
            )
            sys.exit(1)
        print_signature(settings, args.timestamp)
        return

    keyword = args.keyword or settings.default_keyword
    limit = args.limit if args.limit and args.limit > 0 else settings.default_limit
    limit = min(limit, settings.max_limit)

    sys.exit(fetch(settings, keyword, limit))


if __name__ == "__main__":
    main()
