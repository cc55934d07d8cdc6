"""Application configuration for ShopFeed.

Settings are read from environment variables (and an optional ``.env`` file)
once at startup and passed explicitly into the app and providers.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Values shipped in sample configs that mean "not configured yet"
PLACEHOLDER_PARTNER_ID = "YOUR_PARTNER_ID"
PLACEHOLDER_SECRET_KEY = "YOUR_SECRET_KEY"

DEFAULT_SHOPEE_HOST = "https://partner.shopeemobile.com"
DEFAULT_SEARCH_PATH = "/api/v2/item/search"


class Settings(BaseSettings):
    """Runtime configuration for the recommendation service.

    Attributes:
        mock_mode: Serve synthetic items instead of calling Shopee.
        shopee_partner_id: Partner identifier issued by Shopee.
        shopee_key: Shared secret used to sign upstream requests.
        shopee_host: Partner API host (HTTPS).
        shopee_search_path: API path that is signed and requested.
        shopee_shop_url: Storefront base URL used to build item links.
        shopee_request_enabled: Actually send the signed upstream request.
        signature_placement: Where the signing material is attached.
        upstream_timeout: Upstream call timeout in seconds.
        default_keyword: Keyword used when the request has none.
        default_limit: Result count used when the request has none.
        max_limit: Upper bound on the result count.
        log_level: Root logging level.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    mock_mode: bool = True

    shopee_partner_id: str = ""
    shopee_key: str = Field(default="", repr=False)
    shopee_host: str = DEFAULT_SHOPEE_HOST
    shopee_search_path: str = DEFAULT_SEARCH_PATH
    shopee_shop_url: str = "https://shopee.tw"
    shopee_request_enabled: bool = False
    signature_placement: Literal["query", "header"] = "query"
    upstream_timeout: float = Field(default=10.0, gt=0)

    default_keyword: str = "general"
    default_limit: int = Field(default=20, ge=1)
    max_limit: int = Field(default=100, ge=1)

    log_level: str = "INFO"

    @field_validator("shopee_host")
    @classmethod
    def _require_https_host(cls, value: str) -> str:
        """Signed requests may only go to an HTTPS host."""
        if not value.strip().lower().startswith("https://"):
            raise ValueError("shopee_host must be an https:// URL")
        return value.strip()

    @property
    def has_credentials(self) -> bool:
        """Whether real (non-placeholder) Shopee credentials are configured."""
        partner_id = self.shopee_partner_id.strip()
        secret_key = self.shopee_key.strip()
        if not partner_id or not secret_key:
            return False
        return (
            partner_id != PLACEHOLDER_PARTNER_ID
            and secret_key != PLACEHOLDER_SECRET_KEY
        )


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
