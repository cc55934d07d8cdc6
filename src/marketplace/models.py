"""Response models for the recommendation feed.

Field names are snake_case in Python and camelCase on the wire, matching what
the storefront app already consumes.
"""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

SOURCE_MOCK = "mock_server"
SOURCE_SHOPEE = "shopee_api"


class RecommendationItem(BaseModel):
    """A single recommended product.

    Attributes:
        id: Identifier, unique within one response.
        name: Display name.
        price: Price in whole currency units.
        image_url: Absolute URL of the product image.
        shop_url: Absolute URL of the product or shop page.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Item identifier")
    name: str = Field(..., description="Display name")
    price: int = Field(..., ge=0, description="Price, currency-unit-less")
    image_url: str = Field(..., alias="imageUrl", description="Image URL")
    shop_url: str = Field(..., alias="shopUrl", description="Shop URL")


class RecommendationResponse(BaseModel):
    """Success envelope for recommendation requests."""

    success: Literal[True] = True
    data: List[RecommendationItem] = Field(
        ..., description="Recommended items"
    )
    source: Literal["mock_server", "shopee_api"] = Field(
        ..., description="Which provider produced the items"
    )


class ErrorResponse(BaseModel):
    """Failure envelope for recommendation requests."""

    success: Literal[False] = False
    error: str = Field(..., description="Human-readable error message")
