"""Product result records."""

from typing import Any, List, Optional

from pydantic import AliasChoices, Field, field_validator

from ..connectors.pagination import first_node
from .common import Connection, Image, Money, ShopifyModel


class PriceRange(ShopifyModel):
    min_price: Optional[Money] = Field(
        default=None,
        validation_alias=AliasChoices("minVariantPrice", "minPrice"),
        serialization_alias="minPrice",
    )
    max_price: Optional[Money] = Field(
        default=None,
        validation_alias=AliasChoices("maxVariantPrice", "maxPrice"),
        serialization_alias="maxPrice",
    )


class SelectedOption(ShopifyModel):
    name: Optional[str] = None
    value: Optional[str] = None


class VariantSummary(ShopifyModel):
    id: str
    title: Optional[str] = None
    price: Optional[str] = None
    inventory_quantity: Optional[int] = None
    sku: Optional[str] = None


class VariantDetail(VariantSummary):
    compare_at_price: Optional[str] = None
    barcode: Optional[str] = None
    options: List[SelectedOption] = Field(
        default_factory=list,
        validation_alias=AliasChoices("selectedOptions", "options"),
        serialization_alias="options",
    )


class CollectionRef(ShopifyModel):
    id: str
    title: Optional[str] = None


class ProductSummary(ShopifyModel):
    """Row of get-products: first image only, first five variants."""

    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    description_html: Optional[str] = None
    handle: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    total_inventory: Optional[int] = None
    price_range: Optional[PriceRange] = Field(
        default=None,
        validation_alias=AliasChoices("priceRangeV2", "priceRange"),
        serialization_alias="priceRange",
    )
    image_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("images", "imageUrl"),
        serialization_alias="imageUrl",
    )
    variants: Connection[VariantSummary] = Field(default_factory=list)

    @field_validator("image_url", mode="before")
    @classmethod
    def _first_image_url(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        image = first_node(value)
        return image.get("url") if image else None


class ProductDetail(ShopifyModel):
    """Full product as returned by get-product-by-id and update-product."""

    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    description_html: Optional[str] = None
    handle: Optional[str] = None
    status: Optional[str] = None
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    total_inventory: Optional[int] = None
    price_range: Optional[PriceRange] = Field(
        default=None,
        validation_alias=AliasChoices("priceRangeV2", "priceRange"),
        serialization_alias="priceRange",
    )
    images: Connection[Image] = Field(default_factory=list)
    variants: Connection[VariantDetail] = Field(default_factory=list)
    collections: Connection[CollectionRef] = Field(default_factory=list)
