"""Collection result records."""

from typing import Any, Optional

from pydantic import field_validator

from .common import SEO, Image, ShopifyModel


class Collection(ShopifyModel):
    id: str
    title: Optional[str] = None
    handle: Optional[str] = None
    description: Optional[str] = None
    description_html: Optional[str] = None
    updated_at: Optional[str] = None
    sort_order: Optional[str] = None
    template_suffix: Optional[str] = None
    products_count: Optional[int] = None
    seo: Optional[SEO] = None
    image: Optional[Image] = None

    @field_validator("products_count", mode="before")
    @classmethod
    def _unwrap_count(cls, value: Any) -> Optional[int]:
        # productsCount is a Count object: {count, precision}
        if isinstance(value, dict):
            return value.get("count")
        return value
