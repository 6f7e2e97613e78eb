"""Product tools: list, get by ID, and compound update with variants."""

import logging
from typing import Any, Dict, List, Literal, Optional

from pydantic import Field

from ..connectors.pagination import wildcard_filter
from ..models.common import dump_nodes
from ..models.inputs import SEOInput, ToolInput
from ..models.products import ProductDetail, ProductSummary
from .base import BaseTool
from .registry import register_tool

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# GraphQL documents
# ---------------------------------------------------------------------------

_PRODUCT_DETAIL_FRAGMENT = """
fragment ProductDetailFields on Product {
  id
  title
  description
  descriptionHtml
  handle
  status
  vendor
  productType
  tags
  createdAt
  updatedAt
  totalInventory
  priceRangeV2 {
    minVariantPrice { amount currencyCode }
    maxVariantPrice { amount currencyCode }
  }
  images(first: 5) {
    edges { node { id url altText width height } }
  }
  variants(first: 20) {
    edges {
      node {
        id
        title
        price
        compareAtPrice
        barcode
        inventoryQuantity
        sku
        selectedOptions { name value }
      }
    }
  }
  collections(first: 5) {
    edges { node { id title } }
  }
}
"""

_GET_PRODUCTS_QUERY = """
query GetProducts($first: Int!, $query: String) {
  products(first: $first, query: $query) {
    edges {
      node {
        id
        title
        description
        descriptionHtml
        handle
        status
        createdAt
        updatedAt
        totalInventory
        priceRangeV2 {
          minVariantPrice { amount currencyCode }
          maxVariantPrice { amount currencyCode }
        }
        images(first: 1) {
          edges { node { url altText } }
        }
        variants(first: 5) {
          edges { node { id title price inventoryQuantity sku } }
        }
      }
    }
  }
}
"""

_GET_PRODUCT_BY_ID_QUERY = """
query GetProductById($id: ID!) {
  product(id: $id) {
    ...ProductDetailFields
  }
}
""" + _PRODUCT_DETAIL_FRAGMENT

_UPDATE_PRODUCT_MUTATION = """
mutation productUpdate($input: ProductInput!) {
  productUpdate(input: $input) {
    product {
      ...ProductDetailFields
    }
    userErrors { field message }
  }
}
""" + _PRODUCT_DETAIL_FRAGMENT

_BULK_UPDATE_VARIANTS_MUTATION = """
mutation productVariantsBulkUpdate($productId: ID!, $variants: [ProductVariantsBulkInput!]!) {
  productVariantsBulkUpdate(productId: $productId, variants: $variants) {
    productVariants { id title price compareAtPrice barcode sku }
    userErrors { field message }
  }
}
"""


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

class GetProductsInput(ToolInput):
    search_title: Optional[str] = Field(
        default=None, description="Optional search term to filter products by title"
    )
    limit: int = Field(
        default=10, ge=1, le=250,
        description="Maximum number of products to return (default: 10)",
    )


class GetProductByIdInput(ToolInput):
    product_id: str = Field(
        min_length=1,
        description='The GID of the product to fetch (e.g., "gid://shopify/Product/1234567890")',
    )


class VariantUpdateInput(ToolInput):
    id: str = Field(min_length=1, description="The GID of the variant to update")
    price: Optional[str] = None
    compare_at_price: Optional[str] = None
    barcode: Optional[str] = None
    sku: Optional[str] = None
    inventory_policy: Optional[Literal["DENY", "CONTINUE"]] = None
    taxable: Optional[bool] = None

    def to_bulk_input(self) -> Dict[str, Any]:
        """ProductVariantsBulkInput; SKU lives on the inventory item."""
        variant = self.provided("sku")
        if "sku" in self.model_fields_set:
            variant["inventoryItem"] = {"sku": self.sku}
        return variant


class UpdateProductInput(ToolInput):
    product_id: str = Field(
        min_length=1,
        description='The GID of the product to update (e.g., "gid://shopify/Product/1234567890")',
    )
    title: Optional[str] = Field(default=None, description="The new title for the product")
    description_html: Optional[str] = Field(
        default=None, description="The new HTML description for the product"
    )
    handle: Optional[str] = None
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    tags: Optional[List[str]] = None
    status: Optional[Literal["ACTIVE", "ARCHIVED", "DRAFT"]] = None
    seo: Optional[SEOInput] = None
    variants: Optional[List[VariantUpdateInput]] = Field(
        default=None,
        description="Variants to update in the same call; the product is re-fetched afterwards",
    )


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------

@register_tool
class GetProductsTool(BaseTool):
    name = "get-products"
    description = (
        "Get all products or search by title, including SEO-relevant fields "
        "like title and description"
    )
    input_model = GetProductsInput
    subject = "products"

    async def _execute(self, params: GetProductsInput) -> Dict[str, Any]:
        variables: Dict[str, Any] = {"first": params.limit}
        query = wildcard_filter("title", params.search_title)
        if query:
            variables["query"] = query

        data = await self._request(_GET_PRODUCTS_QUERY, variables)
        return {"products": dump_nodes(ProductSummary, data.get("products"))}


@register_tool
class GetProductByIdTool(BaseTool):
    name = "get-product-by-id"
    description = (
        "Get a specific product by ID including title, description, "
        "and SEO-relevant fields"
    )
    input_model = GetProductByIdInput
    subject = "product"

    async def _execute(self, params: GetProductByIdInput) -> Dict[str, Any]:
        data = await self._request(_GET_PRODUCT_BY_ID_QUERY, {"id": params.product_id})
        product = data.get("product")
        if product is None:
            raise self._not_found("Product", params.product_id)
        return {"product": ProductDetail.model_validate(product).to_result()}


@register_tool
class UpdateProductTool(BaseTool):
    """Update a product and, optionally, its variants.

    Steps run strictly in order: productUpdate, then
    productVariantsBulkUpdate when variants were given, then a re-fetch so
    the returned product reflects both. Any userErrors stop the sequence.
    """

    name = "update-product"
    description = (
        "Update a product's details including title and description, "
        "and optionally its variants' price, SKU and barcode"
    )
    input_model = UpdateProductInput
    action = "update"
    subject = "product"

    async def _execute(self, params: UpdateProductInput) -> Dict[str, Any]:
        product_id = params.product_id
        product_input = {"id": product_id, **params.provided("product_id", "variants")}

        data = await self._request(_UPDATE_PRODUCT_MUTATION, {"input": product_input})
        payload = data.get("productUpdate") or {}
        self._raise_for_user_errors(payload)
        product = payload.get("product")

        if params.variants:
            data = await self._request(
                _BULK_UPDATE_VARIANTS_MUTATION,
                {
                    "productId": product_id,
                    "variants": [v.to_bulk_input() for v in params.variants],
                },
            )
            self._raise_for_user_errors(data.get("productVariantsBulkUpdate"))
            logger.info(
                "Updated %d variants of %s, re-fetching product",
                len(params.variants), product_id,
            )

            data = await self._request(_GET_PRODUCT_BY_ID_QUERY, {"id": product_id})
            product = data.get("product")

        if product is None:
            raise self._not_found("Product", product_id)
        return {"product": ProductDetail.model_validate(product).to_result()}
