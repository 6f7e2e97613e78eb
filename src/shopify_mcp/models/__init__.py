"""Typed input and result records for Shopify MCP tools."""

from .common import (
    SEO,
    Author,
    Connection,
    Image,
    MailingAddress,
    Money,
    ShopifyModel,
    dump_nodes,
)
from .collections import Collection
from .content import (
    Article,
    ArticleSummary,
    Blog,
    BlogDetail,
    Page,
    SearchHit,
)
from .customers import Customer
from .inputs import ToolInput
from .orders import Order, UpdatedOrder
from .products import ProductDetail, ProductSummary

__all__ = [
    "Article",
    "ArticleSummary",
    "Author",
    "Blog",
    "BlogDetail",
    "Collection",
    "Connection",
    "Customer",
    "Image",
    "MailingAddress",
    "Money",
    "Order",
    "Page",
    "ProductDetail",
    "ProductSummary",
    "SEO",
    "SearchHit",
    "ShopifyModel",
    "ToolInput",
    "UpdatedOrder",
    "dump_nodes",
]
