"""Order result records.

Money fields arrive as MoneyBag (``{shopMoney: {...}}``); only the shop
currency amount is kept.
"""

from typing import List, Optional

from pydantic import AliasChoices, AliasPath, Field

from .common import Connection, MailingAddress, Money, ShopifyModel


class OrderCustomer(ShopifyModel):
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None


class LineItemVariant(ShopifyModel):
    id: str
    title: Optional[str] = None
    sku: Optional[str] = None


class LineItem(ShopifyModel):
    id: str
    title: Optional[str] = None
    quantity: Optional[int] = None
    original_total: Optional[Money] = Field(
        default=None,
        validation_alias=AliasChoices(
            AliasPath("originalTotalSet", "shopMoney"), "originalTotal"
        ),
        serialization_alias="originalTotal",
    )
    variant: Optional[LineItemVariant] = None


def _money_bag(name: str, source: str):
    return Field(
        default=None,
        validation_alias=AliasChoices(AliasPath(source, "shopMoney"), name),
        serialization_alias=name,
    )


class Order(ShopifyModel):
    """Order row shared by get-orders, get-customer-orders and get-order-by-id.

    ``customer`` is null for guest checkouts and ``shippingAddress`` for
    orders that need no shipping; both are passed through as null.
    """

    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[str] = None
    financial_status: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("displayFinancialStatus", "financialStatus"),
        serialization_alias="financialStatus",
    )
    fulfillment_status: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("displayFulfillmentStatus", "fulfillmentStatus"),
        serialization_alias="fulfillmentStatus",
    )
    total_price: Optional[Money] = _money_bag("totalPrice", "totalPriceSet")
    subtotal_price: Optional[Money] = _money_bag("subtotalPrice", "subtotalPriceSet")
    total_shipping_price: Optional[Money] = _money_bag(
        "totalShippingPrice", "totalShippingPriceSet"
    )
    total_tax: Optional[Money] = _money_bag("totalTax", "totalTaxSet")
    customer: Optional[OrderCustomer] = None
    shipping_address: Optional[MailingAddress] = None
    line_items: Connection[LineItem] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    note: Optional[str] = None


class CustomAttribute(ShopifyModel):
    key: str
    value: Optional[str] = None


class UpdatedOrder(ShopifyModel):
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    note: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    custom_attributes: List[CustomAttribute] = Field(default_factory=list)
    shipping_address: Optional[MailingAddress] = None
    updated_at: Optional[str] = None
