"""Order tools: list, list by customer, get by ID and update."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import EmailStr, Field

from ..models.common import dump_nodes
from ..models.inputs import (
    CustomAttributeInput,
    MailingAddressInput,
    MetafieldInput,
    ToolInput,
)
from ..models.orders import Order, UpdatedOrder
from .base import BaseTool
from .registry import register_tool

_ORDER_FIELDS_FRAGMENT = """
fragment OrderFields on Order {
  id
  name
  email
  createdAt
  displayFinancialStatus
  displayFulfillmentStatus
  totalPriceSet { shopMoney { amount currencyCode } }
  subtotalPriceSet { shopMoney { amount currencyCode } }
  totalShippingPriceSet { shopMoney { amount currencyCode } }
  totalTaxSet { shopMoney { amount currencyCode } }
  customer { id firstName lastName email }
  shippingAddress { address1 address2 city provinceCode zip country phone }
  lineItems(first: 10) {
    edges {
      node {
        id
        title
        quantity
        originalTotalSet { shopMoney { amount currencyCode } }
        variant { id title sku }
      }
    }
  }
  tags
  note
}
"""

_GET_ORDERS_QUERY = """
query GetOrders($first: Int!, $query: String) {
  orders(first: $first, query: $query) {
    edges {
      node {
        ...OrderFields
      }
    }
  }
}
""" + _ORDER_FIELDS_FRAGMENT

_GET_ORDER_BY_ID_QUERY = """
query GetOrderById($id: ID!) {
  order(id: $id) {
    ...OrderFields
  }
}
""" + _ORDER_FIELDS_FRAGMENT

_UPDATE_ORDER_MUTATION = """
mutation orderUpdate($input: OrderInput!) {
  orderUpdate(input: $input) {
    order {
      id
      name
      email
      note
      tags
      customAttributes { key value }
      shippingAddress { address1 address2 city provinceCode zip country phone }
      updatedAt
    }
    userErrors { field message }
  }
}
"""


class GetOrdersInput(ToolInput):
    status: Literal["any", "open", "closed", "cancelled"] = Field(
        default="any", description="Order status filter (default: any)"
    )
    limit: int = Field(default=10, ge=1, le=250, description="Maximum number of orders to return")


class GetOrderByIdInput(ToolInput):
    order_id: str = Field(min_length=1, description="The GID of the order to fetch")


class GetCustomerOrdersInput(ToolInput):
    customer_id: str = Field(
        pattern=r"^\d+$",
        description="Shopify customer ID, numeric excluding gid prefix",
    )
    limit: int = Field(default=10, ge=1, le=250, description="Maximum number of orders to return")


class UpdateOrderInput(ToolInput):
    id: str = Field(min_length=1, description="The GID of the order to update")
    tags: Optional[List[str]] = None
    email: Optional[EmailStr] = None
    note: Optional[str] = None
    custom_attributes: Optional[List[CustomAttributeInput]] = None
    metafields: Optional[List[MetafieldInput]] = None
    shipping_address: Optional[MailingAddressInput] = None


def _order_list(data: Dict[str, Any]) -> Dict[str, Any]:
    return {"orders": dump_nodes(Order, data.get("orders"))}


@register_tool
class GetOrdersTool(BaseTool):
    name = "get-orders"
    description = "Get orders with optional filtering by status"
    input_model = GetOrdersInput
    subject = "orders"

    async def _execute(self, params: GetOrdersInput) -> Dict[str, Any]:
        variables: Dict[str, Any] = {"first": params.limit}
        if params.status != "any":
            variables["query"] = f"status:{params.status}"
        return _order_list(await self._request(_GET_ORDERS_QUERY, variables))


@register_tool
class GetCustomerOrdersTool(BaseTool):
    name = "get-customer-orders"
    description = "Get orders placed by a specific customer"
    input_model = GetCustomerOrdersInput
    subject = "customer orders"

    async def _execute(self, params: GetCustomerOrdersInput) -> Dict[str, Any]:
        variables = {
            "first": params.limit,
            "query": f"customer_id:{params.customer_id}",
        }
        return _order_list(await self._request(_GET_ORDERS_QUERY, variables))


@register_tool
class GetOrderByIdTool(BaseTool):
    name = "get-order-by-id"
    description = "Get a specific order by ID"
    input_model = GetOrderByIdInput
    subject = "order"

    async def _execute(self, params: GetOrderByIdInput) -> Dict[str, Any]:
        data = await self._request(_GET_ORDER_BY_ID_QUERY, {"id": params.order_id})
        order = data.get("order")
        if order is None:
            raise self._not_found("Order", params.order_id)
        return {"order": Order.model_validate(order).to_result()}


@register_tool
class UpdateOrderTool(BaseTool):
    name = "update-order"
    description = (
        "Update an existing order with new information: tags, email, note, "
        "custom attributes, metafields or shipping address"
    )
    input_model = UpdateOrderInput
    action = "update"
    subject = "order"

    async def _execute(self, params: UpdateOrderInput) -> Dict[str, Any]:
        data = await self._request(_UPDATE_ORDER_MUTATION, {"input": params.provided()})
        payload = data.get("orderUpdate") or {}
        self._raise_for_user_errors(payload)
        order = payload.get("order")
        if order is None:
            raise self._not_found("Order", params.id)
        return {"order": UpdatedOrder.model_validate(order).to_result()}
