"""Customer tools."""

from typing import Any, Dict, List, Optional

from pydantic import EmailStr, Field

from ..models.common import dump_nodes
from ..models.customers import Customer
from ..models.inputs import MetafieldInput, ToolInput
from .base import BaseTool
from .registry import register_tool

_CUSTOMER_FIELDS_FRAGMENT = """
fragment CustomerFields on Customer {
  id
  firstName
  lastName
  email
  phone
  note
  taxExempt
  createdAt
  updatedAt
  tags
  defaultAddress { address1 address2 city provinceCode zip country phone }
  addresses { address1 address2 city provinceCode zip country phone }
  amountSpent { amount currencyCode }
  numberOfOrders
}
"""

_GET_CUSTOMERS_QUERY = """
query GetCustomers($first: Int!, $query: String) {
  customers(first: $first, query: $query) {
    edges {
      node {
        ...CustomerFields
      }
    }
  }
}
""" + _CUSTOMER_FIELDS_FRAGMENT

_UPDATE_CUSTOMER_MUTATION = """
mutation customerUpdate($input: CustomerInput!) {
  customerUpdate(input: $input) {
    customer {
      ...CustomerFields
    }
    userErrors { field message }
  }
}
""" + _CUSTOMER_FIELDS_FRAGMENT


class GetCustomersInput(ToolInput):
    search_query: Optional[str] = Field(
        default=None,
        description="Customer search query, passed to Shopify as-is (e.g. \"email:bob@example.com\")",
    )
    limit: int = Field(default=10, ge=1, le=250, description="Maximum number of customers to return")


class UpdateCustomerInput(ToolInput):
    id: str = Field(
        min_length=1,
        description='The GID of the customer to update (e.g., "gid://shopify/Customer/1234567890")',
    )
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    tags: Optional[List[str]] = None
    note: Optional[str] = None
    tax_exempt: Optional[bool] = None
    metafields: Optional[List[MetafieldInput]] = None


@register_tool
class GetCustomersTool(BaseTool):
    name = "get-customers"
    description = "Get customers or search by name/email"
    input_model = GetCustomersInput
    subject = "customers"

    async def _execute(self, params: GetCustomersInput) -> Dict[str, Any]:
        variables: Dict[str, Any] = {"first": params.limit}
        if params.search_query:
            variables["query"] = params.search_query

        data = await self._request(_GET_CUSTOMERS_QUERY, variables)
        return {"customers": dump_nodes(Customer, data.get("customers"))}


@register_tool
class UpdateCustomerTool(BaseTool):
    name = "update-customer"
    description = "Update a customer's information"
    input_model = UpdateCustomerInput
    action = "update"
    subject = "customer"

    async def _execute(self, params: UpdateCustomerInput) -> Dict[str, Any]:
        data = await self._request(_UPDATE_CUSTOMER_MUTATION, {"input": params.provided()})
        payload = data.get("customerUpdate") or {}
        self._raise_for_user_errors(payload)
        customer = payload.get("customer")
        if customer is None:
            raise self._not_found("Customer", params.id)
        return {"customer": Customer.model_validate(customer).to_result()}
