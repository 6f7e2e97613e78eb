"""Tests for order, customer and collection tools.

Verifies:
- Order status and customer filters become Shopify search syntax.
- MoneyBag fields are reduced to shop money; null customer and shipping
  address pass through as null.
- Mutations forward only supplied fields and surface userErrors.
"""

import pytest

from shopify_mcp.connectors.exceptions import EntityNotFoundError, RemoteUserError

pytestmark = pytest.mark.asyncio


def _order_node(customer=True):
    return {
        "id": "gid://shopify/Order/1001",
        "name": "#1001",
        "email": "buyer@example.com",
        "createdAt": "2024-03-01T10:00:00Z",
        "displayFinancialStatus": "PAID",
        "displayFulfillmentStatus": "UNFULFILLED",
        "totalPriceSet": {"shopMoney": {"amount": "59.00", "currencyCode": "USD"}},
        "subtotalPriceSet": {"shopMoney": {"amount": "50.00", "currencyCode": "USD"}},
        "totalShippingPriceSet": {"shopMoney": {"amount": "5.00", "currencyCode": "USD"}},
        "totalTaxSet": {"shopMoney": {"amount": "4.00", "currencyCode": "USD"}},
        "customer": {
            "id": "gid://shopify/Customer/7",
            "firstName": "Ada",
            "lastName": "Lovelace",
            "email": "buyer@example.com",
        } if customer else None,
        "shippingAddress": None,
        "lineItems": {"edges": [{"node": {
            "id": "gid://shopify/LineItem/1",
            "title": "Blue Shirt",
            "quantity": 2,
            "originalTotalSet": {"shopMoney": {"amount": "50.00", "currencyCode": "USD"}},
            "variant": None,
        }}]},
        "tags": ["vip"],
        "note": None,
    }


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------

class TestGetOrders:

    async def test_status_filter(self, registry, mock_client):
        mock_client.request.return_value = {"orders": {"edges": []}}

        await registry.get("get-orders").execute({"status": "open", "limit": 3})

        assert mock_client.request.call_args.args[1] == {"first": 3, "query": "status:open"}

    async def test_order_row(self, registry, mock_client):
        mock_client.request.return_value = {"orders": {"edges": [{"node": _order_node()}]}}

        order = (await registry.get("get-orders").execute({}))["orders"][0]

        assert order["financialStatus"] == "PAID"
        assert order["fulfillmentStatus"] == "UNFULFILLED"
        assert order["totalPrice"] == {"amount": "59.00", "currencyCode": "USD"}
        assert order["customer"]["firstName"] == "Ada"
        assert order["lineItems"][0]["originalTotal"] == {"amount": "50.00", "currencyCode": "USD"}
        assert order["lineItems"][0]["variant"] is None

    async def test_guest_checkout_passes_null_customer(self, registry, mock_client):
        mock_client.request.return_value = {"orders": {"edges": [{"node": _order_node(customer=False)}]}}

        order = (await registry.get("get-orders").execute({}))["orders"][0]

        assert order["customer"] is None
        assert order["shippingAddress"] is None


class TestGetCustomerOrders:

    async def test_customer_filter(self, registry, mock_client):
        mock_client.request.return_value = {"orders": {"edges": [{"node": _order_node()}]}}

        result = await registry.get("get-customer-orders").execute({"customerId": "7"})

        assert mock_client.request.call_args.args[1] == {"first": 10, "query": "customer_id:7"}
        assert len(result["orders"]) == 1


class TestGetOrderById:

    async def test_found(self, registry, mock_client):
        mock_client.request.return_value = {"order": _order_node()}

        result = await registry.get("get-order-by-id").execute({"orderId": "gid://shopify/Order/1001"})

        assert result["order"]["name"] == "#1001"

    async def test_not_found(self, registry, mock_client):
        mock_client.request.return_value = {"order": None}

        with pytest.raises(EntityNotFoundError):
            await registry.get("get-order-by-id").execute({"orderId": "gid://shopify/Order/404"})


class TestUpdateOrder:

    async def test_supplied_fields_only(self, registry, mock_client):
        mock_client.request.return_value = {"orderUpdate": {
            "order": {
                "id": "gid://shopify/Order/1001",
                "note": "Gift wrap",
                "tags": ["gift"],
                "customAttributes": [{"key": "gift", "value": "yes"}],
                "shippingAddress": None,
            },
            "userErrors": [],
        }}

        result = await registry.get("update-order").execute({
            "id": "gid://shopify/Order/1001",
            "note": "Gift wrap",
            "tags": ["gift"],
            "customAttributes": [{"key": "gift", "value": "yes"}],
        })

        assert mock_client.request.call_args.args[1] == {"input": {
            "id": "gid://shopify/Order/1001",
            "note": "Gift wrap",
            "tags": ["gift"],
            "customAttributes": [{"key": "gift", "value": "yes"}],
        }}
        assert result["order"]["customAttributes"] == [{"key": "gift", "value": "yes"}]

    async def test_shipping_address_uses_wire_names(self, registry, mock_client):
        mock_client.request.return_value = {"orderUpdate": {
            "order": {"id": "gid://shopify/Order/1001"},
            "userErrors": [],
        }}

        await registry.get("update-order").execute({
            "id": "gid://shopify/Order/1001",
            "shippingAddress": {"firstName": "Ada", "city": "London"},
        })

        assert mock_client.request.call_args.args[1]["input"]["shippingAddress"] == {
            "firstName": "Ada",
            "city": "London",
        }

    async def test_explicit_null_forwarded(self, registry, mock_client):
        """A field sent as null clears it; an omitted field is left alone."""
        mock_client.request.return_value = {"orderUpdate": {
            "order": {"id": "gid://shopify/Order/1001"},
            "userErrors": [],
        }}

        await registry.get("update-order").execute({"id": "gid://shopify/Order/1001", "note": None})

        assert mock_client.request.call_args.args[1] == {
            "input": {"id": "gid://shopify/Order/1001", "note": None}
        }


# ---------------------------------------------------------------------------
# Customers
# ---------------------------------------------------------------------------

class TestCustomers:

    async def test_search_query_passed_through(self, registry, mock_client):
        mock_client.request.return_value = {"customers": {"edges": [{"node": {
            "id": "gid://shopify/Customer/7",
            "firstName": "Ada",
            "email": "ada@example.com",
            "tags": [],
            "addresses": [],
            "defaultAddress": None,
            "amountSpent": {"amount": "120.00", "currencyCode": "USD"},
            "numberOfOrders": "3",
        }}]}}

        result = await registry.get("get-customers").execute({"searchQuery": "email:ada@example.com"})

        assert mock_client.request.call_args.args[1] == {"first": 10, "query": "email:ada@example.com"}
        customer = result["customers"][0]
        assert customer["amountSpent"] == {"amount": "120.00", "currencyCode": "USD"}
        assert customer["defaultAddress"] is None

    async def test_update_customer(self, registry, mock_client):
        mock_client.request.return_value = {"customerUpdate": {
            "customer": {"id": "gid://shopify/Customer/7", "taxExempt": True, "tags": ["wholesale"]},
            "userErrors": [],
        }}

        result = await registry.get("update-customer").execute({
            "id": "gid://shopify/Customer/7",
            "taxExempt": True,
            "tags": ["wholesale"],
        })

        assert mock_client.request.call_args.args[1] == {"input": {
            "id": "gid://shopify/Customer/7",
            "taxExempt": True,
            "tags": ["wholesale"],
        }}
        assert result["customer"]["taxExempt"] is True

    async def test_update_customer_user_errors(self, registry, mock_client):
        mock_client.request.return_value = {"customerUpdate": {
            "customer": None,
            "userErrors": [{"field": ["email"], "message": "has already been taken"}],
        }}

        with pytest.raises(RemoteUserError, match="email: has already been taken"):
            await registry.get("update-customer").execute({
                "id": "gid://shopify/Customer/7",
                "email": "taken@example.com",
            })


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------

class TestCollections:

    async def test_get_collections(self, registry, mock_client):
        mock_client.request.return_value = {"collections": {"edges": [{"node": {
            "id": "gid://shopify/Collection/5",
            "title": "Summer",
            "productsCount": {"count": 14},
            "seo": {"title": None, "description": None},
            "image": None,
        }}]}}

        result = await registry.get("get-collections").execute({"searchTitle": "sum"})

        assert mock_client.request.call_args.args[1] == {"first": 10, "query": "title:*sum*"}
        collection = result["collections"][0]
        assert collection["productsCount"] == 14
        assert collection["image"] is None

    async def test_update_collection_user_error(self, registry, mock_client):
        mock_client.request.return_value = {"collectionUpdate": {
            "collection": None,
            "userErrors": [{"field": "title", "message": "too long"}],
        }}

        result = await registry.get("update-collection").run({
            "collectionId": "gid://shopify/Collection/5",
            "title": "x" * 300,
        })

        assert not result.ok
        assert isinstance(result.error, RemoteUserError)
        assert "title" in result.message
        assert "too long" in result.message
        assert result.message.startswith("Failed to update collection:")

    async def test_user_error_fails_even_with_entity(self, registry, mock_client):
        mock_client.request.return_value = {"collectionUpdate": {
            "collection": {"id": "gid://shopify/Collection/5", "title": "Summer"},
            "userErrors": [{"field": ["seo", "title"], "message": "is invalid"}],
        }}

        with pytest.raises(RemoteUserError):
            await registry.get("update-collection").execute({
                "collectionId": "gid://shopify/Collection/5",
                "seo": {"title": "!!"},
            })

    async def test_update_collection_input(self, registry, mock_client):
        mock_client.request.return_value = {"collectionUpdate": {
            "collection": {"id": "gid://shopify/Collection/5", "title": "Summer"},
            "userErrors": [],
        }}

        await registry.get("update-collection").execute({
            "collectionId": "gid://shopify/Collection/5",
            "seo": {"description": "Warm weather picks"},
        })

        assert mock_client.request.call_args.args[1] == {"input": {
            "id": "gid://shopify/Collection/5",
            "seo": {"description": "Warm weather picks"},
        }}
