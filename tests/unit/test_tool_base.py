"""Tests for the shared tool pipeline in BaseTool and the registry.

Verifies:
- Every registered tool refuses to execute before a client is bound and
  never touches the network.
- Validation failures list every violated field and happen before I/O.
- Declared defaults are applied before execution.
- run() returns a ToolResult instead of raising.
- Remote failures get the tool-specific "Failed to ..." prefix.
- The registry exposes every tool with a camelCase inputSchema.
"""

from unittest.mock import AsyncMock

import pytest

from shopify_mcp.connectors.exceptions import (
    InvalidInputError,
    ToolErrorKind,
    TransportError,
    UninitializedDependencyError,
)
from shopify_mcp.tools.registry import ToolRegistry, build_registry, registered_tool_classes

pytestmark = pytest.mark.asyncio


EXPECTED_TOOLS = {
    "get-products", "get-product-by-id", "update-product",
    "get-customers", "update-customer",
    "get-orders", "get-order-by-id", "get-customer-orders", "update-order",
    "get-collections", "update-collection",
    "get-pages", "update-page",
    "get-blogs", "get-blog-by-id", "create-blog", "update-blog",
    "get-articles", "get-article-by-id", "create-article", "update-article",
    "search-shopify",
}


# ---------------------------------------------------------------------------
# Client binding
# ---------------------------------------------------------------------------

class TestClientBinding:

    @pytest.mark.parametrize("tool_class", registered_tool_classes(), ids=lambda cls: cls.name)
    async def test_execute_before_initialize(self, tool_class, mock_client):
        """Each tool raises UninitializedDependencyError without a client."""
        tool = tool_class()

        with pytest.raises(UninitializedDependencyError) as exc_info:
            await tool.execute({})

        assert exc_info.value.tool_name == tool.name
        mock_client.request.assert_not_called()

    async def test_every_tool_uninitialized_in_unbound_registry(self):
        registry = build_registry()
        for name in registry.list_names():
            result = await registry.invoke(name, {})
            assert result.kind is ToolErrorKind.UNINITIALIZED_DEPENDENCY, name

    async def test_uninitialized_checked_before_validation(self):
        """Invalid arguments on an unbound tool still report the missing client."""
        tool = build_registry().get("get-product-by-id")

        with pytest.raises(UninitializedDependencyError):
            await tool.execute({"productId": ""})

    async def test_initialize_binds_every_tool(self, mock_client):
        registry = build_registry()
        registry.initialize(mock_client)

        assert all(registry.get(name).is_initialized for name in registry.list_names())

    async def test_initialize_last_writer_wins(self, mock_client):
        tool = build_registry().get("get-blogs")
        other = AsyncMock()
        other.request.return_value = {"blogs": {"edges": []}}
        tool.initialize(mock_client)
        tool.initialize(other)

        await tool.execute({})

        other.request.assert_awaited_once()
        mock_client.request.assert_not_called()


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestValidation:

    async def test_required_field_missing(self, registry, mock_client):
        with pytest.raises(InvalidInputError) as exc_info:
            await registry.get("get-product-by-id").execute({})

        assert exc_info.value.fields == ["productId"]
        mock_client.request.assert_not_called()

    async def test_every_violation_reported(self, registry, mock_client):
        """All violated fields are listed, not only the first."""
        with pytest.raises(InvalidInputError) as exc_info:
            await registry.get("search-shopify").execute(
                {"query": "", "first": 500, "types": ["VIDEO"]}
            )

        fields = exc_info.value.fields
        assert "query" in fields
        assert "first" in fields
        assert any(field.startswith("types") for field in fields)
        assert "query" in str(exc_info.value) and "first" in str(exc_info.value)
        mock_client.request.assert_not_called()

    async def test_numeric_customer_id_required(self, registry, mock_client):
        with pytest.raises(InvalidInputError) as exc_info:
            await registry.get("get-customer-orders").execute(
                {"customerId": "gid://shopify/Customer/1"}
            )

        assert exc_info.value.fields == ["customerId"]

    async def test_order_status_enum(self, registry):
        with pytest.raises(InvalidInputError) as exc_info:
            await registry.get("get-orders").execute({"status": "pending"})

        assert exc_info.value.fields == ["status"]

    async def test_email_format(self, registry):
        with pytest.raises(InvalidInputError) as exc_info:
            await registry.get("update-order").execute(
                {"id": "gid://shopify/Order/1", "email": "not-an-email"}
            )

        assert exc_info.value.fields == ["email"]

    async def test_nested_field_reported_with_path(self, registry):
        with pytest.raises(InvalidInputError) as exc_info:
            await registry.get("create-article").execute({
                "blogId": "gid://shopify/Blog/1",
                "title": "Hello",
                "content": "<p>Hi</p>",
                "author": {},
            })

        assert exc_info.value.fields == ["author.name"]

    async def test_limit_default_applied(self, registry, mock_client):
        mock_client.request.return_value = {"products": {"edges": []}}

        await registry.get("get-products").execute({})

        variables = mock_client.request.call_args.args[1]
        assert variables == {"first": 10}

    async def test_order_status_default_any(self, registry, mock_client):
        mock_client.request.return_value = {"orders": {"edges": []}}

        await registry.get("get-orders").execute({})

        assert mock_client.request.call_args.args[1] == {"first": 10}

    async def test_unknown_arguments_ignored(self, registry, mock_client):
        mock_client.request.return_value = {"collections": {"edges": []}}

        result = await registry.get("get-collections").execute({"limit": 3, "color": "red"})

        assert result == {"collections": []}
        assert mock_client.request.call_args.args[1] == {"first": 3}


# ---------------------------------------------------------------------------
# Error channel
# ---------------------------------------------------------------------------

class TestErrorChannel:

    async def test_transport_error_prefixed(self, registry, mock_client):
        mock_client.request.side_effect = TransportError("HTTP 502 from Shopify Admin API", status_code=502)

        with pytest.raises(TransportError) as exc_info:
            await registry.get("get-products").execute({})

        assert str(exc_info.value) == "Failed to fetch products: HTTP 502 from Shopify Admin API"
        assert exc_info.value.status_code == 502
        assert exc_info.value.tool_name == "get-products"

    async def test_unexpected_shape_is_transport_error(self, registry, mock_client):
        mock_client.request.return_value = {"blog": {"title": "No id"}}

        with pytest.raises(TransportError, match="unexpected response shape"):
            await registry.get("get-blog-by-id").execute({"blogId": "gid://shopify/Blog/1"})

    async def test_run_returns_result_instead_of_raising(self, registry, mock_client):
        mock_client.request.side_effect = TransportError("boom")

        result = await registry.get("get-customers").run({})

        assert not result.ok
        assert result.kind is ToolErrorKind.TRANSPORT
        assert result.message == "Failed to fetch customers: boom"
        assert result.data is None

    async def test_run_success(self, registry, mock_client):
        mock_client.request.return_value = {"customers": {"edges": []}}

        result = await registry.get("get-customers").run({})

        assert result.ok
        assert result.data == {"customers": []}
        assert result.kind is None


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class TestRegistry:

    async def test_all_tools_registered(self, registry):
        assert set(registry.list_names()) == EXPECTED_TOOLS
        assert len(registry) == len(EXPECTED_TOOLS)
        assert "get-products" in registry

    async def test_unknown_tool(self, registry):
        result = await registry.invoke("delete-everything", {})

        assert result.kind is ToolErrorKind.INVALID_INPUT
        assert "Unknown tool" in result.message

    async def test_input_schema_uses_wire_names(self, registry):
        tools = {tool.name: tool for tool in registry.list_tools()}

        schema = tools["get-products"].inputSchema
        assert set(schema["properties"]) == {"searchTitle", "limit"}
        assert schema["properties"]["limit"]["default"] == 10

        schema = tools["get-product-by-id"].inputSchema
        assert schema["required"] == ["productId"]

    async def test_register_replaces_same_name(self, mock_client):
        registry = ToolRegistry()
        first = build_registry(mock_client).get("get-pages")
        second = type(first)(mock_client)

        registry.register(first)
        registry.register(second)

        assert len(registry) == 1
        assert registry.get("get-pages") is second
