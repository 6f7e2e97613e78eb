"""MCP server exposing the Shopify tool registry over stdio."""

import json
import logging
import time
import uuid
from typing import Any, Dict, List, Optional

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from ..observability.logging import clear_log_context, set_log_context
from ..observability.metrics import record_tool_call
from ..tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class ShopifyMCPServer:
    """Single-store MCP server: one registry, one shared GraphQL client."""

    def __init__(self, registry: ToolRegistry, name: str = "shopify"):
        self.registry = registry
        self.server = Server(name)
        self._setup_handlers()

    def _setup_handlers(self):
        """Set up MCP protocol handlers."""

        @self.server.list_tools()
        async def handle_list_tools() -> List[types.Tool]:
            return await self.list_tools()

        # Arguments are validated by each tool's input model, which reports
        # every violated field at once.
        @self.server.call_tool(validate_input=False)
        async def handle_call_tool(
            name: str, arguments: Optional[Dict[str, Any]] = None
        ) -> List[types.TextContent]:
            return await self.call_tool(name, arguments)

    async def list_tools(self) -> List[types.Tool]:
        tools = self.registry.list_tools()
        logger.debug("Returning %d tools", len(tools))
        return tools

    async def call_tool(
        self, name: str, arguments: Optional[Dict[str, Any]] = None
    ) -> List[types.TextContent]:
        """Run one tool call.

        Returns the JSON-serialised result as a single text item. Failures
        are raised so the SDK reports the call with ``isError`` set.
        """
        set_log_context(tool_name=name, request_id=uuid.uuid4().hex[:12])
        logger.info("Tool call: %s", name)

        start = time.perf_counter()
        try:
            result = await self.registry.invoke(name, arguments or {})
            status = "success" if result.ok else result.kind.value
            record_tool_call(tool_name=name, status=status, duration=time.perf_counter() - start)

            if result.error is not None:
                raise result.error
            return [types.TextContent(type="text", text=json.dumps(result.data))]
        finally:
            clear_log_context()

    async def run_stdio(self):
        """Serve MCP over stdin/stdout until the client disconnects."""
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Shopify MCP server running on stdio")
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )
