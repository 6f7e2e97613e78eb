"""Tool registry: the set of tools served by one MCP server."""

import logging
from typing import Any, Dict, List, Optional, Type

from mcp import types

from ..connectors.exceptions import InvalidInputError
from ..connectors.graphql import ShopifyGraphQLClient
from .base import BaseTool, ToolResult

logger = logging.getLogger(__name__)

# Tool classes in registration order; instances are created per registry.
_tool_classes: List[Type[BaseTool]] = []


def register_tool(tool_class: Type[BaseTool]) -> Type[BaseTool]:
    """Decorator to make a tool class part of every built registry."""
    if tool_class not in _tool_classes:
        _tool_classes.append(tool_class)
    return tool_class


def registered_tool_classes() -> List[Type[BaseTool]]:
    return list(_tool_classes)


class ToolRegistry:
    """Registry of tool instances keyed by their kebab-case name."""

    def __init__(self):
        self._tools: Dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        """Register a tool instance. A tool with the same name is replaced."""
        self._tools[tool.name] = tool
        logger.info("Registered tool: %s", tool.name)

    def get(self, name: str) -> Optional[BaseTool]:
        return self._tools.get(name)

    def list_names(self) -> List[str]:
        return list(self._tools.keys())

    def list_tools(self) -> List[types.Tool]:
        return [tool.to_mcp_tool() for tool in self._tools.values()]

    def initialize(self, client: ShopifyGraphQLClient) -> None:
        """Bind ``client`` to every registered tool."""
        for tool in self._tools.values():
            tool.initialize(client)

    async def invoke(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        tool = self._tools.get(name)
        if tool is None:
            return ToolResult(
                error=InvalidInputError(f"Unknown tool: {name}", tool_name=name)
            )
        return await tool.run(arguments)

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


def build_registry(client: Optional[ShopifyGraphQLClient] = None) -> ToolRegistry:
    """Create one instance of every registered tool, each bound to ``client``."""
    registry = ToolRegistry()
    for tool_class in _tool_classes:
        registry.register(tool_class(client))
    return registry
