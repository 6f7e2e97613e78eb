"""MCP tools for the Shopify Admin API."""

from .base import BaseTool, ToolResult
from .registry import ToolRegistry, build_registry, register_tool

# Import all tool modules to trigger registration
from . import products  # noqa: F401
from . import customers  # noqa: F401
from . import orders  # noqa: F401
from . import collections  # noqa: F401
from . import pages  # noqa: F401
from . import blogs  # noqa: F401
from . import articles  # noqa: F401
from . import search  # noqa: F401

__all__ = ["BaseTool", "ToolRegistry", "ToolResult", "build_registry", "register_tool"]
