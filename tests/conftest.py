"""Test configuration and fixtures."""

import os
from unittest.mock import AsyncMock

import pytest

# Set test environment variables BEFORE importing the package
os.environ["ENVIRONMENT"] = "test"

from shopify_mcp.connectors.graphql import ShopifyGraphQLClient
from shopify_mcp.tools.registry import build_registry


@pytest.fixture
def mock_client():
    """GraphQL client double; set ``request.return_value`` or ``side_effect``."""
    client = AsyncMock(spec=ShopifyGraphQLClient)
    client.request.return_value = {}
    return client


@pytest.fixture
def registry(mock_client):
    """Registry of every tool, bound to ``mock_client``."""
    return build_registry(mock_client)

