"""Cross-resource search.

The Admin API has no unified search endpoint, so each requested resource
type is queried separately and concurrently. A failing type yields an empty
list; the other types are unaffected.
"""

import asyncio
import logging
from typing import Any, Dict, List, Literal, Optional

from pydantic import Field

from ..connectors.pagination import flatten_connection
from ..models.content import SearchHit
from ..models.inputs import ToolInput
from .base import BaseTool
from .registry import register_tool

logger = logging.getLogger(__name__)

ResourceType = Literal["ARTICLE", "BLOG", "PAGE", "PRODUCT"]

ALL_TYPES: List[str] = ["ARTICLE", "BLOG", "PAGE", "PRODUCT"]

_SEARCH_QUERIES: Dict[str, str] = {
    "ARTICLE": """
query SearchArticles($query: String!, $first: Int!) {
  articles(first: $first, query: $query) {
    nodes {
      id
      title
      handle
      summary
      blog { title }
    }
  }
}
""",
    "BLOG": """
query SearchBlogs($query: String!, $first: Int!) {
  blogs(first: $first, query: $query) {
    nodes {
      id
      title
      handle
    }
  }
}
""",
    "PAGE": """
query SearchPages($query: String!, $first: Int!) {
  pages(first: $first, query: $query) {
    nodes {
      id
      title
      handle
      bodySummary
    }
  }
}
""",
    "PRODUCT": """
query SearchProducts($query: String!, $first: Int!) {
  products(first: $first, query: $query) {
    nodes {
      id
      title
      handle
      description
    }
  }
}
""",
}


class SearchShopifyInput(ToolInput):
    query: str = Field(min_length=1, description="The search query to find content across the store")
    types: Optional[List[ResourceType]] = Field(
        default=None,
        description="Types of resources to search for. If not specified, searches all types.",
    )
    first: int = Field(default=10, ge=1, le=50, description="Number of results to return (max 50)")


@register_tool
class SearchShopifyTool(BaseTool):
    name = "search-shopify"
    description = "Search across all content types in the Shopify store (products, articles, blogs, pages)"
    input_model = SearchShopifyInput
    action = "search"
    subject = "Shopify"

    async def _execute(self, params: SearchShopifyInput) -> Dict[str, Any]:
        # Preserve order, drop duplicates
        types = list(dict.fromkeys(params.types or ALL_TYPES))
        variables = {"query": params.query, "first": params.first}

        outcomes = await asyncio.gather(
            *(self._search_type(resource_type, variables) for resource_type in types),
            return_exceptions=True,
        )

        results: Dict[str, List[Dict[str, Any]]] = {}
        for resource_type, outcome in zip(types, outcomes):
            if isinstance(outcome, Exception):
                logger.error("Error searching %s: %s", resource_type, outcome)
                outcome = []
            results[resource_type.lower()] = outcome
        return {"results": results}

    async def _search_type(self, resource_type: str, variables: Dict[str, Any]) -> List[Dict[str, Any]]:
        key = resource_type.lower() + "s"
        data = await self._request(_SEARCH_QUERIES[resource_type], variables)
        return [SearchHit.from_node(node).to_result() for node in flatten_connection(data.get(key))]
