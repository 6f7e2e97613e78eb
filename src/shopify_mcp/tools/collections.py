"""Collection tools."""

from typing import Any, Dict, Optional

from pydantic import Field

from ..connectors.pagination import wildcard_filter
from ..models.common import dump_nodes
from ..models.collections import Collection
from ..models.inputs import SEOInput, ToolInput
from .base import BaseTool
from .registry import register_tool

_COLLECTION_FIELDS_FRAGMENT = """
fragment CollectionFields on Collection {
  id
  title
  handle
  description
  descriptionHtml
  updatedAt
  sortOrder
  templateSuffix
  productsCount { count }
  seo { title description }
  image { id url altText width height }
}
"""

_GET_COLLECTIONS_QUERY = """
query GetCollections($first: Int!, $query: String) {
  collections(first: $first, query: $query) {
    edges {
      node {
        ...CollectionFields
      }
    }
  }
}
""" + _COLLECTION_FIELDS_FRAGMENT

_UPDATE_COLLECTION_MUTATION = """
mutation collectionUpdate($input: CollectionInput!) {
  collectionUpdate(input: $input) {
    collection {
      ...CollectionFields
    }
    userErrors { field message }
  }
}
""" + _COLLECTION_FIELDS_FRAGMENT


class GetCollectionsInput(ToolInput):
    search_title: Optional[str] = Field(
        default=None, description="Optional search term to filter collections by title"
    )
    limit: int = Field(default=10, ge=1, le=250, description="Maximum number of collections to return")


class UpdateCollectionInput(ToolInput):
    collection_id: str = Field(
        min_length=1,
        description='The GID of the collection to update (e.g., "gid://shopify/Collection/1234567890")',
    )
    title: Optional[str] = Field(default=None, description="The new title for the collection")
    description_html: Optional[str] = Field(
        default=None, description="The new HTML description for the collection"
    )
    handle: Optional[str] = None
    template_suffix: Optional[str] = None
    sort_order: Optional[str] = None
    seo: Optional[SEOInput] = None


@register_tool
class GetCollectionsTool(BaseTool):
    name = "get-collections"
    description = "Get all collections or search by title"
    input_model = GetCollectionsInput
    subject = "collections"

    async def _execute(self, params: GetCollectionsInput) -> Dict[str, Any]:
        variables: Dict[str, Any] = {"first": params.limit}
        query = wildcard_filter("title", params.search_title)
        if query:
            variables["query"] = query

        data = await self._request(_GET_COLLECTIONS_QUERY, variables)
        return {"collections": dump_nodes(Collection, data.get("collections"))}


@register_tool
class UpdateCollectionTool(BaseTool):
    name = "update-collection"
    description = "Update a collection's details including title, description, and SEO information"
    input_model = UpdateCollectionInput
    action = "update"
    subject = "collection"

    async def _execute(self, params: UpdateCollectionInput) -> Dict[str, Any]:
        collection_input = {"id": params.collection_id, **params.provided("collection_id")}
        data = await self._request(_UPDATE_COLLECTION_MUTATION, {"input": collection_input})
        payload = data.get("collectionUpdate") or {}
        self._raise_for_user_errors(payload)
        collection = payload.get("collection")
        if collection is None:
            raise self._not_found("Collection", params.collection_id)
        return {"collection": Collection.model_validate(collection).to_result()}
