"""Online store page tools."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from ..connectors.pagination import (
    connection_variables,
    extract_page_info,
    wildcard_filter,
)
from ..models.common import dump_nodes
from ..models.content import Page
from ..models.inputs import SEOInput, ToolInput
from .base import BaseTool
from .registry import register_tool

_PAGE_FIELDS_FRAGMENT = """
fragment PageFields on Page {
  id
  title
  handle
  body
  bodySummary
  isPublished
  publishedAt
  templateSuffix
  createdAt
  updatedAt
}
"""

_GET_PAGES_QUERY = """
query PageList($first: Int, $last: Int, $after: String, $before: String, $query: String) {
  pages(first: $first, last: $last, after: $after, before: $before, query: $query) {
    nodes {
      ...PageFields
    }
    pageInfo {
      hasNextPage
      hasPreviousPage
      startCursor
      endCursor
    }
  }
}
""" + _PAGE_FIELDS_FRAGMENT

_UPDATE_PAGE_MUTATION = """
mutation pageUpdate($id: ID!, $page: PageUpdateInput!) {
  pageUpdate(id: $id, page: $page) {
    page {
      ...PageFields
    }
    userErrors { field message }
  }
}
""" + _PAGE_FIELDS_FRAGMENT


class GetPagesInput(ToolInput):
    search_title: Optional[str] = Field(
        default=None, description="Optional search term to filter pages by title"
    )
    limit: int = Field(default=10, ge=1, le=250, description="Maximum number of pages to return (default: 10)")
    after: Optional[str] = Field(default=None, description="Cursor to fetch the page of results after")
    before: Optional[str] = Field(default=None, description="Cursor to fetch the page of results before")


class UpdatePageInput(ToolInput):
    page_id: str = Field(
        min_length=1,
        description='The GID of the page to update (e.g., "gid://shopify/Page/1234567890")',
    )
    title: Optional[str] = Field(default=None, description="The new title for the page")
    handle: Optional[str] = None
    body: Optional[str] = Field(default=None, description="The new HTML body content for the page")
    template_suffix: Optional[str] = None
    seo: Optional[SEOInput] = None
    published: Optional[bool] = Field(
        default=None, description="Whether the page should be published or unpublished"
    )


def _seo_metafields(seo: SEOInput) -> List[Dict[str, Any]]:
    """Pages have no seo input; the storefront reads these global metafields."""
    metafields = []
    for key, value in (("title_tag", seo.title), ("description_tag", seo.description)):
        if value is not None:
            metafields.append({
                "namespace": "global",
                "key": key,
                "type": "single_line_text_field",
                "value": value,
            })
    return metafields


@register_tool
class GetPagesTool(BaseTool):
    name = "get-pages"
    description = "Get all pages or search by title"
    input_model = GetPagesInput
    subject = "pages"

    async def _execute(self, params: GetPagesInput) -> Dict[str, Any]:
        variables = connection_variables(params.limit, params.after, params.before)
        query = wildcard_filter("title", params.search_title)
        if query:
            variables["query"] = query

        data = await self._request(_GET_PAGES_QUERY, variables)
        connection = data.get("pages")
        return {
            "pages": dump_nodes(Page, connection),
            "pageInfo": extract_page_info(connection),
        }


@register_tool
class UpdatePageTool(BaseTool):
    name = "update-page"
    description = "Update a page's details including title, body content, SEO and publication status"
    input_model = UpdatePageInput
    action = "update"
    subject = "page"

    async def _execute(self, params: UpdatePageInput) -> Dict[str, Any]:
        page = params.provided("page_id", "seo", "published")
        if params.published is not None:
            page["isPublished"] = params.published
        if params.seo is not None:
            metafields = _seo_metafields(params.seo)
            if metafields:
                page["metafields"] = metafields

        data = await self._request(_UPDATE_PAGE_MUTATION, {"id": params.page_id, "page": page})
        payload = data.get("pageUpdate") or {}
        self._raise_for_user_errors(payload)
        updated = payload.get("page")
        if updated is None:
            raise self._not_found("Page", params.page_id)
        return {"page": Page.model_validate(updated).to_result()}
