"""Blog tools: list, get by ID, create and update."""

from typing import Any, Dict, Literal, Optional

from pydantic import Field

from ..connectors.pagination import connection_variables, extract_page_info, wildcard_filter
from ..models.common import dump_nodes
from ..models.content import Blog, BlogDetail
from ..models.inputs import ToolInput
from .base import BaseTool
from .registry import register_tool

_BLOG_FIELDS_FRAGMENT = """
fragment BlogFields on Blog {
  id
  title
  handle
  commentPolicy
  templateSuffix
  tags
  feed { path location }
  createdAt
  updatedAt
}
"""

_GET_BLOGS_QUERY = """
query GetBlogs($first: Int, $last: Int, $after: String, $before: String, $query: String) {
  blogs(first: $first, last: $last, after: $after, before: $before, query: $query) {
    edges {
      node {
        ...BlogFields
      }
    }
    pageInfo {
      hasNextPage
      hasPreviousPage
      startCursor
      endCursor
    }
  }
}
""" + _BLOG_FIELDS_FRAGMENT

_GET_BLOG_BY_ID_QUERY = """
query GetBlogById($id: ID!) {
  blog(id: $id) {
    ...BlogFields
    articles(first: 5) {
      nodes {
        id
        title
        handle
        publishedAt
        author { name }
        tags
      }
    }
  }
}
""" + _BLOG_FIELDS_FRAGMENT

_CREATE_BLOG_MUTATION = """
mutation CreateBlog($blog: BlogCreateInput!) {
  blogCreate(blog: $blog) {
    blog {
      ...BlogFields
    }
    userErrors { field message }
  }
}
""" + _BLOG_FIELDS_FRAGMENT

_UPDATE_BLOG_MUTATION = """
mutation UpdateBlog($id: ID!, $blog: BlogUpdateInput!) {
  blogUpdate(id: $id, blog: $blog) {
    blog {
      ...BlogFields
    }
    userErrors { field message }
  }
}
""" + _BLOG_FIELDS_FRAGMENT

CommentPolicy = Literal["MODERATED", "CLOSED"]


class GetBlogsInput(ToolInput):
    search_title: Optional[str] = Field(
        default=None, description="Optional search term to filter blogs by title"
    )
    limit: int = Field(default=10, ge=1, le=250, description="Maximum number of blogs to return (default: 10)")
    after: Optional[str] = Field(default=None, description="Cursor to fetch the page of results after")
    before: Optional[str] = Field(default=None, description="Cursor to fetch the page of results before")


class GetBlogByIdInput(ToolInput):
    blog_id: str = Field(
        min_length=1,
        description='The GID of the blog to fetch (e.g., "gid://shopify/Blog/1234567890")',
    )


class CreateBlogInput(ToolInput):
    title: str = Field(min_length=1, description="The title of the blog")
    handle: Optional[str] = Field(
        default=None,
        description="The URL-friendly handle for the blog. If not provided, it will be generated from the title.",
    )
    template_suffix: Optional[str] = Field(default=None, description="The template suffix for the blog")
    comment_policy: Optional[CommentPolicy] = Field(
        default=None, description="The comment policy for the blog"
    )


class UpdateBlogInput(ToolInput):
    blog_id: str = Field(
        min_length=1,
        description='The GID of the blog to update (e.g., "gid://shopify/Blog/1234567890")',
    )
    title: Optional[str] = Field(default=None, description="The new title for the blog")
    handle: Optional[str] = Field(default=None, description="The URL-friendly handle for the blog")
    template_suffix: Optional[str] = Field(default=None, description="The template suffix for the blog")
    comment_policy: Optional[CommentPolicy] = Field(
        default=None, description="The comment policy for the blog"
    )


@register_tool
class GetBlogsTool(BaseTool):
    name = "get-blogs"
    description = "Get all blogs or search by title"
    input_model = GetBlogsInput
    subject = "blogs"

    async def _execute(self, params: GetBlogsInput) -> Dict[str, Any]:
        variables = connection_variables(params.limit, params.after, params.before)
        query = wildcard_filter("title", params.search_title)
        if query:
            variables["query"] = query

        data = await self._request(_GET_BLOGS_QUERY, variables)
        connection = data.get("blogs")
        return {
            "blogs": dump_nodes(Blog, connection),
            "pageInfo": extract_page_info(connection),
        }


@register_tool
class GetBlogByIdTool(BaseTool):
    name = "get-blog-by-id"
    description = "Get a specific blog by ID with all its details"
    input_model = GetBlogByIdInput
    subject = "blog"

    async def _execute(self, params: GetBlogByIdInput) -> Dict[str, Any]:
        data = await self._request(_GET_BLOG_BY_ID_QUERY, {"id": params.blog_id})
        blog = data.get("blog")
        if blog is None:
            raise self._not_found("Blog", params.blog_id)
        return {"blog": BlogDetail.model_validate(blog).to_result()}


@register_tool
class CreateBlogTool(BaseTool):
    name = "create-blog"
    description = "Create a new blog"
    input_model = CreateBlogInput
    action = "create"
    subject = "blog"

    async def _execute(self, params: CreateBlogInput) -> Dict[str, Any]:
        data = await self._request(_CREATE_BLOG_MUTATION, {"blog": params.provided()})
        payload = data.get("blogCreate") or {}
        self._raise_for_user_errors(payload)
        return {"blog": Blog.model_validate(payload.get("blog")).to_result()}


@register_tool
class UpdateBlogTool(BaseTool):
    name = "update-blog"
    description = "Update an existing blog's title, handle, template suffix or comment policy"
    input_model = UpdateBlogInput
    action = "update"
    subject = "blog"

    async def _execute(self, params: UpdateBlogInput) -> Dict[str, Any]:
        data = await self._request(
            _UPDATE_BLOG_MUTATION,
            {"id": params.blog_id, "blog": params.provided("blog_id")},
        )
        payload = data.get("blogUpdate") or {}
        self._raise_for_user_errors(payload)
        blog = payload.get("blog")
        if blog is None:
            raise self._not_found("Blog", params.blog_id)
        return {"blog": Blog.model_validate(blog).to_result()}
