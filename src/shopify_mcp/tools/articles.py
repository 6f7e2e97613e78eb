"""Blog article tools: list by blog, get by ID, create and update."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from ..connectors.pagination import connection_variables, extract_page_info
from ..models.common import dump_nodes
from ..models.content import Article, ArticleSummary
from ..models.inputs import AuthorInput, ToolInput
from .base import BaseTool
from .registry import register_tool

_ARTICLE_FIELDS_FRAGMENT = """
fragment ArticleFields on Article {
  id
  title
  handle
  body
  summary
  tags
  isPublished
  publishedAt
  author { name }
  blog { id title }
  image { id url altText width height }
}
"""

_GET_ARTICLES_QUERY = """
query GetArticles($blogId: ID!, $first: Int, $last: Int, $after: String, $before: String) {
  blog(id: $blogId) {
    id
    title
    articles(first: $first, last: $last, after: $after, before: $before) {
      edges {
        node {
          id
          title
          handle
          author { name }
          publishedAt
          tags
          image { id url altText }
          comments(first: 0) {
            pageInfo {
              hasNextPage
              hasPreviousPage
            }
          }
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
}
"""

_GET_ARTICLE_BY_ID_QUERY = """
query GetArticleById($id: ID!) {
  article(id: $id) {
    ...ArticleFields
  }
}
""" + _ARTICLE_FIELDS_FRAGMENT

_CREATE_ARTICLE_MUTATION = """
mutation CreateArticle($article: ArticleCreateInput!) {
  articleCreate(article: $article) {
    article {
      ...ArticleFields
    }
    userErrors { field message }
  }
}
""" + _ARTICLE_FIELDS_FRAGMENT

_UPDATE_ARTICLE_MUTATION = """
mutation UpdateArticle($id: ID!, $article: ArticleUpdateInput!) {
  articleUpdate(id: $id, article: $article) {
    article {
      ...ArticleFields
    }
    userErrors { field message }
  }
}
""" + _ARTICLE_FIELDS_FRAGMENT


class GetArticlesInput(ToolInput):
    blog_id: str = Field(
        min_length=1,
        description='The GID of the blog to get articles from (e.g., "gid://shopify/Blog/1234567890")',
    )
    search_title: Optional[str] = Field(
        default=None,
        description="Optional case-insensitive term; only articles on the fetched page whose title contains it are returned",
    )
    limit: int = Field(default=10, ge=1, le=250, description="Maximum number of articles to return (default: 10)")
    after: Optional[str] = Field(default=None, description="Cursor to fetch the page of results after")
    before: Optional[str] = Field(default=None, description="Cursor to fetch the page of results before")


class GetArticleByIdInput(ToolInput):
    article_id: str = Field(
        min_length=1,
        description='The GID of the article to fetch (e.g., "gid://shopify/Article/1234567890")',
    )


class CreateArticleInput(ToolInput):
    blog_id: str = Field(
        min_length=1,
        description='The GID of the blog to create the article in (e.g., "gid://shopify/Blog/1234567890")',
    )
    title: str = Field(min_length=1, description="The title of the article")
    content: str = Field(min_length=1, description="The content of the article in HTML format")
    author: AuthorInput = Field(description="The article's author")
    published: Optional[bool] = Field(default=None, description="Whether to publish the article immediately")
    tags: Optional[List[str]] = Field(default=None, description="Tags to categorize the article")


class UpdateArticleInput(ToolInput):
    article_id: str = Field(
        min_length=1,
        description='The GID of the article to update (e.g., "gid://shopify/Article/1234567890")',
    )
    title: Optional[str] = Field(default=None, description="The new title for the article")
    body: Optional[str] = Field(default=None, description="The new content for the article")
    summary: Optional[str] = Field(default=None, description="A short summary of the article")
    tags: Optional[List[str]] = Field(default=None, description="Tags for the article")
    author: Optional[AuthorInput] = None
    handle: Optional[str] = None
    published: Optional[bool] = Field(
        default=None, description="Whether the article should be published or unpublished"
    )


@register_tool
class GetArticlesTool(BaseTool):
    name = "get-articles"
    description = "Get articles from a specific blog, optionally filtered by title"
    input_model = GetArticlesInput
    subject = "articles"

    async def _execute(self, params: GetArticlesInput) -> Dict[str, Any]:
        variables = {
            "blogId": params.blog_id,
            **connection_variables(params.limit, params.after, params.before),
        }
        data = await self._request(_GET_ARTICLES_QUERY, variables)
        blog = data.get("blog")
        if blog is None:
            raise self._not_found("Blog", params.blog_id)

        connection = blog.get("articles")
        articles = dump_nodes(ArticleSummary, connection)
        if params.search_title:
            term = params.search_title.lower()
            articles = [a for a in articles if term in (a["title"] or "").lower()]

        return {
            "blogId": blog.get("id"),
            "blogTitle": blog.get("title"),
            "articles": articles,
            "pageInfo": extract_page_info(connection),
        }


@register_tool
class GetArticleByIdTool(BaseTool):
    name = "get-article-by-id"
    description = "Get a specific article by ID with its body, author and blog"
    input_model = GetArticleByIdInput
    subject = "article"

    async def _execute(self, params: GetArticleByIdInput) -> Dict[str, Any]:
        data = await self._request(_GET_ARTICLE_BY_ID_QUERY, {"id": params.article_id})
        article = data.get("article")
        if article is None:
            raise self._not_found("Article", params.article_id)
        return {"article": Article.model_validate(article).to_result()}


@register_tool
class CreateArticleTool(BaseTool):
    name = "create-article"
    description = "Create a new article in a blog"
    input_model = CreateArticleInput
    action = "create"
    subject = "article"

    async def _execute(self, params: CreateArticleInput) -> Dict[str, Any]:
        article: Dict[str, Any] = {
            "blogId": params.blog_id,
            "title": params.title,
            "body": params.content,
            "author": params.author.provided(),
        }
        if params.published is not None:
            article["isPublished"] = params.published
        if params.tags is not None:
            article["tags"] = params.tags

        data = await self._request(_CREATE_ARTICLE_MUTATION, {"article": article})
        payload = data.get("articleCreate") or {}
        self._raise_for_user_errors(payload)
        return {"article": Article.model_validate(payload.get("article")).to_result()}


@register_tool
class UpdateArticleTool(BaseTool):
    name = "update-article"
    description = "Update an article's title, body, summary, tags, author or publication status"
    input_model = UpdateArticleInput
    action = "update"
    subject = "article"

    async def _execute(self, params: UpdateArticleInput) -> Dict[str, Any]:
        article = params.provided("article_id", "published")
        if params.published is not None:
            article["isPublished"] = params.published

        data = await self._request(
            _UPDATE_ARTICLE_MUTATION, {"id": params.article_id, "article": article}
        )
        payload = data.get("articleUpdate") or {}
        self._raise_for_user_errors(payload)
        updated = payload.get("article")
        if updated is None:
            raise self._not_found("Article", params.article_id)
        return {"article": Article.model_validate(updated).to_result()}
