"""Online store content: pages, blogs, articles and search hits."""

from typing import Any, List, Optional

from pydantic import AliasChoices, Field, field_validator

from .common import Author, Connection, Image, ShopifyModel


class Page(ShopifyModel):
    id: str
    title: Optional[str] = None
    handle: Optional[str] = None
    body: Optional[str] = None
    body_summary: Optional[str] = None
    is_published: Optional[bool] = None
    published_at: Optional[str] = None
    template_suffix: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class BlogFeed(ShopifyModel):
    path: Optional[str] = None
    location: Optional[str] = None


class Blog(ShopifyModel):
    id: str
    title: Optional[str] = None
    handle: Optional[str] = None
    comment_policy: Optional[str] = None
    template_suffix: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    # Null unless the blog is fed from an external source.
    feed: Optional[BlogFeed] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class BlogArticle(ShopifyModel):
    id: str
    title: Optional[str] = None
    handle: Optional[str] = None
    published_at: Optional[str] = None
    author: Optional[Author] = None
    tags: List[str] = Field(default_factory=list)


class BlogDetail(Blog):
    articles: Connection[BlogArticle] = Field(default_factory=list)


class BlogRef(ShopifyModel):
    id: str
    title: Optional[str] = None


class ArticleSummary(ShopifyModel):
    """Article row of get-articles.

    ``hasComments`` is derived: the query probes ``comments(first: 0)`` and
    the article has comments when that empty page reports a next or
    previous page.
    """

    id: str
    title: Optional[str] = None
    handle: Optional[str] = None
    author: Optional[Author] = None
    published_at: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    image: Optional[Image] = None
    has_comments: bool = Field(
        default=False,
        validation_alias=AliasChoices("comments", "hasComments"),
        serialization_alias="hasComments",
    )

    @field_validator("has_comments", mode="before")
    @classmethod
    def _probe_comments(cls, value: Any) -> bool:
        if isinstance(value, dict):
            page_info = value.get("pageInfo") or {}
            return bool(page_info.get("hasNextPage") or page_info.get("hasPreviousPage"))
        return bool(value)


class Article(ShopifyModel):
    id: str
    title: Optional[str] = None
    handle: Optional[str] = None
    body: Optional[str] = None
    summary: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    is_published: Optional[bool] = None
    published_at: Optional[str] = None
    author: Optional[Author] = None
    blog: Optional[BlogRef] = None
    image: Optional[Image] = None


class SearchHit(ShopifyModel):
    id: str
    title: Optional[str] = None
    handle: Optional[str] = None
    summary: Optional[str] = None
    blog_title: Optional[str] = None

    @classmethod
    def from_node(cls, node: dict) -> "SearchHit":
        """Pick the type-specific summary field and the parent blog title."""
        summary = node.get("summary") or node.get("bodySummary") or node.get("description")
        blog = node.get("blog") or {}
        return cls(
            id=node.get("id"),
            title=node.get("title"),
            handle=node.get("handle"),
            summary=summary or None,
            blog_title=blog.get("title"),
        )

    def to_result(self):
        result = super().to_result()
        if self.blog_title is None:
            result.pop("blogTitle")
        return result
