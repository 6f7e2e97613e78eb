"""Shared result records and the base model used by every tool result."""

from typing import Annotated, Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

from ..connectors.pagination import flatten_connection

T = TypeVar("T")

# A list field fetched as a Relay connection; accepts edges/node or nodes.
Connection = Annotated[List[T], BeforeValidator(flatten_connection)]


class ShopifyModel(BaseModel):
    """Result record validated from Admin API JSON and dumped in camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_result(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class Money(ShopifyModel):
    amount: Optional[str] = None
    currency_code: Optional[str] = None


class SEO(ShopifyModel):
    title: Optional[str] = None
    description: Optional[str] = None


class MailingAddress(ShopifyModel):
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    province_code: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None


class Image(ShopifyModel):
    id: Optional[str] = None
    url: Optional[str] = None
    alt_text: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


class Author(ShopifyModel):
    name: Optional[str] = None


def dump_nodes(model: Type[ShopifyModel], connection: Any) -> List[Dict[str, Any]]:
    """Validate every node of a connection as ``model`` and dump it."""
    return [model.model_validate(node).to_result() for node in flatten_connection(connection)]
