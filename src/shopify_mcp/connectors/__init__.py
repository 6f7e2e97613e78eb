"""Shopify Admin API transport, errors and connection helpers."""

from .exceptions import (
    EntityNotFoundError,
    InvalidInputError,
    RemoteUserError,
    ShopifyToolError,
    ToolErrorKind,
    TransportError,
    UninitializedDependencyError,
)
from .graphql import ShopifyGraphQLClient

__all__ = [
    "EntityNotFoundError",
    "InvalidInputError",
    "RemoteUserError",
    "ShopifyGraphQLClient",
    "ShopifyToolError",
    "ToolErrorKind",
    "TransportError",
    "UninitializedDependencyError",
]
