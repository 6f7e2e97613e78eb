"""Async GraphQL client for the Shopify Admin API.

One instance is created at startup and shared by every tool. It issues a
single POST per request and never retries; failures surface as
TransportError.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from .exceptions import TransportError

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "2025-01"
DEFAULT_TIMEOUT = 30.0


def build_endpoint(domain: str, api_version: str = DEFAULT_API_VERSION) -> str:
    """Admin GraphQL endpoint for a ``*.myshopify.com`` domain."""
    host = domain.strip()
    for scheme in ("https://", "http://"):
        if host.startswith(scheme):
            host = host[len(scheme):]
    host = host.rstrip("/")
    return f"https://{host}/admin/api/{api_version}/graphql.json"


class ShopifyGraphQLClient:
    """Async GraphQL client bound to one store and access token."""

    def __init__(
        self,
        domain: str,
        access_token: str,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.domain = domain
        self.api_version = api_version
        self.endpoint = build_endpoint(domain, api_version)
        self._access_token = access_token
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "X-Shopify-Access-Token": self._access_token,
            "Content-Type": "application/json",
        }

    async def request(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Execute a single GraphQL operation.

        Args:
            query: GraphQL document.
            variables: Operation variables. Keys whose value is None are
                still sent; callers omit keys to leave a field unset.

        Returns:
            The "data" portion of the response.

        Raises:
            TransportError: On connection failure, non-2xx status, a body
                that is not JSON, or top-level GraphQL errors.
        """
        payload: Dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        try:
            response = await self._http.post(
                self.endpoint, json=payload, headers=self.headers
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise TransportError(
                f"HTTP {status} from Shopify Admin API",
                status_code=status,
                response_body=exc.response.text[:500],
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"Request to Shopify Admin API failed: {type(exc).__name__}: {exc}"
            ) from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise TransportError(
                "Shopify Admin API returned a non-JSON response",
                status_code=response.status_code,
                response_body=response.text[:500],
            ) from exc

        if not isinstance(body, dict):
            raise TransportError(
                "Shopify Admin API returned an unexpected response body",
                status_code=response.status_code,
                response_body=response.text[:500],
            )

        if body.get("errors"):
            error_messages = "; ".join(
                e.get("message", "Unknown error") for e in body["errors"]
            )
            raise TransportError(
                f"GraphQL error: {error_messages}",
                status_code=response.status_code,
                response_body=str(body["errors"])[:500],
            )

        return body.get("data") or {}

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http.aclose()
