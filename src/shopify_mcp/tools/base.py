"""Base tool interface.

A tool is one named GraphQL operation exposed over MCP. Subclasses declare
``name``, ``description``, ``input_model`` and the verb/noun used in error
messages, and implement ``_execute``. Everything else (client binding,
input validation, error unification) lives here.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from mcp import types
from pydantic import ValidationError

from ..connectors.exceptions import (
    EntityNotFoundError,
    InvalidInputError,
    RemoteUserError,
    ShopifyToolError,
    ToolErrorKind,
    TransportError,
    UninitializedDependencyError,
    format_user_errors,
)
from ..connectors.graphql import ShopifyGraphQLClient
from ..models.inputs import ToolInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolResult:
    """Outcome of a tool call: either data or exactly one error."""

    data: Optional[Dict[str, Any]] = None
    error: Optional[ShopifyToolError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ToolErrorKind]:
        return self.error.kind if self.error else None

    @property
    def message(self) -> str:
        return str(self.error) if self.error else ""


class BaseTool(ABC):
    """Base class for all Shopify tools."""

    name: str = ""
    description: str = ""
    input_model: Type[ToolInput] = ToolInput
    # "Failed to <action> <subject>: ..."
    action: str = "fetch"
    subject: str = ""

    def __init__(self, client: Optional[ShopifyGraphQLClient] = None):
        self._client = client

    def initialize(self, client: ShopifyGraphQLClient) -> None:
        """Bind the shared GraphQL client. A second call replaces the first."""
        self._client = client
        logger.debug("Initialized tool %s", self.name)

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> ShopifyGraphQLClient:
        if self._client is None:
            raise UninitializedDependencyError(self.name)
        return self._client

    @property
    def error_prefix(self) -> str:
        return f"Failed to {self.action} {self.subject}"

    def validate(self, arguments: Optional[Dict[str, Any]]) -> ToolInput:
        """Parse raw arguments, applying defaults.

        Raises:
            InvalidInputError: Listing every violated field.
        """
        try:
            return self.input_model.model_validate(arguments or {})
        except ValidationError as exc:
            errors = [
                {
                    "field": ".".join(str(part) for part in err["loc"]) or "arguments",
                    "message": err["msg"],
                }
                for err in exc.errors()
            ]
            details = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
            raise InvalidInputError(
                f"Invalid input for {self.name}: {details}",
                errors=errors,
                tool_name=self.name,
            ) from exc

    async def execute(self, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Validate arguments, run the operation and return the normalized result.

        Raises:
            ShopifyToolError: Any of the ToolErrorKind failures.
        """
        if not self.is_initialized:
            raise UninitializedDependencyError(self.name)
        params = self.validate(arguments)

        try:
            return await self._execute(params)
        except TransportError as exc:
            if exc.tool_name:
                raise
            logger.error("Error executing tool '%s': %s", self.name, exc)
            raise TransportError(
                f"{self.error_prefix}: {exc}",
                status_code=exc.status_code,
                response_body=exc.response_body,
                tool_name=self.name,
            ) from exc
        except ShopifyToolError as exc:
            logger.error("Error executing tool '%s': %s", self.name, exc)
            raise
        except ValidationError as exc:
            # The response did not match the result record
            logger.error("Unexpected response shape for tool '%s': %s", self.name, exc)
            raise TransportError(
                f"{self.error_prefix}: unexpected response shape: {exc}",
                tool_name=self.name,
            ) from exc

    async def run(self, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """Like execute, but returns failures as a ToolResult instead of raising."""
        try:
            return ToolResult(data=await self.execute(arguments))
        except ShopifyToolError as exc:
            return ToolResult(error=exc)

    @abstractmethod
    async def _execute(self, params: Any) -> Dict[str, Any]:
        """Perform the GraphQL operation(s) for validated ``params``."""
        pass

    def to_mcp_tool(self) -> types.Tool:
        """MCP tool definition with the JSON Schema of ``input_model``."""
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_model.model_json_schema(by_alias=True),
        )

    # -- helpers -----------------------------------------------------------

    async def _request(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        logger.debug("Tool %s requesting with variables=%s", self.name, variables)
        return await self.client.request(query, variables)

    def _raise_for_user_errors(self, payload: Optional[Dict[str, Any]]) -> None:
        """Fail on any userErrors entry, even when an entity came back too."""
        user_errors: List[Dict[str, Any]] = (payload or {}).get("userErrors") or []
        if user_errors:
            raise RemoteUserError(
                f"{self.error_prefix}: {format_user_errors(user_errors)}",
                user_errors=user_errors,
                tool_name=self.name,
            )

    def _not_found(self, entity: str, entity_id: str) -> EntityNotFoundError:
        return EntityNotFoundError(
            f"{self.error_prefix}: {entity} with ID {entity_id} not found",
            entity_id=entity_id,
            tool_name=self.name,
        )
