"""Tool-level exception types.

Every failure a tool can report derives from ShopifyToolError and carries a
ToolErrorKind, so callers can branch on the kind instead of matching message
strings. The MCP server layer only needs str(error).
"""

import enum
from typing import Any, Dict, List, Optional


class ToolErrorKind(str, enum.Enum):
    """Closed set of failure kinds surfaced by tools."""

    INVALID_INPUT = "invalid_input"
    UNINITIALIZED_DEPENDENCY = "uninitialized_dependency"
    REMOTE_USER_ERROR = "remote_user_error"
    TRANSPORT = "transport"
    NOT_FOUND = "not_found"


class ShopifyToolError(Exception):
    """Base exception for all tool errors."""

    kind: ToolErrorKind = ToolErrorKind.TRANSPORT

    def __init__(self, message: str, tool_name: str = ""):
        self.tool_name = tool_name
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidInputError(ShopifyToolError):
    """Arguments failed schema validation. Raised before any network call."""

    kind = ToolErrorKind.INVALID_INPUT

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, str]]] = None,
        tool_name: str = "",
    ):
        self.errors = errors or []
        super().__init__(message, tool_name)

    @property
    def fields(self) -> List[str]:
        return [e["field"] for e in self.errors]


class UninitializedDependencyError(ShopifyToolError):
    """Tool was executed before a GraphQL client was bound to it."""

    kind = ToolErrorKind.UNINITIALIZED_DEPENDENCY

    def __init__(self, tool_name: str):
        super().__init__(
            f"Tool '{tool_name}' is not initialized: no GraphQL client bound",
            tool_name,
        )


class RemoteUserError(ShopifyToolError):
    """The API accepted the request but rejected it with userErrors."""

    kind = ToolErrorKind.REMOTE_USER_ERROR

    def __init__(
        self,
        message: str,
        user_errors: Optional[List[Dict[str, Any]]] = None,
        tool_name: str = "",
    ):
        self.user_errors = user_errors or []
        super().__init__(message, tool_name)


class TransportError(ShopifyToolError):
    """HTTP, decoding or top-level GraphQL failure of the remote call."""

    kind = ToolErrorKind.TRANSPORT

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        response_body: str = "",
        tool_name: str = "",
    ):
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message, tool_name)


class EntityNotFoundError(ShopifyToolError):
    """A single-entity lookup returned a null payload."""

    kind = ToolErrorKind.NOT_FOUND

    def __init__(self, message: str, entity_id: str = "", tool_name: str = ""):
        self.entity_id = entity_id
        super().__init__(message, tool_name)


def format_user_errors(user_errors: List[Dict[str, Any]]) -> str:
    """Join every userError as "field: message", separated by ", ".

    ``field`` arrives as a path list (["input", "title"]) from the Admin API
    and is rendered dotted ("input.title").
    """
    parts = []
    for error in user_errors:
        field = error.get("field")
        if isinstance(field, list):
            field = ".".join(str(part) for part in field)
        message = error.get("message", "Unknown error")
        parts.append(f"{field}: {message}" if field else message)
    return ", ".join(parts)
