"""Relay connection helpers.

The Admin API wraps lists either as ``{edges: [{cursor, node}]}`` or as a
flattened ``{nodes: [...]}``. Tools run every list field through
flatten_connection so neither wrapper reaches the caller.
"""

from typing import Any, Dict, List, Optional

PAGE_INFO_KEYS = ("hasNextPage", "hasPreviousPage", "startCursor", "endCursor")


def flatten_connection(connection: Any) -> List[Any]:
    """Return the node list of a connection, whichever wrapper it uses.

    ``None`` and already-flat lists are accepted so nullable list fields
    normalise to ``[]`` and re-validation is a no-op.
    """
    if connection is None:
        return []
    if isinstance(connection, list):
        return connection
    if "edges" in connection:
        return [edge.get("node") for edge in connection.get("edges") or []]
    return list(connection.get("nodes") or [])


def first_node(connection: Any) -> Optional[Any]:
    """First node of a connection, or None when it is empty."""
    nodes = flatten_connection(connection)
    return nodes[0] if nodes else None


def extract_page_info(connection: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Copy the pageInfo block of a connection, keeping only the known keys."""
    if not connection or connection.get("pageInfo") is None:
        return None
    page_info = connection["pageInfo"]
    return {key: page_info.get(key) for key in PAGE_INFO_KEYS}


def connection_variables(
    limit: int,
    after: Optional[str] = None,
    before: Optional[str] = None,
) -> Dict[str, Any]:
    """Page-size and cursor variables for a connection field.

    Paging backwards with ``before`` requires ``last: N`` instead of
    ``first: N``. Cursors are opaque and forwarded unchanged.
    """
    if before is not None:
        variables: Dict[str, Any] = {"last": limit, "before": before}
    else:
        variables = {"first": limit}
        if after is not None:
            variables["after"] = after
    return variables


def wildcard_filter(field: str, term: Optional[str]) -> Optional[str]:
    """Shopify search syntax matching ``term`` anywhere in ``field``.

    The term is interpolated as-is; ``*`` or ``:`` inside it keep their
    meaning in the search grammar.
    """
    if not term:
        return None
    return f"{field}:*{term}*"
