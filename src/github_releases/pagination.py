"""Cursor pagination over GraphQL connections.

A connection is any object shaped like::

    {"pageInfo": {"endCursor": "..."}, "edges": [{"node": {...}}, ...]}

``paginate`` runs a query repeatedly, feeding each page's ``endCursor`` back
in as the ``cursor`` variable, until the cursor runs out or enough nodes have
been collected.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Sequence

from .client import GraphQLResponse
from .errors import MissingFieldError, ServiceError

logger = logging.getLogger(__name__)

CURSOR_VARIABLE = "cursor"


class QueryTransport(Protocol):
    """Anything that can send one GraphQL query, e.g. GitHubGraphQLClient."""

    def post(self, query: str, variables: Optional[Dict[str, Any]] = None) -> GraphQLResponse:
        ...


@dataclass
class Page:
    """One page of a connection: its nodes and the cursor for the next page."""

    end_cursor: Optional[str]
    items: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def has_next(self) -> bool:
        return self.end_cursor is not None


def execute_query(
    client: QueryTransport,
    query: str,
    variables: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Execute a query once and return its data payload.

    Raises:
        ServiceError: If the service reported errors
        TransportError: Propagated from the client
    """
    response = client.post(query, variables)
    if not response.ok:
        raise ServiceError(response.errors)
    return response.data


def extract_nested(payload: Any, path: Sequence[str]) -> Any:
    """
    Return the value found by walking ``payload`` along ``path``.

    A segment counts as absent when the key is missing, its value is null, or
    the value it is looked up in is not a mapping.

    Raises:
        MissingFieldError: If any segment of the path is absent
    """
    value = payload
    for name in path:
        if not isinstance(value, Mapping) or value.get(name) is None:
            logger.error("can't find nested field %s in payload", ','.join(path))
            logger.error("payload was: %r", payload)
            raise MissingFieldError(path, payload)
        value = value[name]
    return value


def extract_page(payload: Dict[str, Any], path: Sequence[str]) -> Page:
    """Pull the connection at ``path`` out of ``payload`` as a Page."""
    page_info = extract_nested(payload, [*path, "pageInfo"])
    edges = extract_nested(payload, [*path, "edges"])
    items = []
    for edge in edges:
        # node itself is nullable; only a malformed edge is an error
        if not isinstance(edge, Mapping):
            raise MissingFieldError([*path, "edges", "node"], payload)
        items.append(edge.get("node"))
    return Page(end_cursor=page_info.get("endCursor"), items=items)


def paginate(
    client: QueryTransport,
    query: str,
    base_variables: Dict[str, Any],
    max_results: int,
    path: Sequence[str],
    on_page: Optional[Callable[[Page], None]] = None
) -> List[Dict[str, Any]]:
    """
    Collect nodes from a cursor-paginated connection.

    Pages are fetched one after another; page size is whatever the query
    document asks for, and the last page is truncated rather than shrunk.
    ``max_results`` is taken literally, so 0 returns nothing after the
    first request.

    Args:
        client: Transport with a ``post(query, variables)`` method
        query: GraphQL document declaring a nullable ``$cursor`` variable
        base_variables: Variables for every page (never modified)
        max_results: Maximum number of nodes to return
        path: Field names leading to the connection in the response data
        on_page: Optional callback invoked with each fetched page

    Returns:
        Up to ``max_results`` nodes in server order

    Raises:
        ServiceError, MissingFieldError, TransportError: From any page; no
        partial result is returned
    """
    results: List[Dict[str, Any]] = []
    variables = dict(base_variables)
    page_number = 0

    while True:
        page_number += 1
        logger.debug(
            "Fetching page %d of %s (cursor=%s)",
            page_number, '.'.join(path), variables.get(CURSOR_VARIABLE)
        )

        data = execute_query(client, query, variables)
        page = extract_page(data, path)
        results.extend(page.items)

        logger.debug("Page %d returned %d item(s)", page_number, len(page.items))
        if on_page is not None:
            on_page(page)

        if not page.has_next or len(results) >= max_results:
            break

        variables = {**base_variables, CURSOR_VARIABLE: page.end_cursor}

    return results[:max(max_results, 0)]
