"""GitHub release fetcher using the GraphQL API."""

from .client import GitHubGraphQLClient, GraphQLResponse
from .errors import (
    MissingFieldError,
    ReleaseFetchError,
    SchemaError,
    ServiceError,
    TransportError,
)
from .fetcher import GitHubReleaseFetcher
from .pagination import execute_query, extract_nested, paginate

__version__ = "1.0.0"
__all__ = [
    "GitHubGraphQLClient",
    "GraphQLResponse",
    "GitHubReleaseFetcher",
    "execute_query",
    "extract_nested",
    "paginate",
    "ReleaseFetchError",
    "ServiceError",
    "MissingFieldError",
    "TransportError",
    "SchemaError",
]
