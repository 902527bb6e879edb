"""GitHub GraphQL API client with authentication and rate limit tracking."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from .config import DEFAULT_API_URL, DEFAULT_TIMEOUT, Settings
from .errors import TransportError
from .queries import RATE_LIMIT_QUERY
from .utils import format_rate_limit_info

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphQLResponse:
    """Result of one GraphQL request: either data or a list of errors, never both."""

    data: Optional[Dict[str, Any]] = None
    errors: Optional[List[Dict[str, Any]]] = None

    def __post_init__(self):
        if bool(self.errors) == (self.data is not None):
            raise ValueError("GraphQLResponse must carry either data or errors")

    @property
    def ok(self) -> bool:
        return not self.errors


class GitHubGraphQLClient:
    """Client for GitHub GraphQL API with authentication and rate limit tracking."""

    API_URL = DEFAULT_API_URL

    def __init__(
        self,
        token: str,
        api_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the GitHub GraphQL client.

        Args:
            token: GitHub Personal Access Token
            api_url: GraphQL endpoint (defaults to the public GitHub API)
            timeout: Per-request timeout in seconds
            session: Optional pre-built requests session
        """
        if not token:
            raise ValueError("GitHub token is required")

        self.token = token
        self.api_url = api_url or self.API_URL
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        })

        # Track rate limit info
        self._rate_limit: Optional[Dict[str, Any]] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "GitHubGraphQLClient":
        return cls(settings.token, api_url=settings.api_url, timeout=settings.timeout)

    def __enter__(self) -> "GitHubGraphQLClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    @property
    def rate_limit(self) -> Optional[Dict[str, Any]]:
        """Get the current rate limit info."""
        return self._rate_limit

    def post(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None
    ) -> GraphQLResponse:
        """
        Send a GraphQL query once.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            GraphQLResponse holding either the data payload or the reported errors

        Raises:
            TransportError: On network errors, HTTP error statuses or non-JSON bodies
        """
        payload: Dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        try:
            response = self.session.post(self.api_url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise TransportError(f"HTTP error from {self.api_url}: {e}", status_code=status) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request to {self.api_url} failed: {e}") from e

        try:
            result = response.json()
        except ValueError as e:
            raise TransportError(
                f"Invalid JSON from {self.api_url}: {response.text[:200]}",
                status_code=response.status_code
            ) from e

        data = result.get('data')

        # Update rate limit info if present
        if isinstance(data, dict) and data.get('rateLimit'):
            self._rate_limit = data['rateLimit']

        errors = result.get('errors')
        if errors:
            logger.debug("GraphQL response carried %d error(s)", len(errors))
            return GraphQLResponse(errors=errors)

        return GraphQLResponse(data=data or {})

    def check_rate_limit(self) -> Dict[str, Any]:
        """
        Check current rate limit status.

        Returns:
            Rate limit info dict with 'remaining', 'limit', 'resetAt'
        """
        response = self.post(RATE_LIMIT_QUERY)
        if not response.ok:
            logger.warning("Rate limit query returned errors: %s", response.errors)
            return {}
        return response.data.get('rateLimit') or {}

    def get_rate_limit_info(self) -> str:
        """Get formatted rate limit info string."""
        if not self._rate_limit:
            self._rate_limit = self.check_rate_limit()
        return format_rate_limit_info(self._rate_limit)
