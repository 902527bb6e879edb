"""
Pytest fixtures for github_releases tests.

The fake transport replays canned GraphQL responses and records every call.
"""

from typing import Any, Dict, List, Optional

import pytest

from github_releases.client import GraphQLResponse


class FakeTransport:
    """Stand-in for GitHubGraphQLClient that replays queued responses."""

    def __init__(self, responses: List[GraphQLResponse]):
        self.responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def post(self, query: str, variables: Optional[Dict[str, Any]] = None) -> GraphQLResponse:
        # Copy so later mutation by the caller would show up as a mismatch
        self.calls.append({"query": query, "variables": dict(variables or {})})
        if not self.responses:
            raise AssertionError(f"Unexpected GraphQL call with {variables}")
        return self.responses.pop(0)

    @property
    def cursors(self) -> List[Optional[str]]:
        return [call["variables"].get("cursor") for call in self.calls]


def release_node(index: int) -> Dict[str, Any]:
    return {
        "isDraft": False,
        "isPrerelease": index % 10 == 0,
        "author": {"login": f"user{index}", "email": ""},
        "name": f"Release {index}",
        "tag": {"name": f"v{index}", "prefix": "refs/tags/"},
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-02T00:00:00Z",
        "publishedAt": "2024-01-03T00:00:00Z",
        "url": f"https://github.com/octo/repo/releases/tag/v{index}",
    }


def releases_page(start: int, count: int, end_cursor: Optional[str]) -> GraphQLResponse:
    """Build a successful response holding ``count`` releases numbered from ``start``."""
    return GraphQLResponse(data={
        "repository": {
            "releases": {
                "totalCount": 237,
                "pageInfo": {"endCursor": end_cursor},
                "edges": [{"node": release_node(i)} for i in range(start, start + count)],
            }
        }
    })


@pytest.fixture
def three_pages():
    """Pages of 100, 100 and 37 releases chained by cursors c1 and c2."""
    return FakeTransport([
        releases_page(0, 100, "c1"),
        releases_page(100, 100, "c2"),
        releases_page(200, 37, None),
    ])
