"""Utility functions for rate limit display and release data processing."""

from datetime import datetime
from typing import Any, Dict


def format_rate_limit_info(rate_limit: Dict[str, Any]) -> str:
    """Format rate limit info for display."""
    remaining = rate_limit.get('remaining', '?')
    limit = rate_limit.get('limit', '?')
    reset_at = rate_limit.get('resetAt', '')

    if reset_at:
        try:
            reset_time = datetime.fromisoformat(reset_at.replace('Z', '+00:00'))
            reset_str = reset_time.strftime('%H:%M:%S')
        except (ValueError, TypeError):
            reset_str = reset_at
    else:
        reset_str = '?'

    return f"Rate limit: {remaining}/{limit} (resets at {reset_str})"


def extract_release_data(release_node: Dict[str, Any]) -> Dict[str, Any]:
    """
    Flatten a release node from a GraphQL response into a single row.

    Args:
        release_node: Release node from GraphQL response

    Returns:
        Flat dictionary suitable for a DataFrame row
    """
    if not release_node:
        return {}

    # Deleted (ghost) authors come back as null
    author = release_node.get('author') or {}
    tag = release_node.get('tag') or {}

    return {
        'name': release_node.get('name') or '',
        'tag_name': tag.get('name', ''),
        'tag_prefix': tag.get('prefix', ''),
        'url': release_node.get('url', ''),

        # Flags
        'is_draft': release_node.get('isDraft', False),
        'is_prerelease': release_node.get('isPrerelease', False),

        # Author
        'author_login': author.get('login', ''),
        'author_email': author.get('email', ''),

        # Timestamps
        'created_at': release_node.get('createdAt', ''),
        'updated_at': release_node.get('updatedAt', ''),
        'published_at': release_node.get('publishedAt') or '',
    }
