"""GraphQL query templates for GitHub API."""

from graphql import get_introspection_query

# Releases for one repository, 100 per page; $cursor is injected by the paginator
RELEASE_QUERY = """
query ListReleases($owner: String!, $repo: String!, $cursor: String) {
  repository(owner: $owner, name: $repo) {
    releases(first: 100, after: $cursor) {
      totalCount
      pageInfo {
        endCursor
      }
      edges {
        node {
          isDraft
          isPrerelease
          author {
            login
            email
          }
          name
          tag {
            name
            prefix
          }
          createdAt
          updatedAt
          publishedAt
          url
        }
      }
    }
  }
  rateLimit {
    remaining
    resetAt
    limit
    cost
  }
}
"""

# Query to check rate limit status
RATE_LIMIT_QUERY = """
query {
  rateLimit {
    remaining
    resetAt
    limit
    cost
  }
}
"""

# Full introspection query, as expected by graphql.build_client_schema
INTROSPECTION_QUERY = get_introspection_query(descriptions=False)
