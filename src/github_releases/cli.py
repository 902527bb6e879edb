"""Command line interface for fetching GitHub releases."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .client import GitHubGraphQLClient
from .config import Settings
from .errors import ReleaseFetchError
from .fetcher import SAVE_FORMATS, GitHubReleaseFetcher, resolve_limit, to_json
from .queries import RELEASE_QUERY
from .schema import check_query, ensure_schema


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the fetch-releases command."""
    parser = argparse.ArgumentParser(
        description="Fetch release metadata for a GitHub repository using the GraphQL API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # All releases of a repository, as JSON on stdout
  fetch-releases -o python -r cpython

  # Only the 20 most recent
  fetch-releases -o python -r cpython -l 20

  # Also save a flat table
  fetch-releases -o python -r cpython --save releases.csv

  # Check the query against a cached schema (set REPLACE_GITHUB_SCHEMA=true to refresh)
  fetch-releases -o python -r cpython --schema github_schema.json
        """
    )

    parser.add_argument("-o", "--owner", required=True, help="Repository owner (user or org)")
    parser.add_argument("-r", "--repository", required=True, help="Repository name")
    parser.add_argument(
        "-l", "--limit",
        type=int,
        default=0,
        help="Maximum releases to fetch (default: 0, meaning all)"
    )

    output_group = parser.add_argument_group("Output options")
    output_group.add_argument(
        "--save",
        type=str,
        help="Also save releases to a file (.json, .csv or .parquet)"
    )
    output_group.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide the progress bar"
    )
    output_group.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log each page request and show rate limit info"
    )

    auth_group = parser.add_argument_group("Authentication")
    auth_group.add_argument(
        "--token",
        type=str,
        help="GitHub Personal Access Token (or set GITHUB_API_TOKEN env var)"
    )
    auth_group.add_argument(
        "--schema",
        nargs="?",
        const="",
        default=None,
        metavar="PATH",
        help="Validate the query against a cached schema (default path: GITHUB_SCHEMA_PATH)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        max_results = resolve_limit(args.limit)
    except ValueError as e:
        parser.error(str(e))

    if args.save and Path(args.save).suffix.lower() not in SAVE_FORMATS:
        parser.error(f"--save must end in one of: {', '.join(SAVE_FORMATS)}")

    try:
        settings = Settings.from_env(token=args.token)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Get a token at: https://github.com/settings/tokens", file=sys.stderr)
        return 1

    with GitHubGraphQLClient.from_settings(settings) as client:
        fetcher = GitHubReleaseFetcher(client, show_progress=not args.no_progress)
        try:
            if args.schema is not None:
                schema_path = Path(args.schema) if args.schema else settings.schema_path
                schema = ensure_schema(client, schema_path, replace=settings.replace_schema)
                check_query(schema, RELEASE_QUERY)

            releases = fetcher.releases(args.owner, args.repository, max_results)

            if args.verbose:
                print(client.get_rate_limit_info(), file=sys.stderr)
        except ReleaseFetchError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    if args.save:
        output_path = Path(args.save)
        try:
            fetcher.save(output_path)
        except Exception as e:
            print(f"Error: could not save {output_path}: {e}", file=sys.stderr)
            return 1
        print(f"Saved {len(releases)} releases to {output_path}", file=sys.stderr)

    print(to_json(releases))
    return 0


if __name__ == "__main__":
    sys.exit(main())
