"""Release fetcher built on the cursor paginator."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
from tqdm import tqdm

from .pagination import Page, QueryTransport, paginate
from .queries import RELEASE_QUERY
from .utils import extract_release_data

# Stand-in budget when the caller asks for "no limit"
NO_LIMIT = 999999999

RELEASES_PATH = ["repository", "releases"]

SAVE_FORMATS = (".json", ".csv", ".parquet")


def resolve_limit(limit: Optional[int]) -> int:
    """
    Translate a user-facing limit into a result budget.

    None or 0 mean "fetch everything".
    """
    if limit is None or limit == 0:
        return NO_LIMIT
    if limit < 0:
        raise ValueError(f"Limit must be zero or positive, got {limit}")
    return limit


def to_json(releases: List[Dict[str, Any]]) -> str:
    """Render releases as pretty-printed JSON."""
    return json.dumps(releases, indent=2, ensure_ascii=False)


class GitHubReleaseFetcher:
    """Fetcher for the releases of a GitHub repository."""

    def __init__(self, client: QueryTransport, show_progress: bool = True):
        """
        Initialize the fetcher.

        Args:
            client: GraphQL transport, usually a GitHubGraphQLClient
            show_progress: Display a tqdm progress bar while paginating
        """
        self.client = client
        self.show_progress = show_progress
        self._releases: List[Dict[str, Any]] = []

    def releases(self, owner: str, repo: str, max_results: int) -> List[Dict[str, Any]]:
        """
        Fetch up to ``max_results`` releases of ``owner/repo`` in API order.

        Args:
            owner: Repository owner login
            repo: Repository name
            max_results: Maximum releases to return (see resolve_limit)

        Returns:
            List of release nodes exactly as returned by the API
        """
        total = max_results if max_results != NO_LIMIT else None
        with tqdm(total=total, desc=f"{owner}/{repo} releases", unit="release",
                  disable=not self.show_progress) as pbar:

            def advance(page: Page) -> None:
                pbar.update(len(page.items))

            self._releases = paginate(
                self.client,
                RELEASE_QUERY,
                {"owner": owner, "repo": repo},
                max_results,
                RELEASES_PATH,
                on_page=advance,
            )

        return self._releases

    def to_dataframe(self) -> pd.DataFrame:
        """
        Convert fetched releases to a flat DataFrame.

        Returns:
            DataFrame with one row per release
        """
        if not self._releases:
            return pd.DataFrame()
        return pd.DataFrame([extract_release_data(node) for node in self._releases])

    def save_to_json(self, output_path: Path) -> None:
        """Save fetched releases, unflattened, to a JSON file."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(to_json(self._releases) + "\n", encoding="utf-8")

    def save_to_parquet(self, output_path: Path) -> None:
        """
        Save fetched releases to parquet file.

        Args:
            output_path: Path to output parquet file
        """
        df = self.to_dataframe()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_parquet(output_path, index=False)

    def save_to_csv(self, output_path: Path) -> None:
        """
        Save fetched releases to CSV file.

        Args:
            output_path: Path to output CSV file
        """
        df = self.to_dataframe()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_path, index=False)

    def save(self, output_path: Path) -> None:
        """Save releases in the format picked by the file suffix (.json, .csv, .parquet)."""
        suffix = output_path.suffix.lower()
        if suffix == ".csv":
            self.save_to_csv(output_path)
        elif suffix == ".parquet":
            self.save_to_parquet(output_path)
        elif suffix == ".json":
            self.save_to_json(output_path)
        else:
            raise ValueError(f"Unsupported output format: {output_path.suffix or '(none)'}")
