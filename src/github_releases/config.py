"""Runtime configuration read from the environment and an optional .env file."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_API_URL = "https://api.github.com/graphql"
DEFAULT_SCHEMA_PATH = "github_schema.json"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    """Settings for talking to the GitHub GraphQL API."""

    token: str
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    schema_path: Path = Path(DEFAULT_SCHEMA_PATH)
    replace_schema: bool = False

    @classmethod
    def from_env(cls, token: Optional[str] = None) -> "Settings":
        """
        Build settings from environment variables.

        A .env file in the working directory is loaded first. An explicit
        token (e.g. from the command line) wins over the environment.

        Args:
            token: Optional token overriding GITHUB_API_TOKEN / GITHUB_TOKEN

        Raises:
            ValueError: If no token is available
        """
        load_dotenv(find_dotenv(usecwd=True))

        token = token or os.environ.get("GITHUB_API_TOKEN") or os.environ.get("GITHUB_TOKEN")
        if not token:
            raise ValueError(
                "You must set a GITHUB_API_TOKEN variable (or pass --token) to query github"
            )

        return cls(
            token=token,
            api_url=os.environ.get("GITHUB_GRAPHQL_URL", DEFAULT_API_URL),
            timeout=float(os.environ.get("GITHUB_TIMEOUT", DEFAULT_TIMEOUT)),
            schema_path=Path(os.environ.get("GITHUB_SCHEMA_PATH", DEFAULT_SCHEMA_PATH)),
            replace_schema=os.environ.get("REPLACE_GITHUB_SCHEMA", "").lower() == "true",
        )
