#!/usr/bin/env python3
"""CLI entry point for fetching GitHub release data."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from github_releases.cli import main


if __name__ == "__main__":
    sys.exit(main())
