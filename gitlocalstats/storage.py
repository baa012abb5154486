"""
File-based storage for the list of scanned repositories.

The list is a newline-delimited file of absolute paths, by default
~/.gitlocalstats.
"""

import logging
from pathlib import Path

from gitlocalstats.config import get_repo_list_path

logger = logging.getLogger(__name__)


def join_repos(new_repos: list[str], existing_repos: list[str]) -> list[str]:
    """
    Merge repository paths, keeping first-seen order and dropping duplicates.

    Args:
        new_repos: Paths to add
        existing_repos: Paths already stored

    Returns:
        Combined list with every path appearing once
    """
    merged = list(dict.fromkeys(existing_repos))
    seen = set(merged)
    for repo in new_repos:
        if repo not in seen:
            merged.append(repo)
            seen.add(repo)
    return merged


class RepoListStorage:
    """Persisted list of repository paths."""

    def __init__(self, path: str | Path | None = None):
        """
        Initialize the repository list storage.

        Args:
            path: Path to the list file.
                  Defaults to ~/.gitlocalstats (or GITLOCALSTATS_FILE)
        """
        if path is None:
            path = get_repo_list_path()
        self.path = Path(path)

    def ensure_file(self) -> bool:
        """
        Create the list file if it does not exist yet.

        Returns:
            True if the file was created
        """
        if self.path.exists():
            return False

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("", encoding="utf-8")
        logger.debug("Created repository list at %s", self.path)
        return True

    def get_repos(self) -> list[str]:
        """
        Read the stored repository paths.

        Returns:
            Paths in stored order; empty if the file does not exist.
        """
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []

        return [line.strip() for line in content.splitlines() if line.strip()]

    def save_repos(self, repos: list[str]) -> None:
        """Overwrite the list file with the given paths."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("".join(f"{repo}\n" for repo in repos), encoding="utf-8")

    def add_repos(self, new_repos: list[str]) -> int:
        """
        Append repositories that are not stored yet.

        Args:
            new_repos: Repository paths to add

        Returns:
            Number of paths that were not already in the list
        """
        existing = self.get_repos()
        repos = join_repos(new_repos, existing)
        self.save_repos(repos)
        return len(repos) - len(set(existing))
