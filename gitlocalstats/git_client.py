"""
Git access layer for reading commit history from local repositories.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo

logger = logging.getLogger(__name__)


class GitClientError(Exception):
    """Raised when a repository cannot be read."""

    pass


@dataclass
class CommitRecord:
    """The parts of a commit the calendar cares about."""

    author_email: str
    authored_at: datetime


def read_commits(path: str | Path) -> list[CommitRecord]:
    """
    Read every commit reachable from HEAD in a repository.

    Args:
        path: Path to the repository root

    Returns:
        List of CommitRecord objects, newest first. Empty for a repository
        without commits.

    Raises:
        GitClientError: If the path is missing, is not a git repository, or
            git fails while reading the log
    """
    try:
        repo = Repo(path)
    except NoSuchPathError as e:
        raise GitClientError(f"Repository path does not exist: {path}") from e
    except InvalidGitRepositoryError as e:
        raise GitClientError(f"Not a git repository: {path}") from e

    try:
        if not repo.head.is_valid():
            logger.debug("Repository %s has no commits", path)
            return []

        return [
            CommitRecord(
                author_email=commit.author.email,
                authored_at=commit.authored_datetime,
            )
            for commit in repo.iter_commits("HEAD")
        ]
    except (GitCommandError, ValueError) as e:
        raise GitClientError(f"Failed to read log of {path}: {e}") from e
    finally:
        repo.close()
