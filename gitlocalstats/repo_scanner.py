"""
Git repository scanner.

Recursively walks a folder and collects the roots of git repositories,
skipping dependency directories that never hold the user's own work.
"""

import logging
import os
from pathlib import Path

from gitlocalstats.config import get_excluded_dirs

logger = logging.getLogger(__name__)

# Marker entry identifying a repository root
GIT_MARKER = ".git"


class ScanError(Exception):
    """Raised when the folder to scan cannot be read."""

    pass


def _is_repo_root(path: Path) -> bool:
    return (path / GIT_MARKER).exists()


def _subdirectories(path: Path) -> list[Path]:
    """List real (non-symlinked) subdirectories in name order."""
    with os.scandir(path) as entries:
        return sorted(
            Path(entry.path)
            for entry in entries
            if entry.is_dir(follow_symlinks=False)
        )


def scan_git_folders(
    root: str | Path, excluded: frozenset[str] | set[str] | None = None
) -> list[str]:
    """
    Find git repositories below a folder.

    A directory containing a .git entry is reported and not descended into,
    so repositories nested below a detected root are not reported again.

    Args:
        root: Folder to scan
        excluded: Directory names to skip. Defaults to the configured set.

    Returns:
        Absolute repository root paths in depth-first, name-sorted order

    Raises:
        ScanError: If the root folder is missing or unreadable
    """
    if excluded is None:
        excluded = get_excluded_dirs()

    root = Path(root).expanduser().resolve()
    if _is_repo_root(root):
        return [str(root)]

    try:
        stack = list(reversed(_subdirectories(root)))
    except OSError as e:
        raise ScanError(f'Failed to read folder "{root}": {e}') from e

    repos = []
    while stack:
        folder = stack.pop()

        if folder.name in excluded:
            continue

        if _is_repo_root(folder):
            logger.debug("Found repository %s", folder)
            repos.append(str(folder))
            continue

        try:
            children = _subdirectories(folder)
        except OSError as e:
            logger.warning("Skipping unreadable folder %s: %s", folder, e)
            continue

        stack.extend(reversed(children))

    return repos
