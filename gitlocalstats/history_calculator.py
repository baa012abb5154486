"""
History calculator for the contribution calendar.

Aggregates commit timestamps from many repositories into a dense
day-by-day histogram keyed by bucket index.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from gitlocalstats.config import CalendarWindow
from gitlocalstats.git_client import CommitRecord, GitClientError, read_commits
from gitlocalstats.window_calculator import alignment_offset, days_since

logger = logging.getLogger(__name__)


@dataclass
class RepoFailure:
    """A repository that could not be read during aggregation."""

    path: str
    message: str


@dataclass
class HistoryResult:
    """Outcome of one aggregation run."""

    histogram: list[int]
    now: datetime
    offset: int
    window: CalendarWindow
    failures: list[RepoFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Total number of commits charted."""
        return sum(self.histogram)


def new_histogram(window: CalendarWindow) -> list[int]:
    """Allocate a zeroed histogram covering bucket indices 0..window.days."""
    return [0] * (window.days + 1)


def fill_commits(
    histogram: list[int],
    email: str,
    commits: Iterable[CommitRecord],
    now: datetime,
    window: CalendarWindow,
) -> int:
    """
    Add the commits of one repository to the histogram.

    Only commits whose author e-mail matches exactly are counted. Commits
    outside the window, or whose shifted bucket falls past the end of the
    histogram, are dropped.

    Args:
        histogram: Dense histogram from new_histogram(), updated in place
        email: Author e-mail to chart
        commits: Commit records of a single repository
        now: The captured "now" of the current run
        window: Calendar window in use

    Returns:
        Number of commits added to the histogram
    """
    offset = alignment_offset(now)
    counted = 0

    for commit in commits:
        if commit.author_email != email:
            continue

        days_ago = days_since(commit.authored_at, now, window)
        if days_ago == window.out_of_range:
            continue

        bucket = days_ago + offset
        if bucket >= len(histogram):
            continue

        histogram[bucket] += 1
        counted += 1

    return counted


def calculate_history(
    email: str,
    repos: Iterable[str],
    reader: Callable[[str], Iterable[CommitRecord]] = read_commits,
    now: Optional[datetime] = None,
    window: Optional[CalendarWindow] = None,
) -> HistoryResult:
    """
    Calculate the commit histogram of an author across repositories.

    Repositories are read one at a time. A repository that cannot be read is
    recorded as a failure and skipped; the rest are still processed.

    Args:
        email: Author e-mail to chart
        repos: Repository paths, typically from the persisted list
        reader: Reader returning the commit records of a repository
        now: Override for the current time (for testing)
        window: Calendar window; defaults to CalendarWindow()

    Returns:
        HistoryResult holding the histogram and any repository failures
    """
    if now is None:
        now = datetime.now().astimezone()
    if window is None:
        window = CalendarWindow()

    result = HistoryResult(
        histogram=new_histogram(window),
        now=now,
        offset=alignment_offset(now),
        window=window,
    )

    for path in repos:
        try:
            commits = reader(path)
            counted = fill_commits(result.histogram, email, commits, now, window)
        except (GitClientError, OSError) as e:
            logger.debug("Skipping repository %s: %s", path, e)
            result.failures.append(RepoFailure(path=path, message=str(e)))
            continue

        logger.debug("Counted %d commits in %s", counted, path)

    return result
