"""
Configuration management for gitlocalstats.

Loads settings from environment variables (and an optional .env file).
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from the working directory
load_dotenv()

DEFAULT_WINDOW_DAYS = 183
OUT_OF_RANGE = 99999
DEFAULT_EXCLUDED_DIRS = ("vendor", "node_modules")

REPO_LIST_FILE = os.getenv("GITLOCALSTATS_FILE")
WINDOW_DAYS = os.getenv("GITLOCALSTATS_WINDOW_DAYS")
EXCLUDED_DIRS = os.getenv("GITLOCALSTATS_EXCLUDE")


@dataclass(frozen=True)
class CalendarWindow:
    """The trailing period charted by the calendar."""

    days: int = DEFAULT_WINDOW_DAYS
    out_of_range: int = OUT_OF_RANGE

    @property
    def weeks(self) -> int:
        """Number of whole weeks in the window."""
        return self.days // 7


def get_repo_list_path() -> Path:
    """Get the path of the persisted repository list."""
    if REPO_LIST_FILE:
        return Path(REPO_LIST_FILE).expanduser()
    return Path.home() / ".gitlocalstats"


def get_window() -> CalendarWindow:
    """Build the calendar window from configuration."""
    if not WINDOW_DAYS:
        return CalendarWindow()
    return CalendarWindow(days=int(WINDOW_DAYS))


def get_excluded_dirs() -> frozenset[str]:
    """Directory names never descended into while scanning."""
    if not EXCLUDED_DIRS:
        return frozenset(DEFAULT_EXCLUDED_DIRS)
    return frozenset(name.strip() for name in EXCLUDED_DIRS.split(",") if name.strip())


def validate_config():
    """Validate that configured values are usable."""
    invalid = []

    if WINDOW_DAYS:
        try:
            days = int(WINDOW_DAYS)
        except ValueError:
            days = 0
        if days < 7 or days >= OUT_OF_RANGE:
            invalid.append("GITLOCALSTATS_WINDOW_DAYS")

    if EXCLUDED_DIRS is not None and EXCLUDED_DIRS.strip() and not get_excluded_dirs():
        invalid.append("GITLOCALSTATS_EXCLUDE")

    if invalid:
        raise ValueError(
            f"Invalid configuration: {', '.join(invalid)}\n"
            "GITLOCALSTATS_WINDOW_DAYS must be a number of days (at least 7) and "
            "GITLOCALSTATS_EXCLUDE a comma-separated list of directory names."
        )
