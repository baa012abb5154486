"""
CLI display functions for gitlocalstats.
"""

from datetime import datetime, timedelta

import click

from gitlocalstats.config import CalendarWindow
from gitlocalstats.grid_builder import build_columns, column_value
from gitlocalstats.history_calculator import HistoryResult, RepoFailure
from gitlocalstats.window_calculator import alignment_offset, beginning_of_day

LABEL_WIDTH = 5
CELL_WIDTH = 4

# Rows are drawn top to bottom from Monday (6) to Sunday (0)
DAY_LABELS = {6: " Mon ", 4: " Wed ", 2: " Fri "}

CELL_STYLES = {
    "today": {"bg": "magenta", "fg": "white", "bold": True},
    "empty": {"bg": "black", "fg": "green"},
    "low": {"bg": "bright_black", "fg": "black"},
    "medium": {"bg": "yellow", "fg": "black"},
    "high": {"bg": "green", "fg": "black"},
}


def cell_level(value: int, today: bool = False) -> str:
    """
    Get the intensity level used to style a calendar cell.

    Args:
        value: Number of commits for the day
        today: Whether the cell is today's

    Returns:
        One of "today", "empty", "low" (1-4), "medium" (5-9), "high" (10+)
    """
    if today:
        return "today"
    elif value == 0:
        return "empty"
    elif value < 5:
        return "low"
    elif value < 10:
        return "medium"
    else:
        return "high"


def format_cell(value: int) -> str:
    """Format a count as fixed-width cell text."""
    if value == 0:
        return "  - "
    elif value >= 100:
        return f"{value} "
    elif value >= 10:
        return f" {value} "
    else:
        return f"  {value} "


def render_cell(value: int, today: bool = False) -> str:
    """Render a styled calendar cell."""
    return click.style(format_cell(value), **CELL_STYLES[cell_level(value, today)])


def day_label(day: int) -> str:
    """Weekday label for a row; only Mon, Wed and Fri are printed."""
    return DAY_LABELS.get(day, " " * LABEL_WIDTH)


def month_header(now: datetime, window: CalendarWindow) -> str:
    """
    Build the month label line shown above the grid.

    Each slot sits above one week column and is dated by that column's
    closing Sunday. A month name is printed only in the first column whose
    Sunday falls in a new month. The leftmost column shares the padding
    with the weekday labels and only seeds the starting month.
    """
    today = beginning_of_day(now)
    offset = alignment_offset(now)

    def closing_sunday(week: int):
        return today + timedelta(days=offset - 7 * week)

    month = closing_sunday(window.weeks + 1).month
    output = " " * (LABEL_WIDTH + CELL_WIDTH)

    for week in range(window.weeks, -1, -1):
        sunday = closing_sunday(week)
        if sunday.month != month:
            output += click.style(f"{sunday.strftime('%b')} ", fg="white")
            month = sunday.month
        else:
            output += " " * CELL_WIDTH

    return output


def render_calendar(
    columns: dict[int, list[int]], now: datetime, window: CalendarWindow
) -> list[str]:
    """
    Render the calendar grid as text lines.

    Args:
        columns: Week columns from build_columns()
        now: The captured "now" of the run
        window: Calendar window in use

    Returns:
        The month header followed by one line per weekday row
    """
    offset = alignment_offset(now)
    today_week, today_day = divmod(offset, 7)

    lines = [month_header(now, window)]

    for day in range(6, -1, -1):
        line = day_label(day)
        for week in range(window.weeks + 1, -1, -1):
            is_today = week == today_week and day == today_day
            line += render_cell(column_value(columns, week, day), is_today)
        lines.append(line)

    return lines


def display_calendar(result: HistoryResult) -> None:
    """
    Display the contribution calendar of an aggregation run.

    Args:
        result: HistoryResult from calculate_history()
    """
    columns = build_columns(result.histogram)
    for line in render_calendar(columns, result.now, result.window):
        click.echo(line)


def display_failures(failures: list[RepoFailure]) -> None:
    """Report repositories that could not be read, one line each, on stderr."""
    for failure in failures:
        click.echo(
            click.style(f"Error processing repo at {failure.path}: {failure.message}", fg="bright_red"),
            err=True,
        )


def display_found_folder(path: str) -> None:
    """Print a repository found while scanning."""
    click.echo(click.style(path, fg="bright_green"))
