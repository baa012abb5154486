"""
Reshape the flat histogram into week columns for the calendar grid.

Week index 0 is the most recent week and indices count backward in time.
Inside a column, position j holds the day j days before the week's closing
Sunday: 0 is Sunday, 1 Saturday, and so on up to 6 for Monday. This follows
from the histogram buckets being shifted by alignment_offset(), so the
renderer draws the highest week index leftmost and week 0 rightmost.
"""


def build_columns(histogram: list[int]) -> dict[int, list[int]]:
    """
    Group histogram buckets into 7-day week columns.

    Args:
        histogram: Dense histogram indexed by bucket (0 = most recent)

    Returns:
        Mapping of week index -> list of exactly 7 counts. A trailing group
        with fewer than 7 buckets is not published.
    """
    columns: dict[int, list[int]] = {}
    column: list[int] = []

    for k, count in enumerate(histogram):
        week, day = divmod(k, 7)

        if day == 0:
            column = []

        column.append(count)

        if day == 6:
            columns[week] = column

    return columns


def column_value(columns: dict[int, list[int]], week: int, day: int) -> int:
    """Get the count at (week, day), treating unpublished weeks as empty."""
    column = columns.get(week)
    if column is None:
        return 0
    return column[day]
