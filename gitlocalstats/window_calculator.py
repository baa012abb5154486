"""
Date arithmetic for the contribution calendar window.

Converts a commit date into a "days ago" bucket index and computes the
weekday offset that lines the grid up with today's weekday.
"""

from datetime import date, datetime

from gitlocalstats.config import CalendarWindow


def beginning_of_day(value: date | datetime) -> date:
    """
    Strip the time of day from a date or datetime.

    Timezone-aware datetimes are converted to local time first, so day
    boundaries follow the local wall clock.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def days_since(
    value: date | datetime,
    now: date | datetime,
    window: CalendarWindow,
) -> int:
    """
    Count whole calendar days from a date forward to now.

    Args:
        value: The date (or datetime) of the commit
        now: The captured "now" of the current run
        window: Calendar window supplying the length and sentinel value

    Returns:
        Bucket index in [0, window.days], or window.out_of_range for dates
        older than the window or in the future
    """
    days = (beginning_of_day(now) - beginning_of_day(value)).days

    if days < 0 or days > window.days:
        return window.out_of_range

    return days


def alignment_offset(now: date | datetime) -> int:
    """
    Calculate the shift that aligns bucket indices with the weekday grid.

    Uses a Sunday-first weekday (Sunday=0 ... Saturday=6). Sunday gives 7
    rather than 0, so the result is always in 1..7.
    """
    weekday = beginning_of_day(now).isoweekday() % 7
    return 7 if weekday == 0 else 7 - weekday
