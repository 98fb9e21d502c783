"""Map days of the trailing window onto a GitHub-style week x weekday grid.

Columns are weeks counted from the anchor's week (weeks start on Sunday),
rows are weekdays with 0 = Sunday. Everything is computed in UTC so a
viewer's local timezone never shifts a commit into the neighbouring cell.
"""

from datetime import timedelta

from repo_evolution.exceptions import EmptyWindowError, InvalidRecordError
from repo_evolution.visualizers.date_normalizer import normalize_instant, utc_midnight
from repo_evolution.visualizers.models import CalendarCell, MonthTick

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Label only every other weekday row, like the GitHub contribution graph
WEEKDAY_TICKS = [
    {"value": 1, "label": "Mon"},
    {"value": 3, "label": "Wed"},
    {"value": 5, "label": "Fri"},
]


def weekday_index(day):
    """Day of week with Sunday = 0 through Saturday = 6."""
    return (utc_midnight(day).weekday() + 1) % 7


def week_start(day):
    """Midnight UTC of the Sunday on or before `day`."""
    day = utc_midnight(day)
    return day - timedelta(days=weekday_index(day))


def week_index(anchor, day):
    """Number of Sunday-to-Sunday weeks between the anchor's week and the day's week.

    Raises:
        ValueError: if `day` falls before `anchor`.
    """
    anchor = utc_midnight(anchor)
    day = utc_midnight(day)
    if day < anchor:
        raise ValueError(f"{day.date()} is before the grid anchor {anchor.date()}")
    return (week_start(day) - week_start(anchor)).days // 7


def _ordinal_suffix(n):
    if n % 10 == 1 and n != 11:
        return "st"
    if n % 10 == 2 and n != 12:
        return "nd"
    if n % 10 == 3 and n != 13:
        return "rd"
    return "th"


def contribution_title(day, commits):
    """Tooltip text for a heatmap cell, e.g. "3 contributions on March 21st"."""
    day = utc_midnight(day)
    contributions = commits or "No"
    return f"{contributions} contributions on {MONTH_NAMES[day.month - 1]} {day.day}{_ordinal_suffix(day.day)}"


def calendar_cells(frequency):
    """Place every entry of an ascending daily series on the grid.

    The first entry anchors week 0.

    Args:
        frequency: ascending list of DailyFrequency, one entry per day

    Returns:
        list of CalendarCell in input order

    Raises:
        EmptyWindowError: if the series is empty.
        InvalidRecordError: if a day occurs twice.
    """
    if not frequency:
        raise EmptyWindowError("Calendar window contains no days")

    anchor = frequency[0].day
    seen = set()
    cells = []
    for entry in frequency:
        day = utc_midnight(entry.day)
        if day in seen:
            raise InvalidRecordError(f"Day {day.date()} appears more than once in the calendar window")
        seen.add(day)
        cells.append(CalendarCell(
            day=day,
            week_index=week_index(anchor, day),
            weekday_index=weekday_index(day),
            commit_count=entry.commit_count,
            title=contribution_title(day, entry.commit_count),
        ))
    return cells


def month_ticks(start, end, anchor):
    """Month labels for the grid's top edge.

    One tick per Sunday in [start, end) that falls in the first seven days of
    its month, so each month is labelled above its first full column.
    Sundays in weeks before the anchor's week are skipped.

    Returns:
        list of MonthTick
    """
    end = normalize_instant(end)
    first_column = week_start(anchor)
    day = utc_midnight(start)
    day += timedelta(days=(7 - weekday_index(day)) % 7)

    ticks = []
    while day < end:
        if day.day <= 7 and day >= first_column:
            ticks.append(MonthTick(
                day=day,
                week_index=(day - first_column).days // 7,
                label=MONTH_NAMES[day.month - 1][:3],
            ))
        day += timedelta(days=7)
    return ticks
