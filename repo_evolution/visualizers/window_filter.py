"""Restrict ascending time series to the trailing N calendar days."""

from datetime import timedelta

from repo_evolution.visualizers.date_normalizer import normalize_instant, utc_midnight

DEFAULT_WINDOW_DAYS = 365


def _day_of(point):
    return point.day


def window_start(now, window_days=DEFAULT_WINDOW_DAYS):
    """Return the first instant inside the trailing window: midnight UTC of now - window_days.

    Raises:
        ValueError: for a negative window or one reaching before year 1.
    """
    if window_days < 0:
        raise ValueError(f"window_days must not be negative, got {window_days}")
    try:
        return utc_midnight(normalize_instant(now) - timedelta(days=window_days))
    except OverflowError as e:
        raise ValueError(f"window_days {window_days} reaches outside the supported date range") from e


def filter_trailing_window(series, now, window_days=DEFAULT_WINDOW_DAYS, key=_day_of):
    """Return the suffix of `series` starting at the first point inside the window.

    The series is assumed ascending by `key`. A point exactly at the cutoff
    is inside. When nothing falls inside the window the whole series is
    returned, so a dormant repository still gets a chart.

    Args:
        series: ascending sequence of points
        now: reference instant
        window_days: window length in days
        key: maps a point to its aware UTC instant (defaults to `.day`)

    Returns:
        new list
    """
    cutoff = window_start(now, window_days)
    for i, point in enumerate(series):
        if key(point) >= cutoff:
            return list(series[i:])
    return list(series)


def count_since(series, cutoff, key=_day_of):
    """Count points at or after `cutoff`. Unlike the window filter, this can be zero."""
    cutoff = normalize_instant(cutoff)
    return sum(1 for point in series if key(point) >= cutoff)
