"""Trailing slice of the commit series used for the code-size trend line."""

from fractions import Fraction

from repo_evolution.utils.math import round_half_up

DEFAULT_TREND_FRACTION = Fraction(1, 8)


def regression_window(series, fraction=DEFAULT_TREND_FRACTION):
    """Return the trailing `round_half_up(len(series) * fraction)` points.

    The size is clamped to at least one point and at most the whole series,
    so short histories still get a trend mark. Regression coefficients are
    fitted by the chart; only the window is chosen here.

    Args:
        series: ascending sequence of points
        fraction: share of the series to keep, in (0, 1]

    Returns:
        new list, empty only for an empty series
    """
    if not 0 < fraction <= 1:
        raise ValueError(f"fraction must be in (0, 1], got {fraction}")
    if not series:
        return []
    size = min(len(series), max(1, round_half_up(len(series) * fraction)))
    return list(series[len(series) - size:])
