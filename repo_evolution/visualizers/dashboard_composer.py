"""Assemble the per-chart datasets of a project dashboard.

Every chart is built on its own: a failure in one (for example, no commits to
take the newest from) blanks that chart and is reported under "errors",
while the rest of the dashboard still renders.
"""

import logging
from datetime import timedelta

from repo_evolution.exceptions import EmptyDatasetError, PipelineError
from repo_evolution.visualizers.calendar_grid import WEEKDAY_TICKS, calendar_cells, month_ticks
from repo_evolution.visualizers.contributor_ranker import (
    BAR_SORT_HINT, DEFAULT_TOP_CONTRIBUTORS, rank_contributors, top_contributors,
)
from repo_evolution.visualizers.daily_frequency import build_daily_frequency
from repo_evolution.visualizers.date_normalizer import normalize_instant
from repo_evolution.visualizers.trend_regressor import DEFAULT_TREND_FRACTION, regression_window
from repo_evolution.visualizers.window_filter import (
    DEFAULT_WINDOW_DAYS, count_since, filter_trailing_window, window_start,
)

logger = logging.getLogger(__name__)


def to_iso(instant):
    """Format an aware UTC datetime as ISO 8601 with a Z suffix."""
    return instant.isoformat().replace("+00:00", "Z")


def _commit_instant(point):
    return point.commit_instant


def _newest_commit(commits):
    if not commits:
        raise EmptyDatasetError("No commits to take the newest commit from")
    return to_iso(commits[-1].commit_instant)


def _contributor_bars(contributors, top_n, presort):
    if presort:
        contributors = rank_contributors(contributors)
    selected = top_contributors(contributors, top_n)
    return {
        "title": f"Commits Of Top {len(selected)} Contributors",
        "data": [{"contributor": c.name, "commits": c.commit_count} for c in selected],
        "marks": [{"type": "barY", "x": "contributor", "y": "commits", "sort": dict(BAR_SORT_HINT)}],
    }


def _commits_over_time(commits):
    return {
        "title": "Commits Over Time",
        "data": [
            {"commitDate": to_iso(c.commit_instant), "commitNumber": i + 1}
            for i, c in enumerate(commits)
        ],
        "marks": [{"type": "line", "x": "commitDate", "y": "commitNumber"}],
    }


def _code_size(commits):
    return {
        "data": [
            {"commitDate": to_iso(c.commit_instant), "sloc": c.sloc, "complexity": c.complexity}
            for c in commits
        ],
        "marks": [
            {"type": "line", "x": "commitDate", "y": "complexity", "stroke": "red"},
            {"type": "line", "x": "commitDate", "y": "sloc", "stroke": "blue"},
        ],
    }


def _trend(commits, fraction):
    return {
        "data": [
            {"commitDate": to_iso(c.commit_instant), "sloc": c.sloc}
            for c in regression_window(commits, fraction)
        ],
        "marks": [{"type": "linearRegressionY", "x": "commitDate", "y": "sloc", "stroke": "orange"}],
    }


def _heatmap_title(window_days):
    if window_days == DEFAULT_WINDOW_DAYS:
        return "Commits Per Day During Last Year"
    return f"Commits Per Day During Last {window_days} Days"


def _heatmap(days, window_days):
    return {
        "title": _heatmap_title(window_days),
        "data": [
            {
                "day": to_iso(cell.day),
                "week": cell.week_index,
                "weekday": cell.weekday_index,
                "commits": cell.commit_count,
                "title": cell.title,
            }
            for cell in calendar_cells(days)
        ],
        "marks": [{"type": "cell", "x": "week", "y": "weekday", "fill": "commits", "tip": "title"}],
        "weekday_ticks": [dict(t) for t in WEEKDAY_TICKS],
    }


def _month_ticks(days):
    if not days:
        raise EmptyDatasetError("No days in the heatmap window to label")
    anchor = days[0].day
    end = days[-1].day + timedelta(days=1)
    return [
        {"day": to_iso(t.day), "week": t.week_index, "label": t.label}
        for t in month_ticks(anchor, end, anchor)
    ]


def compose_dashboard(metadata, now, window_days=DEFAULT_WINDOW_DAYS,
                      top_n=DEFAULT_TOP_CONTRIBUTORS, trend_fraction=DEFAULT_TREND_FRACTION,
                      presort_contributors=False):
    """Build every dashboard dataset for one project.

    Args:
        metadata: normalised ProjectMetadata
        now: reference instant for all trailing windows
        window_days: length of the "last year" window
        top_n: number of contributors in the bar chart
        trend_fraction: trailing share of commits for the trend line
        presort_contributors: rank contributors here instead of leaving it to the chart

    Returns:
        dict keyed by chart name, plus "errors" mapping failed charts to messages
    """
    now = normalize_instant(now)
    cutoff = window_start(now, window_days)
    commits = metadata.commit_data
    contributors = metadata.contributor_data
    frequency = metadata.commit_frequency or build_daily_frequency(commits, now)
    heatmap_days = filter_trailing_window(frequency, now, window_days)

    builders = [
        ("total_commits", lambda: len(commits)),
        ("commits_last_year", lambda: count_since(commits, cutoff, key=_commit_instant)),
        ("newest_commit", lambda: _newest_commit(commits)),
        ("contributor_count", lambda: len(contributors)),
        ("contributor_bars", lambda: _contributor_bars(contributors, top_n, presort_contributors)),
        ("commits_over_time", lambda: _commits_over_time(commits)),
        ("code_size", lambda: _code_size(commits)),
        ("trend", lambda: _trend(commits, trend_fraction)),
        ("heatmap", lambda: _heatmap(heatmap_days, window_days)),
        ("month_ticks", lambda: _month_ticks(heatmap_days)),
    ]

    result = {"errors": {}}
    for name, build in builders:
        try:
            result[name] = build()
        except PipelineError as e:
            logger.warning(f"Skipping {name} dataset: {e}")
            result[name] = None
            result["errors"][name] = str(e)
    return result
