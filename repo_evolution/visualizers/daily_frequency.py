"""Per-day commit counts derived from commit instants."""

from collections import Counter
from datetime import timedelta

from repo_evolution.visualizers.date_normalizer import utc_midnight
from repo_evolution.visualizers.models import DailyFrequency


def build_daily_frequency(commits, until):
    """Count commits per UTC day from the first commit's day through `until`.

    Every day in that range gets an entry, zero-commit days included.

    Args:
        commits: ascending list of CommitPoint
        until: last instant to cover; its day is included

    Returns:
        list of DailyFrequency, empty when there are no commits
    """
    if not commits:
        return []

    per_day = Counter(utc_midnight(c.commit_instant) for c in commits)
    day = utc_midnight(commits[0].commit_instant)
    last = utc_midnight(until)

    frequency = []
    while day <= last:
        frequency.append(DailyFrequency(day=day, commit_count=per_day.get(day, 0)))
        day += timedelta(days=1)
    return frequency
