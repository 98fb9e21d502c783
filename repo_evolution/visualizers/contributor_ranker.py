"""Top-N contributor selection for the contributor bar chart."""

DEFAULT_TOP_CONTRIBUTORS = 30

# Bars are ordered by the chart layer: x sorted by the y value, largest first.
BAR_SORT_HINT = {"x": "y", "reverse": True}


def top_contributors(contributors, limit=DEFAULT_TOP_CONTRIBUTORS):
    """Return the first `limit` contributors in the order the source gave them.

    The source already lists contributors by commit count; display ordering is
    left to the chart via BAR_SORT_HINT. Shorter lists come back whole.
    """
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    return list(contributors[:limit])


def rank_contributors(contributors):
    """Order contributors by commit count descending, ties by name ascending."""
    return sorted(contributors, key=lambda c: (-c.commit_count, c.name))
