"""Tests for contributor selection and ranking."""

import pytest

from repo_evolution.visualizers.contributor_ranker import (
    BAR_SORT_HINT,
    rank_contributors,
    top_contributors,
)
from repo_evolution.visualizers.models import ContributorStat


@pytest.fixture
def contributors():
    return [
        ContributorStat("dave", 2),
        ContributorStat("alice", 9),
        ContributorStat("carol", 2),
        ContributorStat("bob", 4),
        ContributorStat("erin", 1),
    ]


class TestTopContributors:

    def test_fewer_than_limit_returns_all_in_order(self, contributors):
        assert top_contributors(contributors, 30) == contributors

    def test_takes_first_entries_without_resorting(self, contributors):
        assert [c.name for c in top_contributors(contributors, 2)] == ["dave", "alice"]

    def test_length_is_min_of_limit_and_input(self, contributors):
        for limit in range(8):
            assert len(top_contributors(contributors, limit)) == min(limit, len(contributors))

    def test_input_is_untouched(self, contributors):
        before = list(contributors)
        top_contributors(contributors, 1)
        assert contributors == before

    def test_negative_limit_is_rejected(self, contributors):
        with pytest.raises(ValueError):
            top_contributors(contributors, -1)


class TestRankContributors:

    def test_commit_count_descending_then_name(self, contributors):
        assert [c.name for c in rank_contributors(contributors)] == ["alice", "bob", "carol", "dave", "erin"]

    def test_sort_hint_orders_by_value_descending(self):
        assert BAR_SORT_HINT == {"x": "y", "reverse": True}
