"""Shared fixtures for the dashboard tests."""

from datetime import datetime, timezone

import pytest

from repo_evolution import create_app
from repo_evolution.config import DEFAULT_CONFIG, reset_config
from repo_evolution.extensions import cache


@pytest.fixture(autouse=True)
def default_config():
    """Use built-in defaults instead of any local config.json."""
    reset_config(dict(DEFAULT_CONFIG))
    yield
    reset_config()


@pytest.fixture(autouse=True)
def empty_cache():
    """Start and finish every test with an empty metadata cache."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def now():
    """Fixed reference instant: 2024-06-15 12:00 UTC."""
    return datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def raw_payload():
    """Metadata payload as the analyser serves it, commits deliberately out of order."""
    return {
        "commitData": [
            {"commitDate": "2024-03-20T18:30:00+01:00", "sloc": 180, "complexity": 15},
            {"commitDate": "2023-01-10T09:00:00Z", "sloc": 100, "complexity": 10},
            {"commitDate": "2024-01-03T09:00:00Z", "sloc": 150, "complexity": 12},
            {"commitDate": "2024-06-14T08:00:00Z", "sloc": 200, "complexity": 18},
        ],
        "contributorData": [
            {"contributor": "alice", "commits": 2},
            {"contributor": "bob", "commits": 1},
            {"contributor": "carol", "commits": 1},
        ],
        "commitFrequency": None,
    }


@pytest.fixture
def app():
    app = create_app()
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
