"""Tests for the project and cache HTTP routes."""

from unittest.mock import patch

import pytest

from repo_evolution.config import get_config
from repo_evolution.exceptions import ProjectNotFoundError
from repo_evolution.extensions import cache

NOW = "2024-06-15T12:00:00Z"


@pytest.fixture
def mock_metadata(raw_payload):
    with patch("repo_evolution.routes.project_routes.fetch_project_metadata") as fetch:
        fetch.return_value = raw_payload
        yield fetch


class TestProjectList:

    def test_lists_projects_with_display_names(self, client):
        with patch("repo_evolution.routes.project_routes.fetch_projects") as fetch:
            fetch.return_value = ["github.com/org/alpha", "beta"]
            response = client.get("/api/projects")
        assert response.status_code == 200
        assert response.get_json() == {"projects": [
            {"id": "github.com/org/alpha", "name": "alpha"},
            {"id": "beta", "name": "beta"},
        ]}

    def test_upstream_failure(self, client):
        with patch("repo_evolution.routes.project_routes.fetch_projects") as fetch:
            fetch.side_effect = RuntimeError("down")
            response = client.get("/api/projects")
        assert response.status_code == 502
        assert response.get_json() == {"error": "Metadata source unavailable"}


class TestProjectDashboard:

    def test_composes_dashboard(self, client, mock_metadata):
        response = client.get(f"/api/projects/github.com/org/repo/dashboard?now={NOW}")
        assert response.status_code == 200
        body = response.get_json()
        assert body["project"] == "github.com/org/repo"
        assert body["total_commits"] == 4
        assert body["commits_last_year"] == 3
        assert body["errors"] == {}
        mock_metadata.assert_called_once_with("github.com/org/repo", refresh=False)

    def test_query_parameters(self, client, mock_metadata):
        response = client.get(f"/api/projects/repo/dashboard?now={NOW}&window_days=30&top=1&refresh=true")
        body = response.get_json()
        assert body["contributor_bars"]["title"] == "Commits Of Top 1 Contributors"
        assert body["commits_last_year"] == 1
        assert body["heatmap"]["title"] == "Commits Per Day During Last 30 Days"
        mock_metadata.assert_called_once_with("repo", refresh=True)

    def test_same_request_same_body(self, client, mock_metadata):
        first = client.get(f"/api/projects/repo/dashboard?now={NOW}")
        second = client.get(f"/api/projects/repo/dashboard?now={NOW}")
        assert first.data == second.data

    def test_unknown_project(self, client, mock_metadata):
        mock_metadata.side_effect = ProjectNotFoundError("repo")
        response = client.get("/api/projects/repo/dashboard")
        assert response.status_code == 404

    def test_upstream_failure(self, client, mock_metadata):
        mock_metadata.side_effect = RuntimeError("timeout")
        response = client.get("/api/projects/repo/dashboard")
        assert response.status_code == 502

    def test_invalid_now(self, client, mock_metadata):
        response = client.get("/api/projects/repo/dashboard?now=yesterday")
        assert response.status_code == 422
        mock_metadata.assert_not_called()

    def test_negative_window(self, client, mock_metadata):
        response = client.get("/api/projects/repo/dashboard?window_days=-3")
        assert response.status_code == 400

    def test_malformed_dataset(self, client, mock_metadata, raw_payload):
        raw_payload["commitData"].append({"commitDate": "garbage", "sloc": 1})
        response = client.get("/api/projects/repo/dashboard")
        assert response.status_code == 422
        assert "garbage" in response.get_json()["error"]


class TestClearCache:

    def test_clears_in_memory_cache(self, client):
        cache["key"] = ("value", 0)
        response = client.post("/api/clear-cache")
        assert response.status_code == 200
        assert "key" not in cache


class TestDashboardInputValidation:

    def test_window_beyond_supported_dates(self, client, mock_metadata):
        response = client.get(f"/api/projects/repo/dashboard?now={NOW}&window_days=1000000")
        assert response.status_code == 400
        mock_metadata.assert_not_called()

    def test_trend_fraction_out_of_range_in_config(self, client, mock_metadata):
        get_config()["trend_fraction"] = 2
        response = client.get(f"/api/projects/repo/dashboard?now={NOW}")
        assert response.status_code == 400
        assert "trend_fraction" in response.get_json()["error"]

    def test_non_finite_count(self, client, mock_metadata, raw_payload):
        raw_payload["commitData"].append({"commitDate": "2024-01-01", "sloc": float("nan")})
        response = client.get(f"/api/projects/repo/dashboard?now={NOW}")
        assert response.status_code == 422

    def test_non_object_contributor(self, client, mock_metadata, raw_payload):
        raw_payload["contributorData"].append("mallory")
        response = client.get(f"/api/projects/repo/dashboard?now={NOW}")
        assert response.status_code == 422

    def test_non_array_field(self, client, mock_metadata, raw_payload):
        raw_payload["commitData"] = "2024-01-01"
        response = client.get(f"/api/projects/repo/dashboard?now={NOW}")
        assert response.status_code == 422
