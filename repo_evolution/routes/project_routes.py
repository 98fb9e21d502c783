"""Project routes: project list and composed dashboard datasets."""

from flask import Blueprint, jsonify, request

from repo_evolution.config import get_config
from repo_evolution.exceptions import InvalidDateError, PipelineError, ProjectNotFoundError
from repo_evolution.filters.dashboard_params import DashboardParams
from repo_evolution.routes import error_response
from repo_evolution.services.metadata_service import fetch_project_metadata, fetch_projects
from repo_evolution.visualizers.dashboard_composer import compose_dashboard
from repo_evolution.visualizers.date_normalizer import normalize_project_metadata

project_bp = Blueprint("projects", __name__)


@project_bp.route("/api/projects")
def get_projects():
    """List analysed projects with a short display name."""
    try:
        projects = fetch_projects()
        return jsonify({
            "projects": [{"id": p, "name": p.rstrip("/").split("/")[-1] or p} for p in projects]
        })
    except RuntimeError as e:
        return error_response("Metadata source unavailable", 502, f"Failed to list projects: {e}")


@project_bp.route("/api/projects/<path:project>/dashboard")
def get_project_dashboard(project):
    """Get every chart dataset of a project's dashboard."""
    try:
        params = DashboardParams.from_request_args(request.args, get_config())
    except InvalidDateError as e:
        return error_response(str(e), 422)
    except ValueError as e:
        return error_response(str(e), 400)

    try:
        payload = fetch_project_metadata(project, refresh=params.refresh)
    except ProjectNotFoundError as e:
        return error_response("Project not found", 404, str(e))
    except RuntimeError as e:
        return error_response("Metadata source unavailable", 502, f"Failed to fetch metadata for {project}: {e}")

    try:
        metadata = normalize_project_metadata(payload)
    except PipelineError as e:
        return error_response(str(e), 422, f"Malformed metadata for {project}: {e}")

    dashboard = compose_dashboard(
        metadata,
        params.now,
        window_days=params.window_days,
        top_n=params.top_n,
        trend_fraction=params.trend_fraction,
        presort_contributors=params.presort_contributors,
    )
    dashboard["project"] = project
    return jsonify(dashboard)
