"""Client for the analyser's metadata endpoints: project list and per-project metadata."""

import logging
from urllib.parse import quote

import requests

from repo_evolution.cache.memory_cache import cached
from repo_evolution.config import get_config
from repo_evolution.exceptions import ProjectNotFoundError

logger = logging.getLogger(__name__)


def _get_json(path):
    """GET a JSON document from the metadata source.

    Raises:
        requests.HTTPError: for non-2xx answers (callers inspect the status).
        RuntimeError: if the source cannot be reached or answers with non-JSON.
    """
    config = get_config()
    url = f"{config['metadata_url'].rstrip('/')}{path}"
    logger.info(f"Fetching {url}")
    try:
        response = requests.get(url, timeout=config.get("request_timeout_seconds", 30))
    except requests.RequestException as e:
        raise RuntimeError(f"Metadata source unreachable: {e}") from e
    response.raise_for_status()
    try:
        return response.json()
    except ValueError as e:
        raise RuntimeError(f"Metadata source returned invalid JSON for {path}") from e


@cached()
def fetch_projects():
    """Return the identifiers of every analysed project (e.g. "github.com/org/repo")."""
    try:
        projects = _get_json("/projects")
    except requests.HTTPError as e:
        raise RuntimeError(f"Failed to list projects: {e}") from e
    if not isinstance(projects, list):
        return []
    return [p for p in projects if isinstance(p, str)]


@cached()
def fetch_project_metadata(project):
    """Return the raw metadata payload of one project.

    Returns:
        dict with commitData, contributorData and commitFrequency arrays

    Raises:
        ProjectNotFoundError: if the source has no analysis for the project.
        RuntimeError: for any other upstream failure.
    """
    try:
        payload = _get_json(f"/projects/{quote(project, safe='/')}/metadata")
    except requests.HTTPError as e:
        if e.response is not None and e.response.status_code == 404:
            raise ProjectNotFoundError(project) from e
        raise RuntimeError(f"Failed to fetch metadata for {project}: {e}") from e
    if not isinstance(payload, dict):
        raise RuntimeError(f"Unexpected metadata payload for {project}: {type(payload).__name__}")
    return payload
