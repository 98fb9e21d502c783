"""Repository Evolution Dashboard - Backend Package.

Provides the Flask application factory and all backend modules.
"""

from flask import Flask

from repo_evolution.config import get_config
from repo_evolution.extensions import logger
from repo_evolution.routes import register_blueprints


def create_app():
    """Create and configure the Flask application."""
    app = Flask(__name__)
    # Keep dataset keys in the order the composer builds them
    app.json.sort_keys = False
    register_blueprints(app)
    logger.info(f"Serving dashboards from {get_config()['metadata_url']}")
    return app
