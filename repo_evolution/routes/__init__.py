"""Route blueprints registration."""

import logging

from flask import jsonify

logger = logging.getLogger(__name__)


def error_response(message, status, log_message=None):
    """Log the detailed failure and return a short JSON error body."""
    if log_message:
        if status >= 500:
            logger.error(log_message)
        else:
            logger.warning(log_message)
    return jsonify({"error": message}), status


def register_blueprints(app):
    """Register all route blueprints with the Flask app."""
    from repo_evolution.routes.project_routes import project_bp
    from repo_evolution.routes.cache_routes import cache_bp

    app.register_blueprint(project_bp)
    app.register_blueprint(cache_bp)
