"""Cache management routes."""

from flask import Blueprint, jsonify

from repo_evolution.extensions import logger, cache

cache_bp = Blueprint("cache", __name__)


@cache_bp.route("/api/clear-cache", methods=["POST"])
def clear_cache():
    """Clear the in-memory cache of upstream metadata."""
    cache.clear()
    logger.info("In-memory metadata cache cleared")
    return jsonify({"message": "Cache cleared"})
