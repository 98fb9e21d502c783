#!/usr/bin/env python3
"""Repository Evolution Dashboard - Flask Backend

Serves chart-ready datasets (commit volume, code size and complexity trends,
contributor activity, daily commit heatmap) built from the commit history an
analyser has already extracted for each project.
"""

from repo_evolution import create_app
from repo_evolution.config import get_config

app = create_app()


if __name__ == "__main__":
    config = get_config()
    app.run(
        host=config.get("host", "127.0.0.1"),
        port=config.get("port", 5050),
        debug=config.get("debug", False),
    )
