"""Application configuration loaded from config.json."""

import json
from pathlib import Path
from typing import Any, Dict, Optional

# Project root is one level up from repo_evolution/
PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_CONFIG: Dict[str, Any] = {
    "host": "127.0.0.1",
    "port": 5050,
    "debug": False,
    "metadata_url": "http://localhost:8000",
    "request_timeout_seconds": 30,
    "cache_ttl_seconds": 300,
    "window_days": 365,
    "top_contributors": 30,
    "trend_fraction": 0.125,
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from config.json.

    Keys missing from the file (or the whole file) fall back to DEFAULT_CONFIG.

    Args:
        config_path: Optional path to config file. Defaults to PROJECT_ROOT/config.json.

    Returns:
        Configuration dictionary.
    """
    if config_path is None:
        config_path = PROJECT_ROOT / "config.json"
    config = dict(DEFAULT_CONFIG)
    if config_path.exists():
        with open(config_path) as f:
            config.update(json.load(f))
    return config


# Singleton config instance
_config: Optional[Dict[str, Any]] = None


def get_config() -> Dict[str, Any]:
    """Get the singleton config dictionary."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config(config: Optional[Dict[str, Any]] = None) -> None:
    """Replace the singleton config, or drop it so the next access reloads."""
    global _config
    _config = config
