"""In-memory TTL cache decorator."""

import time
from functools import wraps

from repo_evolution.config import get_config
from repo_evolution.extensions import cache


def cached(ttl_seconds=None):
    """Decorator for caching function results with TTL.

    The wrapped function accepts an extra `refresh=True` keyword that skips
    the lookup and overwrites the cached entry.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, refresh=False, **kwargs):
            ttl = ttl_seconds if ttl_seconds is not None else get_config().get("cache_ttl_seconds", 300)
            cache_key = f"{func.__module__}.{func.__name__}:{args}:{sorted(kwargs.items())}"
            now = time.time()

            if not refresh and cache_key in cache:
                result, timestamp = cache[cache_key]
                if now - timestamp < ttl:
                    return result

            result = func(*args, **kwargs)
            cache[cache_key] = (result, now)
            return result

        return wrapper

    return decorator
