"""Shared singletons: logger and in-memory cache dict.

All global state used across modules lives here to avoid circular imports.
"""

import logging

from cachetools import TTLCache

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger("repo_evolution")

# Bounded in-memory cache of upstream metadata responses. The 1-hour TTL is only an
# upper bound; cached() expires entries after cache_ttl_seconds.
cache = TTLCache(maxsize=256, ttl=3600)
