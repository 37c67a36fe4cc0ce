"""Image resolver configuration: cache TTL, crawl spacing and search target."""

import os
from typing import Optional


def _env_float(name: str, default: Optional[float]) -> Optional[float]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        return default


IMAGE_CACHE_TTL_SECONDS = _env_float("IMAGE_CACHE_TTL_SECONDS", 24 * 60 * 60)
IMAGE_CRAWL_INTERVAL_SECONDS = _env_float("IMAGE_CRAWL_INTERVAL_SECONDS", 1.0)
IMAGE_SEARCH_URL = os.getenv("IMAGE_SEARCH_URL", "https://www.google.com/search")
IMAGE_SEARCH_QUALIFIER = os.getenv("IMAGE_SEARCH_QUALIFIER", "약")

# No timeout unless configured explicitly.
IMAGE_FETCH_TIMEOUT = _env_float("IMAGE_FETCH_TIMEOUT", None)

__all__ = [
    "IMAGE_CACHE_TTL_SECONDS",
    "IMAGE_CRAWL_INTERVAL_SECONDS",
    "IMAGE_SEARCH_URL",
    "IMAGE_SEARCH_QUALIFIER",
    "IMAGE_FETCH_TIMEOUT",
]
