from threading import Lock
from typing import Optional

from django.conf import settings

from .cache import ImageCache
from .extractors import ImageExtractor
from .fetcher import SearchPageFetcher
from .queue import RateLimitedQueue
from .resolver import ImageResolver
from .validator import ImageValidator

_lock = Lock()
_resolver: Optional[ImageResolver] = None


def build_resolver() -> ImageResolver:
    """Assemble a resolver from the ``IMAGE_*`` Django settings."""
    return ImageResolver(
        cache=ImageCache(ttl_seconds=settings.IMAGE_CACHE_TTL_SECONDS),
        queue=RateLimitedQueue(interval=settings.IMAGE_CRAWL_INTERVAL_SECONDS),
        fetcher=SearchPageFetcher(
            search_url=settings.IMAGE_SEARCH_URL,
            qualifier=settings.IMAGE_SEARCH_QUALIFIER,
            timeout=settings.IMAGE_FETCH_TIMEOUT,
        ),
        extractor=ImageExtractor(),
        validator=ImageValidator(),
    )


def get_resolver() -> ImageResolver:
    """Return the process-wide resolver, building it on first use."""
    global _resolver

    with _lock:
        if _resolver is None:
            _resolver = build_resolver()
        return _resolver


def reset_resolver() -> None:
    global _resolver

    with _lock:
        resolver, _resolver = _resolver, None
    if resolver is not None:
        resolver.queue.shutdown(wait=False)
