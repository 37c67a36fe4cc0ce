"""Image resolution services."""

from .cache import ImageCache
from .enrichment import attach_images
from .extractors import ImageExtractor
from .fetcher import SearchPageFetcher
from .queue import QueueState, RateLimitedQueue
from .resolver import ImageResolver
from .validator import ImageValidator

__all__ = [
    "ImageCache",
    "ImageExtractor",
    "ImageResolver",
    "ImageValidator",
    "QueueState",
    "RateLimitedQueue",
    "SearchPageFetcher",
    "attach_images",
]
