from typing import List, Optional

from core.enums import ImageSource
from core.exceptions import MissingParameter
from core.logging import configure_logger
from core.schemas import CacheSnapshotEntry, ImageResolution

from .cache import ImageCache
from .extractors import ImageExtractor
from .fetcher import SearchPageFetcher
from .queue import RateLimitedQueue
from .validator import ImageValidator


class ImageResolver:
    """Cache-first image lookup backed by a rate-limited search crawl."""

    def __init__(
        self,
        *,
        cache: ImageCache,
        queue: RateLimitedQueue,
        fetcher: SearchPageFetcher,
        extractor: Optional[ImageExtractor] = None,
        validator: Optional[ImageValidator] = None,
    ) -> None:
        self.cache = cache
        self.queue = queue
        self.fetcher = fetcher
        self.extractor = extractor or ImageExtractor()
        self.validator = validator or ImageValidator()
        self.logger = configure_logger(f"image_app.{self.__class__.__name__}")

    def resolve(self, name: Optional[str]) -> ImageResolution:
        if not name:
            raise MissingParameter("Item name is required.")

        self.logger.info("[API Request] %s", name)
        entry = self.cache.get(name)
        if entry is not None:
            return ImageResolution(image_url=entry.image_url, source=ImageSource.CACHE)

        image_url = self.queue.submit(lambda: self._crawl(name)).result()
        self.cache.put(name, image_url)
        return ImageResolution(image_url=image_url, source=ImageSource.CRAWLED)

    def clear_cache(self) -> int:
        return self.cache.clear()

    def delete_cache_entry(self, name: str) -> bool:
        return self.cache.delete(name)

    def cache_snapshot(self) -> List[CacheSnapshotEntry]:
        return self.cache.snapshot()

    def _crawl(self, name: str) -> Optional[str]:
        """Fetch, extract and validate; every failure collapses to ``None``."""
        self.logger.info("[Crawling Start] %s", name)
        try:
            html = self.fetcher.fetch(name)
            if not html:
                return None

            candidate = self.extractor.extract(html)
            if candidate is None:
                return None

            image_url = self.validator.validate(candidate.url)
        except Exception:
            self.logger.exception("[Crawl Error] %s", name)
            return None

        if image_url:
            self.logger.info("[Final Image] %s: %s", name, image_url[:150])
        return image_url
