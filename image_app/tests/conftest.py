import pytest

from image_app.services.cache import ImageCache
from image_app.services.queue import RateLimitedQueue
from image_app.services.resolver import ImageResolver

from .fakes import FakeClock


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def crawl_queue():
    queue = RateLimitedQueue(interval=0.0)
    yield queue
    queue.shutdown(wait=True)


@pytest.fixture()
def resolver_factory(crawl_queue, clock):
    def _create(fetcher, **overrides):
        defaults = {
            "cache": ImageCache(clock=clock),
            "queue": crawl_queue,
            "fetcher": fetcher,
        }
        defaults.update(overrides)
        return ImageResolver(**defaults)

    return _create
