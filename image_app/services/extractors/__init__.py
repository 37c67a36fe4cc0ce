"""Ordered image extraction over search-results HTML."""

from typing import Optional, Sequence

from bs4 import BeautifulSoup

from core.logging import configure_logger
from core.schemas import Candidate

from .base import ImageStrategy
from .containers import ImageContainerStrategy
from .inline import InlineImageStrategy
from .scripts import ScriptImageStrategy
from .thumbnails import ThumbnailHostStrategy

logger = configure_logger(__name__)


def default_strategies() -> Sequence[ImageStrategy]:
    return (
        InlineImageStrategy(),
        ThumbnailHostStrategy(),
        ImageContainerStrategy(),
        ScriptImageStrategy(),
    )


class ImageExtractor:
    """Runs strategies in priority order; the first one that yields a URL wins."""

    def __init__(self, strategies: Optional[Sequence[ImageStrategy]] = None) -> None:
        self.strategies = tuple(strategies if strategies is not None else default_strategies())

    def extract(self, html: str) -> Optional[Candidate]:
        soup = BeautifulSoup(html, "html.parser")
        logger.debug("[Debug] Total images found: %s", len(soup.find_all("img")))

        for rank, strategy in enumerate(self.strategies, start=1):
            url = strategy.extract(soup)
            if url:
                logger.info("[Image Selected] stage=%s %s", strategy.name, url[:150])
                return Candidate(url=url, stage=strategy.name, rank=rank)
        logger.info("[No Image Found At All]")
        return None


__all__ = [
    "ImageExtractor",
    "ImageStrategy",
    "ImageContainerStrategy",
    "InlineImageStrategy",
    "ScriptImageStrategy",
    "ThumbnailHostStrategy",
    "default_strategies",
]
