from abc import ABC, abstractmethod
from typing import Optional

from bs4 import BeautifulSoup, Tag

from ...common.constants import PLACEHOLDER_SIGNATURE


class ImageStrategy(ABC):
    """One heuristic that scans search-results markup for an image URL."""

    name: str = "strategy"

    @abstractmethod
    def extract(self, soup: BeautifulSoup) -> Optional[str]:
        """Return the first usable (already https-normalised) URL, or ``None``."""


def image_source(img: Tag) -> Optional[str]:
    """Lazy-load source wins over the primary one."""
    return img.get("data-src") or img.get("src") or None


def is_placeholder(url: Optional[str]) -> bool:
    return bool(url) and PLACEHOLDER_SIGNATURE in url


def is_pixel_sized(img: Tag) -> bool:
    return img.get("width") == "1" and img.get("height") == "1"
