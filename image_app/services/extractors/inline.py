from typing import Optional

from bs4 import BeautifulSoup

from ...common.constants import BRANDING_MARKERS, MIN_INLINE_IMAGE_CHARS
from ...common.utils import normalise_protocol
from .base import ImageStrategy, image_source, is_pixel_sized, is_placeholder


def _is_acceptable(url: str) -> bool:
    if any(marker in url for marker in BRANDING_MARKERS):
        return False
    if url.startswith("http") or url.startswith("//"):
        return True
    return url.startswith("data:image") and len(url) > MIN_INLINE_IMAGE_CHARS


class InlineImageStrategy(ImageStrategy):
    """First non-placeholder, non-branding ``<img>`` in document order."""

    name = "inline"

    def extract(self, soup: BeautifulSoup) -> Optional[str]:
        for img in soup.find_all("img"):
            url = image_source(img)
            if not url or is_placeholder(url) or is_pixel_sized(img):
                continue
            if _is_acceptable(url):
                return normalise_protocol(url)
        return None
