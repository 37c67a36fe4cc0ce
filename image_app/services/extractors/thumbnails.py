from typing import Optional

from bs4 import BeautifulSoup

from ...common.constants import MIN_THUMBNAIL_EDGE, THUMBNAIL_HOST_MARKER
from ...common.utils import normalise_protocol, parse_dimension
from .base import ImageStrategy


def _exceeds_minimum(value: Optional[str]) -> bool:
    # An undeclared dimension passes; an unparseable one does not.
    if not value:
        return True
    size = parse_dimension(value)
    return size is not None and size > MIN_THUMBNAIL_EDGE


class ThumbnailHostStrategy(ImageStrategy):
    """Search-engine thumbnails served from the known thumbnail host."""

    name = "thumbnail"

    def extract(self, soup: BeautifulSoup) -> Optional[str]:
        for img in soup.find_all("img", src=True):
            src = img["src"]
            if THUMBNAIL_HOST_MARKER not in src:
                continue
            if _exceeds_minimum(img.get("width")) and _exceeds_minimum(img.get("height")):
                return normalise_protocol(src)
        return None
