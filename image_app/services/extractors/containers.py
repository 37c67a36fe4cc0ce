from typing import Optional

from bs4 import BeautifulSoup

from ...common.constants import IMAGE_CONTAINER_SELECTOR
from ...common.utils import normalise_protocol
from .base import ImageStrategy, image_source, is_pixel_sized, is_placeholder


class ImageContainerStrategy(ImageStrategy):
    """Images nested in the results page's dedicated image wrapper element."""

    name = "container"

    def __init__(self, selector: str = IMAGE_CONTAINER_SELECTOR) -> None:
        self.selector = selector

    def extract(self, soup: BeautifulSoup) -> Optional[str]:
        for img in soup.select(self.selector):
            url = image_source(img)
            if url and not is_placeholder(url) and not is_pixel_sized(img):
                return normalise_protocol(url)
        return None
