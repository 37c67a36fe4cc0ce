import re
from typing import List, Optional, Sequence

from bs4 import BeautifulSoup

from core.logging import configure_logger

from ...common.constants import SCRIPT_ALLOWLIST, SCRIPT_DENYLIST, SCRIPT_IMAGE_PATTERN
from ...common.utils import normalise_protocol
from .base import ImageStrategy

logger = configure_logger(__name__)

_IMAGE_URL = re.compile(SCRIPT_IMAGE_PATTERN, re.IGNORECASE)


def find_script_image_urls(soup: BeautifulSoup) -> List[str]:
    text = "\n".join(script.string or "" for script in soup.find_all("script"))
    return _IMAGE_URL.findall(text)


def _contains_any(url: str, markers: Sequence[str]) -> bool:
    lowered = url.lower()
    return any(marker in lowered for marker in markers)


class ScriptImageStrategy(ImageStrategy):
    """Bare image URLs embedded in inline scripts.

    Preference order: denylist-clean and allowlisted, then denylist-clean, then
    whatever matched first. The last tier can return an unrelated image.
    """

    name = "script"

    def __init__(
        self,
        *,
        denylist: Sequence[str] = SCRIPT_DENYLIST,
        allowlist: Sequence[str] = SCRIPT_ALLOWLIST,
    ) -> None:
        self.denylist = tuple(denylist)
        self.allowlist = tuple(allowlist)

    def extract(self, soup: BeautifulSoup) -> Optional[str]:
        matches = find_script_image_urls(soup)
        if not matches:
            return None
        logger.debug("[Script Images Found] %s images in scripts", len(matches))

        clean = [url for url in matches if not _contains_any(url, self.denylist)]
        priority = [url for url in clean if _contains_any(url, self.allowlist)]

        if priority:
            logger.debug("[Priority Image Selected] %s", priority[0][:150])
            return normalise_protocol(priority[0])
        if clean:
            logger.debug("[General Image Selected] %s", clean[0][:150])
            return normalise_protocol(clean[0])
        logger.debug("[Fallback Image Used] %s", matches[0][:150])
        return normalise_protocol(matches[0])
