from typing import Optional, Sequence
from urllib.parse import urlparse

from core.exceptions import CandidateParseFailure
from core.logging import configure_logger

from ..common.constants import INVALID_IMAGE_HOSTS, MIN_INLINE_IMAGE_CHARS

logger = configure_logger(__name__)


def parse_hostname(url: str) -> str:
    try:
        hostname = urlparse(url).hostname
    except ValueError as exc:
        raise CandidateParseFailure(f"Invalid URL format: {url}") from exc
    if not hostname:
        raise CandidateParseFailure(f"URL has no host: {url}")
    return hostname


class ImageValidator:
    """Last gate before a candidate is returned and cached."""

    def __init__(self, invalid_hosts: Sequence[str] = INVALID_IMAGE_HOSTS) -> None:
        self.invalid_hosts = tuple(invalid_hosts)

    def validate(self, candidate: Optional[str]) -> Optional[str]:
        if not candidate:
            return None

        if candidate.startswith("data:image") and len(candidate) < MIN_INLINE_IMAGE_CHARS:
            logger.warning("[Warning] Base64 image too small (%s chars), likely a placeholder", len(candidate))
            return None

        if candidate.startswith("http"):
            try:
                hostname = parse_hostname(candidate)
            except CandidateParseFailure as exc:
                logger.info("[Invalid URL Format] %s", exc)
                return None
            if any(domain in hostname for domain in self.invalid_hosts):
                logger.info("[Invalid Domain] %s - skipping", hostname)
                return None
            logger.debug("[Valid URL] %s", hostname)

        return candidate
