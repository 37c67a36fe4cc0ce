import re
from typing import Optional

from .constants import URL_PREVIEW_CHARS

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def normalise_protocol(url: str) -> str:
    """Turn a protocol-relative URL into an explicit https one."""
    if url.startswith("//"):
        return "https:" + url
    return url


def parse_dimension(value: Optional[str]) -> Optional[int]:
    """Parse a width/height attribute the lenient way browsers do ("300px" -> 300)."""
    m = _LEADING_INT.match(value or "")
    return int(m.group(1)) if m else None


def preview(value: Optional[str], limit: int = URL_PREVIEW_CHARS) -> Optional[str]:
    if not value:
        return None
    return value[:limit]
