"""Attach images to recommended items, one resolution at a time."""

from typing import Any, List, MutableMapping, Sequence

from core.logging import configure_logger

from .resolver import ImageResolver

logger = configure_logger(__name__)


def attach_images(
    items: Sequence[MutableMapping[str, Any]],
    resolver: ImageResolver,
) -> List[MutableMapping[str, Any]]:
    """Fill ``imageUrl`` for items that lack one.

    Items are resolved sequentially. A failure for one item only leaves that
    item's image empty.
    """
    logger.info("=== Fetching medicine images ===")
    for item in items:
        name = item.get("name")
        if not name or item.get("imageUrl"):
            continue
        try:
            item["imageUrl"] = resolver.resolve(name).image_url
        except Exception:
            logger.exception("Failed to fetch image for %s", name)
            item["imageUrl"] = None
    return list(items)
