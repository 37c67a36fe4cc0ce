from dataclasses import dataclass
from typing import Any, Dict, Optional

from core.enums import ImageSource


@dataclass(slots=True)
class CacheEntry:
    """A prior resolution; ``image_url`` of ``None`` records a confirmed miss."""

    image_url: Optional[str]
    inserted_at: float

    @property
    def has_image(self) -> bool:
        return bool(self.image_url)


@dataclass(slots=True)
class CacheSnapshotEntry:
    """Read-only diagnostic view of one cache entry."""

    name: str
    has_image: bool
    url_preview: Optional[str]
    age_minutes: int


@dataclass(slots=True)
class Candidate:
    """Image URL produced by an extraction stage, not yet validated."""

    url: str
    stage: str
    rank: int


@dataclass(slots=True)
class ImageResolution:
    """Typed payload returned by the resolver."""

    image_url: Optional[str]
    source: ImageSource

    def to_dict(self) -> Dict[str, Any]:
        return {
            "image_url": self.image_url,
            "source": self.source.value,
        }
