from enum import Enum


class ImageSource(Enum):
    """Where a resolved image came from."""

    CACHE = "cache"
    CRAWLED = "crawled"


class CacheAction(Enum):
    """Supported cache administration actions."""

    STATUS = "status"
    CLEAR = "clear"
    DELETE = "delete"

    @classmethod
    def from_string(cls, value: str) -> "CacheAction":
        try:
            return cls(value.strip().lower())
        except ValueError as exc:
            allowed = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown cache action '{value}'. Allowed values: {allowed}.") from exc
