class ImageResolverError(RuntimeError):
    """Base exception for all image-resolution errors."""


class MissingParameter(ImageResolverError):
    """Raised when a required request parameter (the item name) is absent."""


class UpstreamFetchFailure(ImageResolverError):
    """Raised when the search page cannot be fetched (non-2xx or network error)."""


class CandidateParseFailure(ImageResolverError):
    """Raised when a candidate image URL cannot be parsed."""
