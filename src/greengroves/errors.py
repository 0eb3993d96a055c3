"""Exception hierarchy for greengroves.

Persistence load failures are never raised: the repository logs them and
falls back to seed data.  Only conditions a caller can act on live here.
"""


class GreenGrovesError(Exception):
    """Base class for all greengroves errors."""


class StorageError(GreenGrovesError):
    """A persistence write was rejected (quota exceeded, disk full, ...)."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Failed to save {key!r}: {reason}")


class UnknownContentTypeError(GreenGrovesError, KeyError):
    """No content model is registered for the requested content type."""

    def __init__(self, content_type: str) -> None:
        self.content_type = content_type
        super().__init__(content_type)

    def __str__(self) -> str:
        return f"Unknown content type: {self.content_type!r}"
