"""Error taxonomy for content publishing.

Every failure raised by this package derives from ``PublisherError`` so
callers can catch the whole family in one place.
"""

from __future__ import annotations


class PublisherError(Exception):
    """Base error for content publishing."""


class ValidationError(PublisherError):
    """A required field was not supplied; raised before any network call."""


class ContentIdMissingError(ValidationError):
    """Unpublish was called without a content id."""

    def __init__(self) -> None:
        super().__init__("Content id has not been supplied")


class CreationFailedError(PublisherError):
    """The draft put-content call did not return a successful status."""

    def __init__(self, content_id: str, status: int) -> None:
        super().__init__("This content item has not been created")
        self.content_id = content_id
        self.status = status


class PublishingAPIError(PublisherError):
    """Transport-level failure talking to the publishing API.

    ``status`` is the HTTP status code, or None when no response was received.
    """

    def __init__(self, message: str, *, url: str, status: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status
