"""Create-then-publish client for the publishing API."""

from content_publisher.config import PublishingApiConfig
from content_publisher.errors import (
    ContentIdMissingError,
    CreationFailedError,
    PublisherError,
    PublishingAPIError,
    ValidationError,
)
from content_publisher.publisher.service import ContentItemPublisher

__version__ = "0.1.0"

__all__ = [
    "ContentIdMissingError",
    "ContentItemPublisher",
    "CreationFailedError",
    "PublisherError",
    "PublishingAPIError",
    "PublishingApiConfig",
    "ValidationError",
]
