"""Base class for content store gateways."""

from __future__ import annotations

from abc import ABC, abstractmethod

from content_publisher.publisher.models import ApiResponse, ContentPayload


class ContentStoreGateway(ABC):
    """Remote operations the publication engine depends on."""

    @abstractmethod
    def put_content(self, content_id: str, payload: ContentPayload) -> ApiResponse:
        """Create or update the draft for ``content_id``.

        A non-2xx status is returned as a value, not raised.
        """

    @abstractmethod
    def publish(self, content_id: str) -> None:
        """Make the current draft of ``content_id`` live."""

    @abstractmethod
    def unpublish(self, content_id: str, *, unpublishing_type: str = "gone") -> None:
        """Withdraw a published item from public view."""

    @abstractmethod
    def put_path(
        self, base_path: str, *, publishing_app: str, override_existing: bool = True
    ) -> None:
        """Reserve ``base_path`` for ``publishing_app``."""
