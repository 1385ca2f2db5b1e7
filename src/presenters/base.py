"""Base class for objects that render a content payload."""

from __future__ import annotations

from abc import ABC, abstractmethod

from content_publisher.publisher.models import ContentPayload


class PayloadPresenter(ABC):
    """Something the engine can draft and publish under a known content id."""

    @property
    @abstractmethod
    def content_id(self) -> str:
        """Identifier the payload is published under."""

    @abstractmethod
    def to_payload(self) -> ContentPayload:
        """Build the put-content payload."""
