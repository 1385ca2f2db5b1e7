"""Publication protocol engine.

Brings content items from nonexistent to live on the publishing API:
a draft put-content call first, then a publish call for the same content
id.  The publish call is only reachable once the draft call has returned a
2xx status.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol

from content_publisher.config import PublishingApiConfig
from content_publisher.errors import CreationFailedError
from content_publisher.presenters.base import PayloadPresenter
from content_publisher.presenters.items import answer_payload, transaction_payload
from content_publisher.publisher import validation
from content_publisher.publisher.base import ContentStoreGateway
from content_publisher.publisher.identity import IdGenerator, uuid_content_id
from content_publisher.publisher.models import ContentPayload

logger = logging.getLogger(__name__)


class FlowPresentation(Protocol):
    """What ``publish`` needs from each element of a batch."""

    name: str

    @property
    def start_page(self) -> PayloadPresenter: ...

    @property
    def nodes(self) -> Iterable[PayloadPresenter]: ...


class ContentItemPublisher:
    """Drafts and publishes content items, one call at a time.

    Args:
        gateway: Remote store operations. Defaults to a PublishingAPIClient
            built from ``config``.
        id_generator: Source of content ids for transactions and answers.
        config: Publishing API settings; read from the environment if omitted.
    """

    def __init__(
        self,
        gateway: ContentStoreGateway | None = None,
        *,
        id_generator: IdGenerator | None = None,
        config: PublishingApiConfig | None = None,
    ) -> None:
        self._config = config or PublishingApiConfig.from_env()
        if gateway is None:
            from content_publisher.integrations.publishing_api import PublishingAPIClient

            gateway = PublishingAPIClient(self._config)
        self._gateway = gateway
        self._next_id = id_generator or uuid_content_id

    # ── Flows ────────────────────────────────────────────────────

    def publish(self, batch: Iterable[FlowPresentation]) -> None:
        """Publish each flow's start page and then its nodes, in order.

        Every page in the batch is validated before the first call is made.
        After that the first failure propagates; later flows are not
        attempted and nothing already published is rolled back.
        """
        flows = []
        for presenter in batch:
            pages = [presenter.start_page, *presenter.nodes]
            flows.append((presenter.name, [self._prepare(page) for page in pages]))
        for name, pages in flows:
            logger.info("Publishing flow '%s' (%d pages)", name, len(pages))
            for content_id, payload in pages:
                self._create_and_publish(content_id, payload)

    @staticmethod
    def _prepare(presenter: PayloadPresenter) -> tuple[str, ContentPayload]:
        payload = presenter.to_payload()
        validation.require_page_fields(
            presenter.content_id, base_path=payload.base_path, title=payload.title
        )
        return presenter.content_id, payload

    # ── Single-call operations ───────────────────────────────────

    def unpublish(self, content_id: str | None, *, unpublishing_type: str = "gone") -> None:
        """Withdraw a published content item."""
        validation.require_content_id(content_id)
        self._gateway.unpublish(content_id, unpublishing_type=unpublishing_type)
        logger.info("Unpublished %s (%s)", content_id, unpublishing_type)

    def reserve_path_for_publishing_app(
        self, base_path: str | None, publishing_app: str | None
    ) -> None:
        """Claim ``base_path`` for ``publishing_app``."""
        validation.require_path_reservation(base_path, publishing_app)
        self._gateway.put_path(base_path, publishing_app=publishing_app, override_existing=True)
        logger.info("Reserved %s for %s", base_path, publishing_app)

    # ── Standalone pages ─────────────────────────────────────────

    def publish_transaction(
        self,
        base_path: str | None,
        *,
        publishing_app: str | None,
        title: str | None,
        content: str | None,
        link: str | None,
    ) -> str:
        """Create and publish a transaction page under a fresh content id.

        Returns:
            The content id the page was published under.

        Raises:
            ValidationError: A required field is missing.
            CreationFailedError: The draft call did not succeed.
        """
        validation.require_transaction_fields(
            base_path, publishing_app=publishing_app, title=title, content=content, link=link
        )
        content_id = self._next_id()
        payload = transaction_payload(
            base_path,
            publishing_app=publishing_app,
            title=title,
            content=content,
            link=link,
            config=self._config,
        )
        self._create_and_publish(content_id, payload)
        return content_id

    def publish_answer(
        self,
        base_path: str | None,
        *,
        publishing_app: str | None,
        title: str | None,
        content: str | None,
    ) -> str:
        """Create and publish an answer page under a fresh content id.

        Returns:
            The content id the page was published under.
        """
        validation.require_answer_fields(
            base_path, publishing_app=publishing_app, title=title, content=content
        )
        content_id = self._next_id()
        payload = answer_payload(
            base_path,
            publishing_app=publishing_app,
            title=title,
            content=content,
            config=self._config,
        )
        self._create_and_publish(content_id, payload)
        return content_id

    # ── Protocol ─────────────────────────────────────────────────

    def _create_and_publish(self, content_id: str, payload: ContentPayload) -> None:
        response = self._gateway.put_content(content_id, payload)
        if not response.ok:
            logger.warning(
                "Draft for %s at %s returned HTTP %d, not publishing",
                content_id,
                payload.base_path,
                response.code,
            )
            raise CreationFailedError(content_id, response.code)

        self._gateway.publish(content_id)
        logger.info("Published %s at %s", content_id, payload.base_path)
