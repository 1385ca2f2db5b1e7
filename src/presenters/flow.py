"""Presenters turning a flow definition into publishable pages.

A flow is published as its start page followed by each of its nodes, in
declaration order.  The start page is a transaction whose start link leads
into the flow; each node is a ``smart_answer`` page under the flow's path.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from content_publisher.config import PublishingApiConfig
from content_publisher.presenters.base import PayloadPresenter
from content_publisher.publisher.models import ContentPayload, Route, SchemaName, govspeak

DEFAULT_START_BUTTON_TEXT = "Start now"


class RelatedLink(BaseModel):
    """An external link shown alongside the start page."""

    title: str
    url: str


class FlowNode(BaseModel):
    """A single question or outcome page of a flow."""

    content_id: str
    name: str
    title: str
    body: str = ""


class Flow(BaseModel):
    """A registered flow definition, consumed read-only."""

    name: str
    title: str = ""
    start_page_content_id: str
    flow_content_id: str
    description: str = ""
    body: str = ""
    start_button_text: str = DEFAULT_START_BUTTON_TEXT
    external_related_links: list[RelatedLink] | None = None
    nodes: list[FlowNode] = Field(default_factory=list)

    @property
    def base_path(self) -> str:
        return f"/{self.name}"

    @property
    def display_title(self) -> str:
        return self.title or self.name.replace("-", " ").capitalize()


class StartPagePresenter(PayloadPresenter):
    """Transaction-style landing page for a flow."""

    def __init__(self, flow: Flow, config: PublishingApiConfig) -> None:
        self._flow = flow
        self._config = config

    @property
    def content_id(self) -> str:
        return self._flow.start_page_content_id

    def to_payload(self) -> ContentPayload:
        flow = self._flow
        details: dict = {
            "introductory_paragraph": govspeak(flow.body),
            "transaction_start_link": f"{flow.base_path}/y",
            "start_button_text": flow.start_button_text,
        }
        if flow.external_related_links:
            details["external_related_links"] = [
                link.model_dump() for link in flow.external_related_links
            ]
        return ContentPayload(
            base_path=flow.base_path,
            title=flow.display_title,
            description=flow.description or None,
            publishing_app=self._config.publishing_app,
            rendering_app=self._config.rendering_app,
            schema_name=SchemaName.TRANSACTION,
            document_type="transaction",
            locale=self._config.locale,
            update_type="minor",
            details=details,
            routes=[Route(path=flow.base_path)],
            links={"flow": [flow.flow_content_id]},
        )


class NodePresenter(PayloadPresenter):
    """A question or outcome page within a flow."""

    def __init__(self, flow: Flow, node: FlowNode, config: PublishingApiConfig) -> None:
        self._flow = flow
        self._node = node
        self._config = config

    @property
    def content_id(self) -> str:
        return self._node.content_id

    @property
    def base_path(self) -> str:
        return f"{self._flow.base_path}/{self._node.name}"

    def to_payload(self) -> ContentPayload:
        return ContentPayload(
            base_path=self.base_path,
            title=self._node.title,
            publishing_app=self._config.publishing_app,
            rendering_app=self._config.rendering_app,
            schema_name=SchemaName.SMART_ANSWER,
            document_type="smart_answer",
            locale=self._config.locale,
            update_type="minor",
            details={"body": govspeak(self._node.body)},
            routes=[Route(path=self.base_path)],
            links={"parent": [self._flow.start_page_content_id]},
        )


class FlowRegistrationPresenter:
    """Exposes a flow as an ordered set of publish targets."""

    def __init__(self, flow: Flow, config: PublishingApiConfig | None = None) -> None:
        self._flow = flow
        self._config = config or PublishingApiConfig.from_env()

    @property
    def name(self) -> str:
        return self._flow.name

    @property
    def start_page_content_id(self) -> str:
        return self._flow.start_page_content_id

    @property
    def flow_content_id(self) -> str:
        return self._flow.flow_content_id

    @property
    def external_related_links(self) -> list[RelatedLink] | None:
        return self._flow.external_related_links

    @property
    def start_page(self) -> StartPagePresenter:
        return StartPagePresenter(self._flow, self._config)

    @property
    def nodes(self) -> list[NodePresenter]:
        return [NodePresenter(self._flow, node, self._config) for node in self._flow.nodes]
