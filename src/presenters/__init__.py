"""Presenters converting flows and standalone pages into content payloads."""

from content_publisher.presenters.base import PayloadPresenter
from content_publisher.presenters.flow import (
    Flow,
    FlowNode,
    FlowRegistrationPresenter,
    NodePresenter,
    RelatedLink,
    StartPagePresenter,
)
from content_publisher.presenters.items import answer_payload, transaction_payload

__all__ = [
    "Flow",
    "FlowNode",
    "FlowRegistrationPresenter",
    "NodePresenter",
    "PayloadPresenter",
    "RelatedLink",
    "StartPagePresenter",
    "answer_payload",
    "transaction_payload",
]
