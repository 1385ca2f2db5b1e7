"""Payload builders for standalone transaction and answer pages."""

from __future__ import annotations

from content_publisher.config import PublishingApiConfig
from content_publisher.publisher.models import ContentPayload, Route, SchemaName, govspeak


def transaction_payload(
    base_path: str,
    *,
    publishing_app: str,
    title: str,
    content: str,
    link: str,
    config: PublishingApiConfig,
) -> ContentPayload:
    """Build a transaction page pointing users at ``link``."""
    return ContentPayload(
        base_path=base_path,
        title=title,
        publishing_app=publishing_app,
        rendering_app=config.rendering_app,
        schema_name=SchemaName.TRANSACTION,
        document_type="transaction",
        locale=config.locale,
        details={
            "introductory_paragraph": govspeak(content),
            "transaction_start_link": link,
        },
        routes=[Route(path=base_path)],
    )


def answer_payload(
    base_path: str,
    *,
    publishing_app: str,
    title: str,
    content: str,
    config: PublishingApiConfig,
) -> ContentPayload:
    """Build an answer page whose body is ``content``."""
    return ContentPayload(
        base_path=base_path,
        title=title,
        publishing_app=publishing_app,
        rendering_app=config.rendering_app,
        schema_name=SchemaName.ANSWER,
        document_type="answer",
        locale=config.locale,
        details={"body": govspeak(content)},
        routes=[Route(path=base_path)],
    )
