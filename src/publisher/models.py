"""Publishing payload models, pure Pydantic v2 data types.

A ContentPayload is built fresh for every draft call and is never stored
locally.  ApiResponse is the only thing the engine reads back from the
remote store, and only its status code is inspected.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class RouteType(StrEnum):
    """How a route matches incoming paths; only exact routes are published."""

    EXACT = "exact"


class SchemaName(StrEnum):
    """Content schemas this package knows how to build."""

    TRANSACTION = "transaction"
    ANSWER = "answer"
    SMART_ANSWER = "smart_answer"


class Route(BaseModel):
    """A path the content item is served under."""

    path: str
    type: RouteType = RouteType.EXACT


class ContentPayload(BaseModel):
    """Body of a draft put-content request."""

    base_path: str
    title: str
    publishing_app: str
    rendering_app: str
    schema_name: SchemaName
    document_type: str
    locale: str = "en"
    update_type: str = "major"
    description: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)
    routes: list[Route] = Field(default_factory=list)
    links: dict[str, list[str]] | None = None

    def to_request_body(self) -> dict[str, Any]:
        """Serialise for the wire, dropping unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)


class ApiResponse(BaseModel):
    """Status of a publishing API response."""

    code: int

    @property
    def ok(self) -> bool:
        return 200 <= self.code < 300


def govspeak(content: str) -> list[dict[str, str]]:
    """Wrap rendered content in the govspeak body format."""
    return [{"content_type": "text/govspeak", "content": content}]
