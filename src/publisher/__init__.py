"""Publication protocol: payload models, gateway contract and id generation.

The engine itself lives in ``content_publisher.publisher.service``.
"""

from content_publisher.publisher.base import ContentStoreGateway
from content_publisher.publisher.identity import IdGenerator, sequence_ids, uuid_content_id
from content_publisher.publisher.models import (
    ApiResponse,
    ContentPayload,
    Route,
    RouteType,
    SchemaName,
)

__all__ = [
    "ApiResponse",
    "ContentPayload",
    "ContentStoreGateway",
    "IdGenerator",
    "Route",
    "RouteType",
    "SchemaName",
    "sequence_ids",
    "uuid_content_id",
]
