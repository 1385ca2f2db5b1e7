"""Publishing API client, the HTTP side of the content store gateway.

Every call is a single blocking urllib request; there is no retry.  Draft
creation hands its status back to the caller, every other call raises
``PublishingAPIError`` on a non-2xx response.
"""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any

from content_publisher.config import PublishingApiConfig
from content_publisher.errors import PublishingAPIError
from content_publisher.publisher.base import ContentStoreGateway
from content_publisher.publisher.models import ApiResponse, ContentPayload

logger = logging.getLogger(__name__)


class PublishingAPIClient(ContentStoreGateway):
    """Client for the publishing API's content and path endpoints."""

    def __init__(self, config: PublishingApiConfig) -> None:
        if not config.is_configured:
            raise ValueError("PublishingApiConfig.url must be set")
        self.config = config
        self.base_url = config.url.rstrip("/")

    def _request(self, method: str, path: str, data: dict[str, Any] | None = None) -> ApiResponse:
        """Send a JSON request and return its status.

        HTTP error statuses come back as an ApiResponse; only a failure to get
        any response at all raises.
        """
        url = f"{self.base_url}{path}"
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self.config.bearer_token:
            headers["Authorization"] = f"Bearer {self.config.bearer_token}"

        body = json.dumps(data).encode("utf-8") if data is not None else None
        req = urllib.request.Request(url, data=body, method=method, headers=headers)

        logger.debug("%s %s", method, url)
        try:
            with urllib.request.urlopen(req, timeout=self.config.timeout) as resp:
                return ApiResponse(code=resp.status)
        except urllib.error.HTTPError as exc:
            logger.debug("%s %s returned %d", method, url, exc.code)
            return ApiResponse(code=exc.code)
        except urllib.error.URLError as exc:
            raise PublishingAPIError(
                f"{method} {url} failed: {exc.reason}", url=url
            ) from exc

    def _request_ok(self, method: str, path: str, data: dict[str, Any] | None = None) -> ApiResponse:
        response = self._request(method, path, data)
        if not response.ok:
            url = f"{self.base_url}{path}"
            raise PublishingAPIError(
                f"{method} {url} returned HTTP {response.code}",
                url=url,
                status=response.code,
            )
        return response

    @staticmethod
    def _content_path(content_id: str) -> str:
        return f"/v2/content/{urllib.parse.quote(content_id, safe='')}"

    def put_content(self, content_id: str, payload: ContentPayload) -> ApiResponse:
        return self._request("PUT", self._content_path(content_id), payload.to_request_body())

    def publish(self, content_id: str) -> None:
        self._request_ok("POST", f"{self._content_path(content_id)}/publish", {})

    def unpublish(self, content_id: str, *, unpublishing_type: str = "gone") -> None:
        self._request_ok(
            "POST",
            f"{self._content_path(content_id)}/unpublish",
            {"type": unpublishing_type},
        )

    def put_path(
        self, base_path: str, *, publishing_app: str, override_existing: bool = True
    ) -> None:
        # The base path is appended as-is, so "/foo" becomes "/paths//foo".
        self._request_ok(
            "PUT",
            f"/paths/{urllib.parse.quote(base_path, safe='/')}",
            {"publishing_app": publishing_app, "override_existing": override_existing},
        )
