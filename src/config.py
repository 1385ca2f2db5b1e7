"""Publishing API configuration, loaded from environment variables."""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_PUBLISHING_APP = "smartanswers"
DEFAULT_RENDERING_APP = "frontend"
DEFAULT_TIMEOUT = 15


class PublishingApiConfig(BaseModel):
    """Connection and ownership settings for the publishing API."""

    url: str = ""
    bearer_token: str = ""
    publishing_app: str = DEFAULT_PUBLISHING_APP
    rendering_app: str = DEFAULT_RENDERING_APP
    locale: str = "en"
    timeout: int = Field(default=DEFAULT_TIMEOUT, gt=0)

    @property
    def is_configured(self) -> bool:
        return bool(self.url)

    @classmethod
    def from_env(cls) -> PublishingApiConfig:
        """Create config from environment variables."""
        timeout = os.environ.get("PUBLISHING_API_TIMEOUT", "")
        try:
            timeout_value = int(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError:
            logger.warning(
                "Ignoring non-integer PUBLISHING_API_TIMEOUT=%r, using %ds",
                timeout,
                DEFAULT_TIMEOUT,
            )
            timeout_value = DEFAULT_TIMEOUT
        return cls(
            url=os.environ.get("PUBLISHING_API_URL", ""),
            bearer_token=os.environ.get("PUBLISHING_API_BEARER_TOKEN", ""),
            publishing_app=os.environ.get("PUBLISHING_APP", "") or DEFAULT_PUBLISHING_APP,
            timeout=timeout_value,
        )
