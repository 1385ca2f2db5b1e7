"""Tests for PublishingApiConfig."""

import pytest
from content_publisher.config import PublishingApiConfig
from pydantic import ValidationError


class TestPublishingApiConfig:
    def test_defaults(self):
        cfg = PublishingApiConfig()
        assert cfg.publishing_app == "smartanswers"
        assert cfg.rendering_app == "frontend"
        assert cfg.locale == "en"
        assert cfg.timeout == 15
        assert cfg.is_configured is False

    def test_is_configured_with_url(self):
        cfg = PublishingApiConfig(url="https://publishing-api.test.gov.uk")
        assert cfg.is_configured is True

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            PublishingApiConfig(timeout=0)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PUBLISHING_API_URL", "https://publishing-api.test.gov.uk")
        monkeypatch.setenv("PUBLISHING_API_BEARER_TOKEN", "token")
        monkeypatch.setenv("PUBLISHING_APP", "publisher")
        monkeypatch.setenv("PUBLISHING_API_TIMEOUT", "30")
        cfg = PublishingApiConfig.from_env()
        assert cfg.url == "https://publishing-api.test.gov.uk"
        assert cfg.bearer_token == "token"
        assert cfg.publishing_app == "publisher"
        assert cfg.timeout == 30

    def test_from_env_empty(self, monkeypatch):
        for name in (
            "PUBLISHING_API_URL",
            "PUBLISHING_API_BEARER_TOKEN",
            "PUBLISHING_APP",
            "PUBLISHING_API_TIMEOUT",
        ):
            monkeypatch.delenv(name, raising=False)
        cfg = PublishingApiConfig.from_env()
        assert cfg.is_configured is False
        assert cfg.publishing_app == "smartanswers"

    def test_from_env_bad_timeout_falls_back(self, monkeypatch, caplog):
        monkeypatch.setenv("PUBLISHING_API_TIMEOUT", "soon")
        cfg = PublishingApiConfig.from_env()
        assert cfg.timeout == 15
        assert "PUBLISHING_API_TIMEOUT" in caplog.text
