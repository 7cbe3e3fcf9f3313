"""Tests for environment-driven settings."""

from __future__ import annotations

from blogscan.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        for name in (
            "BLOGSCAN_LOG_LEVEL",
            "BLOGSCAN_REQUEST_TIMEOUT",
            "BLOGSCAN_VERIFY_FEEDS",
            "BLOGSCAN_MAX_FEED_PROBES",
            "BLOGSCAN_USER_AGENT",
        ):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.request_timeout == 15.0
        assert settings.verify_feeds is False
        assert settings.max_feed_probes == 10
        assert "blogscan" in settings.user_agent

    def test_environment_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("BLOGSCAN_LOG_LEVEL", "debug")
        monkeypatch.setenv("BLOGSCAN_REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("BLOGSCAN_VERIFY_FEEDS", "yes")
        monkeypatch.setenv("BLOGSCAN_MAX_FEED_PROBES", "3")
        monkeypatch.setenv("BLOGSCAN_USER_AGENT", "Custom/2.0")
        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert settings.request_timeout == 2.5
        assert settings.verify_feeds is True
        assert settings.max_feed_probes == 3
        assert settings.user_agent == "Custom/2.0"
