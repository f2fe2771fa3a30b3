"""Tests for environment-driven settings."""

from transcript_normalizer.config import Settings, Transport


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TRANSCRIPT_NORMALIZER_TRANSPORT", raising=False)
        settings = Settings()
        assert settings.transport == Transport.STDIO
        assert settings.cache_max_size == 100
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TRANSCRIPT_NORMALIZER_TRANSPORT", "streamable-http")
        monkeypatch.setenv("TRANSCRIPT_NORMALIZER_MAX_CONTENT_CHARS", "500")
        monkeypatch.setenv("TRANSCRIPT_NORMALIZER_HTTP_PORT", "9000")
        settings = Settings()
        assert settings.transport == Transport.STREAMABLE_HTTP
        assert settings.max_content_chars == 500
        assert settings.http_port == 9000
