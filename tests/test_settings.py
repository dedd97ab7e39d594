"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from presigner.common.settings import Settings, get_settings


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self):
        settings = Settings()

        assert settings.secret_key is None
        assert settings.secret_key_bytes is None
        assert settings.default_ttl_seconds == 3600
        assert settings.signature_header == "X-Signature"
        assert settings.expires_header == "X-Expires"
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("PRESIGNER_SECRET_KEY", "s3cret")
        monkeypatch.setenv("PRESIGNER_DEFAULT_TTL_SECONDS", "90")

        settings = Settings()

        assert settings.secret_key_bytes == b"s3cret"
        assert settings.default_ttl_seconds == 90

    def test_secret_hidden_in_repr(self, monkeypatch):
        monkeypatch.setenv("PRESIGNER_SECRET_KEY", "s3cret")

        assert "s3cret" not in repr(Settings())

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("PRESIGNER_SECRET_KEY=from-dotenv\n")

        assert Settings().secret_key_bytes == b"from-dotenv"

    def test_log_level_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("PRESIGNER_LOG_LEVEL", "debug")

        assert Settings().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_ttl_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(default_ttl_seconds=0)

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()
