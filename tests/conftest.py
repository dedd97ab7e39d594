"""Pytest configuration and fixtures."""

import pytest
import structlog

from presigner.common.settings import Settings, get_settings

SAMPLE_SECRET = "688fbfb6de25825153199abb7b9dbe41f1d7a6d949562351975ef590cd130024"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from PRESIGNER_* variables, local .env files and log config."""
    for name in (
        "PRESIGNER_SECRET_KEY",
        "PRESIGNER_DEFAULT_TTL_SECONDS",
        "PRESIGNER_SIGNATURE_HEADER",
        "PRESIGNER_EXPIRES_HEADER",
        "PRESIGNER_SIGNATURE_PARAM",
        "PRESIGNER_EXPIRES_PARAM",
        "PRESIGNER_LOG_LEVEL",
        "PRESIGNER_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def secret_key() -> bytes:
    """Secret from the sample upload request."""
    return SAMPLE_SECRET.encode("utf-8")


@pytest.fixture
def settings() -> Settings:
    """Create test settings."""
    return Settings(
        secret_key=SAMPLE_SECRET,
        default_ttl_seconds=600,
    )
