"""Tests for settings.py and logging.py."""

import logging

import pytest
from juiceconfig.logging import LOGGER_NAME, bind_context
from juiceconfig.settings import Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run without JUICE_ variables or a .env file."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "JUICE_CONFIG",
        "JUICE_SECRETS_VERSION_STAGE",
        "JUICE_AWS_ENDPOINT_URL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, clean_env):
        """Has sensible defaults."""
        settings = Settings()
        assert settings.config is None
        assert settings.secrets_version_stage == "AWSCURRENT"
        assert settings.aws_endpoint_url is None

    def test_env_prefix(self, clean_env, monkeypatch):
        """Reads JUICE_-prefixed environment variables."""
        monkeypatch.setenv("JUICE_CONFIG", "environment:::APP_CONFIG")
        monkeypatch.setenv("JUICE_SECRETS_VERSION_STAGE", "AWSPREVIOUS")
        monkeypatch.setenv("JUICE_AWS_ENDPOINT_URL", "http://localhost:4566")

        settings = Settings()

        assert settings.config == "environment:::APP_CONFIG"
        assert settings.secrets_version_stage == "AWSPREVIOUS"
        assert settings.aws_endpoint_url == "http://localhost:4566"

    def test_env_file(self, clean_env, tmp_path):
        """Reads a .env file in the working directory."""
        (tmp_path / ".env").write_text("JUICE_CONFIG=file:::/etc/app.json\n")
        assert Settings().config == "file:::/etc/app.json"

    def test_get_settings_cached(self):
        """get_settings returns a cached instance."""
        assert get_settings() is get_settings()


class TestLogging:
    """Tests for logging helpers."""

    def test_library_logger_is_quiet(self):
        """The juiceconfig logger carries a NullHandler for unconfigured hosts."""
        handlers = logging.getLogger(LOGGER_NAME).handlers
        assert any(isinstance(handler, logging.NullHandler) for handler in handlers)

    def test_bind_context(self):
        """Binds fields onto a logger."""
        logger = bind_context(scheme="file")
        assert logger._context["scheme"] == "file"
