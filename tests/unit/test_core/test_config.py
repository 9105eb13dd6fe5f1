"""Unit tests for core configuration module."""

import pytest
from pydantic import ValidationError

from election_lifecycle.core.config import Settings, get_settings


class TestSettings:
    """Tests for Settings configuration."""

    def test_settings_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Default values are applied correctly."""
        for var in ("LOG_LEVEL", "LOG_DIR", "LOG_JSON", "ENVIRONMENT", "API_V1_PREFIX", "CORS_ORIGINS", "SNAPSHOT_PATH"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.log_level == "INFO"
        assert settings.log_dir is None
        assert settings.log_json is False
        assert settings.environment == "production"
        assert settings.api_v1_prefix == "/api/v1"
        assert settings.cors_origins == ""
        assert settings.snapshot_path is None

    def test_settings_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings load from environment variables."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("SNAPSHOT_PATH", "/data/elections.json")
        monkeypatch.setenv("ENVIRONMENT", "staging")
        settings = get_settings()
        assert settings.log_level == "DEBUG"
        assert settings.snapshot_path == "/data/elections.json"
        assert settings.environment == "staging"

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Unknown log levels are rejected."""
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError, match="Invalid log_level"):
            Settings(_env_file=None)  # type: ignore[call-arg]

    def test_cors_origin_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """CORS origins string is parsed into a list."""
        monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, http://example.com")
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.cors_origin_list == ["http://localhost:3000", "http://example.com"]

    def test_cors_origin_list_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Blank CORS origins yield an empty list."""
        monkeypatch.setenv("CORS_ORIGINS", "  ")
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.cors_origin_list == []
