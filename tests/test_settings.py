"""Tests for GlideSettings, LoggingSettings and the root Settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from glide_mcp.config.settings import GlideSettings, LoggingSettings, Settings, get_settings

_GLIDE_ENV = (
    "GLIDE_API_KEY",
    "GLIDE_API_VERSION",
    "GLIDE_HTTP_TIMEOUT_S",
    "GLIDE_INCLUDE_ZERO_OFFSET",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (*_GLIDE_ENV, "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestGlideSettings:
    def test_defaults(self, clean_env) -> None:
        s = GlideSettings()
        assert s.api_key == ""
        assert s.api_version == ""
        assert s.http_timeout_s == 5.0
        assert s.include_zero_offset is False

    def test_loaded_from_env(self, clean_env) -> None:
        clean_env.setenv("GLIDE_API_KEY", "env-key")
        clean_env.setenv("GLIDE_API_VERSION", "v2")
        clean_env.setenv("GLIDE_INCLUDE_ZERO_OFFSET", "true")

        s = GlideSettings()
        assert s.api_key == "env-key"
        assert s.api_version == "v2"
        assert s.include_zero_offset is True

    def test_version_kept_verbatim(self, clean_env) -> None:
        clean_env.setenv("GLIDE_API_VERSION", "V1")
        assert GlideSettings().api_version == "V1"

    def test_unknown_version_is_not_a_startup_error(self, clean_env) -> None:
        clean_env.setenv("GLIDE_API_VERSION", "v9")
        assert GlideSettings().api_version == "v9"

    def test_timeout_must_be_positive(self, clean_env) -> None:
        clean_env.setenv("GLIDE_HTTP_TIMEOUT_S", "0")
        with pytest.raises(ValidationError):
            GlideSettings()


class TestLoggingSettings:
    def test_defaults(self, clean_env) -> None:
        s = LoggingSettings()
        assert s.level == "INFO"
        assert s.json_output is False

    def test_level_normalized(self, clean_env) -> None:
        clean_env.setenv("LOG_LEVEL", "debug")
        assert LoggingSettings().level == "DEBUG"

    def test_invalid_level_rejected(self, clean_env) -> None:
        clean_env.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError, match="LOG_LEVEL must be one of"):
            LoggingSettings()

    def test_json_flag(self, clean_env) -> None:
        clean_env.setenv("LOG_JSON", "1")
        assert LoggingSettings().json_output is True


class TestRootSettings:
    def test_composes_sub_settings(self, clean_env) -> None:
        clean_env.setenv("GLIDE_API_KEY", "k")
        s = get_settings()
        assert isinstance(s, Settings)
        assert s.glide.api_key == "k"
        assert s.logging.level == "INFO"
