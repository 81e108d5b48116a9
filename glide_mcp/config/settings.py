from __future__ import annotations

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env once at module import so every BaseSettings subclass sees the env vars
load_dotenv()


class GlideSettings(BaseSettings):
    """Glide API bootstrap settings. Env vars prefixed with GLIDE_.

    api_key and api_version are both optional: when either is missing (or the
    version is unknown) the server starts unconfigured and waits for
    set_api_version.
    """

    model_config = SettingsConfigDict(env_prefix="GLIDE_")

    api_key: str = ""
    api_version: str = ""
    http_timeout_s: float = Field(5.0, gt=0)
    # Send offset=0 on get_table_rows instead of dropping falsy offsets.
    include_zero_offset: bool = False


class LoggingSettings(BaseSettings):
    """Logging settings. Env vars prefixed with LOG_."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
    json_output: bool = Field(False, validation_alias="LOG_JSON")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR"}
        normalized = v.strip().upper()
        if normalized not in allowed:
            msg = f"LOG_LEVEL must be one of {sorted(allowed)} (got '{v}')"
            raise ValueError(msg)
        return normalized


class Settings(BaseSettings):
    """Root settings composing all sub-configurations."""

    model_config = SettingsConfigDict(extra="ignore")

    glide: GlideSettings = Field(default_factory=GlideSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def get_settings() -> Settings:
    """Load and validate settings. Raises ValidationError on invalid values."""
    return Settings()
