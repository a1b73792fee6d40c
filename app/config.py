"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_NOTIFIABLE_TYPES = [
    "beatmapset",
    "build",
    "channel",
    "comment",
    "forum_topic",
    "news_post",
    "user",
]


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    notification_endpoint: str = Field(
        default="/notifications/ws",
        description=(
            "Websocket endpoint announced to clients. Paths starting with '/' are "
            "resolved against the host of the current request"
        ),
        min_length=1,
    )
    notifiable_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_NOTIFIABLE_TYPES),
        description="Ordered list of object types notifications can refer to",
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used when rendering notification timestamps",
    )

    @model_validator(mode="after")
    def _validate_notifiable_types(self) -> "Settings":
        if not self.notifiable_types:
            raise ValueError("NOTIFIABLE_TYPES must contain at least one type")
        if len(set(self.notifiable_types)) != len(self.notifiable_types):
            raise ValueError("NOTIFIABLE_TYPES must not contain duplicates")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["DEFAULT_NOTIFIABLE_TYPES", "Settings", "get_settings", "reset_settings_cache"]
