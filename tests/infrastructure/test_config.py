"""Tests for configuration validation."""

import pytest
from pydantic import ValidationError

from app.config import Settings


def test_notifiable_types_can_be_overridden():
    settings = Settings(notifiable_types=["forum_topic", "user"])

    assert settings.notifiable_types == ["forum_topic", "user"]


@pytest.mark.parametrize("types", [[], ["user", "user"]])
def test_invalid_notifiable_types_are_rejected(types):
    with pytest.raises(ValidationError):
        Settings(notifiable_types=types)


def test_notifiable_types_are_read_from_environment(monkeypatch):
    monkeypatch.setenv("NOTIFIABLE_TYPES", '["news_post", "comment"]')

    assert Settings().notifiable_types == ["news_post", "comment"]
