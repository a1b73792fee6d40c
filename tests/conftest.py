"""Shared fixtures: a throwaway SQLite database and notification factories."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "notification_stack_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["NOTIFICATION_ENDPOINT"] = "/notifications/ws"
os.environ.pop("NOTIFIABLE_TYPES", None)

from app.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from app.domain.entities import Notification, User  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from app.infrastructure.notifiables import NotifiableRegistry  # noqa: E402
from app.infrastructure.repositories import (  # noqa: E402
    NotificationRepository,
    UserRepository,
)

from tests.factories import BEATMAPSET, FORUM_TOPIC, TOPIC_REPLY  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure every test starts from empty tables."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def session():
    with SessionLocal() as db:
        yield db


@pytest.fixture()
def make_user(session):
    def _make_user(name: str = "reader", *, is_active: bool = True) -> User:
        return UserRepository(session).create(
            User(id=None, name=name, email=f"{name}@example.com", is_active=is_active)
        )

    return _make_user


@pytest.fixture()
def user(make_user) -> User:
    return make_user("reader")


@pytest.fixture()
def other_user(make_user) -> User:
    return make_user("someone_else")


@pytest.fixture()
def notify(session):
    """Persist a notification delivered to ``recipients``."""

    def _notify(
        recipients,
        *,
        notifiable_type: str = FORUM_TOPIC,
        notifiable_id: int = 1,
        name: str = TOPIC_REPLY,
        id: int | None = None,
        details: dict | None = None,
    ) -> Notification:
        return NotificationRepository(session).create(
            Notification(
                id=id,
                name=name,
                notifiable_type=notifiable_type,
                notifiable_id=notifiable_id,
                details=details or {"title": f"{notifiable_type} {notifiable_id}"},
            ),
            recipient_ids=[recipient.id for recipient in recipients],
        )

    return _notify


@pytest.fixture()
def registry() -> NotifiableRegistry:
    return NotifiableRegistry.from_keys([BEATMAPSET, FORUM_TOPIC, "user"])
