"""Flat feed of a user's most recent notifications."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import UnreadNotifications
from app.infrastructure.repositories import NotificationRepository

# One more than the page size; the extra row only signals that more exist.
UNREAD_FETCH_LIMIT = 51


def get_unread_notifications(
    session: Session,
    *,
    user_id: int,
    include_read: bool = False,
    max_id: int | None = None,
) -> UnreadNotifications:
    """Return up to ``UNREAD_FETCH_LIMIT - 1`` notifications, newest first.

    ``unread_count`` is the user's total unread count and is not affected by
    ``max_id`` or by truncation of the page.
    """

    repository = NotificationRepository(session)
    notifications = list(
        repository.list_for_user(
            user_id,
            include_read=include_read,
            max_id=max_id,
            limit=UNREAD_FETCH_LIMIT,
        )
    )

    has_more = len(notifications) == UNREAD_FETCH_LIMIT
    if has_more:
        notifications.pop()

    return UnreadNotifications(
        notifications=notifications,
        has_more=has_more,
        unread_count=repository.count_unread(user_id),
    )


__all__ = ["UNREAD_FETCH_LIMIT", "get_unread_notifications"]
