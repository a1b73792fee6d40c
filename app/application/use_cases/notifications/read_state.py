"""Bulk read-state transitions."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.infrastructure.notifications import dispatch_notification_read
from app.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)

ReadEventPublisher = Callable[[int, Sequence[int]], None]


def mark_notifications_read(
    session: Session,
    *,
    user_id: int,
    ids: Sequence[int],
    publish: ReadEventPublisher = dispatch_notification_read,
) -> bool:
    """Mark the user's notifications ``ids`` as read.

    Ids the user has no notification for are skipped silently. Success means
    the update ran, even when it matched no rows. On success ``publish``
    receives the ids exactly as requested so the user's other sessions can
    catch up.
    """

    ids = list(ids)
    try:
        matched = NotificationRepository(session).mark_as_read(ids, user_id=user_id)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to mark notifications %s read for user %s", ids, user_id)
        return False

    logger.debug("Marked %s of %s notifications read for user %s", matched, len(ids), user_id)
    publish(user_id, ids)
    return True


__all__ = ["ReadEventPublisher", "mark_notifications_read"]
