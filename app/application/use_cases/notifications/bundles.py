"""Bundle stacked notifications across every notifiable type."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.domain.entities import NotificationBundle, TypeSummary
from app.infrastructure.notifiables import NotifiableRegistry
from app.infrastructure.repositories import NotificationRepository

from .stacks import get_notification_stack, stack_to_summary

logger = logging.getLogger(__name__)

GROUPS_PER_TYPE = 5


def get_notifications_by_type(
    session: Session,
    *,
    user_id: int,
    registry: NotifiableRegistry,
    type_filter: str | None = None,
    cursor: int | None = None,
) -> NotificationBundle:
    """Return a page of stacks for each registered type, in registry order.

    Each type contributes at most ``GROUPS_PER_TYPE`` groups ordered by
    their newest notification. Every stack is fetched with the same outer
    ``cursor`` so nothing newer than the page boundary leaks in.
    """

    if type_filter is not None and type_filter not in registry:
        logger.debug("Ignoring notifications for unknown type '%s'", type_filter)

    repository = NotificationRepository(session)
    bundle = NotificationBundle()

    for notifiable_type in registry:
        key = notifiable_type.key
        if type_filter is not None and type_filter != key:
            continue

        groups = repository.list_top_level_groups(
            user_id, notifiable_type=key, before_id=cursor, limit=GROUPS_PER_TYPE
        )

        # Groups arrive by descending newest id, so the cursor left after the
        # loop is the oldest id of the last group's page. Any other visiting
        # order yields a wrong resumption point.
        type_cursor: int | None = None
        for group in groups:
            stack = get_notification_stack(
                session,
                user_id=user_id,
                object_type=key,
                object_id=group.notifiable_id,
                name=group.name,
                cursor=cursor,
            )
            summary = stack_to_summary(stack)
            if summary is None:
                continue
            type_cursor = summary.cursor.id
            bundle.stacks.append(summary)
            bundle.notifications.extend(stack.notifications)

        bundle.types.append(
            TypeSummary(
                name=key,
                total=repository.count_for_type(user_id, notifiable_type=key),
                cursor_id=type_cursor,
            )
        )

    return bundle


__all__ = ["GROUPS_PER_TYPE", "get_notifications_by_type"]
