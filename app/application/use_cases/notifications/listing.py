"""Dispatch between drilling into one stack and browsing the bundle."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import NotificationCursor, NotificationListing
from app.infrastructure.notifiables import NotifiableRegistry

from .bundles import get_notifications_by_type
from .stacks import get_notification_stack, stack_to_summary


def list_notifications(
    session: Session,
    *,
    user_id: int,
    registry: NotifiableRegistry,
    group: str | None = None,
    cursor: NotificationCursor | None = None,
) -> NotificationListing:
    """Return the user's stacked notifications.

    A cursor naming a complete stack returns the next page of that stack
    only; anything else returns the bundle page bounded by ``cursor.id``.
    """

    cursor = cursor or NotificationCursor()

    if cursor.targets_stack:
        stack = get_notification_stack(
            session,
            user_id=user_id,
            object_type=cursor.object_type,
            object_id=cursor.object_id,
            name=cursor.name,
            cursor=cursor.id,
        )
        summary = stack_to_summary(stack)
        return NotificationListing(
            notifications=stack.notifications,
            stacks=[summary] if summary is not None else [],
        )

    bundle = get_notifications_by_type(
        session,
        user_id=user_id,
        registry=registry,
        type_filter=group,
        cursor=cursor.id,
    )
    return NotificationListing(
        notifications=bundle.notifications,
        stacks=bundle.stacks,
        types=bundle.types,
    )


__all__ = ["list_notifications"]
