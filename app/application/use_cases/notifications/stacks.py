"""Collapse notifications about the same object and event into stacks."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import NotificationStack, StackSummary
from app.infrastructure.repositories import NotificationRepository

from .cursors import encode_stack_cursor

STACK_PAGE_SIZE = 5


def get_notification_stack(
    session: Session,
    *,
    user_id: int,
    object_type: str,
    object_id: int,
    name: str,
    cursor: int | None = None,
) -> NotificationStack:
    """Return one page of the stack ``(object_type, object_id, name)``.

    The page holds notifications strictly older than ``cursor``; ``total``
    ignores the cursor. Both are separate reads, so a notification created
    in between may be counted without appearing in the page.
    """

    repository = NotificationRepository(session)
    total = repository.count_stack(
        user_id, notifiable_type=object_type, notifiable_id=object_id, name=name
    )
    page = repository.list_stack(
        user_id,
        notifiable_type=object_type,
        notifiable_id=object_id,
        name=name,
        before_id=cursor,
        limit=STACK_PAGE_SIZE,
    )
    return NotificationStack(
        object_type=object_type,
        object_id=object_id,
        name=name,
        notifications=list(page),
        total=total,
    )


def stack_to_summary(stack: NotificationStack) -> StackSummary | None:
    """Summarise ``stack``; empty pages produce no summary."""

    last = stack.oldest
    if last is None:
        return None

    return StackSummary(
        cursor=encode_stack_cursor(last),
        name=last.name,
        object_type=last.notifiable_type,
        object_id=last.notifiable_id,
        total=stack.total,
    )


__all__ = ["STACK_PAGE_SIZE", "get_notification_stack", "stack_to_summary"]
