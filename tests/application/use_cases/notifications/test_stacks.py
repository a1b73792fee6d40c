"""Tests for collapsing notifications into stacks."""

from app.application.use_cases.notifications import (
    STACK_PAGE_SIZE,
    get_notification_stack,
    stack_to_summary,
)
from app.domain.entities import NotificationStack, StackCursor
from app.infrastructure.repositories import NotificationRepository

from tests.factories import FORUM_TOPIC, TOPIC_REPLY


def _stack(session, user, *, object_id=1, name=TOPIC_REPLY, cursor=None):
    return get_notification_stack(
        session,
        user_id=user.id,
        object_type=FORUM_TOPIC,
        object_id=object_id,
        name=name,
        cursor=cursor,
    )


def test_stack_collapses_matching_notifications(session, user, notify):
    for notification_id in (10, 11, 12):
        notify([user], notifiable_id=7, id=notification_id)

    stack = _stack(session, user, object_id=7)

    assert [n.id for n in stack.notifications] == [12, 11, 10]
    assert stack.total == 3

    summary = stack_to_summary(stack)
    assert summary.cursor == StackCursor(
        id=10, object_type=FORUM_TOPIC, object_id=7, name=TOPIC_REPLY
    )
    assert (summary.name, summary.object_type, summary.object_id, summary.total) == (
        TOPIC_REPLY,
        FORUM_TOPIC,
        7,
        3,
    )


def test_stack_only_contains_the_exact_triple(session, user, other_user, notify):
    kept = notify([user], notifiable_id=1)
    notify([user], notifiable_id=2)
    notify([user], notifiable_id=1, name="forum_topic_lock")
    notify([user], notifiable_id=1, notifiable_type="beatmapset")
    notify([other_user], notifiable_id=1)

    stack = _stack(session, user)

    assert [n.id for n in stack.notifications] == [kept.id]
    assert stack.total == 1


def test_stack_page_is_bounded(session, user, notify):
    for _ in range(STACK_PAGE_SIZE + 3):
        notify([user])

    stack = _stack(session, user)

    assert len(stack.notifications) == STACK_PAGE_SIZE
    assert stack.total == STACK_PAGE_SIZE + 3


def test_paging_with_cursor_enumerates_stack_once(session, user, notify):
    created = [notify([user]).id for _ in range(12)]

    seen: list[int] = []
    cursor = None
    while True:
        stack = _stack(session, user, cursor=cursor)
        assert stack.total == 12
        if not stack.notifications:
            break
        ids = [n.id for n in stack.notifications]
        if cursor is not None:
            assert all(notification_id < cursor for notification_id in ids)
        assert ids == sorted(ids, reverse=True)
        seen.extend(ids)
        cursor = stack_to_summary(stack).cursor.id

    assert seen == sorted(created, reverse=True)


def test_stack_carries_read_state_of_the_caller(session, user, other_user, notify):
    shared = notify([user, other_user])
    NotificationRepository(session).mark_as_read([shared.id], user_id=other_user.id)

    assert _stack(session, user).notifications[0].is_read is False
    assert _stack(session, other_user).notifications[0].is_read is True


def test_empty_stack_has_no_summary():
    stack = NotificationStack(
        object_type=FORUM_TOPIC, object_id=1, name=TOPIC_REPLY, notifications=[], total=4
    )

    assert stack_to_summary(stack) is None
