"""Tests for bundling stacks across notifiable types."""

from app.application.use_cases.notifications import (
    GROUPS_PER_TYPE,
    bundles,
    get_notifications_by_type,
)
from app.domain.entities import NotificationStack

from tests.factories import BEATMAPSET, FORUM_TOPIC, TOPIC_REPLY


def _bundle(session, user, registry, **kwargs):
    return get_notifications_by_type(session, user_id=user.id, registry=registry, **kwargs)


def _type(bundle, name):
    return next(summary for summary in bundle.types if summary.name == name)


def test_types_follow_registry_order(session, user, registry, notify):
    notify([user], notifiable_type="user", notifiable_id=3, name="user_achievement")

    bundle = _bundle(session, user, registry)

    assert [summary.name for summary in bundle.types] == [BEATMAPSET, FORUM_TOPIC, "user"]
    assert _type(bundle, BEATMAPSET).cursor_id is None
    assert _type(bundle, BEATMAPSET).total == 0
    assert _type(bundle, "user").total == 1


def test_groups_are_visited_by_newest_member(session, user, registry, notify):
    # Object 1 is notified first and last; ordering by first or oldest member
    # would visit it before or after the others and change the type cursor.
    notify([user], notifiable_id=1, id=1)
    notify([user], notifiable_id=2, id=2)
    notify([user], notifiable_id=2, id=3)
    notify([user], notifiable_id=3, id=4)
    notify([user], notifiable_id=3, id=5)
    notify([user], notifiable_id=1, id=6)

    bundle = _bundle(session, user, registry, type_filter=FORUM_TOPIC)

    assert [stack.object_id for stack in bundle.stacks] == [1, 3, 2]
    assert [n.id for n in bundle.notifications] == [6, 1, 5, 4, 3, 2]
    assert _type(bundle, FORUM_TOPIC).cursor_id == 2


def test_groups_split_by_event_name(session, user, registry, notify):
    notify([user], notifiable_id=1, name=TOPIC_REPLY)
    notify([user], notifiable_id=1, name="forum_topic_lock")

    bundle = _bundle(session, user, registry, type_filter=FORUM_TOPIC)

    assert sorted(stack.name for stack in bundle.stacks) == ["forum_topic_lock", TOPIC_REPLY]
    assert all(stack.total == 1 for stack in bundle.stacks)


def test_type_pages_are_bounded_and_resumable(session, user, registry, notify):
    for object_id in range(1, 8):
        notify([user], notifiable_id=object_id, id=object_id)

    first = _bundle(session, user, registry, type_filter=FORUM_TOPIC)
    assert len(first.stacks) == GROUPS_PER_TYPE
    assert [stack.object_id for stack in first.stacks] == [7, 6, 5, 4, 3]
    first_cursor = _type(first, FORUM_TOPIC).cursor_id
    assert first_cursor == 3

    second = _bundle(session, user, registry, type_filter=FORUM_TOPIC, cursor=first_cursor)
    assert [stack.object_id for stack in second.stacks] == [2, 1]
    assert _type(second, FORUM_TOPIC).cursor_id == 1

    third = _bundle(
        session, user, registry, type_filter=FORUM_TOPIC, cursor=_type(second, FORUM_TOPIC).cursor_id
    )
    assert third.stacks == []
    assert third.notifications == []
    assert _type(third, FORUM_TOPIC).cursor_id is None

    assert {_type(page, FORUM_TOPIC).total for page in (first, second, third)} == {7}


def test_outer_cursor_bounds_every_stack(session, user, registry, notify):
    for notification_id in range(1, 5):
        notify([user], notifiable_id=1, id=notification_id)
    notify([user], notifiable_id=2, id=5)
    notify([user], notifiable_id=1, id=6)

    bundle = _bundle(session, user, registry, type_filter=FORUM_TOPIC, cursor=5)

    assert [n.id for n in bundle.notifications] == [4, 3, 2, 1]
    assert bundle.stacks[0].total == 5


def test_type_filter_skips_other_types(session, user, registry, notify):
    notify([user], notifiable_type=BEATMAPSET, notifiable_id=9, name="beatmapset_discussion_post_new")
    notify([user], notifiable_type=FORUM_TOPIC, notifiable_id=1)

    bundle = _bundle(session, user, registry, type_filter=BEATMAPSET)

    assert [summary.name for summary in bundle.types] == [BEATMAPSET]
    assert [n.notifiable_type for n in bundle.notifications] == [BEATMAPSET]


def test_unknown_type_filter_yields_empty_bundle(session, user, registry, notify):
    notify([user])

    bundle = _bundle(session, user, registry, type_filter="does_not_exist")

    assert bundle.types == []
    assert bundle.stacks == []
    assert bundle.notifications == []


def test_bundle_ignores_other_users(session, user, other_user, registry, notify):
    notify([other_user])

    bundle = _bundle(session, user, registry)

    assert bundle.notifications == []
    assert _type(bundle, FORUM_TOPIC).total == 0


def test_empty_stack_page_keeps_previous_type_cursor(
    session, user, registry, notify, monkeypatch
):
    notify([user], notifiable_id=1, id=1)
    notify([user], notifiable_id=2, id=2)
    notify([user], notifiable_id=3, id=3)
    real_get_stack = bundles.get_notification_stack

    # The oldest group loses its rows between the group query and the page
    # query, so its page comes back empty.
    def _get_stack(session, **kwargs):
        stack = real_get_stack(session, **kwargs)
        if kwargs["object_id"] == 1:
            return NotificationStack(
                object_type=stack.object_type,
                object_id=stack.object_id,
                name=stack.name,
                notifications=[],
                total=0,
            )
        return stack

    monkeypatch.setattr(bundles, "get_notification_stack", _get_stack)

    bundle = _bundle(session, user, registry, type_filter=FORUM_TOPIC)

    assert [stack.object_id for stack in bundle.stacks] == [3, 2]
    assert [n.id for n in bundle.notifications] == [3, 2]
    assert _type(bundle, FORUM_TOPIC).cursor_id == 2
