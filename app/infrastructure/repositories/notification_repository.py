"""Persistence helpers for notification entities.

Every query is scoped to a recipient: a user only sees notifications for
which a ``user_notification`` row exists.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime, timezone

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from app.domain.entities import Notification, NotificationGroup
from app.infrastructure.models import NotificationModel, UserNotificationModel
from app.utils import ensure_app_timezone, now_in_utc_naive_datetime


class NotificationRepository:
    """Query surface over notifications and per-user read state."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: int,
        *,
        include_read: bool = False,
        max_id: int | None = None,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        """Return the user's notifications, newest first."""

        query = self._visible(user_id)
        if not include_read:
            query = query.filter(UserNotificationModel.is_read.is_(False))
        if max_id is not None:
            query = query.filter(UserNotificationModel.notification_id <= max_id)
        query = query.order_by(UserNotificationModel.notification_id.desc())
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model, is_read) for model, is_read in query.all()]

    def count_unread(self, user_id: int) -> int:
        return (
            self.session.query(func.count(UserNotificationModel.id))
            .filter(UserNotificationModel.user_id == user_id)
            .filter(UserNotificationModel.is_read.is_(False))
            .scalar()
        ) or 0

    def list_stack(
        self,
        user_id: int,
        *,
        notifiable_type: str,
        notifiable_id: int,
        name: str,
        before_id: int | None = None,
        limit: int = 5,
    ) -> Sequence[Notification]:
        """Return up to ``limit`` stack members with ``id < before_id``, newest first."""

        query = self._filter_stack(
            self._visible(user_id), notifiable_type, notifiable_id, name
        )
        if before_id is not None:
            query = query.filter(NotificationModel.id < before_id)
        query = query.order_by(NotificationModel.id.desc()).limit(limit)
        return [self._to_entity(model, is_read) for model, is_read in query.all()]

    def count_stack(
        self,
        user_id: int,
        *,
        notifiable_type: str,
        notifiable_id: int,
        name: str,
    ) -> int:
        query = self._filter_stack(
            self._visible_count(user_id), notifiable_type, notifiable_id, name
        )
        return query.scalar() or 0

    def list_top_level_groups(
        self,
        user_id: int,
        *,
        notifiable_type: str,
        before_id: int | None = None,
        limit: int = 5,
    ) -> Sequence[NotificationGroup]:
        """Return ``(name, notifiable_id)`` groups ordered by their newest id.

        The ``before_id`` bound applies to rows before grouping, so a group's
        ``max_id`` is the newest member older than the boundary.
        """

        max_id = func.max(NotificationModel.id).label("max_id")
        query = (
            self.session.query(
                max_id, NotificationModel.name, NotificationModel.notifiable_id
            )
            .select_from(NotificationModel)
            .join(
                UserNotificationModel,
                UserNotificationModel.notification_id == NotificationModel.id,
            )
            .filter(UserNotificationModel.user_id == user_id)
            .filter(NotificationModel.notifiable_type == notifiable_type)
        )
        if before_id is not None:
            query = query.filter(NotificationModel.id < before_id)
        query = (
            query.group_by(NotificationModel.name, NotificationModel.notifiable_id)
            .order_by(max_id.desc())
            .limit(limit)
        )
        return [
            NotificationGroup(
                max_id=row.max_id, name=row.name, notifiable_id=row.notifiable_id
            )
            for row in query.all()
        ]

    def count_for_type(self, user_id: int, *, notifiable_type: str) -> int:
        return (
            self._visible_count(user_id)
            .filter(NotificationModel.notifiable_type == notifiable_type)
            .scalar()
        ) or 0

    def mark_as_read(self, notification_ids: Iterable[int], *, user_id: int) -> int:
        """Flag the user's rows for ``notification_ids`` as read.

        Ids without a row for ``user_id`` are ignored. Returns the number of
        rows matched.
        """

        ids = [notification_id for notification_id in notification_ids if notification_id is not None]
        matched = (
            self.session.query(UserNotificationModel)
            .filter(
                UserNotificationModel.user_id == user_id,
                UserNotificationModel.notification_id.in_(ids),
            )
            .update({UserNotificationModel.is_read: True}, synchronize_session=False)
        )
        self.session.commit()
        return matched

    def create(
        self, notification: Notification, *, recipient_ids: Iterable[int]
    ) -> Notification:
        """Persist ``notification`` and fan it out to ``recipient_ids``."""

        model = NotificationModel(
            id=notification.id,
            name=notification.name,
            notifiable_type=notification.notifiable_type,
            notifiable_id=notification.notifiable_id,
            source_user_id=notification.source_user_id,
            details=dict(notification.details or {}),
            created_at=_to_utc_naive(notification.created_at),
        )
        for user_id in dict.fromkeys(recipient_ids):
            model.user_notifications.append(UserNotificationModel(user_id=user_id))
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model, False)

    def _visible(self, user_id: int) -> Query:
        return (
            self.session.query(NotificationModel, UserNotificationModel.is_read)
            .join(
                UserNotificationModel,
                UserNotificationModel.notification_id == NotificationModel.id,
            )
            .filter(UserNotificationModel.user_id == user_id)
        )

    def _visible_count(self, user_id: int) -> Query:
        return (
            self.session.query(func.count(NotificationModel.id))
            .select_from(NotificationModel)
            .join(
                UserNotificationModel,
                UserNotificationModel.notification_id == NotificationModel.id,
            )
            .filter(UserNotificationModel.user_id == user_id)
        )

    @staticmethod
    def _filter_stack(
        query: Query, notifiable_type: str, notifiable_id: int, name: str
    ) -> Query:
        return query.filter(
            NotificationModel.notifiable_type == notifiable_type,
            NotificationModel.notifiable_id == notifiable_id,
            NotificationModel.name == name,
        )

    @staticmethod
    def _to_entity(model: NotificationModel, is_read: bool) -> Notification:
        return Notification(
            id=model.id,
            name=model.name,
            notifiable_type=model.notifiable_type,
            notifiable_id=model.notifiable_id,
            source_user_id=model.source_user_id,
            created_at=ensure_app_timezone(model.created_at),
            details=dict(model.details or {}),
            is_read=bool(is_read),
        )


def _to_utc_naive(value: datetime | None) -> datetime:
    if value is None:
        return now_in_utc_naive_datetime()
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


__all__ = ["NotificationRepository"]
