"""SQLAlchemy models for notifications and their per-user read state."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    JSON,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_in_utc_naive_datetime


class NotificationModel(Base):
    """Append-only event record; ``id`` doubles as the pagination key."""

    __tablename__ = "notification"
    __table_args__ = (
        Index(
            "ix_notification_notifiable_name",
            "notifiable_type",
            "notifiable_id",
            "name",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(80), nullable=False)
    notifiable_type = Column(String(50), nullable=False)
    notifiable_id = Column(Integer, nullable=False)
    source_user_id = Column(Integer, ForeignKey("user.id"), nullable=True)
    details = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(), nullable=False, default=now_in_utc_naive_datetime)

    user_notifications = relationship(
        "UserNotificationModel",
        back_populates="notification",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class UserNotificationModel(Base):
    """Fan-out of a notification to one recipient, holding the read flag."""

    __tablename__ = "user_notification"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "notification_id", name="uq_user_notification_user_notification"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    notification_id = Column(
        Integer,
        ForeignKey("notification.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    is_read = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )

    notification = relationship("NotificationModel", back_populates="user_notifications")


__all__ = ["NotificationModel", "UserNotificationModel"]
