"""Domain entities exposed by the application."""

from .notifiable import DetailsRenderer, NotifiableType
from .notification import Notification
from .notification_stack import (
    NotificationBundle,
    NotificationCursor,
    NotificationGroup,
    NotificationListing,
    NotificationStack,
    StackCursor,
    StackSummary,
    TypeSummary,
    UnreadNotifications,
)
from .user import User

__all__ = [
    "DetailsRenderer",
    "NotifiableType",
    "Notification",
    "NotificationBundle",
    "NotificationCursor",
    "NotificationGroup",
    "NotificationListing",
    "NotificationStack",
    "StackCursor",
    "StackSummary",
    "TypeSummary",
    "UnreadNotifications",
    "User",
]
