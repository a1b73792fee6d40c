"""Aggregate application use cases."""

from .notifications import (
    get_unread_notifications,
    list_notifications,
    mark_notifications_read,
)

__all__ = [
    "get_unread_notifications",
    "list_notifications",
    "mark_notifications_read",
]
