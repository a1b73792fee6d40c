"""Realtime notification helpers for the infrastructure layer."""

from .manager import NotificationConnectionManager, notification_manager
from .publisher import (
    NOTIFICATION_READ_EVENT,
    RealtimeEventPublisher,
    dispatch_notification_read,
    realtime_event_publisher,
)

__all__ = [
    "NotificationConnectionManager",
    "notification_manager",
    "NOTIFICATION_READ_EVENT",
    "RealtimeEventPublisher",
    "realtime_event_publisher",
    "dispatch_notification_read",
]
