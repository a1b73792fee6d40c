from .notification import (
    NotificationBundleResponse,
    NotificationEndpointRead,
    NotificationMarkReadRequest,
    NotificationRead,
    NotificationStackRead,
    NotificationStackResponse,
    NotificationTypeRead,
    StackCursorRead,
    TypeCursorRead,
    UnreadNotificationsResponse,
)

__all__ = [
    "NotificationBundleResponse",
    "NotificationEndpointRead",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "NotificationStackRead",
    "NotificationStackResponse",
    "NotificationTypeRead",
    "StackCursorRead",
    "TypeCursorRead",
    "UnreadNotificationsResponse",
]
