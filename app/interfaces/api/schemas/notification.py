"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, Field

from app.utils import MAX_ID, MIN_ID

NotificationId = Annotated[int, Field(ge=MIN_ID, le=MAX_ID)]


class NotificationMarkReadRequest(BaseModel):
    """Payload used to mark a batch of notifications as read."""

    ids: list[NotificationId] = Field(
        default_factory=list, description="Notification ids to mark as read"
    )


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    name: str
    created_at: datetime | None = None
    object_type: str
    object_id: int
    source_user_id: int | None = None
    is_read: bool
    details: dict[str, Any] = Field(default_factory=dict)


class StackCursorRead(BaseModel):
    id: int
    object_type: str
    object_id: int
    name: str


class NotificationStackRead(BaseModel):
    """Summary of a stack of notifications about the same object and event."""

    cursor: StackCursorRead
    name: str
    object_type: str
    object_id: int
    total: int


class TypeCursorRead(BaseModel):
    id: int


class NotificationTypeRead(BaseModel):
    cursor: TypeCursorRead | None = None
    name: str
    total: int


class NotificationBundleResponse(BaseModel):
    notifications: list[NotificationRead]
    stacks: list[NotificationStackRead]
    types: list[NotificationTypeRead]


class NotificationStackResponse(BaseModel):
    notifications: list[NotificationRead]
    stacks: list[NotificationStackRead]


class UnreadNotificationsResponse(BaseModel):
    """Flat feed of recent notifications plus the unread badge count."""

    has_more: bool
    notifications: list[NotificationRead]
    unread_count: int
    notification_endpoint: str


class NotificationEndpointRead(BaseModel):
    url: str


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
