"""Derived views over a user's notifications: stacks, bundles and feeds."""

from __future__ import annotations

from dataclasses import dataclass, field

from .notification import Notification


@dataclass(frozen=True)
class NotificationCursor:
    """Pagination boundary received from a client.

    ``id`` is an exclusive upper bound on notification ids. When the
    identifying triple is complete the cursor points inside a single stack.
    """

    id: int | None = None
    object_type: str | None = None
    object_id: int | None = None
    name: str | None = None

    @property
    def targets_stack(self) -> bool:
        return bool(self.object_id and self.object_type and self.name)


@dataclass(frozen=True)
class StackCursor:
    """Resumption token for strictly older members of one stack."""

    id: int
    object_type: str
    object_id: int
    name: str


@dataclass(frozen=True)
class NotificationGroup:
    """A top-level ``(name, notifiable_id)`` group within a notifiable type."""

    max_id: int
    name: str
    notifiable_id: int


@dataclass
class NotificationStack:
    """Notifications sharing ``(object_type, object_id, name)``.

    ``notifications`` is a page ordered by descending id while ``total``
    counts every matching notification regardless of the page boundary.
    """

    object_type: str
    object_id: int
    name: str
    notifications: list[Notification]
    total: int

    @property
    def oldest(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None


@dataclass(frozen=True)
class StackSummary:
    cursor: StackCursor
    name: str
    object_type: str
    object_id: int
    total: int


@dataclass(frozen=True)
class TypeSummary:
    """Per notifiable type totals and the cursor for its next page."""

    name: str
    total: int
    cursor_id: int | None = None


@dataclass
class NotificationBundle:
    """One page of stacked notifications across notifiable types."""

    types: list[TypeSummary] = field(default_factory=list)
    stacks: list[StackSummary] = field(default_factory=list)
    notifications: list[Notification] = field(default_factory=list)


@dataclass
class NotificationListing:
    """Result of listing notifications either by stack or by bundle.

    ``types`` is ``None`` when a single stack was requested.
    """

    notifications: list[Notification]
    stacks: list[StackSummary]
    types: list[TypeSummary] | None = None


@dataclass
class UnreadNotifications:
    notifications: list[Notification]
    has_more: bool
    unread_count: int


__all__ = [
    "NotificationBundle",
    "NotificationCursor",
    "NotificationGroup",
    "NotificationListing",
    "NotificationStack",
    "StackCursor",
    "StackSummary",
    "TypeSummary",
    "UnreadNotifications",
]
