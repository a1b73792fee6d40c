"""Domain entities representing a notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Notification:
    """Immutable event record about a notifiable object.

    ``is_read`` reflects the read state of the user the notification was
    loaded for; it is not part of the event itself.
    """

    id: int | None
    name: str
    notifiable_type: str
    notifiable_id: int
    source_user_id: int | None = None
    created_at: datetime | None = None
    details: dict[str, Any] = field(default_factory=dict)
    is_read: bool = False


__all__ = ["Notification"]
