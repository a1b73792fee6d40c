"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Core attributes describing a notification recipient."""

    id: int | None
    name: str
    email: str
    is_active: bool = True
    created_at: datetime | None = None
