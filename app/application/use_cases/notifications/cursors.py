"""Encoding and decoding of notification pagination cursors.

Clients send cursors back as ``cursor[id]``, ``cursor[object_type]``,
``cursor[object_id]`` and ``cursor[name]`` query parameters; the dotted
``cursor.id`` spelling is accepted as well.
"""

from __future__ import annotations

from collections.abc import Mapping

from app.domain.entities import Notification, NotificationCursor, StackCursor
from app.utils import parse_optional_int, presence

_CURSOR_FIELDS = ("id", "object_type", "object_id", "name")


def _read_field(params: Mapping[str, str], field: str) -> str | None:
    for key in (f"cursor[{field}]", f"cursor.{field}"):
        value = presence(params.get(key))
        if value is not None:
            return value
    return None


def decode_cursor(params: Mapping[str, str]) -> NotificationCursor:
    """Build a :class:`NotificationCursor` from request parameters.

    Missing, blank or malformed fields are treated as absent.
    """

    raw = {field: _read_field(params, field) for field in _CURSOR_FIELDS}
    return NotificationCursor(
        id=parse_optional_int(raw["id"]),
        object_type=raw["object_type"],
        object_id=parse_optional_int(raw["object_id"]),
        name=raw["name"],
    )


def encode_stack_cursor(notification: Notification) -> StackCursor:
    """Return the cursor resuming a stack after ``notification``."""

    return StackCursor(
        id=notification.id,
        object_type=notification.notifiable_type,
        object_id=notification.notifiable_id,
        name=notification.name,
    )


def encode_type_cursor(cursor_id: int | None) -> dict[str, int] | None:
    """Return the wire form of a per-type cursor, ``None`` when exhausted."""

    if cursor_id is None:
        return None
    return {"id": cursor_id}


__all__ = ["decode_cursor", "encode_stack_cursor", "encode_type_cursor"]
