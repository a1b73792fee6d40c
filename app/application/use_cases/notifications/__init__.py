"""Read-side use cases for a user's notifications."""

from .bundles import GROUPS_PER_TYPE, get_notifications_by_type
from .cursors import decode_cursor, encode_stack_cursor, encode_type_cursor
from .listing import list_notifications
from .read_state import mark_notifications_read
from .stacks import STACK_PAGE_SIZE, get_notification_stack, stack_to_summary
from .unread import UNREAD_FETCH_LIMIT, get_unread_notifications

__all__ = [
    "GROUPS_PER_TYPE",
    "STACK_PAGE_SIZE",
    "UNREAD_FETCH_LIMIT",
    "decode_cursor",
    "encode_stack_cursor",
    "encode_type_cursor",
    "get_notification_stack",
    "get_notifications_by_type",
    "get_unread_notifications",
    "list_notifications",
    "mark_notifications_read",
    "stack_to_summary",
]
