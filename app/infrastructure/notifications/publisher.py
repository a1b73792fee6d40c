"""Best-effort delivery of realtime events to a user's live sessions."""

from __future__ import annotations

import asyncio
import copy
import logging
from typing import Any, Sequence, Set

from anyio import from_thread

from .manager import NotificationConnectionManager, notification_manager

logger = logging.getLogger(__name__)

NOTIFICATION_READ_EVENT = "notification.read"


class RealtimeEventPublisher:
    """Schedule realtime events without waiting for their delivery."""

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager
        self._pending: Set[asyncio.Task] = set()

    def dispatch(self, user_id: int, *, event_type: str, payload: Any) -> None:
        """Schedule an ``event_type`` event for every session of ``user_id``."""

        if not user_id:
            return

        message = {"type": event_type, "data": copy.deepcopy(payload)}
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            # Sync route handlers run in an anyio worker thread.
            try:
                from_thread.run_sync(self._create_task, user_id, message)
            except RuntimeError:
                logger.warning(
                    "No event loop available; dropping %s event for user %s",
                    event_type,
                    user_id,
                )
        else:
            self._create_task(user_id, message)

    def _create_task(self, user_id: int, message: dict[str, Any]) -> None:
        task = asyncio.get_running_loop().create_task(
            self._manager.send_to_user(user_id, message)
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)


realtime_event_publisher = RealtimeEventPublisher(notification_manager)


def dispatch_notification_read(user_id: int, ids: Sequence[int]) -> None:
    """Tell the other sessions of ``user_id`` that ``ids`` were read."""

    realtime_event_publisher.dispatch(
        user_id,
        event_type=NOTIFICATION_READ_EVENT,
        payload={"user_id": user_id, "ids": list(ids)},
    )


__all__ = [
    "NOTIFICATION_READ_EVENT",
    "RealtimeEventPublisher",
    "realtime_event_publisher",
    "dispatch_notification_read",
]
