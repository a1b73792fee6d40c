"""Endpoints and websocket handler for a user's notifications."""

from __future__ import annotations

import logging

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Query,
    Request,
    Response,
    WebSocket,
    WebSocketDisconnect,
    status,
)
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    decode_cursor,
    encode_type_cursor,
    get_unread_notifications,
    list_notifications,
    mark_notifications_read,
)
from app.config import get_settings
from app.domain.entities import Notification, StackSummary, TypeSummary, User
from app.infrastructure.database import SessionLocal, get_db
from app.infrastructure.notifiables import NotifiableRegistry
from app.infrastructure.notifications import notification_manager
from app.interfaces.api.dependencies import (
    get_current_active_user,
    get_registry,
    resolve_current_user,
)
from app.interfaces.api.routes_helpers import resolve_notification_endpoint
from app.interfaces.api.schemas import (
    NotificationBundleResponse,
    NotificationEndpointRead,
    NotificationMarkReadRequest,
    NotificationRead,
    NotificationStackRead,
    NotificationStackResponse,
    NotificationTypeRead,
    StackCursorRead,
    UnreadNotificationsResponse,
)
from app.utils import parse_optional_bool, parse_optional_int, presence

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _notification_to_schema(
    notification: Notification, registry: NotifiableRegistry
) -> NotificationRead:
    return NotificationRead(
        id=notification.id or 0,
        name=notification.name,
        created_at=notification.created_at,
        object_type=notification.notifiable_type,
        object_id=notification.notifiable_id,
        source_user_id=notification.source_user_id,
        is_read=notification.is_read,
        details=registry.render(
            notification.notifiable_type,
            notification.notifiable_id,
            notification.details,
        ),
    )


def _stack_to_schema(summary: StackSummary) -> NotificationStackRead:
    return NotificationStackRead(
        cursor=StackCursorRead(
            id=summary.cursor.id,
            object_type=summary.cursor.object_type,
            object_id=summary.cursor.object_id,
            name=summary.cursor.name,
        ),
        name=summary.name,
        object_type=summary.object_type,
        object_id=summary.object_id,
        total=summary.total,
    )


def _type_to_schema(summary: TypeSummary) -> NotificationTypeRead:
    return NotificationTypeRead(
        cursor=encode_type_cursor(summary.cursor_id),
        name=summary.name,
        total=summary.total,
    )


def _endpoint_url(request: Request | WebSocket) -> str:
    return resolve_notification_endpoint(
        get_settings().notification_endpoint,
        host=request.url.netloc,
        scheme=request.url.scheme,
    )


@router.get("/endpoint", response_model=NotificationEndpointRead)
def read_notification_endpoint(
    request: Request,
    _: User = Depends(get_current_active_user),
) -> NotificationEndpointRead:
    """Return the websocket URL clients connect to for live updates."""

    return NotificationEndpointRead(url=_endpoint_url(request))


@router.get("/unread", response_model=UnreadNotificationsResponse)
def read_unread_notifications(
    request: Request,
    response: Response,
    with_read: str | None = Query(
        None, description="Include notifications already marked as read"
    ),
    max_id: str | None = Query(
        None, description="Only return notifications with an id up to this value"
    ),
    db: Session = Depends(get_db),
    registry: NotifiableRegistry = Depends(get_registry),
    current_user: User = Depends(get_current_active_user),
) -> UnreadNotificationsResponse:
    """Return the user's latest notifications, newest first, 50 at most."""

    feed = get_unread_notifications(
        db,
        user_id=current_user.id,
        include_read=parse_optional_bool(with_read) or False,
        max_id=parse_optional_int(max_id),
    )
    response.headers["Cache-Control"] = "no-store"
    return UnreadNotificationsResponse(
        has_more=feed.has_more,
        notifications=[
            _notification_to_schema(notification, registry)
            for notification in feed.notifications
        ],
        unread_count=feed.unread_count,
        notification_endpoint=_endpoint_url(request),
    )


@router.get(
    "/",
    response_model=NotificationBundleResponse | NotificationStackResponse,
)
def read_notifications(
    request: Request,
    group: str | None = Query(None, description="Restrict the bundle to one object type"),
    db: Session = Depends(get_db),
    registry: NotifiableRegistry = Depends(get_registry),
    current_user: User = Depends(get_current_active_user),
) -> NotificationBundleResponse | NotificationStackResponse:
    """Return stacked notifications.

    Passing ``cursor[object_type]``, ``cursor[object_id]`` and
    ``cursor[name]`` pages through a single stack; otherwise a bundle of
    stacks per object type is returned, bounded by ``cursor[id]``.
    """

    listing = list_notifications(
        db,
        user_id=current_user.id,
        registry=registry,
        group=presence(group),
        cursor=decode_cursor(request.query_params),
    )
    notifications = [
        _notification_to_schema(notification, registry)
        for notification in listing.notifications
    ]
    stacks = [_stack_to_schema(summary) for summary in listing.stacks]

    if listing.types is None:
        return NotificationStackResponse(notifications=notifications, stacks=stacks)

    return NotificationBundleResponse(
        notifications=notifications,
        stacks=stacks,
        types=[_type_to_schema(summary) for summary in listing.types],
    )


@router.post("/mark-read", status_code=status.HTTP_204_NO_CONTENT)
def mark_read(
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    """Mark the given notifications as read for the authenticated user."""

    if not mark_notifications_read(db, user_id=current_user.id, ids=payload.ids):
        return Response(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Websocket endpoint receiving live read-state events for the user."""

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=1008)
        return

    session = SessionLocal()
    try:
        user = resolve_current_user(token, session)
        if not user.is_active:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Usuario inactivo")
    except HTTPException:
        await websocket.close(code=1008)
        return
    finally:
        session.close()

    await notification_manager.connect(user.id, websocket)
    try:
        while True:
            try:
                message = await websocket.receive_json()
            except ValueError:
                continue
            if isinstance(message, dict) and message.get("type") == "ping":
                await websocket.send_json({"type": "pong"})
    except WebSocketDisconnect:
        logger.debug("Websocket session of user %s closed", user.id)
    finally:
        notification_manager.disconnect(user.id, websocket)


__all__ = ["router"]
