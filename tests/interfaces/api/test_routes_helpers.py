"""Tests for helper utilities used by the notification routes."""

import pytest

from app.interfaces.api.routes_helpers import resolve_notification_endpoint


@pytest.mark.parametrize(
    ("endpoint", "scheme", "expected"),
    [
        ("/notifications/ws", "http", "ws://example.com:8080/notifications/ws"),
        ("/notifications/ws", "https", "wss://example.com:8080/notifications/ws"),
        ("wss://notify.example.com", "http", "wss://notify.example.com"),
    ],
)
def test_resolve_notification_endpoint(endpoint, scheme, expected):
    assert (
        resolve_notification_endpoint(endpoint, host="example.com:8080", scheme=scheme)
        == expected
    )
