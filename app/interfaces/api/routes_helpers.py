"""Helper utilities shared across API route handlers."""


def resolve_notification_endpoint(endpoint: str, *, host: str, scheme: str) -> str:
    """Return the websocket URL announced to clients.

    Configured paths are resolved against the request host, using ``wss``
    when the request itself arrived over HTTPS. Absolute URLs are returned
    unchanged.
    """

    if not endpoint.startswith("/"):
        return endpoint

    protocol = "wss" if scheme in ("https", "wss") else "ws"
    return f"{protocol}://{host}{endpoint}"

