"""Request ID and access log middleware.

Forwards a client X-Request-ID when it is safe to log, otherwise generates
one; echoes it on the response and logs one access line per request.
Raw ASGI (no BaseHTTPMiddleware).
"""

import logging
import re
import time
import uuid
from typing import Callable

logger = logging.getLogger(__name__)

REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{1,64}$")


def _header(scope: dict, name: str) -> str | None:
    """First value of header name (case-insensitive), decoded."""
    wanted = name.lower().encode()
    for key, value in scope.get("headers", []):
        if key.lower() == wanted:
            return value.decode("utf-8", errors="replace")
    return None


def resolve_request_id(raw: str | None) -> str:
    """Return the stripped client value if it matches the safe pattern, else a new UUID4."""
    candidate = (raw or "").strip()
    if REQUEST_ID_PATTERN.match(candidate):
        return candidate
    return str(uuid.uuid4())


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Attach request_id to scope state and response headers; log the access line."""
    header_bytes = header_name.lower().encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = resolve_request_id(_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        started = time.perf_counter()
        status_holder = {"status": 500}

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                status_holder["status"] = message["status"]
                headers = [
                    (k, v)
                    for k, v in message.get("headers", [])
                    if k.lower() != header_bytes
                ]
                headers.append((header_bytes, request_id.encode()))
                message["headers"] = headers
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            logger.info(
                "%s %s -> %d (%.1f ms) request_id=%s",
                scope.get("method", ""),
                scope.get("path", ""),
                status_holder["status"],
                (time.perf_counter() - started) * 1000,
                request_id,
            )

    return asgi_app
