"""ASGI middleware tagging each linker request with a correlation id."""

from __future__ import annotations

import time
import uuid
from typing import Any

from jwlib_linker.core.logging import (
    bind_client_ip,
    bind_correlation_id,
    get_logger,
    reset_client_ip,
    reset_correlation_id,
)

logger = get_logger(__name__)

REQUEST_ID_HEADERS = ("x-request-id", "x-correlation-id")


def _incoming_request_id(scope: dict[str, Any]) -> str:
    """Reuse the caller's request id when one is sent, else mint a new one."""
    sent = {key.decode().lower(): value.decode() for key, value in scope.get("headers", [])}
    for header in REQUEST_ID_HEADERS:
        if sent.get(header):
            return sent[header]
    return uuid.uuid4().hex


def _route_name(scope: dict[str, Any]) -> str:
    # FastAPI stores the matched APIRoute on the scope once routing is done
    route = scope.get("route")
    return getattr(route, "name", None) or "unmatched"


def _default_language(scope: dict[str, Any]) -> str:
    app = scope.get("app")
    language = getattr(getattr(app, "state", None), "default_language", None)
    return getattr(language, "value", "-")


class CorrelationIdMiddleware:  # pylint: disable=too-few-public-methods
    """Bind request id and client IP for the request's log lines, echo the id back."""

    def __init__(self, app) -> None:  # type: ignore[no-untyped-def]
        self.app = app

    async def __call__(self, scope, receive, send):  # type: ignore[no-untyped-def]
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        request_id = _incoming_request_id(scope)
        client = scope.get("client")
        cid_token = bind_correlation_id(request_id)
        ip_token = bind_client_ip(client[0] if client else None)
        started = time.perf_counter()
        status_code = 500

        async def send_with_request_id(message):  # type: ignore[no-untyped-def]
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = int(message.get("status", 500))
                headers = list(message.get("headers", []))
                present = {key.decode().lower() for key, _ in headers}
                headers.extend(
                    (name.encode(), request_id.encode())
                    for name in ("X-Request-ID", "X-Correlation-ID")
                    if name.lower() not in present
                )
                message["headers"] = headers
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            logger.info(
                "[http] %s %s -> %s",
                scope.get("method", ""),
                _route_name(scope),
                status_code,
                extra={
                    "event": "link_request",
                    "path": scope.get("path", ""),
                    "route": _route_name(scope),
                    "default_language": _default_language(scope),
                    "status_code": status_code,
                    "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
                },
            )
            reset_client_ip(ip_token)
            reset_correlation_id(cid_token)


__all__ = ["CorrelationIdMiddleware", "REQUEST_ID_HEADERS"]
