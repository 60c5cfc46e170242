"""ASGI authentication and rate-limit middleware."""

import json

import structlog
from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Scope, Send

from app.core.exceptions import InvalidTokenError, RateLimitedError, error_body
from app.core.rate_limit import RateLimiter, client_identity
from app.services.token_service import TokenService

logger = structlog.get_logger()

PUBLIC_PATHS: set[str] = {
    "",
    "/",
    "/health",
    "/docs",
    "/openapi.json",
    "/redoc",
    "/api/auth/register",
    "/api/auth/verify-otp",
    "/api/auth/login",
    "/api/auth/resend-otp",
    "/api/topics",
}

MISSING_TOKEN_MESSAGE = (
    "Arre yaar! Token nahi mila. Login kar pehle, phir savage teacher se baat kar!"
)


async def _send_error(send: Send, status: int, code: str, message: str) -> None:
    """Send a JSON error response directly."""
    body = json.dumps(error_body(status, message, code)).encode()

    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": [
                [b"content-type", b"application/json"],
                [b"content-length", str(len(body)).encode()],
            ],
        }
    )
    await send({"type": "http.response.body", "body": body})


class AuthMiddleware:
    """Pure ASGI middleware that gates protected paths on a valid session token.

    Only signature and expiry are checked here; the account lookup happens
    in the ``get_current_user`` dependency.
    """

    def __init__(self, app: ASGIApp, token_service: TokenService | None = None) -> None:
        self.app = app
        self._token_service = token_service or TokenService()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        method = scope.get("method", "")
        if method == "OPTIONS":
            await self.app(scope, receive, send)
            return

        path = scope["path"]
        normalized = path.rstrip("/") or "/"
        if normalized in PUBLIC_PATHS or path.startswith(("/docs", "/redoc")):
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers", []))
        auth_header = headers.get(b"authorization", b"").decode()

        if not auth_header.startswith("Bearer ") or not auth_header[7:].strip():
            await _send_error(send, 401, "MISSING_TOKEN", MISSING_TOKEN_MESSAGE)
            return

        token = auth_header[7:].strip()
        try:
            payload = self._token_service.decode_token(token)
        except InvalidTokenError as exc:
            await _send_error(send, exc.status_code, exc.code, exc.message)
            return

        scope.setdefault("state", {})
        scope["state"]["user_id"] = payload.sub
        scope["state"]["token"] = token

        await self.app(scope, receive, send)


class RateLimitMiddleware:
    """Pure ASGI middleware applying the global per-client bucket to every request."""

    def __init__(self, app: ASGIApp, limiter: RateLimiter) -> None:
        self.app = app
        self._limiter = limiter

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        try:
            self._limiter.hit_global(client_identity(Request(scope)))
        except RateLimitedError as exc:
            await _send_error(send, exc.status_code, exc.code, exc.message)
            return

        await self.app(scope, receive, send)
