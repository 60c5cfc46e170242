"""Client-side mirror of the auth contract for chat UIs.

Every action resolves to an :class:`ActionResult`; callers branch on
``success`` instead of catching exceptions.
"""

from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from app.client.token_store import TokenStore

logger = structlog.get_logger()

DEFAULT_BASE_URL = "http://localhost:8001"
DEFAULT_TIMEOUT_SECONDS = 30.0

LOGIN_FAILED = "Login failed"
REGISTRATION_FAILED = "Registration failed"
VERIFICATION_FAILED = "OTP verification failed"
RESEND_FAILED = "Failed to resend OTP"
CHAT_FAILED = "Savage teacher is having a bad day. Try again!"
REQUEST_FAILED = "Request failed"


@dataclass(frozen=True)
class ActionResult:
    """Outcome of one controller action."""

    success: bool
    message: str
    data: Any = None


@dataclass
class SessionState:
    user: dict[str, Any] | None = None
    token: str | None = None
    loading: bool = True


@dataclass
class _Reply:
    ok: bool
    message: str
    data: Any = None


class SessionController:
    """Holds ``{user, loading, token}`` and talks to the API over httpx."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        token_store: TokenStore | None = None,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self._client = client or httpx.AsyncClient(
            base_url=base_url, timeout=DEFAULT_TIMEOUT_SECONDS
        )
        self._token_store = token_store or TokenStore()
        self.state = SessionState(token=self._token_store.load())

    @property
    def user(self) -> dict[str, Any] | None:
        return self.state.user

    @property
    def token(self) -> str | None:
        return self.state.token

    @property
    def loading(self) -> bool:
        return self.state.loading

    @property
    def is_authenticated(self) -> bool:
        return self.state.user is not None

    async def aclose(self) -> None:
        await self._client.aclose()

    # --- Session lifecycle ---

    async def initialize(self) -> ActionResult:
        """Restore the session from a persisted token, if any."""
        self.state.loading = True
        try:
            if not self.state.token:
                return ActionResult(success=False, message="Not logged in")

            reply = await self._request("GET", "/api/auth/me", REQUEST_FAILED)
            if not reply.ok:
                logger.info("Stored session rejected", message=reply.message)
                self.logout()
                return ActionResult(success=False, message=reply.message)

            self.state.user = reply.data["user"]
            return ActionResult(success=True, message=reply.message, data=self.user)
        finally:
            self.state.loading = False

    async def login(self, email: str, password: str) -> ActionResult:
        reply = await self._request(
            "POST",
            "/api/auth/login",
            LOGIN_FAILED,
            json={"email": email, "password": password},
        )
        return self._finish_auth(reply)

    async def register(self, name: str, email: str, password: str) -> ActionResult:
        """Register; ``data`` holds the user, or the pending marker in OTP mode."""
        reply = await self._request(
            "POST",
            "/api/auth/register",
            REGISTRATION_FAILED,
            json={"name": name, "email": email, "password": password},
        )
        if reply.ok and "token" not in (reply.data or {}):
            return ActionResult(success=True, message=reply.message, data=reply.data)
        return self._finish_auth(reply)

    async def verify_otp(
        self, email: str, otp: str, name: str, password: str
    ) -> ActionResult:
        reply = await self._request(
            "POST",
            "/api/auth/verify-otp",
            VERIFICATION_FAILED,
            json={"email": email, "otp": otp, "name": name, "password": password},
        )
        return self._finish_auth(reply)

    async def resend_otp(self, email: str) -> ActionResult:
        reply = await self._request(
            "POST", "/api/auth/resend-otp", RESEND_FAILED, json={"email": email}
        )
        return ActionResult(success=reply.ok, message=reply.message)

    def logout(self) -> None:
        """Forget the session locally; tokens are not revoked server-side."""
        self._token_store.clear()
        self.state.token = None
        self.state.user = None

    # --- Chat ---

    async def send_message(
        self, message: str, session_id: str | None = None
    ) -> ActionResult:
        payload: dict[str, Any] = {"message": message}
        if session_id:
            payload["session_id"] = session_id
        reply = await self._request("POST", "/api/chat", CHAT_FAILED, json=payload)
        return ActionResult(success=reply.ok, message=reply.message, data=reply.data)

    async def get_history(self, session_id: str) -> ActionResult:
        reply = await self._request(
            "GET", f"/api/chat/history/{session_id}", REQUEST_FAILED
        )
        return ActionResult(
            success=reply.ok,
            message=reply.message,
            data=reply.data if reply.ok else [],
        )

    async def get_topics(self) -> ActionResult:
        reply = await self._request("GET", "/api/topics", REQUEST_FAILED)
        return ActionResult(
            success=reply.ok,
            message=reply.message,
            data=reply.data if reply.ok else [],
        )

    # --- Internals ---

    def _finish_auth(self, reply: _Reply) -> ActionResult:
        if not reply.ok:
            return ActionResult(success=False, message=reply.message)

        token = reply.data["token"]
        self._token_store.save(token)
        self.state.token = token
        self.state.user = reply.data["user"]
        return ActionResult(success=True, message=reply.message, data=self.user)

    async def _request(
        self,
        method: str,
        url: str,
        default_error: str,
        json: dict[str, Any] | None = None,
    ) -> _Reply:
        headers = {}
        if self.state.token:
            headers["Authorization"] = f"Bearer {self.state.token}"

        try:
            resp = await self._client.request(method, url, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("API request failed", method=method, url=url, error=str(e))
            return _Reply(ok=False, message=default_error)

        try:
            body = resp.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if resp.is_success:
            return _Reply(
                ok=True,
                message=body.get("message", "Success"),
                data=body.get("data"),
            )
        return _Reply(ok=False, message=body.get("message") or default_error)
