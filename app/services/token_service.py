"""Stateless JWT session tokens."""

import uuid
from datetime import UTC, datetime, timedelta

import jwt

from app.core.config import settings
from app.core.exceptions import InvalidTokenError
from app.core.settings import AuthConfig
from app.schemas.auth_schema import TokenPayload

TOKEN_TYPE = "access"


class TokenService:
    """Issue and validate signed session tokens.

    Nothing is stored server-side: a token is valid exactly when its
    signature checks out and ``exp`` lies in the future.
    """

    def __init__(self, config: AuthConfig | None = None) -> None:
        config = config or settings.auth
        self._secret = config.secret_key.get_secret_value()
        self._algorithm = config.algorithm
        self._lifetime = timedelta(days=config.token_expire_days)

    @property
    def lifetime_seconds(self) -> int:
        return int(self._lifetime.total_seconds())

    def create_access_token(self, user_id: int) -> str:
        """Create a signed token for the given user."""
        now = datetime.now(UTC)
        payload = {
            "sub": str(user_id),
            "type": TOKEN_TYPE,
            "jti": str(uuid.uuid4()),
            "iat": now,
            "exp": now + self._lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode_token(self, token: str) -> TokenPayload:
        """Decode and validate a token; any failure is an InvalidTokenError."""
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError from e

        if payload.get("type") != TOKEN_TYPE:
            raise InvalidTokenError

        try:
            return TokenPayload(
                sub=int(payload["sub"]),
                type=payload["type"],
                jti=payload.get("jti", ""),
                iat=int(payload["iat"]),
                exp=int(payload["exp"]),
            )
        except (TypeError, ValueError) as e:
            raise InvalidTokenError from e
