"""Redis-backed store for pending one-time codes."""

import json
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import redis.asyncio as redis

OTP_PREFIX = "otp:"


@dataclass(frozen=True)
class OTPRecord:
    """A live one-time code for an email address."""

    email: str
    code: str
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(UTC)) >= self.expires_at

    def to_json(self) -> str:
        return json.dumps(
            {
                "email": self.email,
                "code": self.code,
                "created_at": self.created_at.isoformat(),
                "expires_at": self.expires_at.isoformat(),
            }
        )

    @classmethod
    def from_json(cls, raw: str) -> "OTPRecord":
        data = json.loads(raw)
        return cls(
            email=data["email"],
            code=data["code"],
            created_at=datetime.fromisoformat(data["created_at"]),
            expires_at=datetime.fromisoformat(data["expires_at"]),
        )


class OTPRepository:
    """One key per email; writing a new code overwrites the previous one.

    Redis drops the key once the lifetime has passed, and reads also
    compare ``expires_at`` so a record is never honoured past its lifetime.
    """

    def __init__(
        self,
        redis_client: redis.Redis,  # type: ignore[type-arg]
        lifetime_seconds: int,
    ) -> None:
        self._redis = redis_client
        self._lifetime = lifetime_seconds

    @staticmethod
    def _key(email: str) -> str:
        return f"{OTP_PREFIX}{email}"

    async def issue(
        self, email: str, code: str, issued_at: datetime | None = None
    ) -> OTPRecord:
        """Store ``code`` as the only live code for ``email``."""
        created = issued_at or datetime.now(UTC)
        record = OTPRecord(
            email=email,
            code=code,
            created_at=created,
            expires_at=created + timedelta(seconds=self._lifetime),
        )
        await self._redis.set(self._key(email), record.to_json(), ex=self._lifetime)
        return record

    async def find(self, email: str) -> OTPRecord | None:
        """Return the live record for ``email``, if any."""
        raw = await self._redis.get(self._key(email))
        if raw is None:
            return None
        record = OTPRecord.from_json(raw)
        if record.is_expired():
            await self.delete(email)
            return None
        return record

    async def find_matching(self, email: str, code: str) -> OTPRecord | None:
        """Return the live record only when its code equals ``code``."""
        record = await self.find(email)
        if record is None or not secrets.compare_digest(record.code, code):
            return None
        return record

    async def delete(self, email: str) -> None:
        """Remove any code stored for ``email``."""
        await self._redis.delete(self._key(email))
