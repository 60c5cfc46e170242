"""Redis connection configuration."""

from pydantic import BaseModel


class RedisConfig(BaseModel, frozen=True):
    """Redis connection settings for the OTP store."""

    url: str
    socket_timeout_seconds: float
