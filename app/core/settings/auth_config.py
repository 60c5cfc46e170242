"""JWT and OTP configuration."""

from pydantic import BaseModel, SecretStr


class AuthConfig(BaseModel, frozen=True):
    """Session token and one-time code settings."""

    secret_key: SecretStr
    algorithm: str
    token_expire_days: int
    otp_expire_seconds: int
