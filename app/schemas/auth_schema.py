"""Authentication request/response schemas."""

from datetime import datetime
from typing import Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    field_validator,
)


def _normalize_email(v: str) -> str:
    return v.lower().strip()


class RegisterRequest(BaseModel):
    """User registration request."""

    name: str = Field(min_length=2, max_length=50, description="Display name")
    email: EmailStr = Field(description="User email address")
    password: str = Field(min_length=6, max_length=128, description="Password")

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)


class VerifyOTPRequest(RegisterRequest):
    """Code submitted together with the registration details."""

    otp: str = Field(pattern=r"^\d{6}$", description="6-digit one-time code")


class LoginRequest(BaseModel):
    """User login request."""

    email: EmailStr = Field(description="User email address")
    password: str = Field(min_length=6, description="User password")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)


class ResendOTPRequest(BaseModel):
    """Request for a fresh one-time code."""

    email: EmailStr = Field(description="User email address")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)


class UserResponse(BaseModel):
    """Public user representation (never includes the password hash).

    Sent over the wire with the camelCase names browser clients read.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    name: str
    email: str
    is_verified: bool = Field(
        validation_alias=AliasChoices("is_verified", "isVerified"),
        serialization_alias="isVerified",
    )
    created_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    last_login: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("last_login", "lastLogin"),
        serialization_alias="lastLogin",
    )


class AuthResponse(BaseModel):
    """Session token plus the user it was issued for."""

    model_config = ConfigDict(frozen=True)

    token: str
    token_type: str = "bearer"
    expires_in: int = Field(description="Token TTL in seconds")
    user: UserResponse


class PendingVerificationResponse(BaseModel):
    """Registration accepted; the account still needs its one-time code."""

    model_config = ConfigDict(frozen=True)

    email: str
    next_step: Literal["verify-otp"] = Field(
        default="verify-otp",
        validation_alias=AliasChoices("next_step", "nextStep"),
        serialization_alias="nextStep",
    )


class CurrentUserResponse(BaseModel):
    """Body of ``GET /api/auth/me``."""

    model_config = ConfigDict(frozen=True)

    user: UserResponse


class TokenPayload(BaseModel):
    """Decoded JWT payload."""

    model_config = ConfigDict(frozen=True)

    sub: int
    type: str
    jti: str
    iat: int
    exp: int
