"""Application environment configuration."""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel


class RegistrationMode(StrEnum):
    """How new accounts become verified."""

    OTP = "otp"
    DIRECT = "direct"


class AppConfig(BaseModel, frozen=True):
    """Application environment settings."""

    name: str
    env: Literal["development", "staging", "production"]
    debug: bool
    registration_mode: RegistrationMode

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.env == "development"
