"""LLM provider configuration."""

from typing import Literal

from pydantic import BaseModel, SecretStr


class LLMConfig(BaseModel, frozen=True):
    """LLM provider and retry settings."""

    provider: Literal["openai", "anthropic", "google"]
    openai_api_key: SecretStr
    openai_model: str
    anthropic_api_key: SecretStr
    anthropic_model: str
    google_api_key: SecretStr
    google_model: str
    max_attempts: int
    backoff_base_seconds: float
