"""Application configuration using Pydantic Settings V2."""

from functools import cached_property
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.settings import (
    AppConfig,
    AuthConfig,
    DatabaseConfig,
    LLMConfig,
    MailConfig,
    RateLimitConfig,
    RedisConfig,
    RegistrationMode,
    ServerConfig,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Flat fields are loaded directly from environment variables.
    Domain properties provide grouped access (e.g. settings.llm.provider).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # LLM Provider
    llm_provider: Literal["openai", "anthropic", "google"] = Field(
        default="openai",
        description="LLM provider to use",
    )

    # OpenAI
    openai_api_key: SecretStr = Field(
        default=SecretStr(""),
        description="OpenAI API key",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        description="OpenAI model name",
    )

    # Anthropic
    anthropic_api_key: SecretStr = Field(
        default=SecretStr(""),
        description="Anthropic API key",
    )
    anthropic_model: str = Field(
        default="claude-sonnet-4-20250514",
        description="Anthropic model name",
    )

    # Google Gemini
    google_api_key: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("google_api_key", "gemini_api_key"),
        description="Google AI Studio key (GEMINI_API_KEY in the legacy deployment)",
    )
    google_model: str = Field(
        default="gemini-2.5-flash",
        description="Gemini model name",
    )

    # Completion retry
    llm_max_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Total completion attempts before falling back",
    )
    llm_backoff_base_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Backoff unit; attempt n waits n * base seconds",
    )

    # App
    app_name: str = Field(
        default="suckdsa-api",
        description="Application name",
    )
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    debug: bool = Field(
        default=True,
        description="Debug mode",
    )
    registration_mode: RegistrationMode | None = Field(
        default=None,
        description="otp or direct; derived from APP_ENV when unset",
    )

    # Server
    host: str = Field(
        default="0.0.0.0",
        description="Server host",
    )
    port: int = Field(
        default=8001,
        ge=1,
        le=65535,
        description="Server port",
    )
    cors_origins: str = Field(
        default="http://localhost:5173",
        description="Comma-separated list of allowed browser origins",
    )

    # JWT Auth
    jwt_secret_key: SecretStr = Field(
        description="JWT secret key for token signing",
    )
    jwt_algorithm: str = Field(
        default="HS256",
        description="JWT signing algorithm",
    )
    jwt_token_expire_days: int = Field(
        default=7,
        ge=1,
        le=90,
        description="Session token expiration in days",
    )
    otp_expire_seconds: int = Field(
        default=300,
        ge=30,
        le=3600,
        description="One-time code lifetime in seconds",
    )

    # Mail
    smtp_host: str = Field(
        default="smtp.gmail.com",
        description="SMTP server host",
    )
    smtp_port: int = Field(
        default=587,
        ge=1,
        le=65535,
        description="SMTP server port",
    )
    smtp_username: str = Field(
        default="",
        description="SMTP login (EMAIL_USER in the legacy deployment)",
    )
    smtp_password: SecretStr = Field(
        default=SecretStr(""),
        description="SMTP password or app password",
    )
    mail_from: str = Field(
        default="",
        description="Sender address; defaults to the SMTP login",
    )
    smtp_use_tls: bool = Field(
        default=True,
        description="Upgrade the SMTP connection with STARTTLS",
    )

    # Rate limits
    global_rate_limit: str = Field(
        default="100/15minutes",
        description="Per-client limit across every endpoint",
    )
    chat_rate_limit: str = Field(
        default="10/minute",
        description="Per-client limit for the chat endpoint",
    )

    # Database
    database_url: SecretStr = Field(
        description="Async database URL (mysql+aiomysql://...)",
    )

    # Redis
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL",
    )
    redis_socket_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Redis socket timeout in seconds",
    )

    # --- Domain properties ---

    @cached_property
    def llm(self) -> LLMConfig:
        """LLM provider configuration."""
        return LLMConfig(
            provider=self.llm_provider,
            openai_api_key=self.openai_api_key,
            openai_model=self.openai_model,
            anthropic_api_key=self.anthropic_api_key,
            anthropic_model=self.anthropic_model,
            google_api_key=self.google_api_key,
            google_model=self.google_model,
            max_attempts=self.llm_max_attempts,
            backoff_base_seconds=self.llm_backoff_base_seconds,
        )

    @cached_property
    def app(self) -> AppConfig:
        """Application environment configuration."""
        mode = self.registration_mode
        if mode is None:
            mode = (
                RegistrationMode.DIRECT
                if self.app_env == "production"
                else RegistrationMode.OTP
            )
        return AppConfig(
            name=self.app_name,
            env=self.app_env,
            debug=self.debug,
            registration_mode=mode,
        )

    @cached_property
    def server(self) -> ServerConfig:
        """Server configuration."""
        return ServerConfig(
            host=self.host,
            port=self.port,
            cors_origins=self.cors_origins,
        )

    @cached_property
    def auth(self) -> AuthConfig:
        """JWT and OTP configuration."""
        return AuthConfig(
            secret_key=self.jwt_secret_key,
            algorithm=self.jwt_algorithm,
            token_expire_days=self.jwt_token_expire_days,
            otp_expire_seconds=self.otp_expire_seconds,
        )

    @cached_property
    def mail(self) -> MailConfig:
        """SMTP configuration."""
        return MailConfig(
            smtp_host=self.smtp_host,
            smtp_port=self.smtp_port,
            smtp_username=self.smtp_username,
            smtp_password=self.smtp_password,
            mail_from=self.mail_from,
            use_tls=self.smtp_use_tls,
        )

    @cached_property
    def rate_limit(self) -> RateLimitConfig:
        """Rate limit configuration."""
        return RateLimitConfig(
            global_limit=self.global_rate_limit,
            chat_limit=self.chat_rate_limit,
        )

    @cached_property
    def database(self) -> DatabaseConfig:
        """Database connection configuration."""
        return DatabaseConfig(url=self.database_url)

    @cached_property
    def redis(self) -> RedisConfig:
        """Redis connection configuration."""
        return RedisConfig(
            url=self.redis_url,
            socket_timeout_seconds=self.redis_socket_timeout,
        )


# Global settings instance
settings = Settings()
