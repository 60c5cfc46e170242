"""Global dependencies for the application."""

from functools import lru_cache

from fastapi import Depends, Request
from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import get_async_session
from app.core.exceptions import AuthenticationError
from app.core.middleware import MISSING_TOKEN_MESSAGE
from app.core.rate_limit import RateLimiter, client_identity
from app.core.redis import get_redis
from app.core.settings import RegistrationMode
from app.repositories.chat_repo import ChatRepository
from app.repositories.otp_repo import OTPRepository
from app.repositories.user_repo import UserRepository
from app.schemas.auth_schema import UserResponse
from app.services.auth_service import AuthService
from app.services.chat_service import ChatService
from app.services.completion_service import CompletionService
from app.services.email_service import EmailService
from app.services.token_service import TokenService

# --- Process-wide singletons ---


@lru_cache
def get_llm() -> BaseChatModel:
    """Get the LLM instance based on the configured provider."""
    llm_config = settings.llm
    match llm_config.provider:
        case "openai":
            return ChatOpenAI(
                model=llm_config.openai_model,
                api_key=llm_config.openai_api_key,
            )
        case "anthropic":
            return ChatAnthropic(  # type: ignore[call-arg]
                model_name=llm_config.anthropic_model,
                api_key=llm_config.anthropic_api_key,
            )
        case "google":
            return ChatGoogleGenerativeAI(
                model=llm_config.google_model,
                google_api_key=llm_config.google_api_key,
            )
        case _:
            raise ValueError(f"Unsupported LLM provider: {llm_config.provider}")


@lru_cache
def get_token_service() -> TokenService:
    """Get the token issuer configured from settings."""
    return TokenService(settings.auth)


@lru_cache
def get_email_service() -> EmailService:
    """Get the SMTP-backed OTP mailer."""
    return EmailService(
        settings.mail, otp_lifetime_seconds=settings.auth.otp_expire_seconds
    )


def get_completion_service() -> CompletionService:
    """Get the retrying completion client for the configured LLM."""
    return CompletionService(
        llm=get_llm(),
        max_attempts=settings.llm.max_attempts,
        backoff_base_seconds=settings.llm.backoff_base_seconds,
    )


def get_registration_mode() -> RegistrationMode:
    """Get the registration mode chosen at startup."""
    return settings.app.registration_mode


def get_rate_limiter(request: Request) -> RateLimiter:
    """Get the limiter created at startup."""
    return request.app.state.rate_limiter


# --- Repositories ---


def get_user_repository(
    session: AsyncSession = Depends(get_async_session),
) -> UserRepository:
    """Get UserRepository bound to the current session."""
    return UserRepository(session)


def get_chat_repository(
    session: AsyncSession = Depends(get_async_session),
) -> ChatRepository:
    """Get ChatRepository bound to the current session."""
    return ChatRepository(session)


def get_otp_repository() -> OTPRepository:
    """Get OTPRepository backed by the active Redis client."""
    return OTPRepository(get_redis(), settings.auth.otp_expire_seconds)


# --- Services ---


def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repository),
    otp_repo: OTPRepository = Depends(get_otp_repository),
    token_service: TokenService = Depends(get_token_service),
    email_service: EmailService = Depends(get_email_service),
    session: AsyncSession = Depends(get_async_session),
    registration_mode: RegistrationMode = Depends(get_registration_mode),
) -> AuthService:
    """Get AuthService with all dependencies."""
    return AuthService(
        user_repo=user_repo,
        otp_repo=otp_repo,
        token_service=token_service,
        email_service=email_service,
        session=session,
        registration_mode=registration_mode,
    )


def get_chat_service(
    completion_service: CompletionService = Depends(get_completion_service),
    chat_repo: ChatRepository = Depends(get_chat_repository),
) -> ChatService:
    """Get ChatService with DB persistence."""
    return ChatService(completion_service=completion_service, chat_repo=chat_repo)


# --- Request guards ---


async def get_current_user(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """Resolve the token validated by AuthMiddleware to a verified user."""
    token = getattr(request.state, "token", None)
    if not token:
        raise AuthenticationError(message=MISSING_TOKEN_MESSAGE, code="MISSING_TOKEN")
    return await auth_service.current_user(token)


def enforce_chat_rate_limit(
    request: Request,
    limiter: RateLimiter = Depends(get_rate_limiter),
) -> None:
    """Count the request against the per-client chat bucket."""
    limiter.hit_chat(client_identity(request))
