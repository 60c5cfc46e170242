"""Authentication business logic."""

import structlog
from redis.exceptions import RedisError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import (
    AlreadyVerifiedError,
    DuplicateUserError,
    EmailDeliveryError,
    InternalError,
    InvalidOrExpiredOTPError,
    InvalidPasswordError,
    NotVerifiedError,
    UserNotFoundError,
)
from app.core.security import (
    DUMMY_HASH,
    generate_otp_code,
    hash_password,
    verify_password,
)
from app.core.settings import RegistrationMode
from app.models.user import User
from app.repositories.otp_repo import OTPRepository
from app.repositories.user_repo import UserRepository
from app.schemas.auth_schema import (
    AuthResponse,
    LoginRequest,
    PendingVerificationResponse,
    RegisterRequest,
    ResendOTPRequest,
    UserResponse,
    VerifyOTPRequest,
)
from app.services.email_service import EmailService
from app.services.token_service import TokenService

logger = structlog.get_logger()

GHOST_USER_MESSAGE = "User not found. Kya bhai, ghost ban gaye ho?"


class AuthService:
    """Orchestrates registration, OTP verification, login and session lookup.

    Account lifecycle: unregistered -> pending verification -> verified.
    In ``RegistrationMode.DIRECT`` accounts are created already verified.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        otp_repo: OTPRepository,
        token_service: TokenService,
        email_service: EmailService,
        session: AsyncSession,
        registration_mode: RegistrationMode,
    ) -> None:
        self._user_repo = user_repo
        self._otp_repo = otp_repo
        self._token_service = token_service
        self._email_service = email_service
        self._session = session
        self._registration_mode = registration_mode

    async def register(
        self, request: RegisterRequest
    ) -> AuthResponse | PendingVerificationResponse:
        """Create the account; return a token or a pending-verification marker."""
        # Check-then-insert is not atomic; the unique index on email is the backstop.
        if await self._user_repo.exists_by_email(request.email):
            raise DuplicateUserError

        hashed = await hash_password(request.password)
        direct = self._registration_mode is RegistrationMode.DIRECT
        try:
            user = await self._user_repo.create(
                name=request.name,
                email=request.email,
                hashed_password=hashed,
                is_verified=direct,
            )
        except IntegrityError as e:
            await self._session.rollback()
            raise DuplicateUserError from e

        code = None
        if not direct:
            # The pending account is only committed once its code is stored.
            code = await self._store_otp_or_rollback(user.email)
        await self._session.commit()
        logger.info(
            "User registered",
            user_id=user.id,
            email=user.email,
            mode=self._registration_mode.value,
        )

        if code is None:
            return self._auth_response(user)

        try:
            await self._mail_otp(user.email, code, user.name)
        except EmailDeliveryError:
            # The account stays pending; the client can ask for a resend.
            logger.warning("Registration OTP not delivered", email=user.email)
        return PendingVerificationResponse(email=user.email)

    async def verify_otp(self, request: VerifyOTPRequest) -> AuthResponse:
        """Consume a live code and mark the account verified."""
        record = await self._otp_repo.find_matching(request.email, request.otp)
        if record is None:
            raise InvalidOrExpiredOTPError

        hashed = await hash_password(request.password)
        user = await self._user_repo.find_by_email(request.email)
        if user is None:
            try:
                user = await self._user_repo.create(
                    name=request.name,
                    email=request.email,
                    hashed_password=hashed,
                    is_verified=True,
                )
            except IntegrityError as e:
                # A concurrent verification created the account first.
                await self._session.rollback()
                raise AlreadyVerifiedError from e
        elif user.is_verified:
            raise AlreadyVerifiedError
        else:
            user = await self._user_repo.mark_verified(user, request.name, hashed)

        await self._session.commit()
        await self._otp_repo.delete(request.email)
        logger.info("User verified", user_id=user.id, email=user.email)

        return self._auth_response(user)

    async def login(self, request: LoginRequest) -> AuthResponse:
        """Authenticate a verified user and issue a token."""
        user = await self._user_repo.find_by_email(request.email)

        if user is None:
            await verify_password(request.password, DUMMY_HASH)
            raise UserNotFoundError

        if not user.is_verified:
            raise NotVerifiedError

        if not await verify_password(request.password, user.hashed_password):
            raise InvalidPasswordError

        user = await self._user_repo.touch_last_login(user)
        await self._session.commit()
        logger.info("User logged in", user_id=user.id, email=user.email)

        return self._auth_response(user)

    async def resend_otp(self, request: ResendOTPRequest) -> None:
        """Replace any live code for the email and mail the new one."""
        user = await self._user_repo.find_by_email(request.email)
        if user is not None and user.is_verified:
            raise AlreadyVerifiedError

        await self._send_new_otp(request.email, user.name if user else "User")

    async def current_user(self, token: str) -> UserResponse:
        """Resolve a session token to its verified user."""
        payload = self._token_service.decode_token(token)

        user = await self._user_repo.find_by_id(payload.sub)
        if user is None:
            raise UserNotFoundError(message=GHOST_USER_MESSAGE)
        if not user.is_verified:
            raise NotVerifiedError

        return UserResponse.model_validate(user)

    async def _store_otp_or_rollback(self, email: str) -> str:
        code = generate_otp_code()
        try:
            await self._otp_repo.issue(email, code)
        except RedisError as e:
            await self._session.rollback()
            logger.error("OTP store unavailable", email=email, error=str(e))
            raise InternalError from e
        return code

    async def _send_new_otp(self, email: str, name: str) -> None:
        code = generate_otp_code()
        await self._otp_repo.issue(email, code)
        await self._mail_otp(email, code, name)

    async def _mail_otp(self, email: str, code: str, name: str) -> None:
        if settings.app.is_development:
            logger.debug("OTP issued", email=email, otp=code)
        await self._email_service.send_otp(email, code, name=name)

    def _auth_response(self, user: User) -> AuthResponse:
        return AuthResponse(
            token=self._token_service.create_access_token(user.id),
            expires_in=self._token_service.lifetime_seconds,
            user=UserResponse.model_validate(user),
        )
