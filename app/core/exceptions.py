"""Application exception classes and handlers."""

import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.schemas.response_schema import ErrorDetail, ErrorResponse

logger = structlog.get_logger()

INTERNAL_ERROR_MESSAGE = "Savage teacher is having a bad day. Try again!"


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, code: str, status_code: int = 400) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


# --- Domain (400) ---


class DuplicateUserError(AppException):
    """An account with this email already exists."""

    def __init__(self) -> None:
        super().__init__(
            message="Email already registered hai! Login kar ya bhool gaye password?",
            code="DUPLICATE_USER",
            status_code=400,
        )


class InvalidOrExpiredOTPError(AppException):
    """No live one-time code matches the submitted one."""

    def __init__(self) -> None:
        super().__init__(
            message="Invalid OTP! Galat code daal rahe ho ya expired ho gaya?",
            code="INVALID_OR_EXPIRED_OTP",
            status_code=400,
        )


class AlreadyVerifiedError(AppException):
    """The account has already completed verification."""

    def __init__(self) -> None:
        super().__init__(
            message="Already verified hai! Login kar le.",
            code="ALREADY_VERIFIED",
            status_code=400,
        )


# --- Authentication (401) ---


class AuthenticationError(AppException):
    """Base authentication error."""

    def __init__(
        self,
        message: str = "Authentication failed",
        code: str = "AUTHENTICATION_ERROR",
    ) -> None:
        super().__init__(message=message, code=code, status_code=401)


class UserNotFoundError(AuthenticationError):
    """No account for the given email or token subject."""

    def __init__(
        self, message: str = "Email not found! Register kar pehle, phir login kar."
    ) -> None:
        super().__init__(message=message, code="USER_NOT_FOUND")


class InvalidPasswordError(AuthenticationError):
    """Password does not match the stored hash."""

    def __init__(self) -> None:
        super().__init__(
            message="Password galat hai! Bhool gaye kya?",
            code="INVALID_PASSWORD",
        )


class NotVerifiedError(AuthenticationError):
    """Account exists but its email was never verified."""

    def __init__(self) -> None:
        super().__init__(
            message="Email verify nahi kiya! OTP check kar inbox mein.",
            code="NOT_VERIFIED",
        )


# --- Authorization (403) ---


class InvalidTokenError(AppException):
    """Token signature, structure or expiry is invalid."""

    def __init__(self) -> None:
        super().__init__(
            message="Invalid token. Phir se login kar, token expired ho gaya!",
            code="INVALID_TOKEN",
            status_code=403,
        )


# --- Rate Limit (429) ---


class RateLimitedError(AppException):
    """Client exhausted a rate-limit bucket."""

    def __init__(
        self,
        message: str = (
            "Arre yaar! Too many requests from your IP. "
            "Take a chai break and try again later!"
        ),
    ) -> None:
        super().__init__(message=message, code="RATE_LIMITED", status_code=429)


# --- Server (500) ---


class EmailDeliveryError(AppException):
    """The OTP email could not be sent."""

    def __init__(self) -> None:
        super().__init__(
            message="Email bhejne mein problem! Try again.",
            code="EMAIL_DELIVERY_ERROR",
            status_code=500,
        )


class InternalError(AppException):
    """Infrastructure failure surfaced to the client without detail."""

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE) -> None:
        super().__init__(message=message, code="INTERNAL_ERROR", status_code=500)


# --- Exception Handlers ---


def error_body(
    status: int,
    message: str,
    code: str,
    details: list[ErrorDetail] | None = None,
) -> dict:
    """Build the ErrorResponse payload shared by handlers and middleware."""
    response = ErrorResponse(
        status=status, message=message, code=code, details=details
    )
    return response.model_dump(exclude_none=True)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Central exception handler for AppException."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, exc.message, exc.code),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as 400 VALIDATION_ERROR."""
    details = [
        ErrorDetail(
            field=".".join(str(part) for part in err.get("loc", ())[1:]),
            message=err.get("msg", ""),
        )
        for err in exc.errors()
    ]
    body = error_body(
        400,
        "Arre yaar! Form bharne mein bhi galti kar rahe ho? Fix these errors.",
        "VALIDATION_ERROR",
        details=details,
    )
    return JSONResponse(status_code=400, content=body)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler; never leaks internal detail."""
    logger.exception("Unhandled error", path=request.url.path)
    return JSONResponse(
        status_code=500,
        content=error_body(500, INTERNAL_ERROR_MESSAGE, "INTERNAL_ERROR"),
    )
