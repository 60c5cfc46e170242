"""Authentication endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from app.dependencies import get_auth_service, get_current_user
from app.schemas.auth_schema import (
    AuthResponse,
    CurrentUserResponse,
    LoginRequest,
    PendingVerificationResponse,
    RegisterRequest,
    ResendOTPRequest,
    UserResponse,
    VerifyOTPRequest,
)
from app.schemas.response_schema import ApiResponse, success_response
from app.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])

AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
CurrentUserDep = Annotated[UserResponse, Depends(get_current_user)]


@router.post(
    "/register",
    response_model=ApiResponse[AuthResponse | PendingVerificationResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterRequest,
    response: Response,
    auth_service: AuthServiceDep,
) -> dict:
    """Register a new user; OTP mode answers 200 with a pending marker."""
    result = await auth_service.register(body)
    if isinstance(result, PendingVerificationResponse):
        response.status_code = status.HTTP_200_OK
        return success_response(
            result, message="OTP bhej diya! Check your email and verify."
        )
    return success_response(
        result,
        status=201,
        message="Welcome to SuckDSA! Ready to get roasted?",
    )


@router.post(
    "/verify-otp",
    response_model=ApiResponse[AuthResponse],
    status_code=status.HTTP_201_CREATED,
)
async def verify_otp(
    body: VerifyOTPRequest,
    auth_service: AuthServiceDep,
) -> dict:
    """Confirm the emailed code and receive a session token."""
    result = await auth_service.verify_otp(body)
    return success_response(
        result,
        status=201,
        message="Email verified! Welcome to SuckDSA! Ready to get roasted?",
    )


@router.post("/login", response_model=ApiResponse[AuthResponse])
async def login(
    body: LoginRequest,
    auth_service: AuthServiceDep,
) -> dict:
    """Authenticate and receive a session token."""
    result = await auth_service.login(body)
    return success_response(result, message="Welcome back! Ready for more roasting?")


@router.get("/me", response_model=ApiResponse[CurrentUserResponse])
async def me(current_user: CurrentUserDep) -> dict:
    """Return the user behind the bearer token."""
    return success_response(CurrentUserResponse(user=current_user))


@router.post("/resend-otp", response_model=ApiResponse[None])
async def resend_otp(
    body: ResendOTPRequest,
    auth_service: AuthServiceDep,
) -> dict:
    """Invalidate any live code and email a fresh one."""
    await auth_service.resend_otp(body)
    return success_response(None, message="Naya OTP bhej diya! Check your email.")
