"""Registration and authentication endpoints."""

import logging

from fastapi import APIRouter, status

from booklend.application.commands.auth import (
    CompleteRegistrationCommand,
    SendEmailVerificationCommand,
    VerifyEmailTokenCommand,
)
from booklend.presentation.api.config import get_api_settings
from booklend.presentation.api.dependencies import (
    Authentication,
    Crypto,
    CurrentUser,
    DBSession,
    Users,
    Verifications,
)
from booklend.presentation.api.schemas import (
    CompleteRegistrationRequest,
    DataResponse,
    EmailResponse,
    LoginRequest,
    MessageResponse,
    SendVerificationRequest,
    TokenResponse,
    UserResponse,
)
from booklend.presentation.api.unit_of_work import finish

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/send-verification",
    summary="Email a registration link",
    responses={
        200: {"description": "Verification email sent"},
        400: {"description": "Email missing"},
        409: {"description": "Email already registered"},
    },
)
async def send_verification(
    request: SendVerificationRequest,
    session: DBSession,
    users: Users,
    verifications: Verifications,
    crypto: Crypto,
) -> MessageResponse:
    """Start a registration by sending a verification token."""
    command = SendEmailVerificationCommand(
        auth_service=users,
        email_verification_service=verifications,
        crypto_service=crypto,
        token_expire_hours=get_api_settings().verification_token_expire_hours,
    )
    result = await command.execute(email=request.email)
    await finish(session, result)
    return MessageResponse(message=result.message)


@router.get(
    "/verify-token/{token}",
    summary="Check a verification token",
    responses={
        200: {"description": "Token is valid"},
        400: {"description": "Invalid or expired token"},
    },
)
async def verify_token(
    token: str,
    session: DBSession,
    verifications: Verifications,
) -> DataResponse[EmailResponse]:
    command = VerifyEmailTokenCommand(email_verification_service=verifications)
    result = await command.execute(token=token)
    await finish(session, result)
    return DataResponse(
        message=result.message,
        data=EmailResponse(email=result.email),  # type: ignore[arg-type]
    )


@router.post(
    "/complete-registration",
    status_code=status.HTTP_201_CREATED,
    summary="Create the account for a verified email",
    responses={
        201: {"description": "Registration completed"},
        400: {"description": "Missing field, invalid or expired token"},
        409: {"description": "Email already registered"},
    },
)
async def complete_registration(
    request: CompleteRegistrationRequest,
    session: DBSession,
    users: Users,
    verifications: Verifications,
    crypto: Crypto,
) -> DataResponse[UserResponse]:
    command = CompleteRegistrationCommand(
        auth_service=users,
        email_verification_service=verifications,
        crypto_service=crypto,
        default_book_limit=get_api_settings().default_book_limit,
    )
    result = await command.execute(
        token=request.token,
        first_name=request.first_name,
        last_name=request.last_name,
        password=request.password,
        phone_number=request.phone_number,
    )
    await finish(session, result)
    return DataResponse(
        message=result.message,
        data=UserResponse.model_validate(result.user),
    )


@router.post(
    "/login",
    summary="Exchange email and password for an access token",
    responses={
        200: {"description": "Login successful"},
        400: {"description": "Email or password missing"},
        401: {"description": "Invalid email or password"},
        403: {"description": "Account is not active"},
    },
)
async def login(
    request: LoginRequest,
    auth: Authentication,
) -> DataResponse[TokenResponse]:
    result = await auth.login(request.email, request.password)
    result.raise_for_failure()
    return DataResponse(
        message=result.message,
        data=TokenResponse(
            access_token=result.access_token,  # type: ignore[arg-type]
            expires_in=result.expires_in,  # type: ignore[arg-type]
            user=UserResponse.model_validate(result.user),
        ),
    )


@router.post(
    "/refresh",
    summary="Issue a fresh access token",
    responses={
        200: {"description": "Token refreshed"},
        401: {"description": "Not authenticated"},
        404: {"description": "User not found or inactive"},
    },
)
async def refresh(
    current_user: CurrentUser,
    auth: Authentication,
) -> DataResponse[TokenResponse]:
    result = await auth.refresh(current_user.id)
    result.raise_for_failure()
    return DataResponse(
        message=result.message,
        data=TokenResponse(
            access_token=result.access_token,  # type: ignore[arg-type]
            expires_in=result.expires_in,  # type: ignore[arg-type]
            user=UserResponse.model_validate(result.user),
        ),
    )


@router.get("/profile", summary="Current user's profile")
async def profile(
    current_user: CurrentUser,
    auth: Authentication,
) -> DataResponse[UserResponse]:
    result = await auth.profile(current_user.id)
    result.raise_for_failure()
    return DataResponse(
        message=result.message,
        data=UserResponse.model_validate(result.user),
    )
