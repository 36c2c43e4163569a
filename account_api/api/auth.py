"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from account_api.api.cookies import clear_session_cookie, set_session_cookie
from account_api.api.dependencies import get_auth_service, get_session_user_id
from account_api.config import Settings, get_settings
from account_api.schemas.auth import (
    ApiResponse,
    PasswordReset,
    ResetOtpRequest,
    UserLogin,
    UserRegister,
    VerifyAccount,
)
from account_api.services.auth_service import AuthService
from account_api.services.security import create_access_token

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=ApiResponse, response_model_exclude_none=True)
def register(
    user_data: UserRegister,
    response: Response,
    service: Annotated[AuthService, Depends(get_auth_service)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Register a new user and start a session."""
    user = service.register(user_data.name, user_data.email, user_data.password)
    set_session_cookie(response, create_access_token(user.id, settings), settings)
    return ApiResponse(success=True, message="Register successful")


@router.post("/login", response_model=ApiResponse, response_model_exclude_none=True)
def login(
    credentials: UserLogin,
    response: Response,
    service: Annotated[AuthService, Depends(get_auth_service)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Login with email and password."""
    user = service.login(credentials.email, credentials.password)
    set_session_cookie(response, create_access_token(user.id, settings), settings)
    return ApiResponse(success=True, message="Login successful")


@router.post("/logout", response_model=ApiResponse, response_model_exclude_none=True)
def logout(
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Logout by clearing the session cookie."""
    clear_session_cookie(response, settings)
    return ApiResponse(success=True, message="Logout successful")


@router.get("/is-auth", response_model=ApiResponse, response_model_exclude_none=True)
def is_authenticated(
    user_id: Annotated[str, Depends(get_session_user_id)],
):
    """Report whether the session cookie is valid."""
    return ApiResponse(success=True)


@router.post("/send-verify-otp", response_model=ApiResponse, response_model_exclude_none=True)
def send_verify_otp(
    user_id: Annotated[str, Depends(get_session_user_id)],
    service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Email a verification code to the logged-in user."""
    service.send_verify_otp(user_id)
    return ApiResponse(success=True, message="Verification OTP sent on your Email")


@router.post("/verify-account", response_model=ApiResponse, response_model_exclude_none=True)
def verify_account(
    body: VerifyAccount,
    user_id: Annotated[str, Depends(get_session_user_id)],
    service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Verify the logged-in user's email with the mailed code."""
    service.verify_account(user_id, body.otp)
    return ApiResponse(success=True, message="Email Verified Successfully")


@router.post("/send-reset-otp", response_model=ApiResponse, response_model_exclude_none=True)
def send_reset_otp(
    body: ResetOtpRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Email a password reset code. Works without a session."""
    service.send_reset_otp(body.email)
    return ApiResponse(success=True, message="Reset OTP sent on your Email")


@router.post("/reset-password", response_model=ApiResponse, response_model_exclude_none=True)
def reset_password(
    body: PasswordReset,
    service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Set a new password using the mailed reset code."""
    service.reset_password(body.email, body.otp, body.new_password)
    return ApiResponse(success=True, message="Password Changed Successfully")
