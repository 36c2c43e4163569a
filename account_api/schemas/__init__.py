"""Pydantic schemas for API requests and responses."""

from account_api.schemas.auth import (
    ApiResponse,
    PasswordReset,
    ResetOtpRequest,
    UserData,
    UserLogin,
    UserRegister,
    VerifyAccount,
)

__all__ = [
    "ApiResponse",
    "UserData",
    "UserRegister",
    "UserLogin",
    "VerifyAccount",
    "ResetOtpRequest",
    "PasswordReset",
]
