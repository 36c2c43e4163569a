"""Authentication schemas.

Request fields are optional at the schema level so a missing field is reported
with the same ``{"success": false}`` envelope as any other account error.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class _EmailBody(BaseModel):
    email: EmailStr | None = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class UserRegister(_EmailBody):
    """User registration request."""

    name: str | None = Field(None, max_length=255)
    password: str | None = None


class UserLogin(_EmailBody):
    """User login request."""

    password: str | None = None


class VerifyAccount(BaseModel):
    """Email verification request; the user comes from the session cookie."""

    otp: str | None = None


class ResetOtpRequest(_EmailBody):
    """Password reset code request."""


class PasswordReset(_EmailBody):
    """Password reset with a mailed code."""

    otp: str | None = None
    new_password: str | None = Field(None, alias="newPassword")

    model_config = ConfigDict(populate_by_name=True)


class UserData(BaseModel):
    """Public account summary."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    name: str
    is_account_verified: bool = Field(alias="isAccountVerified")


class ApiResponse(BaseModel):
    """Envelope returned by every account endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str | None = None
    code: str | None = None
    user_data: UserData | None = Field(None, alias="userData")
