"""Errors raised by the account services.

Every error carries a human-readable ``message`` and a stable ``code``. The API
layer reports both to the client as ``{"success": false, ...}``.
"""


class AuthError(Exception):
    """Base class for expected account-operation failures."""

    code = "auth_error"
    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AuthError):
    """A required field is missing."""

    code = "validation_error"
    default_message = "Please fill all the fields"


class UserNotFound(AuthError):
    code = "not_found"
    default_message = "User not found"


class EmailAlreadyExists(AuthError):
    code = "email_exists"
    default_message = "Email already exists"


class InvalidCredential(AuthError):
    code = "invalid_credential"
    default_message = "Incorrect password"


class InvalidOtp(AuthError):
    """The submitted code does not match a pending OTP."""

    code = "invalid_otp"
    default_message = "Invalid OTP"


class OtpExpired(AuthError):
    code = "otp_expired"
    default_message = "OTP Expired"


class AlreadyVerified(AuthError):
    code = "already_verified"
    default_message = "Account Already Verified"


class Unauthenticated(AuthError):
    """The session cookie is missing, forged, expired or carries no user id."""

    code = "unauthenticated"
    default_message = "Not authorized. Login Again"


class DependencyFailure(AuthError):
    """The database or the mail server could not complete the request."""

    code = "dependency_failure"
    default_message = "Service temporarily unavailable"
