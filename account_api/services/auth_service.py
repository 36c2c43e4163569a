"""Account lifecycle: registration, login, email verification and password reset."""

import logging

from account_api.models.user import User
from account_api.services.errors import (
    AlreadyVerified,
    DependencyFailure,
    EmailAlreadyExists,
    InvalidCredential,
    InvalidOtp,
    UserNotFound,
    ValidationError,
)
from account_api.services.mailer import (
    Notifier,
    reset_otp_message,
    verify_otp_message,
    welcome_message,
)
from account_api.services.otp import (
    RESET_OTP_TTL,
    VERIFY_OTP_TTL,
    Clock,
    check_otp,
    expiry_from,
    generate_otp,
    now_ms,
)
from account_api.services.security import (
    MAX_PASSWORD_BYTES,
    get_password_hash,
    password_too_long,
    verify_password,
)
from account_api.services.user_store import UserStore

logger = logging.getLogger(__name__)

PASSWORD_TOO_LONG = f"Password must be at most {MAX_PASSWORD_BYTES} bytes"


def _normalize_email(email: str | None) -> str | None:
    if email is None:
        return None
    return email.strip().lower() or None


class AuthService:
    """Orchestrates account operations over the user store and notifier.

    Operations raise ``AuthError`` subclasses on failure. Identity for the
    authenticated operations is passed in explicitly as ``user_id``.
    """

    def __init__(self, store: UserStore, notifier: Notifier, clock: Clock = now_ms):
        self.store = store
        self.notifier = notifier
        self.clock = clock

    def register(self, name: str | None, email: str | None, password: str | None) -> User:
        """Create an unverified account and send a welcome email."""
        email = _normalize_email(email)
        if not name or not email or not password:
            raise ValidationError("Please fill all the fields")
        if password_too_long(password):
            raise ValidationError(PASSWORD_TOO_LONG)

        if self.store.find_by_email(email):
            raise EmailAlreadyExists()

        user = self.store.create(name=name, email=email, password_hash=get_password_hash(password))
        logger.info(f"Registered user {user.id}")

        # The account already exists at this point, so a lost welcome mail is not fatal
        subject, body = welcome_message(user.name, user.email)
        if not self.notifier.send(user.email, subject, body):
            logger.warning(f"Welcome email for user {user.id} was not delivered")

        return user

    def login(self, email: str | None, password: str | None) -> User:
        """Check credentials and return the matching user."""
        email = _normalize_email(email)
        if not email or not password:
            raise ValidationError("Please fill all the fields")

        user = self.store.find_by_email(email)
        if not user:
            raise UserNotFound()
        # Anything past the bcrypt limit could never have been registered
        if password_too_long(password) or not verify_password(password, user.password_hash):
            raise InvalidCredential()

        logger.info(f"User {user.id} logged in")
        return user

    def get_user(self, user_id: str) -> User:
        user = self.store.find_by_id(user_id)
        if not user:
            raise UserNotFound()
        return user

    def send_verify_otp(self, user_id: str) -> None:
        """Issue a 24-hour email verification code and mail it to the user."""
        user = self.get_user(user_id)
        if user.is_account_verified:
            raise AlreadyVerified()

        otp = generate_otp()
        user.verify_otp = otp
        user.verify_otp_expire_at = expiry_from(self.clock(), VERIFY_OTP_TTL)
        self.store.save(user)
        logger.info(f"Issued verification OTP for user {user.id}")

        subject, body = verify_otp_message(user.name, otp)
        if not self.notifier.send(user.email, subject, body):
            raise DependencyFailure("Could not send verification email")

    def verify_account(self, user_id: str, otp: str | None) -> None:
        """Consume the verification code and mark the account verified."""
        if not otp:
            raise ValidationError("Missing Details")

        user = self.get_user(user_id)
        now = self.clock()
        check_otp(user.verify_otp, user.verify_otp_expire_at, otp, now)

        if not self.store.consume_verify_otp(user.id, otp, now):
            # Another request consumed or replaced the code after our read
            raise InvalidOtp()
        logger.info(f"User {user_id} verified their email")

    def send_reset_otp(self, email: str | None) -> None:
        """Issue a 15-minute password reset code and mail it to the user."""
        email = _normalize_email(email)
        if not email:
            raise ValidationError("Email is Required")

        user = self.store.find_by_email(email)
        if not user:
            raise UserNotFound()

        otp = generate_otp()
        user.reset_otp = otp
        user.reset_otp_expire_at = expiry_from(self.clock(), RESET_OTP_TTL)
        self.store.save(user)
        logger.info(f"Issued password reset OTP for user {user.id}")

        subject, body = reset_otp_message(user.name, otp)
        if not self.notifier.send(user.email, subject, body):
            raise DependencyFailure("Could not send password reset email")

    def reset_password(
        self, email: str | None, otp: str | None, new_password: str | None
    ) -> None:
        """Consume the reset code and replace the password."""
        email = _normalize_email(email)
        if not email or not otp or not new_password:
            raise ValidationError(
                "Missing Information! Email, OTP and New Password are required"
            )
        if password_too_long(new_password):
            raise ValidationError(PASSWORD_TOO_LONG)

        user = self.store.find_by_email(email)
        if not user:
            raise UserNotFound()

        now = self.clock()
        check_otp(user.reset_otp, user.reset_otp_expire_at, otp, now)

        password_hash = get_password_hash(new_password)
        if not self.store.consume_reset_otp(user.id, otp, now, password_hash):
            raise InvalidOtp()
        logger.info(f"User {user.id} reset their password")
