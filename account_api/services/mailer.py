"""Outbound email for welcome and one-time-passcode messages."""

import logging
import smtplib
from email.message import EmailMessage
from typing import Protocol

from account_api.config import Settings, get_settings

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Anything that can deliver a plain-text message to an email address."""

    def send(self, to: str, subject: str, body: str) -> bool: ...


class EmailNotifier:
    """SMTP sender configured from settings.

    ``send`` returns False instead of raising when delivery fails or SMTP is
    not configured.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        if not self.is_configured:
            logger.info("SMTP host or sender address not configured, email disabled")

    @property
    def is_configured(self) -> bool:
        return bool(self.settings.smtp_host and self.settings.sender_email)

    def send(self, to: str, subject: str, body: str) -> bool:
        if not self.is_configured:
            logger.warning(f"Email to {to} not sent: SMTP not configured")
            return False

        message = EmailMessage()
        message["From"] = self.settings.sender_email
        message["To"] = to
        message["Subject"] = subject
        message.set_content(body)

        try:
            with smtplib.SMTP(self.settings.smtp_host, self.settings.smtp_port, timeout=30) as smtp:
                if self.settings.smtp_use_tls:
                    smtp.starttls()
                if self.settings.smtp_user and self.settings.smtp_password:
                    smtp.login(self.settings.smtp_user, self.settings.smtp_password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send '{subject}' to {to}: {e}")
            return False

        logger.info(f"Sent '{subject}' to {to}")
        return True


def welcome_message(name: str, email: str) -> tuple[str, str]:
    """Subject and body greeting a newly registered user."""
    return (
        "Welcome to Account Center",
        f"Hello {name}, welcome to Account Center! "
        f"Your account has been created successfully with email id: {email}",
    )


def verify_otp_message(name: str, otp: str) -> tuple[str, str]:
    return (
        "Account Verification OTP",
        f"Hello {name},\nYour OTP is {otp}.\nUse this OTP to verify your account.",
    )


def reset_otp_message(name: str, otp: str) -> tuple[str, str]:
    return (
        "Password Reset OTP",
        f"Hello {name},\nYour OTP for resetting your password is {otp}.\n"
        "Use this OTP to reset your password.",
    )
