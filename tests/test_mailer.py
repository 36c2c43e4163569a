"""Tests for the SMTP notifier and message templates."""

import smtplib
from unittest.mock import MagicMock, patch

from account_api.config import Settings
from account_api.services.mailer import (
    EmailNotifier,
    reset_otp_message,
    verify_otp_message,
    welcome_message,
)


def _settings(**overrides):
    values = {
        "smtp_host": "smtp.example.com",
        "smtp_port": 2525,
        "smtp_user": "mailer",
        "smtp_password": "secret",
        "sender_email": "noreply@example.com",
    }
    values.update(overrides)
    return Settings(**values)


@patch("account_api.services.mailer.smtplib.SMTP")
def test_send_email(mock_smtp):
    """Test a message is sent through an authenticated TLS session."""
    smtp = MagicMock()
    mock_smtp.return_value.__enter__.return_value = smtp

    assert EmailNotifier(_settings()).send("ann@x.com", "Hi", "Body") is True

    mock_smtp.assert_called_once_with("smtp.example.com", 2525, timeout=30)
    smtp.starttls.assert_called_once()
    smtp.login.assert_called_once_with("mailer", "secret")
    message = smtp.send_message.call_args.args[0]
    assert message["To"] == "ann@x.com"
    assert message["From"] == "noreply@example.com"
    assert message["Subject"] == "Hi"
    assert message.get_content().strip() == "Body"


@patch("account_api.services.mailer.smtplib.SMTP")
def test_send_email_without_tls_or_login(mock_smtp):
    smtp = MagicMock()
    mock_smtp.return_value.__enter__.return_value = smtp

    notifier = EmailNotifier(_settings(smtp_use_tls=False, smtp_user=None, smtp_password=None))
    assert notifier.send("ann@x.com", "Hi", "Body") is True
    smtp.starttls.assert_not_called()
    smtp.login.assert_not_called()


@patch("account_api.services.mailer.smtplib.SMTP")
def test_send_email_failure(mock_smtp):
    """Test SMTP errors are reported as a failed send."""
    smtp = MagicMock()
    smtp.send_message.side_effect = smtplib.SMTPRecipientsRefused({})
    mock_smtp.return_value.__enter__.return_value = smtp

    assert EmailNotifier(_settings()).send("ann@x.com", "Hi", "Body") is False


@patch("account_api.services.mailer.smtplib.SMTP")
def test_send_email_connection_error(mock_smtp):
    mock_smtp.side_effect = ConnectionRefusedError()
    assert EmailNotifier(_settings()).send("ann@x.com", "Hi", "Body") is False


@patch("account_api.services.mailer.smtplib.SMTP")
def test_send_email_not_configured(mock_smtp):
    notifier = EmailNotifier(_settings(smtp_host=None))
    assert notifier.send("ann@x.com", "Hi", "Body") is False
    mock_smtp.assert_not_called()


def test_message_templates():
    subject, body = welcome_message("Ann", "ann@x.com")
    assert "Ann" in body and "ann@x.com" in body

    subject, body = verify_otp_message("Ann", "004211")
    assert subject == "Account Verification OTP"
    assert "004211" in body

    subject, body = reset_otp_message("Ann", "123456")
    assert subject == "Password Reset OTP"
    assert "123456" in body
