"""One-time passcode generation and validation."""

import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from account_api.services.errors import InvalidOtp, OtpExpired

OTP_LENGTH = 6
VERIFY_OTP_TTL = timedelta(hours=24)
# Reset codes grant a password change, so they live much shorter
RESET_OTP_TTL = timedelta(minutes=15)

Clock = Callable[[], int]


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(datetime.now(UTC).timestamp() * 1000)


def generate_otp() -> str:
    """Draw a uniformly random numeric code, zero-padded to ``OTP_LENGTH`` digits."""
    return f"{secrets.randbelow(10**OTP_LENGTH):0{OTP_LENGTH}d}"


def expiry_from(now: int, ttl: timedelta) -> int:
    """Epoch-millisecond expiry for a code issued at ``now``."""
    return now + int(ttl.total_seconds() * 1000)


def check_otp(stored: str, expire_at: int, submitted: str, now: int) -> None:
    """Validate a submitted code against the pending one.

    A mismatch (including no pending code) is reported before expiry, so a
    consumed code reads as invalid rather than expired.
    """
    if not stored or not secrets.compare_digest(stored.encode(), submitted.encode()):
        raise InvalidOtp()
    if expire_at < now:
        raise OtpExpired()
