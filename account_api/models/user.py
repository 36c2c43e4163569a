"""User model."""

import uuid

from sqlalchemy import BigInteger, Boolean, Column, String, false

from account_api.database import Base
from account_api.models.mixins import TimestampMixin


def _new_user_id() -> str:
    return uuid.uuid4().hex


class User(Base, TimestampMixin):
    """A registered account with its pending email-verification and reset codes.

    OTP expiry columns hold epoch milliseconds; an empty OTP with a zero expiry
    means no challenge is pending.
    """

    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=_new_user_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    is_account_verified = Column(Boolean, nullable=False, default=False, server_default=false())

    verify_otp = Column(String(6), nullable=False, default="", server_default="")
    verify_otp_expire_at = Column(BigInteger, nullable=False, default=0, server_default="0")
    reset_otp = Column(String(6), nullable=False, default="", server_default="")
    reset_otp_expire_at = Column(BigInteger, nullable=False, default=0, server_default="0")

    def __repr__(self) -> str:
        return f"<User {self.id} {self.email}>"
