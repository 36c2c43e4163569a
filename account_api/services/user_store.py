"""Persistence of user accounts."""

import logging
from typing import NoReturn

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from account_api.models.user import User
from account_api.services.errors import DependencyFailure, EmailAlreadyExists

logger = logging.getLogger(__name__)


class UserStore:
    """Lookup and write access to ``User`` records.

    Database faults surface as ``DependencyFailure`` after the session is rolled
    back, so callers only ever see account-level errors.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        try:
            return self.db.query(User).filter(User.email == email).first()
        except SQLAlchemyError as e:
            self._fail("lookup by email", e)

    def find_by_id(self, user_id: str) -> User | None:
        """Get a user by id."""
        try:
            return self.db.query(User).filter(User.id == user_id).first()
        except SQLAlchemyError as e:
            self._fail("lookup by id", e)

    def create(self, name: str, email: str, password_hash: str) -> User:
        """Insert a new, unverified user."""
        user = User(name=name, email=email, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            self.db.rollback()
            raise EmailAlreadyExists() from None
        except SQLAlchemyError as e:
            self._fail("create", e)
        try:
            self.db.refresh(user)
        except SQLAlchemyError as e:
            self._fail("reload after create", e)
        return user

    def save(self, user: User) -> User:
        """Persist pending changes to ``user``."""
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except SQLAlchemyError as e:
            self._fail("save", e)
        return user

    def consume_verify_otp(self, user_id: str, otp: str, now: int) -> bool:
        """Mark the account verified if ``otp`` is still the live verification code.

        Match and clear happen in one conditional UPDATE; returns False when no
        row matched because the code was already consumed or replaced.
        """
        values = {
            User.is_account_verified: True,
            User.verify_otp: "",
            User.verify_otp_expire_at: 0,
        }
        return self._conditional_update(
            "verify otp",
            [
                User.id == user_id,
                User.verify_otp == otp,
                User.verify_otp_expire_at >= now,
            ],
            values,
        )

    def consume_reset_otp(self, user_id: str, otp: str, now: int, password_hash: str) -> bool:
        """Replace the password hash if ``otp`` is still the live reset code."""
        values = {
            User.password_hash: password_hash,
            User.reset_otp: "",
            User.reset_otp_expire_at: 0,
        }
        return self._conditional_update(
            "reset otp",
            [
                User.id == user_id,
                User.reset_otp == otp,
                User.reset_otp_expire_at >= now,
            ],
            values,
        )

    def _conditional_update(self, action: str, criteria: list, values: dict) -> bool:
        try:
            updated = (
                self.db.query(User)
                .filter(*criteria)
                .update(values, synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail(action, e)
        return updated == 1

    def _fail(self, action: str, error: SQLAlchemyError) -> NoReturn:
        logger.exception(f"User store {action} failed")
        self.db.rollback()
        raise DependencyFailure() from error
