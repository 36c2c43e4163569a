"""FastAPI dependencies for authentication and database."""

from functools import lru_cache
from typing import Annotated

from fastapi import Cookie, Depends
from sqlalchemy.orm import Session

from account_api.api.cookies import SESSION_COOKIE_NAME
from account_api.config import Settings, get_settings
from account_api.database import get_db
from account_api.services.auth_service import AuthService
from account_api.services.mailer import EmailNotifier, Notifier
from account_api.services.otp import Clock, now_ms
from account_api.services.security import resolve_session
from account_api.services.user_store import UserStore


def get_user_store(db: Annotated[Session, Depends(get_db)]) -> UserStore:
    """Get user store bound to the request's database session."""
    return UserStore(db)


@lru_cache
def get_notifier() -> Notifier:
    """Get the shared outbound email sender."""
    return EmailNotifier()


def get_clock() -> Clock:
    """Get the clock used for OTP expiry."""
    return now_ms


def get_auth_service(
    store: Annotated[UserStore, Depends(get_user_store)],
    notifier: Annotated[Notifier, Depends(get_notifier)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(store, notifier, clock)


def get_session_user_id(
    settings: Annotated[Settings, Depends(get_settings)],
    token: Annotated[str | None, Cookie(alias=SESSION_COOKIE_NAME)] = None,
) -> str:
    """Resolve the user id from the session cookie.

    Raises ``Unauthenticated`` for a missing or invalid cookie; the exception
    handler reports it as an ordinary ``success: false`` response.
    """
    return resolve_session(token, settings)
