"""Session cookie handling.

Browsers only drop a cookie when the clearing ``Set-Cookie`` repeats the
attributes it was set with, so both directions read them from
``session_cookie_attributes``.
"""

from datetime import timedelta

from fastapi import Response

from account_api.config import Settings

SESSION_COOKIE_NAME = "token"
SESSION_COOKIE_MAX_AGE = int(timedelta(days=7).total_seconds())


def session_cookie_attributes(settings: Settings) -> dict:
    return {
        "httponly": True,
        "secure": settings.is_production,
        "samesite": "none" if settings.is_production else "strict",
    }


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        max_age=SESSION_COOKIE_MAX_AGE,
        **session_cookie_attributes(settings),
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(SESSION_COOKIE_NAME, **session_cookie_attributes(settings))
