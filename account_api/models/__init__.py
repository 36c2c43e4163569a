"""SQLAlchemy models."""

from account_api.models.user import User

__all__ = ["User"]
