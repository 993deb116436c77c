"""SQLAlchemy models for gatehouse_auth."""

from gatehouse_auth.persistence.sqlalchemy.models.login_attempt_model import (
    LoginAttemptModel,
)
from gatehouse_auth.persistence.sqlalchemy.models.remember_token_model import (
    RememberTokenModel,
)

__all__ = ["LoginAttemptModel", "RememberTokenModel"]
