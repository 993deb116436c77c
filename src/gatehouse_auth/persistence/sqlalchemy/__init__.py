"""SQLAlchemy implementation for gatehouse_auth persistence.

Provides:
- AuthBase: Declarative base for auth models
- LoginAttemptModel / RememberTokenModel: SQLAlchemy models
- LoginAttemptRepositorySQLAlchemy / RememberTokenRepositorySQLAlchemy
- create_engine_from_settings, create_all, drop_all: schema helpers
"""

from gatehouse_auth.persistence.sqlalchemy.base import AuthBase
from gatehouse_auth.persistence.sqlalchemy.database import (
    create_all,
    create_engine_from_settings,
    drop_all,
)
from gatehouse_auth.persistence.sqlalchemy.models import (
    LoginAttemptModel,
    RememberTokenModel,
)
from gatehouse_auth.persistence.sqlalchemy.repositories import (
    LoginAttemptRepositorySQLAlchemy,
    RememberTokenRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "LoginAttemptModel",
    "LoginAttemptRepositorySQLAlchemy",
    "RememberTokenModel",
    "RememberTokenRepositorySQLAlchemy",
    "create_all",
    "create_engine_from_settings",
    "drop_all",
]
