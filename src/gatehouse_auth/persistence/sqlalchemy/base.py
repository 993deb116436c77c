"""SQLAlchemy declarative base for gatehouse_auth models.

The consuming application should include AuthBase.metadata in its
migration configuration next to IdentityBase.metadata.
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for gatehouse_auth models."""
