"""SQLAlchemy models for identity management."""

from gatehouse_identity.infrastructure.persistence.sqlalchemy.models.user_model import (  # noqa: E501
    UserModel,
)

__all__ = ["UserModel"]
