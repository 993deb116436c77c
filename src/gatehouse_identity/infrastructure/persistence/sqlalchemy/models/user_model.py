"""SQLAlchemy model for User aggregate."""

from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from gatehouse_identity.infrastructure.persistence.sqlalchemy.base import (
    IdentityBase,
    TimestampMixin,
)


class UserModel(IdentityBase, TimestampMixin):
    """SQLAlchemy model for persisting User aggregates."""

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    username: Mapped[str | None] = mapped_column(
        String(64),
        unique=True,
        nullable=True,
        index=True,
    )
    # bcrypt format, ~60 chars
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
