"""SQLAlchemy model for remember-me tokens."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from gatehouse_auth.persistence.sqlalchemy.base import AuthBase
from gatehouse_identity.domain.shared.time import utc_now


class RememberTokenModel(AuthBase):
    __tablename__ = "auth_remember_tokens"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    user_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    selector: Mapped[str] = mapped_column(
        String(24),
        unique=True,
        nullable=False,
        index=True,
    )
    # SHA-256 hex digest of the validator
    hashed_validator: Mapped[str] = mapped_column(String(64), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    def __repr__(self) -> str:
        return f"<RememberTokenModel(id={self.id}, user_id={self.user_id})>"
