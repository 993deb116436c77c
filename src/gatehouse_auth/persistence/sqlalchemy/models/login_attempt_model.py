"""SQLAlchemy model for the login attempt audit log."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from gatehouse_auth.persistence.sqlalchemy.base import AuthBase
from gatehouse_identity.domain.shared.time import utc_now


class LoginAttemptModel(AuthBase):
    """
    One row per authentication attempt, successful or not.

    Rows are never updated; removal is left to scheduled maintenance.

    Table: auth_logins
    """

    __tablename__ = "auth_logins"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Email or username the attempt was made with
    identifier: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Long enough for IPv6
    ip_address: Mapped[str | None] = mapped_column(String(45), nullable=True)

    # No FK to stay decoupled from the users table
    user_id: Mapped[str | None] = mapped_column(String(36), nullable=True)

    success: Mapped[bool] = mapped_column(Boolean, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<LoginAttemptModel(id={self.id}, identifier={self.identifier}, "
            f"success={self.success})>"
        )
