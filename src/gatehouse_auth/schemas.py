"""Authentication schemas and data structures.

These are simple data classes used for transferring authentication
data between components.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from gatehouse_auth.ports import Authenticatable


class AuthFailureReason(str, Enum):
    """Why a credential check failed.

    Only two generic reasons exist so a caller cannot tell whether an
    account exists for the submitted identifier.
    """

    BAD_ATTEMPT = "bad_attempt"
    INVALID_PASSWORD = "invalid_password"

    @property
    def message(self) -> str:
        return _FAILURE_MESSAGES[self]


_FAILURE_MESSAGES = {
    AuthFailureReason.BAD_ATTEMPT: (
        "Unable to log you in. Please check your credentials."
    ),
    AuthFailureReason.INVALID_PASSWORD: (
        "Unable to log you in. Please check your password."
    ),
}


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a credential check.

    Attributes
    ----------
    success
        Whether the credentials matched a user
    user
        The matched user on success, None otherwise
    reason
        The failure reason on failure, None otherwise
    """

    success: bool
    user: Authenticatable | None = None
    reason: AuthFailureReason | None = None

    @classmethod
    def ok(cls, user: Authenticatable) -> AuthResult:
        return cls(success=True, user=user)

    @classmethod
    def fail(cls, reason: AuthFailureReason) -> AuthResult:
        return cls(success=False, reason=reason)

    @property
    def message(self) -> str | None:
        """User-facing failure message, None on success."""
        return self.reason.message if self.reason else None


@dataclass(frozen=True)
class RememberTokenData:
    """Immutable remember-me token row.

    Only the SHA-256 hash of the validator is ever stored.
    """

    id: UUID
    user_id: UUID
    selector: str
    hashed_validator: str
    expires_at: datetime
    created_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """Check if the token has expired."""
        return now >= self.expires_at
