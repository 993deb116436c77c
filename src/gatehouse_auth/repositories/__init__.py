"""Repository interfaces for gatehouse_auth.

Implementations live in gatehouse_auth.persistence.
"""

from gatehouse_auth.repositories.login_attempt_repository import (
    LoginAttemptRepository,
)
from gatehouse_auth.repositories.remember_token_repository import (
    RememberTokenRepository,
)

__all__ = ["LoginAttemptRepository", "RememberTokenRepository"]
