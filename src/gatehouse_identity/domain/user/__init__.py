"""User domain manages user identity only.

This domain handles:
- User aggregate (identity: id, email, username, password hash)
- Lookup of users by identifying credentials
"""

from gatehouse_identity.domain.user.aggregates import User
from gatehouse_identity.domain.user.repositories import UserRepository
from gatehouse_identity.domain.user.value_objects import Email
from gatehouse_identity.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
)

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserRepository",
]
